"""Extractor: the end-to-end entry point.

    input -> lowercase -> normalize_url -> IP literal? -> SuffixMatcher.split

Build one Extractor and share it. It wraps a frozen RuleTrie and holds
no per-call state, so concurrent parse() calls need no locking.

Usage:
    extractor = Extractor.from_cache()          # cached or downloaded list
    extractor.parse("https://www.google.co.uk/search?q=x")
    # ClassificationResult(subdomain='www', root='google', suffix='co.uk', ...)

    extractor = Extractor.from_text(psl_text, include_private=True)

For scripts, extract() uses a lazily built process-wide instance.
"""

from __future__ import annotations

import ipaddress
import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import requests

from suffixdex.config import Settings
from suffixdex.domain.result import ClassificationResult
from suffixdex.domain.rule import Rule
from suffixdex.extract.normalize import normalize_url
from suffixdex.matching.suffix_matcher import SuffixMatcher
from suffixdex.matching.trie import RuleTrie
from suffixdex.rules.parser import parse_rules
from suffixdex.rules.source import load_suffix_list

log = logging.getLogger(__name__)


class Extractor:
    """Classify URLs and hostnames against a suffix list.

    Args:
        trie: the rule trie, frozen by this constructor if it isn't already
        validate: strip scheme, user-info, port and path from inputs
        strip_html: drop a trailing ".html" from inputs
        include_private: treat private-section rules as public suffixes
        implicit_rule: treat an unknown rightmost label as a suffix
    """

    def __init__(
        self,
        trie: RuleTrie,
        *,
        validate: bool = True,
        strip_html: bool = True,
        include_private: bool = False,
        implicit_rule: bool = False,
    ) -> None:
        if not trie.frozen:
            trie.freeze()
        self._trie = trie
        self._validate = validate
        self._strip_html = strip_html
        self._matcher = SuffixMatcher(
            trie, include_private=include_private, implicit_rule=implicit_rule
        )

    @classmethod
    def from_rules(cls, rules: Iterable[Rule], **options: Any) -> Extractor:
        return cls(RuleTrie.from_rules(rules), **options)

    @classmethod
    def from_text(cls, text: str, **options: Any) -> Extractor:
        """Build from raw suffix list text."""
        return cls.from_rules(parse_rules(text), **options)

    @classmethod
    def from_cache(
        cls,
        cache_file: Path | None = None,
        *,
        settings: Settings | None = None,
        refresh: bool = False,
        session: requests.Session | None = None,
        **options: Any,
    ) -> Extractor:
        """Build from the cached list, downloading it first if needed.

        Raises SuffixListError if there is no cache and no URL answers.
        """
        settings = settings or Settings.from_env()
        text = load_suffix_list(
            cache_file or settings.cache_file,
            refresh=refresh,
            urls=settings.suffix_list_urls,
            session=session,
            timeout=settings.timeout,
        )
        options.setdefault("include_private", settings.include_private)
        return cls.from_text(text, **options)

    @property
    def trie(self) -> RuleTrie:
        return self._trie

    @property
    def matcher(self) -> SuffixMatcher:
        return self._matcher

    def parse(self, url: str) -> ClassificationResult:
        """Classify a URL or hostname. Never raises for bad input."""
        host = normalize_url(
            url.lower(), validate=self._validate, strip_html=self._strip_html
        )
        log.debug("%s;%s", host, url)
        return self.classify(host)

    __call__ = parse

    def classify(self, host: str) -> ClassificationResult:
        """Classify an already normalized, lowercase host."""
        try:
            address = ipaddress.ip_address(host)
        except ValueError:
            return self._matcher.split(host)
        return ClassificationResult.for_ip(host, address.version)


_default_extractor: Extractor | None = None
_default_lock = threading.Lock()


def get_default_extractor() -> Extractor:
    """Shared Extractor built from Settings.from_env() on first use."""
    global _default_extractor
    if _default_extractor is None:
        with _default_lock:
            if _default_extractor is None:
                _default_extractor = Extractor.from_cache()
    return _default_extractor


def extract(url: str) -> ClassificationResult:
    return get_default_extractor().parse(url)
