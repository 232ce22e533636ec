"""Fetch the Public Suffix List and keep a local copy of it.

The raw list is cached unchanged, comments included, so the ICANN and
PRIVATE section markers are still there the next time it is parsed.

Lookup order in load_suffix_list():
    1. the cache file, unless refresh=True
    2. each download URL in turn; the first success is written to the cache

This module does not parse anything; see parser.py.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Sequence
from pathlib import Path

import requests

from suffixdex.config import DEFAULT_TIMEOUT, PUBLIC_SUFFIX_LIST_URLS

log = logging.getLogger(__name__)


class SuffixListError(Exception):
    """Raised when the suffix list cannot be obtained from any source."""


def fetch_suffix_list(
    urls: Sequence[str] = PUBLIC_SUFFIX_LIST_URLS,
    *,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Download the list, trying each URL until one answers with 2xx."""
    http = session or requests.Session()
    errors: list[str] = []
    try:
        for url in urls:
            try:
                response = http.get(url, timeout=timeout)
                response.raise_for_status()
            except requests.RequestException as exc:
                log.warning("Failed to fetch suffix list from %s: %s", url, exc)
                errors.append(f"{url}: {exc}")
                continue
            log.info("Fetched suffix list from %s (%d bytes)", url, len(response.content))
            return response.text
    finally:
        if session is None:
            http.close()

    if not errors:
        raise SuffixListError("No suffix list URLs configured")
    raise SuffixListError("Could not fetch suffix list: " + "; ".join(errors))


def read_cache(path: Path) -> str | None:
    """Return cached list text, or None if the cache is missing or unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Ignoring unreadable suffix list cache %s: %s", path, exc)
        return None


def write_cache(path: Path, text: str) -> None:
    """Atomically write text to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", delete=False, dir=path.parent, encoding="utf-8"
    ) as tmp:
        tmp.write(text)
        tmp_path = Path(tmp.name)
    try:
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    log.info("Wrote suffix list cache %s", path)


def load_suffix_list(
    cache_file: Path,
    *,
    refresh: bool = False,
    urls: Sequence[str] = PUBLIC_SUFFIX_LIST_URLS,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Return the list text from cache_file, downloading it if needed."""
    if not refresh:
        cached = read_cache(cache_file)
        if cached is not None:
            log.debug("Using cached suffix list %s", cache_file)
            return cached

    text = fetch_suffix_list(urls, session=session, timeout=timeout)
    write_cache(cache_file, text)
    return text
