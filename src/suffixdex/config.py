"""Process-level defaults, overridable through environment variables.

    SUFFIXDEX_CACHE_FILE         path of the cached suffix list
    SUFFIXDEX_SUFFIX_LIST_URLS   comma-separated download URLs, tried in order
    SUFFIXDEX_TIMEOUT            HTTP timeout in seconds
    SUFFIXDEX_INCLUDE_PRIVATE    "1"/"true"/"yes" to treat private rules as suffixes

Explicit constructor arguments always win over these.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

PUBLIC_SUFFIX_LIST_URLS = (
    "https://publicsuffix.org/list/public_suffix_list.dat",
    "https://raw.githubusercontent.com/publicsuffix/list/master/public_suffix_list.dat",
)
DEFAULT_CACHE_FILE = Path.home() / ".cache" / "suffixdex" / "public_suffix_list.dat"
DEFAULT_TIMEOUT = 30.0

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class Settings:
    cache_file: Path = DEFAULT_CACHE_FILE
    suffix_list_urls: tuple[str, ...] = PUBLIC_SUFFIX_LIST_URLS
    timeout: float = DEFAULT_TIMEOUT
    include_private: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        settings = cls()

        cache_file = env.get("SUFFIXDEX_CACHE_FILE")
        urls = env.get("SUFFIXDEX_SUFFIX_LIST_URLS")
        timeout = env.get("SUFFIXDEX_TIMEOUT")
        include_private = env.get("SUFFIXDEX_INCLUDE_PRIVATE")

        return cls(
            cache_file=Path(cache_file).expanduser() if cache_file else settings.cache_file,
            suffix_list_urls=(
                tuple(u.strip() for u in urls.split(",") if u.strip())
                if urls else settings.suffix_list_urls
            ),
            timeout=float(timeout) if timeout else settings.timeout,
            include_private=(
                include_private.strip().lower() in _TRUE_VALUES
                if include_private is not None else settings.include_private
            ),
        )
