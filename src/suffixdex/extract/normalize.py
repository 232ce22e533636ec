"""Reduce a URL-ish string to the bare host the matcher expects.

    "ftp://user:pw@1992.ftp.com:21/path"  -> "1992.ftp.com"
    "http://[::1]:8080/"                  -> "::1"
    "google.com?q=marvel"                 -> "google.com"

Input must already be lowercase. This is text trimming only: nothing here
checks that the result is a valid hostname.
"""
from __future__ import annotations

import ipaddress
import re

_SCHEME_RE = re.compile(r"^(?:[a-z0-9+\-.]+:)?//")
_AUTHORITY_END_RE = re.compile(r"[/?#&]")
HTML_SUFFIX = ".html"


def strip_scheme(url: str) -> str:
    return _SCHEME_RE.sub("", url, count=1)


def extract_host(url: str) -> str:
    """Host part of a scheme-less URL: no user-info, port or path."""
    match = _AUTHORITY_END_RE.search(url)
    authority = url[:match.start()] if match else url
    _, _, host = authority.rpartition("@")

    if host.startswith("["):
        end = host.find("]")
        return host[1:end] if end != -1 else host[1:]
    if host.count(":") > 1 and _is_ipv6(host):
        return host
    return host.partition(":")[0]


def normalize_url(url: str, *, validate: bool = True, strip_html: bool = True) -> str:
    """Return the host of url ready for suffix matching.

    validate=False skips scheme, user-info and delimiter stripping for
    callers that already pass bare hostnames. strip_html=False keeps a
    trailing ".html".
    """
    host = url.strip()
    if validate:
        host = extract_host(strip_scheme(host))
    if strip_html and host.endswith(HTML_SUFFIX):
        host = host[:-len(HTML_SUFFIX)]
    if host.endswith("."):
        host = host[:-1]
    return host


def _is_ipv6(text: str) -> bool:
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True
