"""Suffix list acquisition and parsing."""

from suffixdex.rules.parser import count_rules, parse_rules, to_ascii_rule
from suffixdex.rules.source import (
    SuffixListError,
    fetch_suffix_list,
    load_suffix_list,
    read_cache,
    write_cache,
)

__all__ = [
    "SuffixListError",
    "count_rules",
    "fetch_suffix_list",
    "load_suffix_list",
    "parse_rules",
    "read_cache",
    "to_ascii_rule",
    "write_cache",
]
