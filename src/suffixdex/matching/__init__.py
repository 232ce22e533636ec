"""Suffix matching core: the rule trie and the boundary lookup."""

from suffixdex.matching.suffix_matcher import Boundary, SuffixMatcher, is_valid_root
from suffixdex.matching.trie import RuleTrie, TrieNode

__all__ = [
    "Boundary",
    "RuleTrie",
    "SuffixMatcher",
    "TrieNode",
    "is_valid_root",
]
