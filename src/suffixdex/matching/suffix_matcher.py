"""SuffixMatcher: find where the public suffix starts in a domain.

Walks a frozen RuleTrie right-to-left, one label per step, remembering
the last position at which a complete suffix ended. At each label:

    exact child, exception    -> boundary is one label to the right; stop
    exact child               -> descend; terminal nodes record a boundary
    "*" child only            -> descend; a terminal "*" records a boundary
    neither                   -> stop; the last recorded boundary is final

Exception nodes always win, whatever else the walk has seen. Longer
suffixes beat shorter ones on the same path because the walk only ever
moves the boundary further left.

Private-section rules depend on include_private:

    include_private=True   -- reference PSL behaviour; "blogspot.ca" is a
                              suffix like "co.uk", flagged private
    include_private=False  -- private rules are not boundaries; the walk
                              stops at the first label a private rule
                              would claim and the ICANN suffix below it
                              is used, with the result flagged private.
                              Private nodes that only lead to deeper
                              rules ("amazonaws" on the way to
                              "*.compute.amazonaws.com") are walked
                              through and leave the flags alone.
                              A private "!" rule is dropped along with
                              the private wildcard it makes an exception to

So "mehrdadep.blogspot.ca" splits as root "mehrdadep" / suffix
"blogspot.ca" in the first mode, and root "blogspot" / suffix "ca" in
the second.

The matcher holds no mutable state. One instance (or many, over the
same trie) can serve concurrent callers.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from suffixdex.domain.result import ClassificationResult
from suffixdex.domain.types import LABEL_SEPARATOR, WILDCARD
from suffixdex.matching.trie import RuleTrie, TrieNode

# 1-63 Unicode letters, digits or hyphens
_ROOT_LABEL_RE = re.compile(r"(?:[^\W_]|-){1,63}")


class Boundary(NamedTuple):
    """Where the suffix starts, as a label index from the left.

    index is -1 when matched is False.
    """
    index: int
    matched: bool
    is_private: bool = False
    is_icann: bool = False


NO_MATCH = Boundary(-1, False)


def _as_private(found: Boundary) -> Boundary:
    if not found.matched:
        return found
    return found._replace(is_private=True, is_icann=False)


def is_valid_root(label: str) -> bool:
    """True if label can be a registrable root label."""
    return _ROOT_LABEL_RE.fullmatch(label) is not None


class SuffixMatcher:
    """Longest-match suffix lookup with exception and wildcard rules.

    Args:
        trie: the rule trie to consult (shared, never modified)
        include_private: treat private-section rules as suffixes
        implicit_rule: when nothing matches, treat the rightmost label
            as the suffix (the PSL "*" default rule)
    """

    def __init__(
        self,
        trie: RuleTrie,
        include_private: bool = False,
        implicit_rule: bool = False,
    ) -> None:
        self._trie = trie
        self._include_private = include_private
        self._implicit_rule = implicit_rule

    @property
    def include_private(self) -> bool:
        return self._include_private

    @property
    def implicit_rule(self) -> bool:
        return self._implicit_rule

    def classify(self, domain: str) -> Boundary:
        """Return the suffix boundary for a lowercase, normalized domain."""
        return self._find_boundary(domain.split(LABEL_SEPARATOR))

    def split(self, domain: str) -> ClassificationResult:
        """Split a domain into subdomain / root / suffix.

        Returns the invalid result when no suffix matched, when the
        input is nothing but a suffix ("co.uk"), or when the root label
        is not a valid hostname label.
        """
        labels = domain.split(LABEL_SEPARATOR)
        boundary = self._find_boundary(labels)
        if not boundary.matched or boundary.index >= len(labels):
            return ClassificationResult.invalid()

        head = labels[:boundary.index]
        if not head:
            return ClassificationResult.invalid()
        root = head[-1]
        if not is_valid_root(root):
            return ClassificationResult.invalid()

        return ClassificationResult(
            subdomain=LABEL_SEPARATOR.join(head[:-1]),
            root=root,
            suffix=LABEL_SEPARATOR.join(labels[boundary.index:]),
            is_icann=boundary.is_icann,
            is_private=boundary.is_private,
        )

    def _excluded(self, node: TrieNode) -> bool:
        return node.is_private and not self._include_private

    def _find_boundary(self, labels: list[str]) -> Boundary:
        root = self._trie.root
        node = root
        found = NO_MATCH

        for i in range(len(labels) - 1, -1, -1):
            child = node.children.get(labels[i])
            wild = node.children.get(WILDCARD)

            if child is not None and child.is_exception:
                if self._excluded(child):
                    return _as_private(found)
                return Boundary(i + 1, True, child.is_private, child.is_icann)

            if child is not None:
                if child.is_terminal:
                    rule_end = child
                elif wild is not None and wild.is_terminal:
                    rule_end = wild
                else:
                    rule_end = None
                if rule_end is not None and self._excluded(rule_end):
                    # registrable under the ICANN suffix matched so far
                    return _as_private(found)
                node = child
                if rule_end is not None:
                    found = Boundary(i, True, rule_end.is_private, rule_end.is_icann)
                continue

            if wild is not None:
                if wild.is_terminal and self._excluded(wild):
                    return _as_private(found)
                node = wild
                if wild.is_terminal:
                    found = Boundary(i, True, wild.is_private, wild.is_icann)
                continue

            break

        if not found.matched and node is root and self._implicit_rule and labels:
            return Boundary(len(labels) - 1, True)
        return found
