"""Label-level trie over Public Suffix List rules.

Rules are inserted right-to-left so that the TLD comes first:
"act.edu.au" walks root -> "au" -> "edu" -> "act". Sibling rules under
the same TLD share their common prefix and branch only where they
diverge, so lookup cost is O(labels in the input), independent of the
size of the list.

Wildcard labels ("*") are stored as regular children with the key "*".
They carry no special meaning at build time; SuffixMatcher decides what
a "*" child means during lookup.

The trie is built once and then frozen. After freeze() no node is ever
written again, so any number of threads may walk it concurrently
without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from suffixdex.domain.rule import Rule, Section

log = logging.getLogger(__name__)


@dataclass(slots=True)
class TrieNode:
    """One label position in the trie.

    is_terminal marks the left edge of a complete public suffix.
    is_exception marks the node reached by a "!" rule; such a node is
    never also terminal.
    is_icann / is_private record the section of the rule that created
    the node, re-stamped by the rule that ends here.
    """
    children: dict[str, TrieNode] = field(default_factory=dict)
    is_terminal: bool = False
    is_exception: bool = False
    is_icann: bool = False
    is_private: bool = False

    def stamp(self, section: Section) -> None:
        self.is_icann = section is Section.ICANN
        self.is_private = section is Section.PRIVATE


class RuleTrie:
    """Trie of PSL rules keyed by label, rightmost label first.

    Usage:
        trie = RuleTrie()
        trie.insert(Rule.from_text("co.uk"))
        trie.insert(Rule.from_text("!city.kawasaki.jp"))
        trie.freeze()

    Or in one step:
        trie = RuleTrie.from_rules(parse_rules(text))
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._rule_count = 0
        self._frozen = False

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> RuleTrie:
        """Build a trie from rules and freeze it."""
        trie = cls()
        for rule in rules:
            trie.insert(rule)
        trie.freeze()
        log.info(
            "Built suffix trie: %d rules, %d nodes",
            trie.rule_count, trie.node_count(),
        )
        return trie

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def rule_count(self) -> int:
        return self._rule_count

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Disallow further inserts. Lookups work before and after."""
        self._frozen = True

    def insert(self, rule: Rule) -> None:
        """Add one rule's label path, creating nodes as needed.

        The node for the leftmost label becomes terminal, or an
        exception node for "!" rules. A rule with no labels is ignored.
        """
        if self._frozen:
            raise RuntimeError("Cannot insert into a frozen RuleTrie")
        if not rule.labels:
            log.debug("Ignoring rule with no labels")
            return

        node = self._root
        for i in range(len(rule.labels) - 1, -1, -1):
            label = rule.labels[i]
            child = node.children.get(label)
            if child is None:
                child = TrieNode()
                child.stamp(rule.section)
                node.children[label] = child
            node = child

        # last rule to end at a node decides what the node is
        node.is_exception = rule.exception
        node.is_terminal = not rule.exception
        node.stamp(rule.section)
        self._rule_count += 1

    def node_count(self) -> int:
        """Number of nodes, root included. Logged when a trie is built."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count
