"""Tests for RuleTrie construction."""

import pytest

from suffixdex.domain.rule import Rule, Section
from suffixdex.matching.trie import RuleTrie


def _node(trie, *path):
    node = trie.root
    for label in path:
        node = node.children[label]
    return node


class TestTrieBasics:
    """Basic trie operations."""

    def test_empty_trie(self):
        t = RuleTrie()
        assert t.rule_count == 0
        assert t.node_count() == 1
        assert t.root.children == {}

    def test_single_rule(self):
        t = RuleTrie()
        t.insert(Rule.from_text("co.uk"))
        # root -> uk -> co = 3 nodes
        assert t.node_count() == 3
        assert _node(t, "uk", "co").is_terminal
        assert not _node(t, "uk").is_terminal

    def test_rightmost_label_first(self):
        t = RuleTrie()
        t.insert(Rule.from_text("act.edu.au"))
        assert list(t.root.children) == ["au"]
        assert list(_node(t, "au").children) == ["edu"]
        assert _node(t, "au", "edu", "act").is_terminal

    def test_shared_suffix(self):
        """Two rules under the same TLD share the TLD node."""
        t = RuleTrie()
        t.insert(Rule.from_text("co.uk"))
        t.insert(Rule.from_text("ac.uk"))
        # root -> uk -> co, ac = 4 nodes
        assert t.node_count() == 4
        assert t.rule_count == 2

    def test_parent_after_child(self):
        t = RuleTrie()
        t.insert(Rule.from_text("co.uk"))
        t.insert(Rule.from_text("uk"))
        assert _node(t, "uk").is_terminal
        assert _node(t, "uk", "co").is_terminal
        assert t.node_count() == 3

    def test_wildcard_is_plain_child(self):
        t = RuleTrie()
        t.insert(Rule.from_text("*.kawasaki.jp"))
        wild = _node(t, "jp", "kawasaki", "*")
        assert wild.is_terminal
        assert not _node(t, "jp", "kawasaki").is_terminal


class TestExceptionRules:

    def test_exception_node_not_terminal(self):
        t = RuleTrie()
        t.insert(Rule.from_text("*.kawasaki.jp"))
        t.insert(Rule.from_text("!city.kawasaki.jp"))
        city = _node(t, "jp", "kawasaki", "city")
        assert city.is_exception
        assert not city.is_terminal

    def test_exception_not_inherited(self):
        t = RuleTrie()
        t.insert(Rule.from_text("!www.ck"))
        t.insert(Rule.from_text("foo.www.ck"))
        assert _node(t, "ck", "www").is_exception
        foo = _node(t, "ck", "www", "foo")
        assert foo.is_terminal
        assert not foo.is_exception

    def test_intermediate_nodes_plain(self):
        t = RuleTrie()
        t.insert(Rule.from_text("!city.kawasaki.jp"))
        assert not _node(t, "jp").is_exception
        assert not _node(t, "jp", "kawasaki").is_exception


class TestProvenance:

    def test_new_nodes_stamped_with_section(self):
        t = RuleTrie()
        t.insert(Rule.from_text("s3.amazonaws.com", Section.PRIVATE))
        for path in (("com",), ("com", "amazonaws"), ("com", "amazonaws", "s3")):
            node = _node(t, *path)
            assert node.is_private
            assert not node.is_icann

    def test_existing_parent_keeps_section(self):
        t = RuleTrie()
        t.insert(Rule.from_text("ca", Section.ICANN))
        t.insert(Rule.from_text("blogspot.ca", Section.PRIVATE))
        assert _node(t, "ca").is_icann
        assert not _node(t, "ca").is_private
        assert _node(t, "ca", "blogspot").is_private

    def test_terminal_restamped_by_its_rule(self):
        t = RuleTrie()
        t.insert(Rule.from_text("foo.example", Section.PRIVATE))
        assert _node(t, "example").is_private
        t.insert(Rule.from_text("example", Section.ICANN))
        assert _node(t, "example").is_icann
        assert not _node(t, "example").is_private


class TestTrieEdgeCases:

    def test_empty_rule_ignored(self):
        t = RuleTrie()
        t.insert(Rule.from_text(""))
        t.insert(Rule.from_text("!"))
        t.insert(Rule.from_text("com"))
        assert t.rule_count == 1
        assert t.node_count() == 2

    def test_insert_after_freeze(self):
        t = RuleTrie()
        t.insert(Rule.from_text("com"))
        t.freeze()
        assert t.frozen
        with pytest.raises(RuntimeError, match="frozen"):
            t.insert(Rule.from_text("net"))

    def test_from_rules_freezes(self):
        t = RuleTrie.from_rules([Rule.from_text("com"), Rule.from_text("co.uk")])
        assert t.frozen
        assert t.rule_count == 2

    def test_many_rules(self):
        t = RuleTrie()
        for i in range(1000):
            t.insert(Rule.from_text(f"zone-{i}.example"))
        assert t.rule_count == 1000
        # root + example + 1000 leaves
        assert t.node_count() == 1002

    def test_build_logs_counts(self, caplog):
        with caplog.at_level("INFO", logger="suffixdex.matching.trie"):
            t = RuleTrie.from_rules([Rule.from_text("co.uk"), Rule.from_text("ac.uk")])
        assert t.node_count() == 4
        assert "2 rules, 4 nodes" in caplog.text
