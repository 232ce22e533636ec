"""Parse raw Public Suffix List text into Rule records.

The list is line oriented:

    // comment
    // ===BEGIN ICANN DOMAINS===
    com
    *.ck
    !www.ck
    // ===END ICANN DOMAINS===
    // ===BEGIN PRIVATE DOMAINS===
    blogspot.com

Only the first whitespace-delimited token of a line is the rule. The
BEGIN markers switch the section that subsequent rules belong to; rules
before any marker are treated as ICANN.

Non-ASCII rules ("中国") are also emitted in their punycode form
("xn--fiqs8s") so inputs in either encoding find them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import idna

from suffixdex.domain.rule import Rule, Section

log = logging.getLogger(__name__)

COMMENT_PREFIX = "//"
ICANN_BEGIN = "// ===BEGIN ICANN DOMAINS==="
PRIVATE_BEGIN = "// ===BEGIN PRIVATE DOMAINS==="


def parse_rules(text: str, *, punycode: bool = True) -> Iterator[Rule]:
    """Yield one Rule per rule line of text, in list order."""
    section = Section.ICANN
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(COMMENT_PREFIX):
            if line.startswith(ICANN_BEGIN):
                section = Section.ICANN
            elif line.startswith(PRIVATE_BEGIN):
                section = Section.PRIVATE
            continue

        rule = Rule.from_text(line.split()[0].lower(), section)
        if not rule.labels or "" in rule.labels:
            log.warning("Skipping malformed rule on line %d: %r", lineno, line)
            continue
        yield rule

        if punycode:
            twin = to_ascii_rule(rule)
            if twin is not None:
                yield twin


def to_ascii_rule(rule: Rule) -> Rule | None:
    """Return the punycode form of a rule with non-ASCII labels.

    Returns None if the rule is already ASCII or a label cannot be
    IDNA-encoded.
    """
    if all(label.isascii() for label in rule.labels):
        return None
    labels = []
    for label in rule.labels:
        if label.isascii():
            labels.append(label)
            continue
        try:
            labels.append(idna.alabel(label).decode("ascii"))
        except idna.IDNAError as exc:
            log.debug("No punycode form for rule %s: %s", rule, exc)
            return None
    return Rule(labels=tuple(labels), exception=rule.exception, section=rule.section)


def count_rules(text: str) -> int:
    """Number of rules in text, not counting punycode twins."""
    return sum(1 for _ in parse_rules(text, punycode=False))
