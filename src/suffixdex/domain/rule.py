"""A single Public Suffix List rule.

Rules come from one line of the list each:

    com                 -- plain rule
    *.kawasaki.jp       -- wildcard: any label under kawasaki.jp is a suffix
    !city.kawasaki.jp   -- exception: city.kawasaki.jp is registrable

Labels are stored left-to-right as written. The trie consumes them from
the right (TLD first), indexing from the end instead of building a
reversed copy.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from suffixdex.domain.types import EXCEPTION_PREFIX, LABEL_SEPARATOR, Label


class Section(Enum):
    ICANN = auto()
    PRIVATE = auto()


@dataclass(frozen=True, slots=True)
class Rule:
    labels: tuple[Label, ...]
    exception: bool = False
    section: Section = Section.ICANN

    @classmethod
    def from_text(cls, text: str, section: Section = Section.ICANN) -> Rule:
        """Parse one rule token, e.g. "!city.kawasaki.jp".

        An empty token (or a bare "!") yields a rule with no labels,
        which RuleTrie.insert() ignores.
        """
        exception = text.startswith(EXCEPTION_PREFIX)
        if exception:
            text = text[len(EXCEPTION_PREFIX):]
        labels = tuple(text.split(LABEL_SEPARATOR)) if text else ()
        return cls(labels=labels, exception=exception, section=section)

    @property
    def is_icann(self) -> bool:
        return self.section is Section.ICANN

    @property
    def is_private(self) -> bool:
        return self.section is Section.PRIVATE

    def __str__(self) -> str:
        text = LABEL_SEPARATOR.join(self.labels)
        return EXCEPTION_PREFIX + text if self.exception else text
