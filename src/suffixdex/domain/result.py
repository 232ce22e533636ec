"""Classification outcome for one input string.

Exactly one of three shapes holds:
  1. a domain split: root and suffix set, subdomain possibly empty
  2. an IP literal: is_ipv4 or is_ipv6 set, the address text in root
  3. invalid: every string empty, every flag False
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from suffixdex.domain.types import LABEL_SEPARATOR


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    subdomain: str = ""
    root: str = ""
    suffix: str = ""
    is_icann: bool = False
    is_private: bool = False
    is_ipv4: bool = False
    is_ipv6: bool = False

    @classmethod
    def invalid(cls) -> ClassificationResult:
        return cls()

    @classmethod
    def for_ip(cls, address: str, version: int) -> ClassificationResult:
        """Result for an IPv4 (version 4) or IPv6 (version 6) literal."""
        return cls(root=address, is_ipv4=version == 4, is_ipv6=version == 6)

    @property
    def is_ip(self) -> bool:
        return self.is_ipv4 or self.is_ipv6

    @property
    def is_valid(self) -> bool:
        """True for a domain split or an IP literal."""
        return bool(self.root)

    @property
    def registered_domain(self) -> str:
        """root + suffix, or "" when either is missing (IPs included)."""
        if self.root and self.suffix:
            return self.root + LABEL_SEPARATOR + self.suffix
        return ""

    @property
    def fqdn(self) -> str:
        """Full hostname rebuilt from the split, "" for IPs and invalid input."""
        if not self.suffix:
            return ""
        return LABEL_SEPARATOR.join(
            part for part in (self.subdomain, self.root, self.suffix) if part
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
