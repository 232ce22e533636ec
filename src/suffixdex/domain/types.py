"""Shared type aliases and constants used across the domain."""
from __future__ import annotations

from typing import TypeAlias

Label: TypeAlias = str
DomainName: TypeAlias = str

LABEL_SEPARATOR = "."
WILDCARD = "*"
EXCEPTION_PREFIX = "!"
