"""Domain model for suffixdex.

Re-exports all public types for convenient access:
    from suffixdex.domain import Rule, Section, ClassificationResult
"""
from suffixdex.domain.result import ClassificationResult
from suffixdex.domain.rule import Rule, Section
from suffixdex.domain.types import (
    EXCEPTION_PREFIX,
    LABEL_SEPARATOR,
    WILDCARD,
    DomainName,
    Label,
)

__all__ = [
    "ClassificationResult",
    "Rule",
    "Section",
    "DomainName",
    "Label",
    "EXCEPTION_PREFIX",
    "LABEL_SEPARATOR",
    "WILDCARD",
]
