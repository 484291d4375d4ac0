from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    EmptyIdentifierException,
)

__all__ = [
    "DomainException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "EmptyIdentifierException",
]
