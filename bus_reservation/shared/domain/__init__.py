from .entity import AggregateRoot, Entity
from .exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    EmptyIdentifierException,
)
from .repository import Repository
from .value_object import TripId

__all__ = [
    "Entity",
    "AggregateRoot",
    "Repository",
    "DomainException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "EmptyIdentifierException",
    "TripId",
]
