from .entity import AggregateRoot, Entity
from .exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
    StorageUnavailableException,
    UnauthorizedException,
)
from .repository import Repository
from .value_object import Currency, Money, UserId

__all__ = [
    "Entity",
    "AggregateRoot",
    "Repository",
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "UnauthorizedException",
    "StorageUnavailableException",
    "UserId",
    "Currency",
    "Money",
]
