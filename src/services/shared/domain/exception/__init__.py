from .exceptions import (
    AccessDeniedException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
    UnsupportedStateException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "AccessDeniedException",
    "BusinessRuleViolationException",
    "UnsupportedStateException",
    "DuplicateResourceException",
    "OptimisticLockException",
]
