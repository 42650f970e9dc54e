# Shared domain module
from .base_value_object import ValueObject
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    InsufficientStockError,
    UnauthorizedError,
    PersistenceError,
)

__all__ = [
    'ValueObject',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'InsufficientStockError',
    'UnauthorizedError',
    'PersistenceError',
]
