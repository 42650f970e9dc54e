"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code=code
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field


class InsufficientStockError(DomainException):
    """Raised when stock is insufficient."""

    def __init__(self, product_id: int, requested: int, available: int):
        super().__init__(
            message=f"Insufficient stock for product '{product_id}': requested {requested}, available {available}",
            code="INSUFFICIENT_STOCK"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class UnauthorizedError(DomainException):
    """Raised when the caller cannot be identified."""

    def __init__(self, message: str = "Authentication credentials are missing or invalid"):
        super().__init__(message=message, code="UNAUTHORIZED")


class PersistenceError(DomainException):
    """Raised when the database rejects a write or a commit."""

    def __init__(self, message: str = "The operation could not be saved"):
        super().__init__(message=message, code="PERSISTENCE_ERROR")
