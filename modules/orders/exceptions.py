"""
Order domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, ValidationError


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, order_id):
        super().__init__(
            entity_name="Order",
            entity_id=str(order_id),
            code="ORDER_NOT_FOUND",
        )


class EmptyOrderError(ValidationError):
    """Raised when an order is submitted without items."""

    def __init__(self):
        super().__init__(
            message="Cannot place an order without items",
            field="items",
            code="EMPTY_ORDER",
        )


class InvalidOrderLineError(ValidationError):
    """Raised when an order line is malformed."""

    def __init__(self, message: str):
        super().__init__(message=message, field="items", code="INVALID_ORDER_LINE")
