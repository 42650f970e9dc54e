"""
Product domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, InsufficientStockError


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is unknown or not for sale."""

    def __init__(self, product_id):
        super().__init__(
            entity_name="Product",
            entity_id=str(product_id),
            code="PRODUCT_NOT_FOUND",
        )
        self.product_id = product_id


# Re-export for convenience
__all__ = [
    'ProductNotFoundError',
    'InsufficientStockError',
]
