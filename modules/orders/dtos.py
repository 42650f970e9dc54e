"""
Order line data passed between validation and persistence.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from shared.domain import ValueObject
from modules.products.models import ProductModel
from modules.products.pricing import resolve_unit_price

# BigAutoField primary keys and PositiveIntegerField quantities
MAX_PRODUCT_ID = 2 ** 63 - 1
MAX_QUANTITY = 2 ** 31 - 1


@dataclass(frozen=True)
class OrderLineRequest(ValueObject):
    """A (product, quantity) intent from the client cart. Prices are never taken from it."""
    product_id: Any
    quantity: Any


@dataclass(frozen=True)
class ValidatedLine(ValueObject):
    """A line checked against current catalog state and priced."""
    product: ProductModel
    unit_price: Decimal
    quantity: int
    line_total: Decimal

    @classmethod
    def price(cls, product: ProductModel, quantity: int) -> 'ValidatedLine':
        """Price ``quantity`` units of ``product`` at its current unit price."""
        unit_price = resolve_unit_price(product)
        return cls(
            product=product,
            unit_price=unit_price,
            quantity=quantity,
            line_total=unit_price * quantity,
        )
