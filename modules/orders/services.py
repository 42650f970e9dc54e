"""
Orders module service layer.

Placing an order walks Received -> Authenticated -> Validated -> Persisted
-> Confirmed. Any failure aborts the whole order; nothing is retried.
"""
import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from django.conf import settings
from django.db import DatabaseError, transaction

from shared.domain.exceptions import (
    DomainException,
    InsufficientStockError,
    PersistenceError,
    UnauthorizedError,
)
from modules.products.exceptions import ProductNotFoundError
from modules.products.services import ProductService
from .dtos import MAX_PRODUCT_ID, MAX_QUANTITY, OrderLineRequest, ValidatedLine
from .exceptions import EmptyOrderError, InvalidOrderLineError, OrderNotFoundError
from .models import OrderModel, OrderItemModel

logger = logging.getLogger(__name__)


def _as_line_request(item) -> OrderLineRequest:
    if isinstance(item, OrderLineRequest):
        return item
    try:
        return OrderLineRequest(product_id=item['product_id'], quantity=item['quantity'])
    except (KeyError, TypeError) as e:
        raise InvalidOrderLineError("Each item needs a product_id and a quantity") from e


def merge_lines(items: Iterable) -> List[OrderLineRequest]:
    """
    Normalize cart intents, summing quantities of repeated products.

    A product keeps the position of its first occurrence.
    """
    merged = {}
    for item in items or []:
        line = _as_line_request(item)

        if (
            isinstance(line.product_id, bool)
            or not isinstance(line.product_id, int)
            or not 1 <= line.product_id <= MAX_PRODUCT_ID
        ):
            raise InvalidOrderLineError(f"Invalid product id: {line.product_id!r}")
        if (
            isinstance(line.quantity, bool)
            or not isinstance(line.quantity, int)
            or not 1 <= line.quantity <= MAX_QUANTITY
        ):
            raise InvalidOrderLineError(
                f"Quantity for product {line.product_id} must be a positive integer"
            )

        merged[line.product_id] = merged.get(line.product_id, 0) + line.quantity

    return [
        OrderLineRequest(product_id=product_id, quantity=quantity)
        for product_id, quantity in merged.items()
    ]


class OrderValidator:
    """
    Checks cart intents against live catalog state.
    """

    def __init__(self, product_service: ProductService = None):
        self.product_service = product_service or ProductService()

    def validate(self, items: Iterable) -> List[ValidatedLine]:
        """
        Re-fetch every product and price the lines.

        Product rows stay locked until the surrounding transaction ends.

        Raises:
            EmptyOrderError: no items
            InvalidOrderLineError: malformed line
            ProductNotFoundError: unknown or unavailable product
            InsufficientStockError: quantity above current stock
        """
        line_requests = merge_lines(items)
        if not line_requests:
            raise EmptyOrderError()

        products = self.product_service.get_products_for_update(
            request.product_id for request in line_requests
        )

        validated = []
        for request in line_requests:
            product = products.get(request.product_id)
            if product is None:
                raise ProductNotFoundError(request.product_id)

            if request.quantity > product.stock:
                raise InsufficientStockError(
                    product_id=product.id,
                    requested=request.quantity,
                    available=product.stock,
                )

            validated.append(ValidatedLine.price(product, request.quantity))

        return validated


class OrderWriter:
    """
    Persists an order and takes its stock in one atomic unit.
    """

    def __init__(self, product_service: ProductService = None):
        self.product_service = product_service or ProductService()

    def write(self, user, lines: List[ValidatedLine]) -> OrderModel:
        """
        Insert the order header and lines, then decrement stock.

        Raises:
            EmptyOrderError: no lines
            InsufficientStockError: stock moved below a line's quantity
            PersistenceError: the database rejected any statement
        """
        if not lines:
            raise EmptyOrderError()

        total = sum((line.line_total for line in lines), Decimal('0.00'))

        try:
            with transaction.atomic():
                order = OrderModel.objects.create(
                    user=user,
                    status=OrderModel.STATUS_CREATED,
                    total=total,
                    currency=settings.STORE_CURRENCY,
                )

                OrderItemModel.objects.bulk_create([
                    OrderItemModel(
                        order=order,
                        product_name=line.product.name,
                        product_sku=line.product.sku,
                        **line.as_dict()
                    )
                    for line in lines
                ])

                for line in lines:
                    if not self.product_service.decrement_stock(line.product.id, line.quantity):
                        raise InsufficientStockError(
                            product_id=line.product.id,
                            requested=line.quantity,
                            available=self.product_service.get_stock(line.product.id),
                        )
        except DatabaseError as e:
            logger.error(f"Order write failed for customer {user.id}: {str(e)}", exc_info=True)
            raise PersistenceError() from e

        return order


class OrderService:
    """
    Order business logic service.
    """

    def __init__(
        self,
        product_service: ProductService = None,
        validator: OrderValidator = None,
        writer: OrderWriter = None,
    ):
        product_service = product_service or ProductService()
        self.validator = validator or OrderValidator(product_service)
        self.writer = writer or OrderWriter(product_service)

    def place_order(self, user, items: Iterable) -> OrderModel:
        """Create an order for ``user`` from cart intents."""
        if user is None or not getattr(user, 'is_authenticated', False):
            raise UnauthorizedError()

        logger.debug(f"Order request received from customer {user.id}")

        try:
            with transaction.atomic():
                lines = self.validator.validate(items)
                logger.debug(f"Validated {len(lines)} lines for customer {user.id}")
                order = self.writer.write(user, lines)
        except DatabaseError as e:
            logger.error(f"Order commit failed for customer {user.id}: {str(e)}", exc_info=True)
            raise PersistenceError() from e
        except PersistenceError:
            raise
        except DomainException as e:
            logger.warning(f"Order rejected for customer {user.id}: {e.code} {e.message}")
            raise

        logger.info(
            f"Order {order.id} confirmed for customer {user.id}: "
            f"{len(lines)} lines, total {order.total}"
        )
        return order

    def get_user_orders(
        self,
        user_id: int,
        offset: int = 0,
        limit: int = 50,
        with_items: bool = False,
    ) -> List[OrderModel]:
        """Get a customer's orders, newest first."""
        queryset = OrderModel.objects.filter(user_id=user_id).order_by('-placed_at', '-id')
        if with_items:
            queryset = queryset.prefetch_related('items')
        return list(queryset[offset:offset + limit])

    def get_order_for_user(self, order_id: int, user_id: int) -> OrderModel:
        """Get one of a customer's orders with its items."""
        order: Optional[OrderModel] = (
            OrderModel.objects.prefetch_related('items')
            .filter(id=order_id, user_id=user_id)
            .first()
        )
        if order is None:
            raise OrderNotFoundError(order_id)
        return order
