"""
Products module service layer.

``ProductService`` is the catalog store used by checkout: it reads product
rows and applies stock decrements, always inside the caller's transaction.
"""
import logging
from typing import Dict, Iterable, List, Optional

from django.db.models import F

from .models import ProductModel

logger = logging.getLogger(__name__)


class ProductService:
    """
    Product business logic service.
    """

    def _available(self):
        return ProductModel.objects.filter(is_active=True, deleted_at__isnull=True)

    def get_product_by_id(self, product_id: int) -> Optional[ProductModel]:
        """Get an available product by ID."""
        try:
            return self._available().select_related('category').get(id=product_id)
        except (ProductModel.DoesNotExist, ValueError, TypeError):
            return None

    def get_all_products(
        self,
        category_id: int = None,
        offset: int = 0,
        limit: int = None,
    ) -> List[ProductModel]:
        """Get all available products, optionally for one category."""
        queryset = self._available().select_related('category')
        if category_id:
            queryset = queryset.filter(category_id=category_id)
        queryset = queryset.order_by('name', 'id')
        if limit is not None:
            return list(queryset[offset:offset + limit])
        return list(queryset[offset:])

    def get_products_for_update(self, product_ids: Iterable[int]) -> Dict[int, ProductModel]:
        """
        Lock and return the available products among ``product_ids``.

        Rows are locked in ascending id order so that concurrent checkouts
        touching the same products cannot deadlock. Must run inside
        ``transaction.atomic()``. Unknown or unavailable ids are absent from
        the result.
        """
        ids = sorted(set(product_ids))
        products = (
            self._available()
            .select_for_update()
            .filter(id__in=ids)
            .order_by('id')
        )
        return {product.id: product for product in products}

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """
        Take ``quantity`` units out of stock.

        The update only matches while enough stock remains, so stock never
        goes negative even when the caller's view of it is stale.

        Returns:
            True when the row was updated, False otherwise
        """
        updated = (
            ProductModel.objects
            .filter(id=product_id, stock__gte=quantity)
            .update(stock=F('stock') - quantity)
        )
        if not updated:
            logger.warning(f"Stock decrement of {quantity} refused for product {product_id}")
        return updated == 1

    def get_stock(self, product_id: int) -> int:
        """Current stock of a product row, 0 when the row is gone."""
        stock = (
            ProductModel.objects
            .filter(id=product_id)
            .values_list('stock', flat=True)
            .first()
        )
        return stock or 0
