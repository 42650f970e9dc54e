"""
Orders module Django ORM models.
"""
from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone


class OrderModel(models.Model):
    """Order header. The total is fixed when the order is placed."""

    STATUS_CREATED = 'created'
    STATUS_CHOICES = [
        ('created', 'Created'),
        ('paid', 'Paid'),
        ('shipped', 'Shipped'),
        ('cancelled', 'Cancelled'),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='orders',
        verbose_name='customer'
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_CREATED,
        db_index=True,
        verbose_name='status'
    )
    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        verbose_name='total'
    )
    currency = models.CharField(
        max_length=3,
        default='COP',
        verbose_name='currency'
    )
    placed_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        verbose_name='placed at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='updated at'
    )

    class Meta:
        db_table = 'orders'
        verbose_name = 'Order'
        verbose_name_plural = 'Orders'
        ordering = ['-placed_at', '-id']
        indexes = [
            models.Index(fields=['user', 'placed_at'], name='orders_user_placed_idx'),
        ]

    def __str__(self):
        return f"Order {self.id} by customer {self.user_id}"

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items.all())


class OrderItemModel(models.Model):
    """Order line with the price charged at purchase time."""

    order = models.ForeignKey(
        OrderModel,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='order'
    )
    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.PROTECT,
        related_name='order_items',
        verbose_name='product'
    )
    product_name = models.CharField(
        max_length=200,
        verbose_name='product name'
    )
    product_sku = models.CharField(
        max_length=64,
        verbose_name='SKU'
    )
    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        verbose_name='unit price'
    )
    quantity = models.PositiveIntegerField(
        verbose_name='quantity'
    )
    line_total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        verbose_name='line total'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='created at'
    )

    class Meta:
        db_table = 'order_items'
        verbose_name = 'Order Item'
        verbose_name_plural = 'Order Items'
        ordering = ['id']
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gte=1),
                name='order_items_quantity_positive',
            ),
        ]

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"
