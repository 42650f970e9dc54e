"""
Products module Django ORM models.
"""
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q

from . import pricing


class ProductModel(models.Model):
    """Catalog product with price, discount and stock."""

    name = models.CharField(
        max_length=200,
        db_index=True,
        verbose_name='name'
    )
    sku = models.CharField(
        max_length=64,
        unique=True,
        db_index=True,
        verbose_name='SKU'
    )
    description = models.TextField(
        blank=True,
        default='',
        verbose_name='description'
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))],
        verbose_name='price'
    )
    discount_pct = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))],
        verbose_name='discount %'
    )
    stock = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        verbose_name='stock'
    )
    is_active = models.BooleanField(
        default=True,
        db_index=True,
        verbose_name='active'
    )
    image_url = models.URLField(
        max_length=500,
        null=True,
        blank=True,
        verbose_name='image URL'
    )
    category = models.ForeignKey(
        'categories.CategoryModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='category'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='updated at'
    )
    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='deleted at'
    )

    class Meta:
        db_table = 'products'
        verbose_name = 'Product'
        verbose_name_plural = 'Products'
        ordering = ['name']
        indexes = [
            models.Index(fields=['category', 'is_active'], name='products_cat_active_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(stock__gte=0),
                name='products_stock_non_negative',
            ),
            models.CheckConstraint(
                condition=Q(price__gte=0),
                name='products_price_non_negative',
            ),
            models.CheckConstraint(
                condition=Q(discount_pct__isnull=True) | (Q(discount_pct__gte=0) & Q(discount_pct__lte=100)),
                name='products_discount_pct_range',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.sku})"

    @property
    def is_deleted(self) -> bool:
        """Check if product is soft deleted."""
        return self.deleted_at is not None

    @property
    def is_available(self) -> bool:
        """Active and not soft deleted."""
        return self.is_active and not self.is_deleted

    @property
    def final_price(self) -> Decimal:
        return pricing.resolve_unit_price(self)

    @property
    def discount_applied_pct(self) -> Decimal:
        return pricing.discount_applied_pct(self)
