"""
Categories models.
"""
from django.db import models


class CategoryModel(models.Model):
    """Product category model."""

    name = models.CharField(
        max_length=100,
        db_index=True,
        verbose_name='name'
    )
    description = models.TextField(
        blank=True,
        default='',
        verbose_name='description'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='active'
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
        db_table = 'categories'
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def is_deleted(self) -> bool:
        """Check if category is soft deleted."""
        return self.deleted_at is not None
