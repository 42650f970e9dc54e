"""
Products module admin configuration.
"""
from django.contrib import admin

from .models import ProductModel


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('id', 'sku', 'name', 'price', 'discount_pct', 'final_price', 'stock', 'is_active', 'category')
    list_filter = ('is_active', 'category', 'created_at')
    search_fields = ('sku', 'name', 'description')
    ordering = ('name',)
    readonly_fields = ('created_at', 'updated_at')
