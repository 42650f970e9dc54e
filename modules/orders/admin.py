"""
Orders admin configuration.
"""
from django.contrib import admin

from .models import OrderModel, OrderItemModel


class OrderItemInline(admin.TabularInline):
    """Inline for order items."""
    model = OrderItemModel
    extra = 0
    can_delete = False
    readonly_fields = ('product', 'product_name', 'product_sku', 'unit_price', 'quantity', 'line_total')


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model."""
    list_display = ('id', 'user', 'status', 'total', 'currency', 'placed_at')
    list_filter = ('status', 'placed_at')
    search_fields = ('id', 'user__email')
    ordering = ('-placed_at',)
    readonly_fields = ('user', 'total', 'currency', 'placed_at', 'updated_at')
    inlines = [OrderItemInline]
