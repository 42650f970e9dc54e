"""
Orders module serializers.
"""
from rest_framework import serializers

from .dtos import MAX_PRODUCT_ID, MAX_QUANTITY, OrderLineRequest


# Checkout input

class OrderLineInputSerializer(serializers.Serializer):
    """One cart line as sent by the storefront."""
    producto_id = serializers.IntegerField(min_value=1, max_value=MAX_PRODUCT_ID)
    cantidad = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return OrderLineRequest(product_id=value['producto_id'], quantity=value['cantidad'])


class OrderCreateSerializer(serializers.Serializer):
    """Serializer for placing an order."""
    items = OrderLineInputSerializer(many=True, allow_empty=True)


class OrderCreatedSerializer(serializers.Serializer):
    """Serializer for the checkout confirmation."""
    ordenId = serializers.IntegerField(source='id', read_only=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


# Order output

class OrderItemSerializer(serializers.Serializer):
    """Serializer for order item output."""
    id = serializers.IntegerField(read_only=True)
    product_id = serializers.IntegerField(read_only=True)
    sku = serializers.CharField(source='product_sku', read_only=True)
    product_name = serializers.CharField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class OrderSerializer(serializers.Serializer):
    """Serializer for order output."""
    id = serializers.IntegerField(read_only=True)
    status = serializers.CharField(read_only=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    placed_at = serializers.DateTimeField(read_only=True)


class OrderDetailSerializer(OrderSerializer):
    """Serializer for order output including its lines."""
    items = OrderItemSerializer(many=True, read_only=True)
    item_count = serializers.IntegerField(read_only=True)


class OrderListQuerySerializer(serializers.Serializer):
    """Query parameters for the customer's order list."""
    details = serializers.BooleanField(default=False)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=50)
    offset = serializers.IntegerField(min_value=0, default=0)
