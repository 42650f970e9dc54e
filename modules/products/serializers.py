"""
Products module serializers.
"""
from rest_framework import serializers

from .models import ProductModel


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for product output."""
    category_name = serializers.CharField(source='category.name', read_only=True, allow_null=True)
    final_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    discount_applied_pct = serializers.DecimalField(max_digits=5, decimal_places=2, read_only=True)

    class Meta:
        model = ProductModel
        fields = [
            'id',
            'sku',
            'name',
            'description',
            'price',
            'discount_pct',
            'final_price',
            'discount_applied_pct',
            'stock',
            'image_url',
            'category',
            'category_name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ProductListQuerySerializer(serializers.Serializer):
    """Query parameters for the product list."""
    category_id = serializers.IntegerField(required=False, min_value=1)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=200)
    offset = serializers.IntegerField(min_value=0, default=0)
