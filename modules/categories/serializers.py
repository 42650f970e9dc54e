"""
Categories serializers.
"""
from rest_framework import serializers

from .models import CategoryModel


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for category output."""

    class Meta:
        model = CategoryModel
        fields = ['id', 'name', 'description', 'is_active']
        read_only_fields = fields
