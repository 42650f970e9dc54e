"""
Categories business logic services.
"""
from typing import List, Optional

from .models import CategoryModel


class CategoryService:
    """Service for category operations."""

    def get_category_by_id(self, category_id: int) -> Optional[CategoryModel]:
        """Get category by ID."""
        try:
            return CategoryModel.objects.get(id=category_id, deleted_at__isnull=True)
        except CategoryModel.DoesNotExist:
            return None

    def get_active_categories(self) -> List[CategoryModel]:
        """Get all active categories."""
        return list(
            CategoryModel.objects.filter(is_active=True, deleted_at__isnull=True)
            .order_by('name')
        )
