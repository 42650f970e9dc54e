"""
Category domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, category_id):
        super().__init__(
            entity_name="Category",
            entity_id=str(category_id),
            code="CATEGORY_NOT_FOUND",
        )
