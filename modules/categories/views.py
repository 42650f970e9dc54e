"""
Categories API views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import CategoryNotFoundError
from .serializers import CategorySerializer
from .services import CategoryService

category_service = CategoryService()


@extend_schema(tags=['Categories'])
class CategoryListView(APIView):
    """Category list endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CategorySerializer(many=True)},
        summary="List active categories",
    )
    def get(self, request):
        categories = category_service.get_active_categories()
        return Response(CategorySerializer(categories, many=True).data)


@extend_schema(tags=['Categories'])
class CategoryDetailView(APIView):
    """Category detail endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CategorySerializer},
        summary="Get category detail",
    )
    def get(self, request, category_id: int):
        category = category_service.get_category_by_id(category_id)
        if not category:
            raise CategoryNotFoundError(category_id)
        return Response(CategorySerializer(category).data)
