"""
Products module API views.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import ProductNotFoundError
from .services import ProductService
from .serializers import ProductSerializer, ProductListQuerySerializer


product_service = ProductService()


@extend_schema(tags=['Products'])
class ProductListView(APIView):
    """Product list endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='category_id', type=int, required=False),
            OpenApiParameter(name='limit', type=int, required=False),
            OpenApiParameter(name='offset', type=int, required=False),
        ],
        responses={200: ProductSerializer(many=True)},
        summary="List products",
    )
    def get(self, request):
        query = ProductListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        products = product_service.get_all_products(
            category_id=query.validated_data.get('category_id'),
            offset=query.validated_data['offset'],
            limit=query.validated_data.get('limit'),
        )

        return Response(ProductSerializer(products, many=True).data)


@extend_schema(tags=['Products'])
class ProductDetailView(APIView):
    """Product detail endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ProductSerializer},
        summary="Get product detail",
    )
    def get(self, request, product_id: int):
        product = product_service.get_product_by_id(product_id)
        if not product:
            raise ProductNotFoundError(product_id)

        return Response(ProductSerializer(product).data)
