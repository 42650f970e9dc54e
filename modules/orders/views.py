"""
Orders module API views.
"""
import logging

from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import OrderService
from .serializers import (
    OrderCreateSerializer,
    OrderCreatedSerializer,
    OrderSerializer,
    OrderDetailSerializer,
    OrderListQuerySerializer,
)


logger = logging.getLogger(__name__)

order_service = OrderService()

_error_schema = {
    'type': 'object',
    'properties': {
        'status': {'type': 'integer'},
        'message': {'type': 'string'},
        'code': {'type': 'string'},
    }
}


@extend_schema(tags=['Orders'])
class OrderCreateView(APIView):
    """Checkout endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=OrderCreateSerializer,
        responses={
            201: OrderCreatedSerializer,
            400: _error_schema,
            401: _error_schema,
            404: _error_schema,
            409: _error_schema,
            500: _error_schema,
        },
        summary="Place an order",
        description="Prices and stock are re-read from the catalog; only product ids and quantities are taken from the request.",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = order_service.place_order(request.user, serializer.validated_data['items'])

        return Response(OrderCreatedSerializer(order).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Orders'])
class MyOrdersView(APIView):
    """Current customer's order history."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='details', type=bool, required=False),
            OpenApiParameter(name='limit', type=int, required=False),
            OpenApiParameter(name='offset', type=int, required=False),
        ],
        responses={200: OrderDetailSerializer(many=True)},
        summary="List my orders",
    )
    def get(self, request):
        query = OrderListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        with_items = query.validated_data['details']

        orders = order_service.get_user_orders(
            request.user.id,
            offset=query.validated_data['offset'],
            limit=query.validated_data['limit'],
            with_items=with_items,
        )

        serializer_class = OrderDetailSerializer if with_items else OrderSerializer
        return Response(serializer_class(orders, many=True).data)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: OrderDetailSerializer, 404: _error_schema},
        summary="Get order detail",
    )
    def get(self, request, order_id: int):
        order = order_service.get_order_for_user(order_id, request.user.id)
        return Response(OrderDetailSerializer(order).data)
