"""
Users module API views.
"""
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import UserService
from .serializers import (
    UserSerializer,
    UserCreateSerializer,
    UserUpdateSerializer,
    LoginSerializer,
    TokenSerializer,
    PasswordChangeSerializer,
)

logger = logging.getLogger(__name__)

user_service = UserService()


@extend_schema(tags=['Auth'])
class RegisterView(APIView):
    """User registration endpoint."""
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        request=UserCreateSerializer,
        responses={201: TokenSerializer},
        summary="Register a new customer",
    )
    def post(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = user_service.register_user(**serializer.validated_data)

        return Response(TokenSerializer(result).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Auth'])
class LoginView(APIView):
    """Login endpoint - verifies credentials and issues tokens."""
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        request=LoginSerializer,
        responses={200: TokenSerializer},
        summary="Log in",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = user_service.authenticate(**serializer.validated_data)

        return Response(TokenSerializer(result).data)


@extend_schema(tags=['Auth'])
class UserMeView(APIView):
    """Current user endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: UserSerializer},
        summary="Get current user",
    )
    def get(self, request):
        return Response(UserSerializer(request.user).data)


@extend_schema(tags=['Auth'])
class ProfileView(APIView):
    """Profile update endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=UserUpdateSerializer,
        responses={200: UserSerializer},
        summary="Update current user's profile",
    )
    def put(self, request):
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_service.update_profile(request.user.id, **serializer.validated_data)

        return Response(UserSerializer(user).data)


@extend_schema(tags=['Auth'])
class PasswordChangeView(APIView):
    """Password change endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=PasswordChangeSerializer,
        responses={200: None},
        summary="Change password",
    )
    def put(self, request):
        serializer = PasswordChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user_service.change_password(
            request.user,
            serializer.validated_data['current_password'],
            serializer.validated_data['new_password'],
        )

        return Response(
            {
                'status': 200,
                'message': 'Password updated.',
            },
            status=status.HTTP_200_OK
        )
