"""
Users module service layer.
"""
import logging
from typing import Optional

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings as jwt_settings
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

from shared.domain.exceptions import UnauthorizedError, ValidationError
from .models import UserModel
from .exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
    InvalidCredentialsError,
    UserInactiveError,
)

logger = logging.getLogger(__name__)


def issue_tokens(user: UserModel) -> dict:
    """Issue an access/refresh token pair for a user."""
    refresh = RefreshToken.for_user(user)
    return {
        'access_token': str(refresh.access_token),
        'refresh_token': str(refresh),
        'token_type': 'Bearer',
        'user': user,
    }


class UserService:
    """
    User business logic service.
    """

    def get_user_by_id(self, user_id: int) -> Optional[UserModel]:
        """Get user by ID."""
        try:
            return UserModel.objects.get(id=user_id, deleted_at__isnull=True)
        except (UserModel.DoesNotExist, ValueError, TypeError):
            return None

    def get_user_by_email(self, email: str) -> Optional[UserModel]:
        """Get user by email."""
        try:
            return UserModel.objects.get(email__iexact=email, deleted_at__isnull=True)
        except UserModel.DoesNotExist:
            return None

    def register_user(
        self,
        email: str,
        name: str,
        password: str,
        last_name: str = '',
        phone: str = None,
    ) -> dict:
        """Register a new user and sign them in."""
        if UserModel.objects.filter(email__iexact=email).exists():
            raise UserAlreadyExistsError(field="email", value=email)

        user = UserModel.objects.create_user(
            email=email,
            name=name,
            last_name=last_name or '',
            password=password,
            phone=phone or None,
        )
        logger.info(f"Registered customer {user.id}")

        return issue_tokens(user)

    def authenticate(self, email: str, password: str) -> dict:
        """Authenticate user and return tokens."""
        user = self.get_user_by_email(email)

        # check_password compares against the salted hash
        if not user or not user.check_password(password):
            logger.warning("Rejected login attempt")
            raise InvalidCredentialsError()

        if not user.is_active:
            raise UserInactiveError(str(user.id))

        return issue_tokens(user)

    def update_profile(
        self,
        user_id: int,
        name: str = None,
        last_name: str = None,
        phone: str = None,
    ) -> UserModel:
        """Update user profile."""
        user = self.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        if name is not None:
            user.name = name
        if last_name is not None:
            user.last_name = last_name
        if phone is not None:
            user.phone = phone or None

        user.save()
        return user

    def change_password(self, user: UserModel, current_password: str, new_password: str) -> bool:
        """Replace the password after re-checking the current one."""
        if not user.check_password(current_password):
            raise ValidationError("Current password is incorrect", field="current_password")

        user.set_password(new_password)
        user.save(update_fields=['password', 'updated_at'])
        logger.info(f"Password changed for customer {user.id}")
        return True


class AuthService:
    """
    Resolves bearer credentials to a known customer.
    """

    def __init__(self, user_service: UserService = None):
        self.user_service = user_service or UserService()

    def resolve_identity(self, raw_token) -> UserModel:
        """
        Map an access token to an active customer.

        Raises:
            UnauthorizedError: token missing, malformed, expired, or the
                user behind it is unknown, inactive or deleted.
        """
        if not raw_token:
            raise UnauthorizedError()

        try:
            token = AccessToken(raw_token)
        except TokenError as e:
            raise UnauthorizedError("Token is invalid or expired") from e

        user_id = token.get(jwt_settings.USER_ID_CLAIM)
        user = self.user_service.get_user_by_id(user_id) if user_id is not None else None
        if user is None:
            raise UnauthorizedError("User not found")

        if not user.is_active:
            raise UserInactiveError(str(user.id))

        return user
