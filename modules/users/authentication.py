"""
Bearer token authentication for the API.
"""
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

from shared.domain.exceptions import UnauthorizedError
from .services import AuthService

auth_service = AuthService()


class CustomerJWTAuthentication(JWTAuthentication):
    """
    Reads ``Authorization: Bearer <token>`` and resolves it to a customer.

    Requests without the header stay anonymous so that permission classes
    decide; a header carrying a bad token fails with 401 immediately.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        try:
            user = auth_service.resolve_identity(raw_token)
        except UnauthorizedError as exc:
            raise AuthenticationFailed(exc.message, code=exc.code.lower()) from exc

        return user, raw_token
