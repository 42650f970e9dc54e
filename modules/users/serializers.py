"""
Users module serializers.
"""
import re
from rest_framework import serializers

from .models import UserModel

PHONE_PATTERN = re.compile(r'^\+?[0-9][0-9\s-]{5,18}$')


class UserSerializer(serializers.ModelSerializer):
    """Serializer for user output."""

    class Meta:
        model = UserModel
        fields = [
            'id',
            'email',
            'name',
            'last_name',
            'phone',
            'is_staff',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField()
    name = serializers.CharField(min_length=1, max_length=100)
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    password = serializers.CharField(min_length=8, write_only=True)

    def validate_phone(self, value):
        """Validate phone number format."""
        if value and not PHONE_PATTERN.match(value):
            raise serializers.ValidationError("Invalid phone number format.")
        return value


class UserUpdateSerializer(serializers.Serializer):
    """Serializer for user profile update."""

    name = serializers.CharField(min_length=1, max_length=100, required=False)
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)

    def validate_phone(self, value):
        if value and not PHONE_PATTERN.match(value):
            raise serializers.ValidationError("Invalid phone number format.")
        return value


class LoginSerializer(serializers.Serializer):
    """Serializer for login request."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class TokenSerializer(serializers.Serializer):
    """Serializer for token response."""

    access_token = serializers.CharField(read_only=True)
    refresh_token = serializers.CharField(read_only=True)
    token_type = serializers.CharField(read_only=True, default="Bearer")
    user = UserSerializer(read_only=True)


class PasswordChangeSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True)

    def validate_new_password(self, value):
        if len(value) < 8:
            raise serializers.ValidationError("Password must be at least 8 characters long.")
        return value
