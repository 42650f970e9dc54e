"""
Authentication and account API tests.
"""
import pytest

from shared.domain.exceptions import UnauthorizedError
from modules.users.exceptions import UserInactiveError
from modules.users.models import UserModel
from modules.users.services import AuthService, issue_tokens

AUTH_URL = '/api/auth/'


@pytest.mark.django_db
class TestRegister:
    """Registration tests."""

    def test_register_returns_tokens(self, api_client):
        response = api_client.post(f'{AUTH_URL}register/', {
            'email': 'nuevo@example.com',
            'name': 'Nuevo',
            'password': 'secreto123',
        }, format='json')

        assert response.status_code == 201
        assert response.data['token_type'] == 'Bearer'
        assert response.data['access_token']
        assert response.data['user']['email'] == 'nuevo@example.com'

    def test_password_is_stored_hashed(self, api_client):
        api_client.post(f'{AUTH_URL}register/', {
            'email': 'nuevo@example.com',
            'name': 'Nuevo',
            'password': 'secreto123',
        }, format='json')

        user = UserModel.objects.get(email='nuevo@example.com')
        assert user.password != 'secreto123'
        assert user.check_password('secreto123')

    def test_duplicate_email_is_rejected(self, api_client, customer):
        response = api_client.post(f'{AUTH_URL}register/', {
            'email': customer.email.upper(),
            'name': 'Copia',
            'password': 'secreto123',
        }, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'USER_ALREADY_EXISTS'

    def test_short_password_is_rejected(self, api_client):
        response = api_client.post(f'{AUTH_URL}register/', {
            'email': 'corto@example.com',
            'name': 'Corto',
            'password': 'abc',
        }, format='json')

        assert response.status_code == 400


@pytest.mark.django_db
class TestLogin:
    """Login tests."""

    def test_valid_credentials(self, api_client, customer):
        response = api_client.post(f'{AUTH_URL}login/', {
            'email': 'test@example.com',
            'password': 'testpass123',
        }, format='json')

        assert response.status_code == 200
        assert response.data['user']['id'] == customer.id

    def test_wrong_password(self, api_client, customer):
        response = api_client.post(f'{AUTH_URL}login/', {
            'email': 'test@example.com',
            'password': 'wrong-password',
        }, format='json')

        assert response.status_code == 401
        assert response.data['code'] == 'INVALID_CREDENTIALS'

    def test_unknown_email(self, api_client):
        response = api_client.post(f'{AUTH_URL}login/', {
            'email': 'nadie@example.com',
            'password': 'testpass123',
        }, format='json')

        assert response.status_code == 401

    def test_inactive_customer(self, api_client, customer):
        customer.is_active = False
        customer.save()

        response = api_client.post(f'{AUTH_URL}login/', {
            'email': 'test@example.com',
            'password': 'testpass123',
        }, format='json')

        assert response.status_code == 401
        assert response.data['code'] == 'USER_INACTIVE'

    def test_refresh_issues_new_access_token(self, api_client, customer):
        refresh = issue_tokens(customer)['refresh_token']

        response = api_client.post(f'{AUTH_URL}token/refresh/', {'refresh': refresh}, format='json')

        assert response.status_code == 200
        assert response.data['access']


@pytest.mark.django_db
class TestResolveIdentity:
    """AuthService.resolve_identity tests."""

    def test_valid_token(self, customer, access_token):
        assert AuthService().resolve_identity(access_token) == customer

    @pytest.mark.parametrize('raw_token', [None, '', 'garbage'])
    def test_missing_or_malformed_token(self, raw_token):
        with pytest.raises(UnauthorizedError):
            AuthService().resolve_identity(raw_token)

    def test_deleted_customer(self, customer, access_token):
        from django.utils import timezone

        customer.deleted_at = timezone.now()
        customer.save()

        with pytest.raises(UnauthorizedError):
            AuthService().resolve_identity(access_token)

    def test_inactive_customer(self, customer, access_token):
        customer.is_active = False
        customer.save()

        with pytest.raises(UserInactiveError):
            AuthService().resolve_identity(access_token)


@pytest.mark.django_db
class TestAccount:
    """Account endpoint tests."""

    def test_me(self, authenticated_client, customer):
        response = authenticated_client.get(f'{AUTH_URL}me/')

        assert response.status_code == 200
        assert response.data['email'] == customer.email
        assert 'password' not in response.data

    def test_me_requires_token(self, api_client):
        response = api_client.get(f'{AUTH_URL}me/')
        assert response.status_code == 401

    def test_update_profile(self, authenticated_client, customer):
        response = authenticated_client.put(f'{AUTH_URL}profile/', {
            'name': 'Ana',
            'phone': '+57 300 1234567',
        }, format='json')

        assert response.status_code == 200
        customer.refresh_from_db()
        assert customer.name == 'Ana'
        assert customer.phone == '+57 300 1234567'
        assert customer.last_name == 'Customer'

    def test_change_password(self, authenticated_client, customer):
        response = authenticated_client.put(f'{AUTH_URL}password/', {
            'current_password': 'testpass123',
            'new_password': 'otraclave456',
        }, format='json')

        assert response.status_code == 200
        customer.refresh_from_db()
        assert customer.check_password('otraclave456')

    def test_change_password_with_wrong_current(self, authenticated_client, customer):
        response = authenticated_client.put(f'{AUTH_URL}password/', {
            'current_password': 'incorrecta',
            'new_password': 'otraclave456',
        }, format='json')

        assert response.status_code == 400
        assert response.data['field'] == 'current_password'
        customer.refresh_from_db()
        assert customer.check_password('testpass123')
