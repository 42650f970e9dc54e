"""
Pytest configuration and fixtures.
"""
from decimal import Decimal
from itertools import count

import pytest


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def customer(django_user_model):
    """Create an active customer."""
    return django_user_model.objects.create_user(
        email='test@example.com',
        name='Test',
        last_name='Customer',
        password='testpass123',
    )


@pytest.fixture
def other_customer(django_user_model):
    return django_user_model.objects.create_user(
        email='other@example.com',
        name='Other',
        password='testpass123',
    )


@pytest.fixture
def access_token(customer):
    """Issue a real bearer token for the customer."""
    from modules.users.services import issue_tokens
    return issue_tokens(customer)['access_token']


@pytest.fixture
def authenticated_client(api_client, access_token):
    """Create an API client sending the customer's bearer token."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {access_token}')
    return api_client


@pytest.fixture
def category(db):
    from modules.categories.models import CategoryModel
    return CategoryModel.objects.create(name='Herramientas')


@pytest.fixture
def product_factory(db):
    """Create catalog products with sensible defaults."""
    from modules.products.models import ProductModel

    sequence = count(1)

    def create(**kwargs):
        n = next(sequence)
        kwargs.setdefault('name', f'Product {n}')
        kwargs.setdefault('sku', f'SKU-{n:04d}')
        kwargs.setdefault('price', Decimal('100.00'))
        kwargs.setdefault('stock', 10)
        return ProductModel.objects.create(**kwargs)

    return create
