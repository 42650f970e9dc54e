"""
Catalog API tests.
"""
from decimal import Decimal

import pytest
from django.utils import timezone


@pytest.mark.django_db
class TestProductList:
    """GET /api/products/ tests."""

    def test_lists_available_products_with_final_price(self, api_client, product_factory):
        product_factory(name='Alicate', price=Decimal('100.00'), discount_pct=Decimal('20'))
        product_factory(name='Broca', price=Decimal('8.00'))

        response = api_client.get('/api/products/')

        assert response.status_code == 200
        assert [item['name'] for item in response.data] == ['Alicate', 'Broca']
        assert response.data[0]['final_price'] == '80.00'
        assert response.data[0]['discount_applied_pct'] == '20.00'
        assert response.data[1]['final_price'] == '8.00'
        assert response.data[1]['discount_applied_pct'] == '0.00'

    def test_hides_inactive_and_deleted_products(self, api_client, product_factory):
        product_factory(name='Visible')
        product_factory(name='Inactivo', is_active=False)
        product_factory(name='Borrado', deleted_at=timezone.now())

        response = api_client.get('/api/products/')

        assert [item['name'] for item in response.data] == ['Visible']

    def test_filters_by_category(self, api_client, product_factory, category):
        product_factory(name='Sierra', category=category)
        product_factory(name='Pintura')

        response = api_client.get('/api/products/', {'category_id': category.id})

        assert [item['name'] for item in response.data] == ['Sierra']
        assert response.data[0]['category_name'] == category.name

    def test_pagination(self, api_client, product_factory):
        for name in ['A', 'B', 'C']:
            product_factory(name=name)

        response = api_client.get('/api/products/', {'limit': 1, 'offset': 1})

        assert [item['name'] for item in response.data] == ['B']


@pytest.mark.django_db
class TestProductDetail:
    """GET /api/products/<id>/ tests."""

    def test_detail(self, api_client, product_factory):
        product = product_factory(sku='DET-1')

        response = api_client.get(f'/api/products/{product.id}/')

        assert response.status_code == 200
        assert response.data['sku'] == 'DET-1'

    def test_unknown_product(self, api_client):
        response = api_client.get('/api/products/999/')

        assert response.status_code == 404
        assert response.data['code'] == 'PRODUCT_NOT_FOUND'


@pytest.mark.django_db
class TestCategories:
    """GET /api/categories/ tests."""

    def test_lists_active_categories(self, api_client, category):
        from modules.categories.models import CategoryModel
        CategoryModel.objects.create(name='Oculta', is_active=False)

        response = api_client.get('/api/categories/')

        assert response.status_code == 200
        assert [item['name'] for item in response.data] == [category.name]


@pytest.mark.django_db
class TestStockConstraint:
    """Database-level stock guard."""

    def test_negative_stock_is_rejected(self, product_factory):
        from django.db import IntegrityError, transaction
        from modules.products.models import ProductModel

        product = product_factory(stock=1)

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                ProductModel.objects.filter(id=product.id).update(stock=-1)

    def test_decrement_refuses_to_go_below_zero(self, product_factory):
        from modules.products.services import ProductService

        product = product_factory(stock=2)
        service = ProductService()

        assert service.decrement_stock(product.id, 3) is False
        assert service.decrement_stock(product.id, 2) is True
        product.refresh_from_db()
        assert product.stock == 0


class TestModelLabels:
    """Admin labels share one language."""

    def test_field_labels_are_english(self):
        from modules.orders.models import OrderModel, OrderItemModel
        from modules.products.models import ProductModel

        assert OrderModel._meta.verbose_name == 'Order'
        assert OrderModel._meta.get_field('status').verbose_name == 'status'
        assert OrderItemModel._meta.get_field('unit_price').verbose_name == 'unit price'
        assert ProductModel._meta.get_field('stock').verbose_name == 'stock'
