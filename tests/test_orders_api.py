"""
Orders API tests.
"""
from decimal import Decimal

import pytest

from modules.orders.models import OrderModel

ORDERS_URL = '/api/orders/'


def cart(*lines):
    return {'items': [{'producto_id': product_id, 'cantidad': quantity} for product_id, quantity in lines]}


@pytest.mark.django_db
class TestPlaceOrderEndpoint:
    """POST /api/orders/ tests."""

    def test_creates_order(self, authenticated_client, customer, product_factory):
        product = product_factory(price=Decimal('100.00'), discount_pct=Decimal('20'), stock=5)

        response = authenticated_client.post(ORDERS_URL, cart((product.id, 3)), format='json')

        assert response.status_code == 201
        assert response.data['total'] == '240.00'
        order = OrderModel.objects.get(id=response.data['ordenId'])
        assert order.user_id == customer.id
        product.refresh_from_db()
        assert product.stock == 2

    def test_client_prices_are_ignored(self, authenticated_client, product_factory):
        product = product_factory(price=Decimal('50.00'))
        payload = {'items': [{'producto_id': product.id, 'cantidad': 2, 'precio': '0.01'}]}

        response = authenticated_client.post(ORDERS_URL, payload, format='json')

        assert response.status_code == 201
        assert response.data['total'] == '100.00'

    def test_without_token_returns_401(self, api_client, product_factory):
        product = product_factory(stock=5)

        response = api_client.post(ORDERS_URL, cart((product.id, 1)), format='json')

        assert response.status_code == 401
        product.refresh_from_db()
        assert product.stock == 5
        assert OrderModel.objects.count() == 0

    def test_invalid_token_returns_401(self, api_client, product_factory):
        product = product_factory(stock=5)
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')

        response = api_client.post(ORDERS_URL, cart((product.id, 1)), format='json')

        assert response.status_code == 401
        product.refresh_from_db()
        assert product.stock == 5

    def test_token_of_inactive_customer_returns_401(self, authenticated_client, customer, product_factory):
        product = product_factory(stock=5)
        customer.is_active = False
        customer.save()

        response = authenticated_client.post(ORDERS_URL, cart((product.id, 1)), format='json')

        assert response.status_code == 401
        assert OrderModel.objects.count() == 0

    def test_insufficient_stock_returns_409(self, authenticated_client, product_factory):
        product = product_factory(stock=2)

        response = authenticated_client.post(ORDERS_URL, cart((product.id, 3)), format='json')

        assert response.status_code == 409
        assert response.data['code'] == 'INSUFFICIENT_STOCK'
        assert response.data['product_id'] == product.id
        assert response.data['requested'] == 3
        assert response.data['available'] == 2
        product.refresh_from_db()
        assert product.stock == 2

    def test_unknown_product_returns_404(self, authenticated_client, product_factory):
        product = product_factory(stock=5)

        response = authenticated_client.post(ORDERS_URL, cart((product.id, 1), (999, 1)), format='json')

        assert response.status_code == 404
        assert response.data['code'] == 'PRODUCT_NOT_FOUND'
        product.refresh_from_db()
        assert product.stock == 5

    def test_empty_items_returns_400(self, authenticated_client):
        response = authenticated_client.post(ORDERS_URL, {'items': []}, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'EMPTY_ORDER'

    def test_missing_items_returns_400(self, authenticated_client):
        response = authenticated_client.post(ORDERS_URL, {}, format='json')
        assert response.status_code == 400

    def test_zero_quantity_returns_400(self, authenticated_client, product_factory):
        product = product_factory()
        response = authenticated_client.post(ORDERS_URL, cart((product.id, 0)), format='json')
        assert response.status_code == 400

    def test_out_of_range_product_id_returns_400(self, authenticated_client, product_factory):
        product = product_factory(stock=5)

        response = authenticated_client.post(ORDERS_URL, cart((10 ** 20, 1)), format='json')

        assert response.status_code == 400
        assert OrderModel.objects.count() == 0
        product.refresh_from_db()
        assert product.stock == 5

    def test_out_of_range_quantity_returns_400(self, authenticated_client, product_factory):
        product = product_factory(stock=5)

        response = authenticated_client.post(ORDERS_URL, cart((product.id, 10 ** 20)), format='json')

        assert response.status_code == 400
        assert OrderModel.objects.count() == 0


@pytest.mark.django_db
class TestOrderHistoryEndpoints:
    """Order read endpoint tests."""

    def place(self, client, product, quantity=1):
        response = client.post(ORDERS_URL, cart((product.id, quantity)), format='json')
        assert response.status_code == 201
        return response.data['ordenId']

    def test_mine_lists_own_orders(self, authenticated_client, other_customer, product_factory):
        from modules.orders.services import OrderService
        from modules.orders.dtos import OrderLineRequest

        product = product_factory(stock=10)
        first = self.place(authenticated_client, product)
        second = self.place(authenticated_client, product, 2)
        OrderService().place_order(other_customer, [OrderLineRequest(product_id=product.id, quantity=1)])

        response = authenticated_client.get(f'{ORDERS_URL}mine/')

        assert response.status_code == 200
        assert [order['id'] for order in response.data] == [second, first]
        assert 'items' not in response.data[0]

    def test_mine_with_details_includes_items(self, authenticated_client, product_factory):
        product = product_factory(sku='TAL-9', price=Decimal('12.50'), stock=10)
        self.place(authenticated_client, product, 2)

        response = authenticated_client.get(f'{ORDERS_URL}mine/', {'details': '1'})

        assert response.status_code == 200
        items = response.data[0]['items']
        assert len(items) == 1
        assert items[0]['product_id'] == product.id
        assert items[0]['sku'] == 'TAL-9'
        assert items[0]['unit_price'] == '12.50'
        assert items[0]['quantity'] == 2
        assert items[0]['line_total'] == '25.00'
        assert response.data[0]['item_count'] == 2

    def test_mine_requires_authentication(self, api_client):
        response = api_client.get(f'{ORDERS_URL}mine/')
        assert response.status_code == 401

    def test_detail_of_own_order(self, authenticated_client, product_factory):
        product = product_factory(stock=10)
        order_id = self.place(authenticated_client, product, 3)

        response = authenticated_client.get(f'{ORDERS_URL}{order_id}/')

        assert response.status_code == 200
        assert response.data['id'] == order_id
        assert response.data['status'] == 'created'
        assert response.data['total'] == '300.00'

    def test_detail_of_other_customers_order_returns_404(self, authenticated_client, other_customer, product_factory):
        from modules.orders.services import OrderService
        from modules.orders.dtos import OrderLineRequest

        product = product_factory()
        order = OrderService().place_order(other_customer, [OrderLineRequest(product_id=product.id, quantity=1)])

        response = authenticated_client.get(f'{ORDERS_URL}{order.id}/')

        assert response.status_code == 404
        assert response.data['code'] == 'ORDER_NOT_FOUND'
