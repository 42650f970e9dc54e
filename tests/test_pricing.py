"""
Unit price resolution tests.
"""
from decimal import Decimal
from types import SimpleNamespace

import pytest

from modules.products.pricing import resolve_unit_price, discount_applied_pct


def product(price, discount_pct=None):
    return SimpleNamespace(price=Decimal(price), discount_pct=discount_pct)


class TestResolveUnitPrice:
    """resolve_unit_price tests."""

    def test_no_discount_returns_base_price(self):
        assert resolve_unit_price(product('100.00')) == Decimal('100.00')

    def test_discount_is_applied(self):
        assert resolve_unit_price(product('100.00', Decimal('20'))) == Decimal('80.00')

    def test_discounted_price_rounds_half_up_to_cents(self):
        # 19.99 * 0.85 = 16.9915
        assert resolve_unit_price(product('19.99', Decimal('15'))) == Decimal('16.99')
        # 0.05 * 0.50 = 0.025
        assert resolve_unit_price(product('0.05', Decimal('50'))) == Decimal('0.03')

    def test_full_discount_makes_product_free(self):
        assert resolve_unit_price(product('45.50', Decimal('100'))) == Decimal('0.00')

    @pytest.mark.parametrize('discount_pct', [Decimal('0'), Decimal('-5'), Decimal('120')])
    def test_out_of_range_discount_is_ignored(self, discount_pct):
        assert resolve_unit_price(product('100.00', discount_pct)) == Decimal('100.00')

    def test_discount_that_does_not_lower_price_is_ignored(self):
        # 0.01 * 0.99 rounds back up to 0.01
        assert resolve_unit_price(product('0.01', Decimal('1'))) == Decimal('0.01')
        assert discount_applied_pct(product('0.01', Decimal('1'))) == Decimal('0')

    def test_is_deterministic(self):
        item = product('33.33', Decimal('33.33'))
        assert resolve_unit_price(item) == resolve_unit_price(item)


class TestDiscountAppliedPct:
    """discount_applied_pct tests."""

    def test_reports_applied_discount(self):
        assert discount_applied_pct(product('100.00', Decimal('20'))) == Decimal('20')

    def test_reports_zero_without_discount(self):
        assert discount_applied_pct(product('100.00')) == Decimal('0')
