"""
Unit price resolution for catalog products.

The charged price is derived from the product row alone, so the same
snapshot always yields the same price.
"""
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal('0.01')
HUNDRED = Decimal('100')
ZERO = Decimal('0')


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _discounted_price(base: Decimal, discount_pct) -> Decimal:
    """Return the discounted price, or None when no discount applies."""
    if discount_pct is None:
        return None

    pct = _to_decimal(discount_pct)
    if not (ZERO < pct <= HUNDRED):
        return None

    discounted = (base * (HUNDRED - pct) / HUNDRED).quantize(CENT, rounding=ROUND_HALF_UP)
    if discounted >= base:
        return None
    return discounted


def resolve_unit_price(product) -> Decimal:
    """
    Price to charge for one unit of ``product``.

    Args:
        product: anything with ``price`` and ``discount_pct`` attributes

    Returns:
        The discounted price when ``0 < discount_pct <= 100`` and it is
        lower than the base price, otherwise the base price. Always
        quantized to cents.
    """
    base = _to_decimal(product.price).quantize(CENT, rounding=ROUND_HALF_UP)
    discounted = _discounted_price(base, product.discount_pct)
    return base if discounted is None else discounted


def discount_applied_pct(product) -> Decimal:
    """Discount percentage actually applied to the unit price (0 when none)."""
    base = _to_decimal(product.price).quantize(CENT, rounding=ROUND_HALF_UP)
    if _discounted_price(base, product.discount_pct) is None:
        return ZERO
    return _to_decimal(product.discount_pct)
