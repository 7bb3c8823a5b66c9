import pytest

from models.cart import CartItem
from models.promo import AppliedPromo
from services.pricing_service import PricingService


@pytest.fixture
def pricing() -> PricingService:
    return PricingService()


@pytest.fixture
def items() -> list:
    return [CartItem("SKU1", "Milk", 10, 2), CartItem("SKU2", "Bread", 20, 3)]


def test_subtotal(pricing, items):
    assert pricing.subtotal(items) == 80
    assert pricing.subtotal([]) == 0


def test_discount_without_promo(pricing):
    assert pricing.discount(80, None) == 0


def test_discount_with_promo(pricing):
    assert pricing.discount(80, AppliedPromo("HALF", 50)) == 40


def test_total_without_promo_is_rounded(pricing):
    assert pricing.total([CartItem("SKU1", "Milk", 10.336, 1)]) == 10.34


def test_total_with_promo(pricing, items):
    assert pricing.total(items, AppliedPromo("SALE10", 10)) == 72


def test_total_is_clamped_at_zero(pricing, items):
    # not reachable through Cart.apply_promo, which range-checks first
    assert pricing.total(items, AppliedPromo("OVER", 150)) == 0
