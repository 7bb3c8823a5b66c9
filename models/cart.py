# models/cart.py
import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Mapping, Optional

from models.errors import InvalidPromoError, ItemNotFoundError, ValidationError
from models.promo import AppliedPromo, lookup_percent, merge_promo_codes, normalize_code
from services.pricing_service import PricingService

logger = logging.getLogger("cartcore.cart")


def _is_positive_int(value) -> bool:
    # bool is an int subclass; True must not pass as qty 1
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_percent(value) -> bool:
    # NaN fails the range comparison as well
    return isinstance(value, Real) and not isinstance(value, bool) and 0 <= value <= 100


# One product line in a cart.
# qty must be an int: integer-valued floats such as 2.0 are rejected.
@dataclass
class CartItem:
    sku: str
    name: str
    unit_price: float
    qty: int = 1

    def __post_init__(self):
        if not isinstance(self.sku, str) or not self.sku:
            raise ValidationError("SKU is required")
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError("Name is required")
        if (not isinstance(self.unit_price, Real) or isinstance(self.unit_price, bool)
                or math.isnan(self.unit_price) or self.unit_price <= 0):
            raise ValidationError("unitPrice must be > 0")
        if not _is_positive_int(self.qty):
            raise ValidationError("qty must be positive integer")

    @property
    def line_total(self) -> float:
        return self.unit_price * self.qty


class Cart:
    """
    Shopping cart holding CartItems (unique by SKU, first-seen order) and
    at most one applied promo.

    pricing: optional {"promo_codes": {CODE: percent}}; entries override the
    built-in codes one by one. Percents are only range-checked when a code
    is applied.
    """

    def __init__(self, pricing: Optional[Mapping] = None):
        self.items: list[CartItem] = []
        self.pricing: dict = {"promo_codes": merge_promo_codes(pricing)}
        self.applied_promo: Optional[AppliedPromo] = None
        self._pricing_service = PricingService()

    def __len__(self) -> int:
        return len(self.items)

    # item management

    def get_item(self, sku: str) -> CartItem:
        for it in self.items:
            if it.sku == sku:
                return it
        logger.warning(f"cart: no item with sku {sku!r}")
        raise ItemNotFoundError("Item not found")

    def add_item(self, item: CartItem) -> None:
        if not isinstance(item, CartItem):
            logger.warning(f"cart: rejected add of {type(item).__name__}")
            raise ValidationError("item must be CartItem")

        for existing in self.items:
            if existing.sku == item.sku:
                # merge: only the quantity changes
                existing.qty += item.qty
                logger.info(f"cart: merged {item.sku} +{item.qty} -> {existing.qty}")
                return

        self.items.append(item)
        logger.info(f"cart: added {item.sku} x {item.qty}")

    def update_qty(self, sku: str, new_qty: int) -> None:
        if not _is_positive_int(new_qty):
            logger.warning(f"cart: rejected qty {new_qty!r} for {sku}")
            raise ValidationError("newQty must be positive integer")
        item = self.get_item(sku)
        item.qty = new_qty
        logger.info(f"cart: set {sku} qty to {new_qty}")

    def remove_item(self, sku: str) -> None:
        item = self.get_item(sku)
        self.items.remove(item)
        logger.info(f"cart: removed {sku}")

    def clear(self) -> None:
        self.items.clear()

    # pricing

    def get_subtotal(self) -> float:
        return self._pricing_service.subtotal(self.items)

    def apply_promo(self, code: str) -> None:
        if not isinstance(code, str) or not code:
            logger.warning(f"cart: rejected promo code {code!r}")
            raise ValidationError("Promo code must be non-empty string")

        normalized = normalize_code(code)
        percent = lookup_percent(self.pricing["promo_codes"], normalized)
        if percent is None:
            logger.warning(f"cart: unknown promo code {normalized!r}")
            raise InvalidPromoError("Invalid promo code")
        if not _is_percent(percent):
            logger.warning(f"cart: promo {normalized} configured at {percent}%")
            raise InvalidPromoError("Configured promo is out of range 0..100")

        # single slot: a new promo replaces the previous one
        self.applied_promo = AppliedPromo(code=normalized, percent=percent)
        logger.info(f"cart: applied promo {normalized} ({percent}%)")

    def get_discount(self) -> float:
        return self._pricing_service.discount(self.get_subtotal(), self.applied_promo)

    def get_total(self) -> float:
        return self._pricing_service.total(self.items, self.applied_promo)
