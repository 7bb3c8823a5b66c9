# services/pricing_service.py

from __future__ import annotations
import logging
from typing import Iterable, Optional

from models.promo import AppliedPromo
from utils.money import round2

logger = logging.getLogger("cartcore.pricing")


class PricingService:
    # Computes cart totals. Stateless: the cart passes in its items and
    # the promo it currently has applied.

    def subtotal(self, items: Iterable) -> float:
        # Full-precision sum of line totals, 0 for no items.
        return sum(it.line_total for it in items)

    def discount(self, subtotal: float, promo: Optional[AppliedPromo]) -> float:
        if promo is None:
            return 0
        return subtotal * (promo.percent / 100)

    def total(self, items: Iterable, promo: Optional[AppliedPromo] = None) -> float:
        # Return the payable amount after the promo, rounded to cents.
        subtotal = self.subtotal(items)
        if promo is None:
            return round2(subtotal)

        final = subtotal - self.discount(subtotal, promo)
        # safety clamp
        if final < 0:
            final = 0
        logger.debug(f"total: subtotal={subtotal} promo={promo.code} final={final}")
        return round2(final)
