# models/errors.py
# Exceptions raised by the cart models. All of them are ValueErrors so callers
# can treat them as plain input-validation failures.


class CartError(ValueError):
    pass


class ValidationError(CartError):
    # An argument has the wrong type or an out-of-range value.
    pass


class ItemNotFoundError(CartError, LookupError):
    # No line item with the requested SKU.
    pass


class InvalidPromoError(CartError):
    # Unknown promo code, or the configured percent is outside 0..100.
    pass
