# models/promo.py
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union

Percent = Union[int, float]

# Built-in promo table. Read-only; every Cart merges its own copy.
DEFAULT_PROMO_CODES: Mapping[str, Percent] = MappingProxyType({
    "SALE10": 10,
    "FREE100": 100,
    "SPRING5": 5,
})


@dataclass(frozen=True)
class AppliedPromo:
    code: str
    percent: Percent


def normalize_code(code: str) -> str:
    # "  sale10 " -> "SALE10"
    return code.strip().upper()


def merge_promo_codes(pricing: Optional[Mapping] = None) -> dict:
    """
    Build a cart's promo table: defaults first, then caller entries
    key-by-key. A pricing mapping without "promo_codes" keeps the defaults.
    """
    merged = dict(DEFAULT_PROMO_CODES)
    if pricing:
        merged.update(pricing.get("promo_codes") or {})
    return merged


def lookup_percent(promo_codes: Mapping[str, Percent], code: str) -> Optional[Percent]:
    # Keys are stored as supplied and normalized here; later entries win
    # when two keys normalize to the same code.
    normalized = {}
    for key, percent in promo_codes.items():
        if isinstance(key, str):
            normalized[normalize_code(key)] = percent
    return normalized.get(normalize_code(code))
