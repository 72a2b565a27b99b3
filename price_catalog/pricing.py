import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

CENT = Decimal("0.01")


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a raw price value to a float.
    Accepts ints, floats and numeric strings; returns None for anything else
    (bool, None, empty strings, lists, dicts, text).
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return None


def with_tax(price: Any, tax_rate: float) -> Optional[float]:
    """
    Return the tax-inclusive price rounded to cents (half away from zero),
    or None if the price is missing, non-numeric, NaN or infinite.
    """
    p = to_number(price)
    if p is None or not math.isfinite(p):
        return None

    total = p * (1 + tax_rate)
    if not math.isfinite(total):
        return None
    return float(Decimal(repr(total)).quantize(CENT, rounding=ROUND_HALF_UP))
