"""Pure price arithmetic and display formatting.

Every function here is stateless and safe to call from any number of
threads. The only module-level value, TAX_RATE, is resolved once at import
time and never reassigned.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final

from .config import resolve_tax_rate
from .errors import PriceFormatError

TAX_RATE: Final[float] = resolve_tax_rate()

CURRENCY_SYMBOL: Final = "$"

_CENT = Decimal("0.01")
# Wide enough to quantize sys.float_info.max to cents
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def format_price(price: float) -> str:
    """Format a price for display, e.g. 5000 -> "$5,000.00".

    The amount is rounded to two decimal places, half away from zero,
    using the shortest decimal representation of the float (so 999.995
    becomes "$1,000.00"). The integer part is grouped by thousands.
    Negative amounts put the sign before the currency symbol.

    Args:
        price: Amount in base currency units

    Returns:
        Display string

    Raises:
        PriceFormatError: If price is NaN or infinite
    """
    value = float(price)
    if not math.isfinite(value):
        raise PriceFormatError(f"Cannot format non-finite price: {price!r}")

    cents = Decimal(repr(value)).quantize(_CENT, context=_CONTEXT)
    sign = "-" if cents < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{cents.copy_abs():,.2f}"


def add_tax(price: float) -> float:
    """Return price with TAX_RATE added. No rounding is applied."""
    return price * (1 + TAX_RATE)


def discount_price(price: float, percentage: float) -> float:
    """Return price reduced by a fractional discount.

    percentage is not validated: values outside [0, 1] give an inflated or
    negative result.
    """
    return price * (1 - percentage)
