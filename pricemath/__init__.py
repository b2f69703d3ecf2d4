"""pricemath - price formatting, tax and discount helpers.

Basic usage:

    import pricemath

    pricemath.format_price(5000)             # "$5,000.00"
    pricemath.add_tax(100)                   # 113.0 (with the default 0.13 rate)
    pricemath.discount_price(100, 0.25)      # 75.0
    "FREESHIP" in pricemath.COUPON_CODES     # True

The tax rate is read once from PRICEMATH_TAX_RATE at import time
(default 0.13) and stays fixed for the life of the process.

statement() is the only function that performs I/O; it lives in
pricemath.diagnostics and is re-exported here.
"""

from .coupons import COUPON_CODES, is_coupon_code
from .diagnostics import statement
from .errors import ApiError, ConfigError, PriceFormatError, PriceMathError
from .prices import TAX_RATE, add_tax, discount_price, format_price

__version__ = "0.1.0"
__all__ = [
    "format_price",
    "add_tax",
    "discount_price",
    "statement",
    "COUPON_CODES",
    "TAX_RATE",
    "is_coupon_code",
    # Errors
    "PriceMathError",
    "ConfigError",
    "PriceFormatError",
    "ApiError",
]
