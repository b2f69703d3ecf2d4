"""Coupon codes accepted by the shop."""

from typing import Final

COUPON_CODES: Final[tuple[str, ...]] = ("BLACKFRIDAY", "FREESHIP", "HOHOHO")


def is_coupon_code(code: str) -> bool:
    """Check whether code is one of COUPON_CODES (exact, case-sensitive)."""
    return code in COUPON_CODES
