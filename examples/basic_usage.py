#!/usr/bin/env python3
"""Basic usage example for pricemath.

Run this example (from the repository root):
    $ python examples/basic_usage.py
"""

import pricemath


def main():
    cart = [19.99, 5000, 1234567.891]

    for price in cart:
        print(f"{pricemath.format_price(price):>16}  with tax: {pricemath.format_price(pricemath.add_tax(price))}")

    total = sum(cart)
    print(f"\nTotal:            {pricemath.format_price(total)}")
    print(f"Total, 10% off:   {pricemath.format_price(pricemath.discount_price(total, 0.10))}")

    for code in ("FREESHIP", "freeship"):
        print(f"Coupon {code!r} valid: {pricemath.is_coupon_code(code)}")

    try:
        pricemath.format_price(float("nan"))
    except pricemath.PriceFormatError as e:
        print(f"\nExpected error: {e}")


if __name__ == "__main__":
    main()
