"""Demonstration script for pricemath.

Run with:
    $ pricemath-demo --user wesbos
    $ python -m pricemath.demo --offline

Each snippet is independent: a failing HTTP request is reported and the
remaining snippets still run.
"""

import argparse
import logging
import sys
from collections.abc import Iterable
from typing import Any, TextIO, TypeVar

from .coupons import COUPON_CODES
from .diagnostics import statement
from .errors import ApiError, ConfigError
from .github import GitHubClient, HttpGitHubClient
from .models import Dog
from .prices import add_tax, discount_price, format_price

_logger = logging.getLogger("pricemath.demo")

T = TypeVar("T")

_MISSING = object()

DOGS = (
    Dog(name="snickers", age=2, breed="King Charles"),
    Dog(name="prudence", age=5, breed="Poodle"),
)


def find_where(items: Iterable[T], **attrs: Any) -> T | None:
    """Return the first item whose attributes equal all of attrs, or None."""
    for item in items:
        if all(getattr(item, key, _MISSING) == value for key, value in attrs.items()):
            return item
    return None


def run_demo(
    out: TextIO,
    client: GitHubClient | None = None,
    username: str = "wesbos",
    offline: bool = False,
) -> int:
    """Run every snippet, writing results to out.

    Args:
        out: Stream for the demo output
        client: GitHub client to use (default: a new HttpGitHubClient)
        username: GitHub login to fetch
        offline: Skip the HTTP snippet

    Returns:
        Number of snippets that failed
    """
    failures = 0

    print(format_price(5000), file=out)
    print("Coupons: " + ", ".join(COUPON_CODES), file=out)
    print(f"100 with tax: {format_price(add_tax(100))}", file=out)
    print(f"100 at 25% off: {format_price(discount_price(100, 0.25))}", file=out)

    dog = find_where(DOGS, breed="King Charles")
    print(f"Found: {dog.model_dump() if dog else None}", file=out)

    statement(out)

    if offline:
        _logger.info("Offline mode, skipping user lookup")
        return failures

    owned: HttpGitHubClient | None = None
    try:
        if client is None:
            client = owned = HttpGitHubClient()
        user = client.get_user(username)
        print(f"User: {user.model_dump_json()}", file=out)
    except (ApiError, ConfigError) as e:
        _logger.error("User lookup failed: %s", e)
        print(f"User lookup failed: {e}", file=sys.stderr)
        failures += 1
    finally:
        if owned is not None:
            owned.close()

    return failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pricemath-demo", description=__doc__.splitlines()[0])
    parser.add_argument("--user", default="wesbos", help="GitHub login to fetch (default: wesbos)")
    parser.add_argument("--offline", action="store_true", help="skip the HTTP request")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    failures = run_demo(sys.stdout, username=args.user, offline=args.offline)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
