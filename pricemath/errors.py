"""Error types for pricemath.

This module defines a hierarchy of exceptions for the library:

    PriceMathError (base)
    ├── ConfigError - Invalid environment/configuration values
    ├── PriceFormatError - Price cannot be formatted (NaN, infinity)
    └── ApiError - HTTP request made by the demo failed

All exceptions inherit from PriceMathError, allowing:
    try:
        pricemath.format_price(value)
    except PriceMathError as e:
        # Catch any pricemath-related error
        ...
"""


class PriceMathError(Exception):
    """Base exception for all pricemath errors.

    All other pricemath exceptions inherit from this class, allowing
    callers to catch all library errors with a single except clause.
    """

    pass


class ConfigError(PriceMathError):
    """Configuration error.

    Raised when:
    - PRICEMATH_TAX_RATE is not a number in [0, 1)
    - PRICEMATH_HTTP_TIMEOUT is not a positive number
    """

    pass


class PriceFormatError(PriceMathError, ValueError):
    """A price could not be rendered as a display string.

    Raised when format_price() receives NaN or an infinity.
    Also a ValueError, so callers validating numeric input can catch it
    without importing pricemath.
    """

    pass


class ApiError(PriceMathError):
    """Error talking to the GitHub API in the demo.

    Raised when:
    - The API is not reachable (network error, timeout)
    - The API returns a non-2xx response
    - The response body is not a valid user payload
    """

    pass
