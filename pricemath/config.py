"""Configuration management for pricemath."""

import logging
import os

from .errors import ConfigError

_logger = logging.getLogger("pricemath.config")

DEFAULT_TAX_RATE = 0.13
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_HTTP_TIMEOUT = 5.0


def get_env_config() -> dict[str, str | None]:
    """Get configuration from environment variables.

    Supported environment variables:
        PRICEMATH_TAX_RATE: Tax rate applied by add_tax() (0 <= rate < 1)
        PRICEMATH_GITHUB_API_URL: Base URL of the API used by the demo
        PRICEMATH_HTTP_TIMEOUT: Timeout for demo HTTP requests (seconds)

    Returns:
        Dictionary with raw configuration values from environment
    """
    return {
        "tax_rate": os.environ.get("PRICEMATH_TAX_RATE"),
        "github_api_url": os.environ.get("PRICEMATH_GITHUB_API_URL"),
        "http_timeout": os.environ.get("PRICEMATH_HTTP_TIMEOUT"),
    }


def resolve_tax_rate(value: str | None = None) -> float:
    """Resolve the process-wide tax rate.

    Args:
        value: Raw value to parse. When None, PRICEMATH_TAX_RATE is read.

    Returns:
        Tax rate in [0, 1), DEFAULT_TAX_RATE when nothing is configured

    Raises:
        ConfigError: If the value is not a number in [0, 1)
    """
    if value is None:
        value = get_env_config()["tax_rate"]
    if not value:
        return DEFAULT_TAX_RATE
    try:
        rate = float(value)
        if not (0.0 <= rate < 1.0):
            raise ValueError(f"Tax rate must be in [0, 1), got {rate}")
    except ValueError as e:
        raise ConfigError(f"Invalid PRICEMATH_TAX_RATE: {value!r}") from e
    _logger.debug("Using tax rate %s from environment", rate)
    return rate


def resolve_timeout(param_value: float | None = None) -> float:
    """Resolve the HTTP timeout from a parameter or PRICEMATH_HTTP_TIMEOUT.

    Args:
        param_value: Explicit timeout in seconds (takes precedence)

    Returns:
        Timeout in seconds (positive float)

    Raises:
        ConfigError: If the timeout is not positive or not a number
    """
    if param_value is not None:
        if param_value <= 0:
            raise ConfigError(f"Timeout must be positive, got {param_value}")
        return param_value
    env_val = get_env_config()["http_timeout"]
    if env_val:
        try:
            timeout = float(env_val)
            if timeout <= 0:
                raise ValueError(f"Timeout must be positive, got {timeout}")
            return timeout
        except ValueError as e:
            raise ConfigError(f"Invalid PRICEMATH_HTTP_TIMEOUT: {env_val!r}") from e
    return DEFAULT_HTTP_TIMEOUT


def resolve_github_api_url(param_value: str | None = None) -> str:
    """Resolve the API base URL, falling back to PRICEMATH_GITHUB_API_URL."""
    return (
        param_value
        or get_env_config()["github_api_url"]
        or DEFAULT_GITHUB_API_URL
    ).rstrip("/")
