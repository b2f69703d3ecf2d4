"""GitHub API client used by the demo.

This module defines a GitHubClient Protocol for testability and provides
a default HTTP implementation using httpx.

Example:
    # Using the module-level convenience function
    user = fetch_user("wesbos")

    # Using the client class directly (for connection reuse)
    with HttpGitHubClient("https://api.github.com") as client:
        user = client.get_user("wesbos")
"""

import logging
from typing import Protocol, runtime_checkable

import httpx
from pydantic import ValidationError

from .config import resolve_github_api_url, resolve_timeout
from .errors import ApiError
from .models import GitHubUser

_logger = logging.getLogger("pricemath.github")


@runtime_checkable
class GitHubClient(Protocol):
    """Protocol for fetching GitHub users.

    Implementations:
        - HttpGitHubClient: Default HTTP-based implementation using httpx

    Example for testing:
        class StubGitHubClient:
            def get_user(self, username: str) -> GitHubUser:
                return GitHubUser(login=username, id=1)
    """

    def get_user(self, username: str) -> GitHubUser:
        """Fetch a user by login.

        Raises:
            ApiError: If the request fails or the payload is invalid
        """
        ...


class HttpGitHubClient:
    """HTTP-based implementation of GitHubClient using httpx.

    Args:
        base_url: Base URL of the API (default: PRICEMATH_GITHUB_API_URL or
            https://api.github.com)
        timeout: Request timeout in seconds (default: PRICEMATH_HTTP_TIMEOUT or 5.0)

    Example:
        with HttpGitHubClient() as client:
            user = client.get_user("wesbos")
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = resolve_github_api_url(base_url)
        self._timeout = resolve_timeout(timeout)
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self._timeout),
            headers={"Accept": "application/vnd.github+json"},
        )

    def __enter__(self) -> "HttpGitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit - close the client."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client and release connections."""
        self._client.close()

    def get_user(self, username: str) -> GitHubUser:
        """Fetch a user by login.

        Args:
            username: GitHub login

        Raises:
            ApiError: If the API is not reachable, answers with a non-2xx
                status, or returns an invalid payload

        Returns:
            Parsed user record
        """
        _logger.debug("Fetching user %r from %s", username, self.base_url)
        try:
            response = self._client.get(f"/users/{username}")
            response.raise_for_status()
            return GitHubUser.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise ApiError(
                f"Failed to fetch user {username!r}: HTTP {e.response.status_code} - "
                f"{e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise ApiError(f"Cannot connect to {self.base_url}: {e}") from e
        except (ValidationError, ValueError) as e:
            # ValueError from json parsing
            raise ApiError(f"Invalid user payload for {username!r}: {e}") from e


def fetch_user(
    username: str,
    base_url: str | None = None,
    timeout: float | None = None,
) -> GitHubUser:
    """Fetch a user with a one-off client.

    This is a convenience wrapper around HttpGitHubClient.get_user().

    Raises:
        ApiError: If the request fails or the payload is invalid
    """
    with HttpGitHubClient(base_url, timeout) as client:
        return client.get_user(username)
