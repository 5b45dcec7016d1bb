"""Expiring in-memory cache for a single access token."""

import time
from collections.abc import Callable


class TokenCache:
    """Holds one access token until shortly before it expires.

    The clock is injectable so expiry can be tested without sleeping.

    Args:
        clock: Monotonic time source in seconds (default ``time.monotonic``).
        margin_seconds: Treat the token as expired this many seconds early.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        margin_seconds: float = 60.0,
    ) -> None:
        self._clock = clock
        self._margin = margin_seconds
        self._token: str | None = None
        self._expires_at = 0.0

    def get(self) -> str | None:
        """Return the cached token, or None if absent or expired."""
        if self._token is None:
            return None
        if self._clock() >= self._expires_at - self._margin:
            self._token = None
            return None
        return self._token

    def put(self, token: str, expires_in: float) -> None:
        """Store a token valid for ``expires_in`` seconds from now."""
        self._token = token
        self._expires_at = self._clock() + expires_in

    def clear(self) -> None:
        self._token = None
        self._expires_at = 0.0
