"""Reddit OAuth2 client-credentials token provider."""

import logging
import os

import httpx

from prism_analysis.auth.cache import TokenCache
from prism_analysis.errors import CredentialError

REDDIT_TOKEN_URL = "https://www.reddit.com/api/v1/access_token"
DEFAULT_USER_AGENT = "prism-analysis/0.1"
DEFAULT_TOKEN_LIFETIME = 3600.0

logger = logging.getLogger(__name__)


class RedditCredentialProvider:
    """Obtain application-only Reddit access tokens.

    Uses the client credentials grant (no user context). Tokens are kept in
    the supplied ``TokenCache`` and reused until they expire.

    Args:
        client_id: Reddit app client id (defaults to REDDIT_CLIENT_ID env var).
        client_secret: Reddit app secret (defaults to REDDIT_CLIENT_SECRET env var).
        user_agent: User-Agent header sent with the token request.
        cache: Token cache; a fresh one is created if omitted.
        timeout_seconds: HTTP timeout for the token request.
    """

    def __init__(
        self,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        cache: TokenCache | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._client_id = client_id or os.environ.get("REDDIT_CLIENT_ID")
        self._client_secret = client_secret or os.environ.get("REDDIT_CLIENT_SECRET")
        self._user_agent = user_agent
        self._cache = cache or TokenCache()
        self._timeout = timeout_seconds

    async def get_access_token(self) -> str:
        cached = self._cache.get()
        if cached is not None:
            return cached

        if not self._client_id or not self._client_secret:
            raise CredentialError("Reddit client ID/secret not set")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    REDDIT_TOKEN_URL,
                    auth=httpx.BasicAuth(self._client_id, self._client_secret),
                    headers={"User-Agent": self._user_agent},
                    data={"grant_type": "client_credentials"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CredentialError(
                f"Failed to get Reddit access token: {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise CredentialError(f"Reddit token request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise CredentialError("Reddit token response is not JSON") from e

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise CredentialError("No access token returned from Reddit")

        expires_in = data.get("expires_in", DEFAULT_TOKEN_LIFETIME)
        if not isinstance(expires_in, (int, float)):
            expires_in = DEFAULT_TOKEN_LIFETIME
        self._cache.put(token, float(expires_in))
        logger.info("Obtained Reddit access token (expires in %ss)", expires_in)
        return token

    def invalidate(self) -> None:
        self._cache.clear()
