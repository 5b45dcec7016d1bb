"""Tests for TokenCache and RedditCredentialProvider."""

from unittest.mock import MagicMock

import httpx
import pytest

from prism_analysis.auth import RedditCredentialProvider, TokenCache
from prism_analysis.auth.reddit import REDDIT_TOKEN_URL
from prism_analysis.errors import CredentialError


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestTokenCache:
    def test_empty_cache_returns_none(self) -> None:
        assert TokenCache().get() is None

    def test_returns_token_before_expiry(self) -> None:
        clock = FakeClock()
        cache = TokenCache(clock=clock)
        cache.put("abc", expires_in=3600)
        clock.now += 3000
        assert cache.get() == "abc"

    def test_expires_within_margin(self) -> None:
        clock = FakeClock()
        cache = TokenCache(clock=clock, margin_seconds=60)
        cache.put("abc", expires_in=3600)
        clock.now += 3540
        assert cache.get() is None

    def test_clear(self) -> None:
        cache = TokenCache(clock=FakeClock())
        cache.put("abc", expires_in=3600)
        cache.clear()
        assert cache.get() is None


def _token_response(data: object) -> MagicMock:
    response = MagicMock()
    response.json.return_value = data
    response.raise_for_status = MagicMock()
    return response


class TestRedditCredentialProvider:
    @pytest.fixture
    def clock(self) -> FakeClock:
        return FakeClock()

    @pytest.fixture
    def provider(self, clock: FakeClock) -> RedditCredentialProvider:
        return RedditCredentialProvider(
            client_id="id",
            client_secret="secret",
            cache=TokenCache(clock=clock),
        )

    async def test_missing_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REDDIT_CLIENT_ID", raising=False)
        monkeypatch.delenv("REDDIT_CLIENT_SECRET", raising=False)
        provider = RedditCredentialProvider()
        with pytest.raises(CredentialError, match="not set"):
            await provider.get_access_token()

    async def test_reads_credentials_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REDDIT_CLIENT_ID", "env-id")
        monkeypatch.setenv("REDDIT_CLIENT_SECRET", "env-secret")
        provider = RedditCredentialProvider()
        assert provider._client_id == "env-id"
        assert provider._client_secret == "env-secret"

    async def test_fetches_and_caches_token(
        self,
        provider: RedditCredentialProvider,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        calls: list[dict] = []

        async def mock_post(self, url, **kwargs):
            calls.append({"url": url, **kwargs})
            return _token_response({"access_token": "tok", "expires_in": 3600})

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

        assert await provider.get_access_token() == "tok"
        assert await provider.get_access_token() == "tok"
        assert len(calls) == 1
        assert calls[0]["url"] == REDDIT_TOKEN_URL
        assert calls[0]["data"] == {"grant_type": "client_credentials"}
        assert isinstance(calls[0]["auth"], httpx.BasicAuth)

    async def test_refreshes_expired_token(
        self,
        provider: RedditCredentialProvider,
        clock: FakeClock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        tokens = iter(["first", "second"])

        async def mock_post(self, url, **kwargs):
            return _token_response({"access_token": next(tokens), "expires_in": 3600})

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

        assert await provider.get_access_token() == "first"
        clock.now += 3600
        assert await provider.get_access_token() == "second"

    async def test_http_error_becomes_credential_error(
        self,
        provider: RedditCredentialProvider,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def mock_post(self, url, **kwargs):
            request = httpx.Request("POST", url)
            return httpx.Response(401, request=request, text="unauthorized")

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

        with pytest.raises(CredentialError, match="401"):
            await provider.get_access_token()

    async def test_missing_access_token(
        self,
        provider: RedditCredentialProvider,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def mock_post(self, url, **kwargs):
            return _token_response({"error": "invalid_grant"})

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

        with pytest.raises(CredentialError, match="No access token"):
            await provider.get_access_token()

    async def test_invalidate_forces_new_token(
        self,
        provider: RedditCredentialProvider,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        tokens = iter(["revoked", "fresh"])

        async def mock_post(self, url, **kwargs):
            return _token_response({"access_token": next(tokens), "expires_in": 3600})

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

        assert await provider.get_access_token() == "revoked"
        provider.invalidate()
        assert await provider.get_access_token() == "fresh"
