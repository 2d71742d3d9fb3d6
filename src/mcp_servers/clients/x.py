"""XClient — posts to and reads from the X (Twitter) v2 API.

Every request carries an OAuth 1.0a ``Authorization`` header computed by
:class:`~mcp_servers.clients.oauth1.OAuth1Signer`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from mcp_servers.clients._http import decode_response
from mcp_servers.clients.oauth1 import OAuth1Signer, OAuthCredentials
from mcp_servers.config import DEFAULT_TIMEOUT, XSettings

logger = logging.getLogger(__name__)

API_BASE = "https://api.twitter.com/2"


class XClient:
    """Async client for the handful of X endpoints the tools need.

    Satisfies the :class:`~mcp_servers.clients.base.SocialFeed` protocol.

    Usage::

        async with XClient.from_settings(XSettings.from_env()) as x:
            await x.post("hello")
    """

    def __init__(
        self,
        signer: OAuth1Signer,
        *,
        http: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._signer = signer
        self._http = http or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: XSettings, **kwargs: Any) -> XClient:
        credentials = OAuthCredentials(
            consumer_key=settings.api_key,
            consumer_secret=settings.api_secret,
            token=settings.access_token,
            token_secret=settings.access_token_secret,
        )
        return cls(OAuth1Signer(credentials), timeout=settings.timeout, **kwargs)

    async def __aenter__(self) -> XClient:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    async def post(self, text: str, reply_to: str | None = None) -> dict[str, Any]:
        """Publish a post, optionally as a reply to *reply_to*."""
        payload: dict[str, Any] = {"text": text}
        if reply_to:
            payload["reply"] = {"in_reply_to_tweet_id": str(reply_to)}
        return await self._request("POST", f"{API_BASE}/tweets", json=payload)

    async def get_timeline(self, max_results: int = 10) -> dict[str, Any]:
        """Fetch the authenticated user's home timeline."""
        return await self._user_feed("reverse_chronological_timeline", max_results)

    async def get_my_posts(self, max_results: int = 10) -> dict[str, Any]:
        """Fetch the authenticated user's own posts."""
        return await self._user_feed("tweets", max_results)

    async def get_me(self) -> dict[str, Any]:
        return await self._request("GET", f"{API_BASE}/users/me")

    async def _user_feed(self, path: str, max_results: int) -> dict[str, Any]:
        me = await self.get_me()
        user_id = (me.get("data") or {}).get("id") if isinstance(me, dict) else None
        if not user_id:
            return {"error": "Could not get user ID", "details": me}
        return await self._request(
            "GET",
            f"{API_BASE}/users/{user_id}/{path}",
            params={"max_results": max_results},
        )

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        # JSON bodies are not part of the OAuth signature; query params are.
        headers = {"Authorization": self._signer.authorization_header(method, url, params)}
        logger.debug("%s %s", method, url)
        response = await self._http.request(method, url, params=params, json=json, headers=headers)
        return decode_response(response)
