"""OAuth 1.0a request signing (HMAC-SHA1, fixed access token).

Builds the ``Authorization`` header for a single outbound request:

1. collect the ``oauth_*`` protocol parameters with a fresh nonce and
   timestamp,
2. merge them with the query parameters (JSON bodies are not signed),
3. percent-encode (RFC 3986) and sort the pairs, join as ``k=v&k=v``,
4. sign ``METHOD&enc(base_url)&enc(params)`` with
   ``enc(consumer_secret)&enc(token_secret)``.

The helpers are pure so the signature can be checked against published
reference vectors.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import time
from typing import Callable, Iterable, Mapping
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

from pydantic import BaseModel

from mcp_servers.clients.errors import SigningError

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"

Params = Mapping[str, object]


class OAuthCredentials(BaseModel):
    """Consumer key pair plus the account's access token pair."""

    consumer_key: str | None = None
    consumer_secret: str | None = None
    token: str | None = None
    token_secret: str | None = None

    def missing(self) -> list[str]:
        """Return the names of unset credentials."""
        return [name for name, value in self.model_dump().items() if not value]


def percent_encode(value: object) -> str:
    """Encode per RFC 3986: only ``A-Za-z0-9-._~`` stay literal."""
    return quote(str(value), safe="")


def normalize_parameters(params: Iterable[tuple[str, object]]) -> str:
    """Encode, sort byte-wise and join parameters as ``k=v&k=v``."""
    encoded = sorted((percent_encode(k), percent_encode(v)) for k, v in params)
    return "&".join(f"{k}={v}" for k, v in encoded)


def base_string_uri(url: str) -> tuple[str, list[tuple[str, str]]]:
    """Split *url* into its signing base URI and any query parameters it carries."""
    parts = urlsplit(url)
    base = urlunsplit((parts.scheme.lower(), parts.netloc.lower(), parts.path or "/", "", ""))
    return base, parse_qsl(parts.query, keep_blank_values=True)


def signature_base_string(method: str, base_url: str, normalized_params: str) -> str:
    return "&".join(
        [method.upper(), percent_encode(base_url), percent_encode(normalized_params)]
    )


def signing_key(consumer_secret: str, token_secret: str) -> str:
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"


def sign_hmac_sha1(base_string: str, key: str) -> str:
    digest = hmac.new(key.encode(), base_string.encode(), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


def _default_nonce() -> str:
    return secrets.token_hex(16)


def _default_timestamp() -> int:
    return int(time.time())


class OAuth1Signer:
    """Signs requests for one account with a fixed access token.

    ``nonce_factory`` and ``clock`` exist so tests can pin the values;
    in normal use each call gets a fresh random nonce and the current
    time.

    Usage::

        signer = OAuth1Signer(credentials)
        header = signer.authorization_header("GET", url, {"max_results": 10})
    """

    def __init__(
        self,
        credentials: OAuthCredentials,
        *,
        nonce_factory: Callable[[], str] = _default_nonce,
        clock: Callable[[], int] = _default_timestamp,
    ) -> None:
        self._credentials = credentials
        self._nonce_factory = nonce_factory
        self._clock = clock

    def oauth_parameters(self) -> dict[str, str]:
        """Protocol parameters for one request, without the signature."""
        self._check_credentials()
        creds = self._credentials
        return {
            "oauth_consumer_key": str(creds.consumer_key),
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": SIGNATURE_METHOD,
            "oauth_timestamp": str(self._clock()),
            "oauth_token": str(creds.token),
            "oauth_version": OAUTH_VERSION,
        }

    def signature(
        self,
        method: str,
        url: str,
        oauth_params: Params,
        query_params: Params | None = None,
    ) -> str:
        """Compute ``oauth_signature`` for an already-built parameter set."""
        self._check_credentials()
        base_url, url_query = base_string_uri(url)
        pairs: list[tuple[str, object]] = list(oauth_params.items())
        pairs.extend(url_query)
        if query_params:
            pairs.extend(query_params.items())
        base = signature_base_string(method, base_url, normalize_parameters(pairs))
        key = signing_key(
            str(self._credentials.consumer_secret), str(self._credentials.token_secret)
        )
        return sign_hmac_sha1(base, key)

    def authorization_header(
        self, method: str, url: str, query_params: Params | None = None
    ) -> str:
        """Return the ``Authorization`` header value for one request."""
        oauth = self.oauth_parameters()
        oauth["oauth_signature"] = self.signature(method, url, oauth, query_params)
        return "OAuth " + ", ".join(
            f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in oauth.items()
        )

    def _check_credentials(self) -> None:
        missing = self._credentials.missing()
        if missing:
            msg = f"Cannot sign request, missing OAuth credentials: {', '.join(missing)}"
            raise SigningError(msg)
