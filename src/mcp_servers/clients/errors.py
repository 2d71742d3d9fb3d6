"""Error types raised by the API clients."""

from __future__ import annotations


class ClientError(Exception):
    """Base error for all client-side failures."""


class ConfigError(ClientError):
    """Required configuration for a client is missing."""

    def __init__(self, *names: str) -> None:
        self.names = names
        super().__init__(f"Missing configuration: {', '.join(names)}")


class SigningError(ClientError):
    """An outbound request could not be signed."""
