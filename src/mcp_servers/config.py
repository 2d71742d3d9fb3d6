"""Settings for the API clients, read from the process environment.

The CLI loads an optional ``.env`` file first (python-dotenv), so either
source works.  Every value is optional at load time; clients fail with a
:class:`~mcp_servers.clients.errors.ConfigError` (or ``SigningError``)
when a call needs something that is not set.
"""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field

DEFAULT_TIMEOUT = 15.0


def _env(environ: Mapping[str, str], key: str) -> str | None:
    value = environ.get(key, "").strip()
    return value or None


def parse_status_options(raw: str | None) -> dict[str, str]:
    """Parse ``todo=abc,doing=def`` into ``{"todo": "abc", "doing": "def"}``."""
    options: dict[str, str] = {}
    if not raw:
        return options
    for item in raw.split(","):
        key, sep, value = item.partition("=")
        if not sep or not key.strip() or not value.strip():
            msg = f"Invalid status option {item!r}, expected name=option_id"
            raise ValueError(msg)
        options[key.strip().lower()] = value.strip()
    return options


class XSettings(BaseModel):
    """OAuth 1.0a credentials for the X (Twitter) API."""

    api_key: str | None = None
    api_secret: str | None = None
    access_token: str | None = None
    access_token_secret: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> XSettings:
        env = os.environ if environ is None else environ
        return cls(
            api_key=_env(env, "TWITTER_API_KEY"),
            api_secret=_env(env, "TWITTER_API_SECRET"),
            access_token=_env(env, "TWITTER_ACCESS_TOKEN"),
            access_token_secret=_env(env, "TWITTER_ACCESS_TOKEN_SECRET"),
            timeout=float(_env(env, "HTTP_TIMEOUT") or DEFAULT_TIMEOUT),
        )


class BoardSettings(BaseModel):
    """GitHub Projects (v2) boards used by the step/task workflow."""

    steps_project_id: str | None = None
    tasks_project_id: str | None = None
    tasks_status_field_id: str | None = None
    tasks_status_options: dict[str, str] = Field(default_factory=lambda: dict[str, str]())


class GitHubSettings(BaseModel):
    """Token, repository and board settings for the GitHub API."""

    token: str | None = None
    owner: str | None = None
    repo: str | None = None
    boards: BoardSettings = Field(default_factory=BoardSettings)
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GitHubSettings:
        env = os.environ if environ is None else environ
        return cls(
            token=_env(env, "GITHUB_TOKEN"),
            owner=_env(env, "GITHUB_OWNER"),
            repo=_env(env, "GITHUB_REPO"),
            boards=BoardSettings(
                steps_project_id=_env(env, "GITHUB_STEPS_PROJECT_ID"),
                tasks_project_id=_env(env, "GITHUB_TASKS_PROJECT_ID"),
                tasks_status_field_id=_env(env, "GITHUB_TASKS_STATUS_FIELD_ID"),
                tasks_status_options=parse_status_options(
                    _env(env, "GITHUB_TASKS_STATUS_OPTIONS")
                ),
            ),
            timeout=float(_env(env, "HTTP_TIMEOUT") or DEFAULT_TIMEOUT),
        )
