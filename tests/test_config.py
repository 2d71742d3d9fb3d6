"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from mcp_servers.config import (
    DEFAULT_TIMEOUT,
    GitHubSettings,
    XSettings,
    parse_status_options,
)


class TestParseStatusOptions:
    def test_empty(self) -> None:
        assert parse_status_options(None) == {}
        assert parse_status_options("") == {}

    def test_parses_and_normalizes(self) -> None:
        assert parse_status_options("Todo=a1, doing = b2 ,done=c3") == {
            "todo": "a1",
            "doing": "b2",
            "done": "c3",
        }

    @pytest.mark.parametrize("raw", ["todo", "todo=", "=abc", "todo=a,,done=b"])
    def test_rejects_malformed(self, raw: str) -> None:
        with pytest.raises(ValueError, match="expected name=option_id"):
            parse_status_options(raw)


class TestXSettings:
    def test_from_env(self) -> None:
        settings = XSettings.from_env(
            {
                "TWITTER_API_KEY": "key",
                "TWITTER_API_SECRET": "secret",
                "TWITTER_ACCESS_TOKEN": "token",
                "TWITTER_ACCESS_TOKEN_SECRET": "token-secret",
                "HTTP_TIMEOUT": "3.5",
            }
        )
        assert settings.api_key == "key"
        assert settings.api_secret == "secret"
        assert settings.access_token == "token"
        assert settings.access_token_secret == "token-secret"
        assert settings.timeout == 3.5

    def test_blank_values_are_unset(self) -> None:
        settings = XSettings.from_env({"TWITTER_API_KEY": "   "})
        assert settings.api_key is None
        assert settings.timeout == DEFAULT_TIMEOUT

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWITTER_API_KEY", "from-os")
        assert XSettings.from_env().api_key == "from-os"


class TestGitHubSettings:
    def test_from_env(self) -> None:
        settings = GitHubSettings.from_env(
            {
                "GITHUB_TOKEN": "ghp_x",
                "GITHUB_OWNER": "acme",
                "GITHUB_REPO": "widgets",
                "GITHUB_STEPS_PROJECT_ID": "PVT_s",
                "GITHUB_TASKS_PROJECT_ID": "PVT_t",
                "GITHUB_TASKS_STATUS_FIELD_ID": "F_1",
                "GITHUB_TASKS_STATUS_OPTIONS": "todo=o1,done=o4",
            }
        )
        assert settings.token == "ghp_x"
        assert settings.owner == "acme"
        assert settings.repo == "widgets"
        assert settings.boards.steps_project_id == "PVT_s"
        assert settings.boards.tasks_project_id == "PVT_t"
        assert settings.boards.tasks_status_field_id == "F_1"
        assert settings.boards.tasks_status_options == {"todo": "o1", "done": "o4"}

    def test_empty_env(self) -> None:
        settings = GitHubSettings.from_env({})
        assert settings.token is None
        assert settings.boards.tasks_status_options == {}
        assert settings.timeout == DEFAULT_TIMEOUT
