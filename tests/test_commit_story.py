"""Tests for commit-to-post generation."""

from __future__ import annotations

import random
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from mcp_servers.commit_story import (
    MAX_POST_LENGTH,
    Commit,
    GitError,
    classify,
    compose_post,
    recent_commits,
)


def _commit(message: str) -> Commit:
    return Commit("abc1234", message, "dev", "2 hours ago")


def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(["git"], returncode, stdout=stdout, stderr=stderr)


class TestClassify:
    @pytest.mark.parametrize(
        ("message", "kind"),
        [
            ("Fix crash on startup", "fix"),
            ("feat: dark mode", "feature"),
            ("Add login page", "feature"),
            ("Refactor parser", "refactor"),
            ("More tests for parser", "test"),
            ("Update docs", "docs"),
            ("Tweak CSS spacing", "style"),
            ("Bump version", "update"),
        ],
    )
    def test_categories(self, message: str, kind: str) -> None:
        assert classify(message) == kind

    def test_first_match_wins(self) -> None:
        assert classify("Fix test for new feature") == "fix"


class TestComposePost:
    def test_uses_newest_commit(self) -> None:
        text = compose_post([_commit("Fix login"), _commit("Add page")], "shop", rng=random.Random(0))
        assert "Fix login" in text
        assert "Add page" not in text

    def test_project_name_substituted(self) -> None:
        text = compose_post([_commit("Bump version")], "shop", rng=random.Random(1))
        assert "{" not in text
        assert "Bump version" in text

    def test_truncates_long_posts(self) -> None:
        text = compose_post([_commit("Fix " + "x" * 400)], "shop")
        assert len(text) == MAX_POST_LENGTH
        assert text.endswith("...")

    def test_requires_a_commit(self) -> None:
        with pytest.raises(ValueError, match="At least one commit"):
            compose_post([], "shop")


class TestRecentCommits:
    def test_parses_git_log(self, tmp_path: Path) -> None:
        out = "0123456789abcdef|||Fix bug|||Ada|||2 hours ago\nfedcba9876543210|||Add x|||Bob|||3 days ago"
        with patch("mcp_servers.commit_story.subprocess.run", return_value=_completed(out)) as run:
            commits = recent_commits(tmp_path, 2)

        assert commits == [
            Commit("0123456", "Fix bug", "Ada", "2 hours ago"),
            Commit("fedcba9", "Add x", "Bob", "3 days ago"),
        ]
        args = run.call_args.args[0]
        assert args[:3] == ["git", "log", "-2"]
        assert run.call_args.kwargs["cwd"] == tmp_path

    def test_empty_history(self, tmp_path: Path) -> None:
        with patch("mcp_servers.commit_story.subprocess.run", return_value=_completed("")):
            assert recent_commits(tmp_path) == []

    def test_git_error(self, tmp_path: Path) -> None:
        failed = _completed(returncode=128, stderr="fatal: not a git repository")
        with patch("mcp_servers.commit_story.subprocess.run", return_value=failed):
            with pytest.raises(GitError, match="not a git repository"):
                recent_commits(tmp_path)

    def test_git_missing(self, tmp_path: Path) -> None:
        with patch("mcp_servers.commit_story.subprocess.run", side_effect=FileNotFoundError("git")):
            with pytest.raises(GitError):
                recent_commits(tmp_path)
