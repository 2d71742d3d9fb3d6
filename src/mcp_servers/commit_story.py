"""Turn recent git commits into a short "build in public" post."""

from __future__ import annotations

import random
import subprocess
from dataclasses import dataclass
from pathlib import Path

MAX_POST_LENGTH = 280
_FIELD_SEP = "|||"

_TEMPLATES: dict[str, tuple[str, ...]] = {
    "fix": (
        "🔧 Just squashed a bug in {project}! {message} #coding #developer",
        "🐛 Bug hunting session complete! Fixed: {message} #programming",
    ),
    "feature": (
        "🚀 New feature alert! Just shipped: {message} #buildinpublic #coding",
        "✨ Building something cool! {message} #developer #coding",
    ),
    "refactor": (
        "🧹 Code cleanup day! {message} #cleancode #refactoring",
        "♻️ Making the codebase better, one refactor at a time. {message}",
    ),
    "test": (
        "🧪 Adding tests to {project}! Quality matters. #testing #tdd",
        "✅ Test coverage improved! {message} #qualitycode",
    ),
    "docs": (
        "📝 Documentation matters! Updated docs for {project}. #documentation",
        "📚 Better docs = happier developers. {message}",
    ),
    "style": (
        "🎨 Making things pretty! {message} #frontend #design",
        "💅 Style updates for {project}! {message}",
    ),
    "update": (
        "💻 Progress on {project}: {message} #coding #buildinpublic",
        "🔨 Working on {project}! {message} #developer",
    ),
}

# Checked in order; first match wins.
_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("fix", ("fix",)),
    ("feature", ("feat", "add")),
    ("refactor", ("refactor",)),
    ("test", ("test",)),
    ("docs", ("doc",)),
    ("style", ("style", "css")),
)


@dataclass(frozen=True)
class Commit:
    hash: str
    message: str
    author: str
    time: str


class GitError(Exception):
    """``git`` could not be run or returned an error."""


def recent_commits(path: Path, count: int = 1) -> list[Commit]:
    """Return the *count* most recent commits of the repository at *path*."""
    fmt = _FIELD_SEP.join(["%H", "%s", "%an", "%ar"])
    output = _git(path, "log", f"-{count}", f"--pretty=format:{fmt}")
    commits: list[Commit] = []
    for line in output.splitlines():
        parts = line.split(_FIELD_SEP)
        if len(parts) >= 4:
            commits.append(Commit(parts[0][:7], parts[1], parts[2], parts[3]))
    return commits


def classify(message: str) -> str:
    """Map a commit message to a template category."""
    lowered = message.lower()
    for kind, words in _KEYWORDS:
        if any(word in lowered for word in words):
            return kind
    return "update"


def compose_post(
    commits: list[Commit], project: str, *, rng: random.Random | None = None
) -> str:
    """Render a post about the newest commit, capped at 280 characters."""
    if not commits:
        msg = "At least one commit is required"
        raise ValueError(msg)
    first = commits[0]
    template = (rng or random).choice(_TEMPLATES[classify(first.message)])
    text = template.format(project=project, message=first.message)
    if len(text) > MAX_POST_LENGTH:
        text = text[: MAX_POST_LENGTH - 3] + "..."
    return text


def _git(path: Path, *args: str) -> str:
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=path,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise GitError(str(exc)) from exc
    if proc.returncode != 0:
        raise GitError(proc.stderr.strip() or f"git {args[0]} failed")
    return proc.stdout
