"""Capability interfaces the tool handlers depend on.

The concrete clients (:class:`~mcp_servers.clients.x.XClient`,
:class:`~mcp_servers.clients.github.GitHubClient`) satisfy these
protocols; tests substitute mocks.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SocialFeed(Protocol):
    """Can post to and read from a social-media account."""

    async def post(self, text: str, reply_to: str | None = None) -> dict[str, Any]: ...
    async def get_timeline(self, max_results: int = 10) -> dict[str, Any]: ...
    async def get_my_posts(self, max_results: int = 10) -> dict[str, Any]: ...
    async def get_me(self) -> dict[str, Any]: ...


@runtime_checkable
class IssueTracker(Protocol):
    """Can create, read and update issues and project-board items."""

    async def create_issue(
        self, title: str, body: str | None = None, labels: list[str] | None = None
    ) -> dict[str, Any]: ...

    async def list_issues(
        self, state: str = "open", labels: str | None = None, per_page: int = 10
    ) -> Any: ...

    async def get_issue(self, issue_number: int) -> dict[str, Any]: ...

    async def update_issue(
        self,
        issue_number: int,
        title: str | None = None,
        body: str | None = None,
        state: str | None = None,
        labels: list[str] | None = None,
    ) -> dict[str, Any]: ...

    async def close_issue(self, issue_number: int) -> dict[str, Any]: ...
    async def add_comment(self, issue_number: int, body: str) -> dict[str, Any]: ...

    async def create_step(
        self,
        title: str,
        user_story: str,
        context: str,
        criteria: list[str],
        priority: str = "medium",
    ) -> dict[str, Any]: ...

    async def create_task(
        self, title: str, description: str, parent_step: int, priority: str = "medium"
    ) -> dict[str, Any]: ...

    async def move_task_to_status(self, issue_number: int, status: str) -> dict[str, Any]: ...
