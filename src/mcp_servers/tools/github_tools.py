"""Issue-tracker tools: GitHub issues plus the step/task planning boards."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from mcp_servers.tools.arguments import optional, require
from mcp_servers.tools.registry import ToolRegistry, ToolSpec

if TYPE_CHECKING:
    from mcp_servers.clients.base import IssueTracker

_ISSUE_NUMBER = {"type": "integer", "description": "Issue number"}
_LABELS = {"type": "array", "items": {"type": "string"}}
_PRIORITY = {
    "type": "string",
    "enum": ["high", "medium", "low"],
    "description": "Priority: high, medium, low (default: medium)",
}


class GitHubTool(str, Enum):
    CREATE_ISSUE = "create_issue"
    LIST_ISSUES = "list_issues"
    GET_ISSUE = "get_issue"
    UPDATE_ISSUE = "update_issue"
    CLOSE_ISSUE = "close_issue"
    ADD_COMMENT = "add_comment"
    CREATE_STEP = "create_step"
    CREATE_TASK = "create_task"
    MOVE_TASK_STATUS = "move_task_status"


def _labels(arguments: dict[str, Any]) -> list[str] | None:
    value = optional(arguments, "labels")
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    return [str(label) for label in value]


class GitHubTools:
    """Tool handlers bound to an :class:`IssueTracker`."""

    def __init__(self, tracker: IssueTracker) -> None:
        self._tracker = tracker

    async def create_issue(self, arguments: dict[str, Any]) -> Any:
        return await self._tracker.create_issue(
            require(arguments, "title"), optional(arguments, "body"), _labels(arguments)
        )

    async def list_issues(self, arguments: dict[str, Any]) -> Any:
        return await self._tracker.list_issues(
            optional(arguments, "state", "open"),
            optional(arguments, "labels"),
            int(optional(arguments, "per_page", 10)),
        )

    async def get_issue(self, arguments: dict[str, Any]) -> Any:
        return await self._tracker.get_issue(int(require(arguments, "issue_number")))

    async def update_issue(self, arguments: dict[str, Any]) -> Any:
        return await self._tracker.update_issue(
            int(require(arguments, "issue_number")),
            optional(arguments, "title"),
            optional(arguments, "body"),
            optional(arguments, "state"),
            _labels(arguments),
        )

    async def close_issue(self, arguments: dict[str, Any]) -> Any:
        return await self._tracker.close_issue(int(require(arguments, "issue_number")))

    async def add_comment(self, arguments: dict[str, Any]) -> Any:
        return await self._tracker.add_comment(
            int(require(arguments, "issue_number")), require(arguments, "body")
        )

    async def create_step(self, arguments: dict[str, Any]) -> Any:
        return await self._tracker.create_step(
            require(arguments, "title"),
            require(arguments, "user_story"),
            require(arguments, "context"),
            list(require(arguments, "criteria")),
            optional(arguments, "priority", "medium"),
        )

    async def create_task(self, arguments: dict[str, Any]) -> Any:
        return await self._tracker.create_task(
            require(arguments, "title"),
            require(arguments, "description"),
            int(require(arguments, "parent_step")),
            optional(arguments, "priority", "medium"),
        )

    async def move_task_status(self, arguments: dict[str, Any]) -> Any:
        return await self._tracker.move_task_to_status(
            int(require(arguments, "issue_number")), str(require(arguments, "status"))
        )


def build_github_registry(tracker: IssueTracker) -> ToolRegistry:
    tools = GitHubTools(tracker)
    return ToolRegistry.from_enum(
        GitHubTool,
        [
            ToolSpec(
                GitHubTool.CREATE_ISSUE,
                "Create a new GitHub issue (task/story)",
                {
                    "type": "object",
                    "properties": {
                        "title": {"type": "string", "description": "Issue title"},
                        "body": {
                            "type": "string",
                            "description": "Issue body/description (markdown supported)",
                        },
                        "labels": {
                            **_LABELS,
                            "description": 'Labels to add (e.g., ["bug", "enhancement"])',
                        },
                    },
                    "required": ["title"],
                },
                tools.create_issue,
            ),
            ToolSpec(
                GitHubTool.LIST_ISSUES,
                "List GitHub issues",
                {
                    "type": "object",
                    "properties": {
                        "state": {
                            "type": "string",
                            "enum": ["open", "closed", "all"],
                            "description": "Filter by state: open, closed, all (default: open)",
                        },
                        "labels": {
                            "type": "string",
                            "description": "Filter by labels (comma-separated)",
                        },
                        "per_page": {
                            "type": "integer",
                            "minimum": 1,
                            "maximum": 100,
                            "description": "Results per page (default: 10)",
                        },
                    },
                },
                tools.list_issues,
            ),
            ToolSpec(
                GitHubTool.GET_ISSUE,
                "Get a specific GitHub issue by number",
                {
                    "type": "object",
                    "properties": {"issue_number": _ISSUE_NUMBER},
                    "required": ["issue_number"],
                },
                tools.get_issue,
            ),
            ToolSpec(
                GitHubTool.UPDATE_ISSUE,
                "Update a GitHub issue",
                {
                    "type": "object",
                    "properties": {
                        "issue_number": _ISSUE_NUMBER,
                        "title": {"type": "string", "description": "New title"},
                        "body": {"type": "string", "description": "New body"},
                        "state": {
                            "type": "string",
                            "enum": ["open", "closed"],
                            "description": "State: open or closed",
                        },
                        "labels": {**_LABELS, "description": "Labels to set"},
                    },
                    "required": ["issue_number"],
                },
                tools.update_issue,
            ),
            ToolSpec(
                GitHubTool.CLOSE_ISSUE,
                "Close a GitHub issue",
                {
                    "type": "object",
                    "properties": {
                        "issue_number": {"type": "integer", "description": "Issue number to close"},
                    },
                    "required": ["issue_number"],
                },
                tools.close_issue,
            ),
            ToolSpec(
                GitHubTool.ADD_COMMENT,
                "Add a comment to a GitHub issue",
                {
                    "type": "object",
                    "properties": {
                        "issue_number": _ISSUE_NUMBER,
                        "body": {
                            "type": "string",
                            "description": "Comment body (markdown supported)",
                        },
                    },
                    "required": ["issue_number", "body"],
                },
                tools.add_comment,
            ),
            ToolSpec(
                GitHubTool.CREATE_STEP,
                "Create a Step (user story) and add it to the Steps board",
                {
                    "type": "object",
                    "properties": {
                        "title": {"type": "string", "description": "Step title"},
                        "user_story": {
                            "type": "string",
                            "description": "User story: As X, I want Y, so that Z",
                        },
                        "context": {
                            "type": "string",
                            "description": "Context explaining why this is needed",
                        },
                        "criteria": {
                            **_LABELS,
                            "description": "Acceptance criteria (Given/When/Then)",
                        },
                        "priority": _PRIORITY,
                    },
                    "required": ["title", "user_story", "context", "criteria"],
                },
                tools.create_step,
            ),
            ToolSpec(
                GitHubTool.CREATE_TASK,
                "Create a Task linked to a parent Step and add it to the Tasks board",
                {
                    "type": "object",
                    "properties": {
                        "title": {"type": "string", "description": "Task title"},
                        "description": {
                            "type": "string",
                            "description": "Technical description of the task",
                        },
                        "parent_step": {
                            "type": "integer",
                            "description": "Parent Step issue number",
                        },
                        "priority": _PRIORITY,
                    },
                    "required": ["title", "description", "parent_step"],
                },
                tools.create_task,
            ),
            ToolSpec(
                GitHubTool.MOVE_TASK_STATUS,
                "Move a task to a different status column in the Tasks board",
                {
                    "type": "object",
                    "properties": {
                        "issue_number": {"type": "integer", "description": "Task issue number"},
                        "status": {
                            "type": "string",
                            "enum": ["todo", "doing", "review", "done"],
                            "description": "New status: todo, doing, review, done",
                        },
                    },
                    "required": ["issue_number", "status"],
                },
                tools.move_task_status,
            ),
        ],
    )
