"""GitHubClient — issues over REST, project boards over GraphQL.

Besides plain issue CRUD the client implements a small planning
workflow on top of two GitHub Projects (v2) boards:

- a *step* is a user story issue placed on the steps board,
- a *task* is an issue placed on the tasks board, linked to its parent
  step (``Resolves #n`` in the task, a checkbox line in the step),
- a task moves between the board's status columns via a single-select
  field.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from mcp_servers.clients._http import decode_response
from mcp_servers.clients.errors import ConfigError
from mcp_servers.config import DEFAULT_TIMEOUT, BoardSettings, GitHubSettings

logger = logging.getLogger(__name__)

API_BASE = "https://api.github.com"
API_VERSION = "2022-11-28"
TASK_STATUSES = ("todo", "doing", "review", "done")

_ADD_TO_PROJECT = """
mutation($projectId: ID!, $contentId: ID!) {
  addProjectV2ItemById(input: {projectId: $projectId, contentId: $contentId}) {
    item { id }
  }
}
"""

_SET_STATUS = """
mutation($projectId: ID!, $itemId: ID!, $fieldId: ID!, $optionId: String!) {
  updateProjectV2ItemFieldValue(input: {
    projectId: $projectId
    itemId: $itemId
    fieldId: $fieldId
    value: {singleSelectOptionId: $optionId}
  }) {
    projectV2Item { id }
  }
}
"""

_PROJECT_ITEMS = """
query($nodeId: ID!) {
  node(id: $nodeId) {
    ... on Issue {
      projectItems(first: 10) {
        nodes { id project { id } }
      }
    }
  }
}
"""


class GitHubClient:
    """Async GitHub client scoped to one repository.

    Satisfies the :class:`~mcp_servers.clients.base.IssueTracker` protocol.
    """

    def __init__(
        self,
        token: str | None,
        owner: str | None,
        repo: str | None,
        *,
        boards: BoardSettings | None = None,
        http: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owner = owner
        self._repo = repo
        self._boards = boards or BoardSettings()
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._http = http or httpx.AsyncClient(timeout=timeout)
        self._has_token = bool(token)

    @classmethod
    def from_settings(cls, settings: GitHubSettings, **kwargs: Any) -> GitHubClient:
        return cls(
            settings.token,
            settings.owner,
            settings.repo,
            boards=settings.boards,
            timeout=settings.timeout,
            **kwargs,
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    # -- issues -------------------------------------------------------------

    async def create_issue(
        self, title: str, body: str | None = None, labels: list[str] | None = None
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": title}
        if body:
            payload["body"] = body
        if labels:
            payload["labels"] = list(labels)
        return await self._request("POST", self._repo_path("issues"), json=payload)

    async def list_issues(
        self, state: str = "open", labels: str | None = None, per_page: int = 10
    ) -> Any:
        params: dict[str, Any] = {"state": state, "per_page": per_page}
        if labels:
            params["labels"] = labels
        return await self._request("GET", self._repo_path("issues"), params=params)

    async def get_issue(self, issue_number: int) -> dict[str, Any]:
        return await self._request("GET", self._repo_path(f"issues/{issue_number}"))

    async def update_issue(
        self,
        issue_number: int,
        title: str | None = None,
        body: str | None = None,
        state: str | None = None,
        labels: list[str] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        if body is not None:
            payload["body"] = body
        if state is not None:
            payload["state"] = state
        if labels is not None:
            payload["labels"] = list(labels)
        return await self._request("PATCH", self._repo_path(f"issues/{issue_number}"), json=payload)

    async def close_issue(self, issue_number: int) -> dict[str, Any]:
        return await self.update_issue(issue_number, state="closed")

    async def add_comment(self, issue_number: int, body: str) -> dict[str, Any]:
        return await self._request(
            "POST", self._repo_path(f"issues/{issue_number}/comments"), json={"body": body}
        )

    # -- planning workflow --------------------------------------------------

    async def create_step(
        self,
        title: str,
        user_story: str,
        context: str,
        criteria: list[str],
        priority: str = "medium",
    ) -> dict[str, Any]:
        """Create a user-story issue and place it on the steps board."""
        lines = [
            "## User Story",
            "",
            user_story,
            "",
            "## Context",
            "",
            context,
            "",
            "## Acceptance Criteria",
            "",
        ]
        lines.extend(f"- [ ] {criterion}" for criterion in criteria)
        body = "\n".join(lines) + "\n"

        issue = await self.create_issue(title, body, ["step", "backlog", f"priority:{priority}"])
        if isinstance(issue, dict) and issue.get("node_id"):
            await self._add_to_board(issue["node_id"], self._boards.steps_project_id, "steps")
        return issue

    async def create_task(
        self, title: str, description: str, parent_step: int, priority: str = "medium"
    ) -> dict[str, Any]:
        """Create a task issue on the tasks board and link it to its step."""
        body = f"## Description\n\n{description}\n\n## Parent Step\n\nResolves #{parent_step}"
        issue = await self.create_issue(title, body, ["task", "todo", f"priority:{priority}"])
        if not isinstance(issue, dict):
            return issue
        if issue.get("node_id"):
            await self._add_to_board(issue["node_id"], self._boards.tasks_project_id, "tasks")
        if issue.get("number"):
            await self._link_task_to_step(parent_step, issue["number"], title)
        return issue

    async def move_task_to_status(self, issue_number: int, status: str) -> dict[str, Any]:
        """Set the status column of a task on the tasks board."""
        status = status.lower()
        if status not in TASK_STATUSES:
            return {"error": f"Invalid status: {status}. Valid: {', '.join(TASK_STATUSES)}"}

        boards = self._boards
        option_id = boards.tasks_status_options.get(status)
        if not (boards.tasks_project_id and boards.tasks_status_field_id and option_id):
            return {"error": f"Tasks board is not configured for status: {status}"}

        item_id = await self.project_item_id(issue_number, boards.tasks_project_id)
        if item_id is None:
            return {"error": f"Task #{issue_number} not found in tasks board"}

        result = await self.set_status(
            boards.tasks_project_id, item_id, boards.tasks_status_field_id, option_id
        )
        if (result.get("data") or {}).get("updateProjectV2ItemFieldValue"):
            return {"success": True, "status": status, "issue": issue_number}
        return result

    # -- GraphQL ------------------------------------------------------------

    async def add_to_project(self, content_id: str, project_id: str) -> dict[str, Any]:
        return await self.graphql(_ADD_TO_PROJECT, projectId=project_id, contentId=content_id)

    async def set_status(
        self, project_id: str, item_id: str, field_id: str, option_id: str
    ) -> dict[str, Any]:
        return await self.graphql(
            _SET_STATUS,
            projectId=project_id,
            itemId=item_id,
            fieldId=field_id,
            optionId=option_id,
        )

    async def project_item_id(self, issue_number: int, project_id: str) -> str | None:
        """Return the board item id of an issue on *project_id*, if any."""
        issue = await self.get_issue(issue_number)
        node_id = issue.get("node_id") if isinstance(issue, dict) else None
        if not node_id:
            return None

        data = await self.graphql(_PROJECT_ITEMS, nodeId=node_id)
        node = (data.get("data") or {}).get("node") or {}
        items = (node.get("projectItems") or {}).get("nodes") or []
        for item in items:
            if (item.get("project") or {}).get("id") == project_id:
                return item.get("id")
        return None

    async def graphql(self, query: str, **variables: Any) -> dict[str, Any]:
        return await self._request(
            "POST", f"{API_BASE}/graphql", json={"query": query, "variables": variables}
        )

    # -- internals ----------------------------------------------------------

    async def _add_to_board(self, content_id: str, project_id: str | None, board: str) -> None:
        if not project_id:
            logger.warning("No %s board configured, %s left off the board", board, content_id)
            return
        await self.add_to_project(content_id, project_id)

    async def _link_task_to_step(self, step_number: int, task_number: int, title: str) -> None:
        step = await self.get_issue(step_number)
        if not isinstance(step, dict) or "body" not in step:
            logger.warning("Step #%d not found, task #%d not linked", step_number, task_number)
            return

        body = step.get("body") or ""
        line = f"- [ ] #{task_number} {title}"
        if "## Tasks" in body:
            body = f"{body}\n{line}"
        else:
            body = f"{body}\n\n## Tasks\n\n{line}"
        await self.update_issue(step_number, body=body)

    def _repo_path(self, suffix: str) -> str:
        if not (self._owner and self._repo):
            raise ConfigError("GITHUB_OWNER", "GITHUB_REPO")
        return f"{API_BASE}/repos/{self._owner}/{self._repo}/{suffix}"

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        if not self._has_token:
            raise ConfigError("GITHUB_TOKEN")
        logger.debug("%s %s", method, url)
        response = await self._http.request(
            method, url, params=params, json=json, headers=self._headers
        )
        return decode_response(response)
