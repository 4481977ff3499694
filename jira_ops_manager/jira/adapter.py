"""Jira client adapter for the httpx library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import httpx
import structlog

from jira_ops_manager.configuration.models import JiraAuthenticationType

from .abc import JiraClientBase
from .client import get_jira_client
from .exceptions import JiraRequestFailed
from .models import (
    IssueTypeSchemeProjectsPage,
    Project,
    ProjectIdentifiers,
    ProjectPayload,
    ProjectUpdatePayload,
    ScreenPage,
    Status,
    WorkflowScheme,
)

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

API_PREFIX = "/rest/api/3"


def log_jira_errors(func: F) -> F:
    """Decorator to log failed Jira API calls with their status code and raw body before re-raising."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except JiraRequestFailed as exc:
            logger.error(
                "Jira API request failed",
                function=func.__name__,
                status_code=exc.status_code,
                url=str(exc.response.request.url),
                body=exc.body,
            )
            raise
        except httpx.HTTPError as exc:
            logger.error("Jira API transport error", function=func.__name__, error=str(exc), error_type=type(exc).__name__)
            raise

    return wrapper  # type: ignore


class JiraRestAdapter(JiraClientBase):
    """Jira client adapter for the httpx library."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize the Jira client adapter with an already-initialized client."""
        self.client = client

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Issue a single request and raise JiraRequestFailed on a non-success status."""
        response = await self.client.request(method, f"{API_PREFIX}{path}", **kwargs)
        if response.is_error:
            raise JiraRequestFailed(response)
        return response

    @classmethod
    async def create(
        cls,
        jira_auth_type: JiraAuthenticationType,
        jira_api_url: str,
        jira_username: str | None = None,
        jira_api_token: str | None = None,
        jira_pat_token: str | None = None,
        timeout: float = 30.0,
    ) -> Self:
        """Create a new Jira client adapter.

        Args:
            jira_auth_type: Type of authentication (BASIC or PAT)
            jira_api_url: Base URL of the Jira site, e.g. https://example.atlassian.net
            jira_username: Account email (required for BASIC auth)
            jira_api_token: API token (required for BASIC auth)
            jira_pat_token: Personal access token (required for PAT auth)
            timeout: Timeout in seconds applied to every request

        Returns:
            Configured JiraRestAdapter instance
        """
        logger.info("Creating client for Jira instance", jira_api_url=jira_api_url, auth_type=jira_auth_type.value)
        client = await get_jira_client(
            jira_auth_type=jira_auth_type,
            jira_username=jira_username,
            jira_api_token=jira_api_token,
            jira_pat_token=jira_pat_token,
            jira_api_url=jira_api_url,
            timeout=timeout,
        )
        return cls(client)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()

    # Workflow schemes
    @log_jira_errors
    async def get_workflow_scheme(self, workflow_scheme_id: int, return_draft_if_exists: bool = False) -> WorkflowScheme:
        """Get a workflow scheme by ID."""
        response = await self._request(
            "GET",
            f"/workflowscheme/{workflow_scheme_id}",
            params={"returnDraftIfExists": str(return_draft_if_exists).lower()},
        )
        return WorkflowScheme.model_validate(response.json())

    # Statuses
    @log_jira_errors
    async def get_statuses(self, status_ids: list[str], expand: list[str] | None = None) -> list[Status]:
        """Get statuses by ID."""
        params: list[tuple[str, str]] = [("id", status_id) for status_id in status_ids]
        if expand:
            params.append(("expand", ",".join(expand)))
        response = await self._request("GET", "/statuses", params=params)
        return [Status.model_validate(item) for item in response.json()]

    # Screens
    @log_jira_errors
    async def get_screens(self, screen_ids: list[int], start_at: int = 0, max_results: int = 50) -> ScreenPage:
        """Get a page of screens filtered by ID."""
        params: list[tuple[str, str | int]] = [("id", screen_id) for screen_id in screen_ids]
        params.extend([("startAt", start_at), ("maxResults", max_results)])
        response = await self._request("GET", "/screens", params=params)
        return ScreenPage.model_validate(response.json())

    # Project CRUD
    @log_jira_errors
    async def create_project(self, payload: ProjectPayload) -> ProjectIdentifiers:
        """Create a project."""
        response = await self._request("POST", "/project", json=payload.model_dump(by_alias=True, exclude_none=True))
        return ProjectIdentifiers.model_validate(response.json())

    @log_jira_errors
    async def get_project(self, project_id_or_key: str, expand: list[str] | None = None) -> Project:
        """Get a project by ID or key."""
        params = self._omit_null_parameters(expand=",".join(expand) if expand else None)
        response = await self._request("GET", f"/project/{project_id_or_key}", params=params)
        return Project.model_validate(response.json())

    @log_jira_errors
    async def update_project(self, project_id_or_key: str, payload: ProjectUpdatePayload) -> Project:
        """Update a project."""
        response = await self._request(
            "PUT",
            f"/project/{project_id_or_key}",
            json=payload.model_dump(by_alias=True, exclude_none=True),
        )
        return Project.model_validate(response.json())

    @log_jira_errors
    async def delete_project(self, project_id_or_key: str, enable_undo: bool = False) -> None:
        """Delete a project."""
        await self._request("DELETE", f"/project/{project_id_or_key}", params={"enableUndo": str(enable_undo).lower()})

    # Issue type schemes
    @log_jira_errors
    async def list_issue_type_scheme_projects(
        self, project_ids: list[int], start_at: int = 0, max_results: int = 50
    ) -> IssueTypeSchemeProjectsPage:
        """List issue type schemes together with the projects they are associated with."""
        params: list[tuple[str, int]] = [("projectId", project_id) for project_id in project_ids]
        params.extend([("startAt", start_at), ("maxResults", max_results)])
        response = await self._request("GET", "/issuetypescheme/project", params=params)
        return IssueTypeSchemeProjectsPage.model_validate(response.json())

    @log_jira_errors
    async def assign_issue_type_scheme(self, issue_type_scheme_id: str, project_id: str) -> None:
        """Assign an issue type scheme to a project."""
        await self._request(
            "PUT",
            "/issuetypescheme/project",
            json={"issueTypeSchemeId": issue_type_scheme_id, "projectId": project_id},
        )
