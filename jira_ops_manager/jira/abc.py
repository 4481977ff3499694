"""Base ABC for Jira clients."""

from abc import ABC, abstractmethod
from typing import Any


class JiraClientBase(ABC):
    """Base ABC for Jira clients."""

    # Workflow schemes
    @abstractmethod
    async def get_workflow_scheme(self, workflow_scheme_id: int, return_draft_if_exists: bool = False) -> Any:
        """Get a workflow scheme by ID."""
        pass

    # Statuses
    @abstractmethod
    async def get_statuses(self, status_ids: list[str], expand: list[str] | None = None) -> list[Any]:
        """Get statuses by ID."""
        pass

    # Screens
    @abstractmethod
    async def get_screens(self, screen_ids: list[int], start_at: int = 0, max_results: int = 50) -> Any:
        """Get a page of screens filtered by ID."""
        pass

    # Project CRUD
    @abstractmethod
    async def create_project(self, payload: Any) -> Any:
        """Create a project."""
        pass

    @abstractmethod
    async def get_project(self, project_id_or_key: str, expand: list[str] | None = None) -> Any:
        """Get a project by ID or key."""
        pass

    @abstractmethod
    async def update_project(self, project_id_or_key: str, payload: Any) -> Any:
        """Update a project."""
        pass

    @abstractmethod
    async def delete_project(self, project_id_or_key: str, enable_undo: bool = False) -> None:
        """Delete a project."""
        pass

    # Issue type schemes
    @abstractmethod
    async def list_issue_type_scheme_projects(self, project_ids: list[int], start_at: int = 0, max_results: int = 50) -> Any:
        """List issue type schemes together with the projects they are associated with."""
        pass

    @abstractmethod
    async def assign_issue_type_scheme(self, issue_type_scheme_id: str, project_id: str) -> None:
        """Assign an issue type scheme to a project."""
        pass
