"""Pydantic models for Jira REST API payloads and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JiraModel(BaseModel):
    """Base model for Jira payloads using the API's camelCase field names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _coerce_to_str(value: Any) -> Any:
    if isinstance(value, int):
        return str(value)
    return value


# Project
class ProjectLead(JiraModel):
    """The lead of a Jira project."""

    account_id: str | None = Field(default=None, alias="accountId")
    display_name: str | None = Field(default=None, alias="displayName")


class Project(JiraModel):
    """A Jira project as returned by the project endpoints."""

    id: str
    key: str
    name: str | None = None
    description: str | None = None
    avatar_urls: dict[str, str] = Field(default_factory=dict, alias="avatarUrls")
    lead: ProjectLead | None = None
    project_type_key: str | None = Field(default=None, alias="projectTypeKey")
    url: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        """Accept numeric ids from the API."""
        return _coerce_to_str(value)


class ProjectIdentifiers(JiraModel):
    """Identifiers returned when a project is created."""

    id: str
    key: str
    self_url: str | None = Field(default=None, alias="self")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        """Accept numeric ids from the API."""
        return _coerce_to_str(value)


class ProjectPayload(JiraModel):
    """Request body for creating a project."""

    key: str
    name: str
    description: str | None = None
    avatar_id: int | None = Field(default=None, alias="avatarId")
    field_configuration_scheme: int | None = Field(default=None, alias="fieldConfigurationScheme")
    issue_type_scheme: int | None = Field(default=None, alias="issueTypeScheme")
    issue_type_screen_scheme: int | None = Field(default=None, alias="issueTypeScreenScheme")
    workflow_scheme: int | None = Field(default=None, alias="workflowScheme")
    lead_account_id: str | None = Field(default=None, alias="leadAccountId")
    project_type_key: str | None = Field(default=None, alias="projectTypeKey")
    url: str | None = None


class ProjectUpdatePayload(JiraModel):
    """Request body for updating a project."""

    key: str | None = None
    name: str | None = None
    description: str | None = None
    avatar_id: int | None = Field(default=None, alias="avatarId")
    project_type_key: str | None = Field(default=None, alias="projectTypeKey")
    url: str | None = None


# Workflow schemes, statuses and screens
class WorkflowScheme(JiraModel):
    """A Jira workflow scheme."""

    id: int | None = None
    name: str
    description: str | None = None
    default_workflow: str | None = Field(default=None, alias="defaultWorkflow")


class Status(JiraModel):
    """A Jira status as returned by the bulk status endpoint."""

    id: str
    name: str
    description: str | None = None
    status_category: str | None = Field(default=None, alias="statusCategory")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        """Accept numeric ids from the API."""
        return _coerce_to_str(value)


class Screen(JiraModel):
    """A Jira screen."""

    id: int
    name: str
    description: str | None = None


class ScreenPage(JiraModel):
    """A page of Jira screens."""

    start_at: int = Field(default=0, alias="startAt")
    max_results: int = Field(default=0, alias="maxResults")
    total: int = 0
    is_last: bool = Field(default=True, alias="isLast")
    values: list[Screen] = Field(default_factory=list)


# Issue type schemes
class IssueTypeSchemeSummary(JiraModel):
    """An issue type scheme as nested in its project associations."""

    id: str
    name: str | None = None
    description: str | None = None
    is_default: bool | None = Field(default=None, alias="isDefault")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        """Accept numeric ids from the API."""
        return _coerce_to_str(value)


class IssueTypeSchemeProjects(JiraModel):
    """An issue type scheme together with the projects it is associated with."""

    issue_type_scheme: IssueTypeSchemeSummary = Field(alias="issueTypeScheme")
    project_ids: list[str] = Field(default_factory=list, alias="projectIds")

    @field_validator("project_ids", mode="before")
    @classmethod
    def coerce_project_ids(cls, value: Any) -> Any:
        """Accept numeric project ids from the API."""
        if isinstance(value, list):
            return [_coerce_to_str(item) for item in value]
        return value


class IssueTypeSchemeProjectsPage(JiraModel):
    """A page of issue type scheme to project associations."""

    start_at: int = Field(default=0, alias="startAt")
    max_results: int = Field(default=0, alias="maxResults")
    total: int = 0
    is_last: bool = Field(default=True, alias="isLast")
    values: list[IssueTypeSchemeProjects] = Field(default_factory=list)
