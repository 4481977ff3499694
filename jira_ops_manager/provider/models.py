"""Pydantic models for the configuration, plan and state records of each entity."""

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """Base model for flat entity records. ``None`` represents a null attribute."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class WorkflowSchemeModel(RecordModel):
    """Record for the workflow scheme data source."""

    id: str | None = None
    name: str | None = None
    description: str | None = None


class StatusModel(RecordModel):
    """Record for the status data source."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    category: str | None = None


class IssueScreenModel(RecordModel):
    """Record for the issue screen data source."""

    id: str | None = None
    name: str | None = None
    description: str | None = None


class ProjectModel(RecordModel):
    """Record for the project resource."""

    id: str | None = None
    key: str | None = None
    name: str | None = None
    description: str | None = None
    avatar_id: int | None = None
    field_configuration_scheme: int | None = None
    issue_type_scheme: int | None = None
    issue_type_screen_scheme: int | None = None
    workflow_scheme: int | None = None
    lead_account_id: str | None = None
    project_type_key: str | None = None
    url: str | None = None
