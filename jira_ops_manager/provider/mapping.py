"""Converts between entity records and Jira API payloads."""

from typing import Sequence, TypeVar
from urllib.parse import urlparse

import httpx

from jira_ops_manager.jira.exceptions import JiraRequestFailed
from jira_ops_manager.jira.models import IssueTypeSchemeProjects, Project, ProjectPayload, ProjectUpdatePayload
from jira_ops_manager.provider.exceptions import AttributeValidationError, ClientError, ResponseShapeError
from jira_ops_manager.provider.models import ProjectModel

T = TypeVar("T")

REMOTE_ERRORS = (JiraRequestFailed, httpx.HTTPError)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

AVATAR_SIZE = "16x16"
# /rest/api/3/universal_avatar/view/type/project/avatar/<id>
AVATAR_ID_PATH_INDEX = 9


def client_error(action: str, exc: Exception) -> ClientError:
    """Build a ClientError embedding the remote error and, when available, the raw response body."""
    body = exc.body if isinstance(exc, JiraRequestFailed) else ""
    return ClientError(f"Unable to {action}, got error: {exc}\n{body}")


def parse_numeric_id(value: str | None, attribute: str = "id") -> int:
    """Parse an identifier that must be a numeric string: ASCII digits with an optional leading sign."""
    digits = value[1:] if value and value[0] in ("+", "-") else value
    if not (value and value.isascii() and digits and digits.isdigit()):
        raise AttributeValidationError(
            attribute,
            f'Unable to parse value of "{attribute}" attribute.',
            f'Value of "{attribute}" attribute can only be a numeric string.',
        )
    return int(value)


def require_id(value: str | None, attribute: str = "id") -> str:
    """Return a non-empty identifier."""
    if not value:
        raise AttributeValidationError(
            attribute,
            f'Unable to parse value of "{attribute}" attribute.',
            f'Value of "{attribute}" attribute can only be a numeric string.',
        )
    return value


def to_api_int(value: int | None, attribute: str) -> int | None:
    """Check that an integer attribute fits the API's 32-bit integer fields."""
    if value is None:
        return None
    if not INT32_MIN <= value <= INT32_MAX:
        raise AttributeValidationError(
            attribute,
            "Invalid Attribute Value",
            f"Attribute {attribute} value must be between {INT32_MIN} and {INT32_MAX}, got: {value}",
        )
    return value


def first_item(items: Sequence[T], entity: str, entity_id: str) -> T:
    """Return the first element of a lookup result."""
    if not items:
        raise ResponseShapeError(f"No {entity} found with id {entity_id}.")
    return items[0]


def avatar_id_from_url(avatar_urls: dict[str, str]) -> int:
    """Extract the numeric avatar ID from the project's smallest avatar URL."""
    avatar_url = avatar_urls.get(AVATAR_SIZE)
    if not avatar_url:
        raise ResponseShapeError(f"Project response has no {AVATAR_SIZE} avatar URL.")
    segments = urlparse(avatar_url).path.split("/")
    if len(segments) <= AVATAR_ID_PATH_INDEX:
        raise ResponseShapeError(f"Unable to find avatar ID in avatar URL: {avatar_url}")
    try:
        return int(segments[AVATAR_ID_PATH_INDEX])
    except ValueError:
        raise ResponseShapeError(f"Avatar URL path segment is not numeric: {avatar_url}") from None


def find_issue_type_scheme_id(associations: Sequence[IssueTypeSchemeProjects], project_id: str) -> int | None:
    """Find the issue type scheme associated with a project, if any."""
    for association in associations:
        if project_id in association.project_ids:
            return int(association.issue_type_scheme.id)
    return None


def project_create_payload(plan: ProjectModel) -> ProjectPayload:
    """Build the project creation request body from the plan."""
    return ProjectPayload(
        key=plan.key,
        name=plan.name,
        description=plan.description,
        avatar_id=to_api_int(plan.avatar_id, "avatar_id"),
        field_configuration_scheme=to_api_int(plan.field_configuration_scheme, "field_configuration_scheme"),
        issue_type_scheme=to_api_int(plan.issue_type_scheme, "issue_type_scheme"),
        issue_type_screen_scheme=to_api_int(plan.issue_type_screen_scheme, "issue_type_screen_scheme"),
        workflow_scheme=to_api_int(plan.workflow_scheme, "workflow_scheme"),
        lead_account_id=plan.lead_account_id,
        project_type_key=plan.project_type_key,
        url=plan.url,
    )


def project_update_payload(plan: ProjectModel) -> ProjectUpdatePayload:
    """Build the project update request body from the plan."""
    return ProjectUpdatePayload(
        key=plan.key,
        name=plan.name,
        description=plan.description,
        avatar_id=to_api_int(plan.avatar_id, "avatar_id"),
        project_type_key=plan.project_type_key,
        url=plan.url,
    )


def apply_project_response(record: ProjectModel, project: Project) -> ProjectModel:
    """Return a copy of ``record`` with every field the project response carries."""
    return record.model_copy(
        update={
            "id": project.id,
            "key": project.key,
            "name": project.name,
            "description": project.description,
            "avatar_id": avatar_id_from_url(project.avatar_urls),
            "lead_account_id": project.lead.account_id if project.lead else None,
            "project_type_key": project.project_type_key,
            "url": project.url,
        }
    )
