"""Contains unit tests for the provider field mapping functions."""

import httpx
import pytest

from jira_ops_manager.jira.exceptions import JiraRequestFailed
from jira_ops_manager.provider.exceptions import AttributeValidationError, ResponseShapeError
from jira_ops_manager.provider.mapping import (
    apply_project_response,
    avatar_id_from_url,
    client_error,
    find_issue_type_scheme_id,
    first_item,
    parse_numeric_id,
    project_create_payload,
    project_update_payload,
    require_id,
    to_api_int,
)
from jira_ops_manager.provider.models import ProjectModel
from tests.unit.factories import AVATAR_URL, make_issue_type_scheme_projects, make_project


@pytest.mark.parametrize("value, expected", [("10000", 10000), ("0", 0), ("-1", -1), ("+10000", 10000)])
def test_parse_numeric_id_valid(value: str, expected: int) -> None:
    """Test that numeric strings are parsed."""
    assert parse_numeric_id(value) == expected


@pytest.mark.parametrize("value", ["abc", "", None, "10.5", "1O", "10_001", " 10001 ", "١٠٠٠١", "-", "+-1"])
def test_parse_numeric_id_invalid(value: str | None) -> None:
    """Test that non-numeric values raise an attribute error naming the attribute."""
    with pytest.raises(AttributeValidationError) as exc_info:
        parse_numeric_id(value)
    assert exc_info.value.attribute == "id"
    assert exc_info.value.summary == 'Unable to parse value of "id" attribute.'
    assert exc_info.value.detail == 'Value of "id" attribute can only be a numeric string.'


def test_require_id() -> None:
    """Test that non-empty IDs pass and empty IDs are rejected."""
    assert require_id("status-1") == "status-1"
    with pytest.raises(AttributeValidationError):
        require_id("")
    with pytest.raises(AttributeValidationError):
        require_id(None)


def test_to_api_int_bounds() -> None:
    """Test the 32-bit range check."""
    assert to_api_int(None, "avatar_id") is None
    assert to_api_int(2**31 - 1, "avatar_id") == 2**31 - 1
    with pytest.raises(AttributeValidationError) as exc_info:
        to_api_int(2**31, "workflow_scheme")
    assert exc_info.value.attribute == "workflow_scheme"


def test_first_item() -> None:
    """Test that the first element is returned and an empty result is a handled error."""
    assert first_item(["a", "b"], "status", "1") == "a"
    with pytest.raises(ResponseShapeError, match="No status found with id 1"):
        first_item([], "status", "1")


def test_avatar_id_from_url() -> None:
    """Test that the avatar ID is the tenth path segment of the 16x16 URL."""
    assert avatar_id_from_url({"16x16": AVATAR_URL}) == 10400


@pytest.mark.parametrize(
    "avatar_urls",
    [
        pytest.param({}, id="missing url"),
        pytest.param({"16x16": ""}, id="empty url"),
        pytest.param({"16x16": "https://example.atlassian.net/secure/projectavatar?avatarId=10400"}, id="short path"),
        pytest.param({"16x16": "https://example.atlassian.net/rest/api/3/universal_avatar/view/type/project/avatar/abc"}, id="non numeric"),
    ],
)
def test_avatar_id_from_url_malformed(avatar_urls: dict[str, str]) -> None:
    """Test that malformed avatar URLs raise a handled error."""
    with pytest.raises(ResponseShapeError):
        avatar_id_from_url(avatar_urls)


def test_find_issue_type_scheme_id() -> None:
    """Test that the scheme whose project IDs contain the project is found."""
    page = make_issue_type_scheme_projects(("10000", ["10002", "10003"]), ("10050", ["10001"]))
    assert find_issue_type_scheme_id(page.values, "10001") == 10050
    assert find_issue_type_scheme_id(page.values, "99999") is None
    assert find_issue_type_scheme_id([], "10001") is None


def test_find_issue_type_scheme_id_numeric_project_ids() -> None:
    """Test that numeric project IDs in the response are matched."""
    page = make_issue_type_scheme_projects(("10050", [10001]))  # type: ignore[list-item]
    assert find_issue_type_scheme_id(page.values, "10001") == 10050


def test_project_create_payload_omits_unset_fields() -> None:
    """Test that the creation body uses API field names and omits unset fields."""
    plan = ProjectModel(key="TES", name="Test Project", description="", project_type_key="software", workflow_scheme=10010)
    body = project_create_payload(plan).model_dump(by_alias=True, exclude_none=True)
    assert body == {"key": "TES", "name": "Test Project", "description": "", "projectTypeKey": "software", "workflowScheme": 10010}


def test_project_update_payload_fields() -> None:
    """Test that only updatable fields end up in the update body."""
    plan = ProjectModel(key="TES", name="Renamed", avatar_id=10400, lead_account_id="abc", workflow_scheme=1, url="")
    body = project_update_payload(plan).model_dump(by_alias=True, exclude_none=True)
    assert body == {"key": "TES", "name": "Renamed", "avatarId": 10400, "url": ""}


def test_apply_project_response_keeps_other_fields() -> None:
    """Test that response fields overwrite the record and other fields are kept."""
    record = ProjectModel(id="10001", key="OLD", issue_type_scheme=10050, workflow_scheme=10010)
    result = apply_project_response(record, make_project())
    assert result.key == "TES"
    assert result.avatar_id == 10400
    assert result.lead_account_id == "5b10a2844c20165700ede21g"
    assert result.issue_type_scheme == 10050
    assert result.workflow_scheme == 10010


def test_client_error_includes_body() -> None:
    """Test that the raw response body is appended to the error detail."""
    request = httpx.Request("GET", "https://example.atlassian.net/rest/api/3/project/1")
    response = httpx.Response(404, request=request, text='{"errorMessages":["No project could be found"]}')
    error = client_error("get project", JiraRequestFailed(response))
    assert error.summary == "Client Error"
    assert error.detail.startswith("Unable to get project, got error: GET")
    assert error.detail.endswith('{"errorMessages":["No project could be found"]}')


def test_client_error_without_body() -> None:
    """Test that transport errors produce a detail without a body."""
    error = client_error("get project", httpx.ConnectError("connection refused"))
    assert error.detail == "Unable to get project, got error: connection refused\n"
