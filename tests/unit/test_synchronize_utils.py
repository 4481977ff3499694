"""Contains unit tests for the synchronize utils."""

import pytest

from jira_ops_manager.provider.resources.project import JiraProjectResource
from jira_ops_manager.synchronize.models import SyncDecision
from jira_ops_manager.synchronize.utils import compare_field, decide_resource_sync_action, value_is_noney

PROJECT_SCHEMA = JiraProjectResource.schema


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "value,expected",
    [
        (None, True),
        ([], True),
        ("", True),
        ({}, True),
        ([1, 2, 3], False),
        ("non-empty", False),
        ({"key": "value"}, False),
        (0, False),
        (False, False),
    ],
)
async def test_value_is_noney(value: object, expected: bool) -> None:
    """Test the value_is_noney function."""
    result = await value_is_noney(value)
    assert result == expected


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "planned, state, expected",
    [
        (None, None, SyncDecision.NOOP),
        ("", None, SyncDecision.NOOP),
        (None, "", SyncDecision.NOOP),
        ("foo", "foo", SyncDecision.NOOP),
        (10010, 10010, SyncDecision.NOOP),
        ("foo", "bar", SyncDecision.UPDATE),
        ("non-empty", None, SyncDecision.UPDATE),
        (None, 10400, SyncDecision.UPDATE),
        (0, None, SyncDecision.UPDATE),
    ],
)
async def test_compare_field(planned: object, state: object, expected: SyncDecision) -> None:
    """Test the compare_field function."""
    result = await compare_field(planned, state)
    assert result == expected


@pytest.mark.asyncio
async def test_decide_create_without_state() -> None:
    """Test that a resource without state is created."""
    assert await decide_resource_sync_action(PROJECT_SCHEMA, {"key": "TES"}, None) == SyncDecision.CREATE


@pytest.mark.asyncio
async def test_decide_skips_unknown_computed_values() -> None:
    """Test that computed attributes left unset in the plan do not cause an update."""
    state = {"id": "10001", "key": "TES", "name": "Test", "description": "", "url": "", "lead_account_id": "abc", "project_type_key": "software"}
    planned = {"id": "10001", "key": "TES", "name": "Test", "description": "", "url": "", "lead_account_id": None, "project_type_key": None}
    assert await decide_resource_sync_action(PROJECT_SCHEMA, planned, state) == SyncDecision.NOOP


@pytest.mark.asyncio
async def test_decide_update_on_changed_attribute() -> None:
    """Test that a changed configured attribute causes an update."""
    state = {"id": "10001", "key": "TES", "name": "Test", "description": "", "url": ""}
    planned = {**state, "name": "Renamed"}
    assert await decide_resource_sync_action(PROJECT_SCHEMA, planned, state) == SyncDecision.UPDATE
