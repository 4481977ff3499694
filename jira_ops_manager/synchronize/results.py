"""Contains results of application execution."""

from typing import Any

from jira_ops_manager.synchronize.models import SyncDecision


class ResourceSynchronizationResult:
    """Contains the result of synchronizing a single resource."""

    def __init__(self, address: str, decision: SyncDecision, state: dict[str, Any] | None) -> None:
        """Initialize the result with the address, the decision taken, and the resulting state."""
        self.address = address
        self.decision = decision
        self.state = state


class ApplyResult:
    """Contains results of the apply workflow."""

    def __init__(
        self,
        results: list[ResourceSynchronizationResult] | None = None,
        data: dict[str, dict[str, Any]] | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize the result with resource results, data source records and errors."""
        self.results = results or []
        self.data = data or {}
        self.errors = errors or []

    def count(self, decision: SyncDecision) -> int:
        """Count resources for which ``decision`` was taken."""
        return sum(1 for result in self.results if result.decision == decision)
