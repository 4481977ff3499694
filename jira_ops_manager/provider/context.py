"""Shared provider context handed to every data source and resource."""

from dataclasses import dataclass

from jira_ops_manager.jira.abc import JiraClientBase
from jira_ops_manager.provider.exceptions import ProviderConfigurationError

DEFAULT_PROVIDER_TYPE_NAME = "atlassian"


@dataclass(frozen=True)
class ProviderContext:
    """Holds the configured Jira client. Never mutated after configuration."""

    client: JiraClientBase
    type_name: str = DEFAULT_PROVIDER_TYPE_NAME

    def __post_init__(self) -> None:
        """Reject clients that do not implement the Jira client interface."""
        if not isinstance(self.client, JiraClientBase):
            raise ProviderConfigurationError(
                "Unexpected Provider Configure Type",
                f"Expected JiraClientBase, got: {type(self.client).__name__}. Please report this issue to the provider developers.",
            )
