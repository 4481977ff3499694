"""Reconcile Jira connection configuration."""

from jira_ops_manager.configuration.exceptions import (
    JiraAuthenticationConfigurationUndefinedError,
    RequiredConfigurationElementError,
)
from jira_ops_manager.configuration.models import JiraAuthenticationType


async def validate_jira_api_url(jira_api_url: str | None) -> str:
    """Validates that the Jira site URL is set and strips any trailing slash."""
    if not jira_api_url:
        raise RequiredConfigurationElementError(name="Jira API URL", cli_name="jira_api_url", env_name="JIRA_API_URL")
    return jira_api_url.rstrip("/")


async def validate_jira_authentication_configuration(
    jira_username: str | None,
    jira_api_token: str | None,
    jira_pat_token: str | None,
) -> JiraAuthenticationType:
    """Validates the Jira authentication configuration.

    Args:
        jira_username (str | None): The account email used with an API token.
        jira_api_token (str | None): The API token.
        jira_pat_token (str | None): The personal access token.

    Raises:
        JiraAuthenticationConfigurationUndefinedError: If both or neither of the basic and PAT configurations are defined.

    Returns:
        JiraAuthenticationType: The type of Jira authentication used.
    """
    if jira_pat_token and (jira_username or jira_api_token):
        raise JiraAuthenticationConfigurationUndefinedError("Both PAT and basic authentication configurations are defined. Please use one or the other.")

    if jira_pat_token:
        return JiraAuthenticationType.PAT

    if jira_username and jira_api_token:
        return JiraAuthenticationType.BASIC
    elif jira_username or jira_api_token:
        missing_settings: list[dict[str, str]] = []
        if not jira_username:
            missing_settings.append({"name": "Jira username", "cli_name": "jira_username", "env_name": "JIRA_USERNAME"})
        if not jira_api_token:
            missing_settings.append({"name": "Jira API token", "cli_name": "jira_api_token", "env_name": "JIRA_API_TOKEN"})
        msg = "Incomplete Jira basic authentication configuration - missing settings include " + ", ".join(
            f"{setting['name']} (command line option {setting['cli_name']}, environment variable {setting['env_name']})"
            for setting in missing_settings
        )
        raise JiraAuthenticationConfigurationUndefinedError(msg)
    else:
        raise JiraAuthenticationConfigurationUndefinedError(
            "No Jira authentication configuration provided. Please provide either a PAT or a username and API token."
        )
