# This file is intended to hold the setup for the authenticated httpx client.

"""Sets up the authenticated httpx client for the Jira REST API."""

import httpx

from jira_ops_manager.configuration.models import JiraAuthenticationType

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


async def get_jira_basic_client(jira_username: str, jira_api_token: str, jira_api_url: str, timeout: float) -> httpx.AsyncClient:
    """Returns an authenticated client using an account email and API token."""
    if not (jira_username and jira_api_token):
        raise RuntimeError("Jira basic authentication requires username and api_token in config.")
    return httpx.AsyncClient(
        base_url=jira_api_url,
        auth=httpx.BasicAuth(jira_username, jira_api_token),
        headers=DEFAULT_HEADERS,
        timeout=timeout,
    )


async def get_jira_pat_client(jira_pat_token: str, jira_api_url: str, timeout: float) -> httpx.AsyncClient:
    """Returns an authenticated client using a personal access token."""
    if not jira_pat_token:
        raise RuntimeError("Jira PAT authentication requires pat_token in config.")
    return httpx.AsyncClient(
        base_url=jira_api_url,
        headers={**DEFAULT_HEADERS, "Authorization": f"Bearer {jira_pat_token}"},
        timeout=timeout,
    )


async def get_jira_client(
    jira_auth_type: JiraAuthenticationType,
    jira_username: str | None,
    jira_api_token: str | None,
    jira_pat_token: str | None,
    jira_api_url: str,
    timeout: float = 30.0,
) -> httpx.AsyncClient:
    """Returns an authenticated client using either basic or PAT credentials.

    Raises RuntimeError if the credentials for the chosen authentication type are missing.
    """
    if jira_auth_type == JiraAuthenticationType.BASIC:
        if not (jira_username and jira_api_token):
            raise RuntimeError("Jira basic authentication requires username and api_token in config.")
        return await get_jira_basic_client(jira_username, jira_api_token, jira_api_url, timeout)
    elif jira_auth_type == JiraAuthenticationType.PAT:
        if not jira_pat_token:
            raise RuntimeError("Jira PAT authentication requires pat_token in config.")
        return await get_jira_pat_client(jira_pat_token, jira_api_url, timeout)
    raise RuntimeError(f"Unsupported Jira authentication type: {jira_auth_type}")
