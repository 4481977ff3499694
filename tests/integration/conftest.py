"""Pytest configuration for integration tests."""

import os
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from dotenv import load_dotenv

from jira_ops_manager.configuration.reconcile import validate_jira_api_url, validate_jira_authentication_configuration
from jira_ops_manager.provider.provider import JiraProvider


@pytest.fixture(autouse=True, scope="session")
def load_env() -> None:
    """Load environment variables from .env file before running integration tests.

    It loads environment variables from:
    1. .env.integration (if it exists)
    2. .env (if it exists)

    The .env.integration file takes precedence over .env.
    """
    project_root = Path(__file__).parent.parent.parent

    integration_env = project_root / ".env.integration"
    if integration_env.exists():
        load_dotenv(dotenv_path=integration_env)

    default_env = project_root / ".env"
    if default_env.exists():
        load_dotenv(dotenv_path=default_env)


@pytest_asyncio.fixture
async def jira_provider() -> AsyncGenerator[JiraProvider, None]:
    """A provider connected to the Jira site named by the environment.

    Tests using it are skipped unless JIRA_API_URL, a lead account ID and credentials are set.
    """
    required_vars = ["JIRA_API_URL", "JIRA_LEAD_ACCOUNT_ID"]
    missing_vars = [var for var in required_vars if not os.getenv(var)]
    if missing_vars or not (os.getenv("JIRA_PAT_TOKEN") or (os.getenv("JIRA_USERNAME") and os.getenv("JIRA_API_TOKEN"))):
        pytest.skip(f"Jira site not configured; missing: {', '.join(missing_vars) or 'credentials'}")

    jira_api_url = await validate_jira_api_url(os.getenv("JIRA_API_URL"))
    jira_auth_type = await validate_jira_authentication_configuration(
        jira_username=os.getenv("JIRA_USERNAME"),
        jira_api_token=os.getenv("JIRA_API_TOKEN"),
        jira_pat_token=os.getenv("JIRA_PAT_TOKEN"),
    )
    provider = await JiraProvider.configure(
        jira_auth_type=jira_auth_type,
        jira_api_url=jira_api_url,
        jira_username=os.getenv("JIRA_USERNAME"),
        jira_api_token=os.getenv("JIRA_API_TOKEN"),
        jira_pat_token=os.getenv("JIRA_PAT_TOKEN"),
    )
    yield provider
    await provider.aclose()
