"""Models for configuration between CLI arguments and environment variables."""

from enum import Enum


class JiraAuthenticationType(str, Enum):
    """Enum for Jira authentication types."""

    BASIC = "basic"
    PAT = "pat"
