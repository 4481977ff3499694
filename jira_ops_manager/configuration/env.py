"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Jira API settings
    JIRA_API_URL: str | None = None
    JIRA_TIMEOUT: float = 30.0
    JIRA_PROVIDER_TYPE_NAME: str = "atlassian"

    # Jira basic authentication settings
    JIRA_USERNAME: str | None = None
    JIRA_API_TOKEN: str | None = None

    # Jira personal access token settings
    JIRA_PAT_TOKEN: str | None = None


settings = Settings()
