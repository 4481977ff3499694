"""Errors surfaced by provider handlers.

Every error carries a short ``summary`` and a ``detail`` string. Attribute
validation errors also name the configuration attribute they refer to.
"""


class JiraOpsError(Exception):
    """Base class for errors that abort a handler operation."""

    def __init__(self, summary: str, detail: str) -> None:
        """Initializes the error with a short summary and a detail string."""
        super().__init__(f"{summary}: {detail}")
        self.summary = summary
        self.detail = detail

    def as_dict(self) -> dict[str, str | None]:
        """Returns the error as a plain dictionary for results and logging."""
        return {"summary": self.summary, "detail": self.detail, "attribute": None}


class AttributeValidationError(JiraOpsError):
    """Raised when a configuration attribute is rejected before any remote call."""

    def __init__(self, attribute: str, summary: str, detail: str) -> None:
        """Initializes the error with the offending attribute path."""
        super().__init__(summary, detail)
        self.attribute = attribute

    def as_dict(self) -> dict[str, str | None]:
        """Returns the error as a plain dictionary, including the attribute path."""
        return {"summary": self.summary, "detail": self.detail, "attribute": self.attribute}


class SchemaValidationError(AttributeValidationError):
    """Raised when a configuration does not match the declared schema."""

    pass


class ClientError(JiraOpsError):
    """Raised when a call to the Jira API fails."""

    def __init__(self, detail: str) -> None:
        """Initializes the error with the formatted remote error."""
        super().__init__("Client Error", detail)


class ResponseShapeError(JiraOpsError):
    """Raised when a Jira API response does not have the expected shape."""

    def __init__(self, detail: str) -> None:
        """Initializes the error with a description of the unexpected response."""
        super().__init__("Unexpected API Response", detail)


class ProviderConfigurationError(JiraOpsError):
    """Raised when a handler is used without a properly configured provider."""

    pass
