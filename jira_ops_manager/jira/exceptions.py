"""Exceptions raised by the Jira REST client."""

import httpx


class JiraRequestFailed(Exception):
    """Raised when the Jira REST API answers with a non-success status code.

    The raw response body is kept so that callers can surface it verbatim.
    """

    def __init__(self, response: httpx.Response) -> None:
        """Initializes the exception from the failed response."""
        self.response = response
        self.status_code = response.status_code
        self.body = response.text
        super().__init__(f"{response.request.method} {response.request.url}: {response.status_code} {response.reason_phrase}")
