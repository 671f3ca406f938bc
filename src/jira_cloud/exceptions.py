"""Exceptions raised by the Jira Cloud client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .jira.response import JiraResponse


class JiraCloudError(Exception):
    """Base class for all errors raised by jira_cloud."""


class JiraValidationError(JiraCloudError, ValueError):
    """Raised when an argument is rejected before any request is sent."""


class JiraAuthenticationError(JiraCloudError):
    """Raised when no usable credentials are configured."""


class JiraResponseError(JiraCloudError):
    """Base class for errors that carry the response envelope.

    Attributes:
        response: The envelope of the failed call, kept so callers can
            inspect the status code and raw body.
    """

    def __init__(self, message: str, response: "JiraResponse") -> None:
        super().__init__(message)
        self.response = response


class JiraHTTPError(JiraResponseError):
    """Raised when Jira answers with a non-2xx status code."""


class JiraDecodeError(JiraResponseError):
    """Raised when a response body cannot be decoded into the expected shape."""
