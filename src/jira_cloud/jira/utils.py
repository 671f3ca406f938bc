"""Utility functions for Jira service operations."""

from typing import Any

from ..exceptions import JiraValidationError


def require_identifier(value: str | int | None, name: str) -> str | int:
    """
    Reject an empty identifier before a request is built.

    Args:
        value: The identifier (key, ID or numeric ID)
        name: Human readable name used in the error, e.g. "version ID"

    Returns:
        The identifier with surrounding whitespace removed

    Raises:
        JiraValidationError: If the value is None, empty or zero
    """
    if isinstance(value, str):
        value = value.strip()
    if not value:
        error_msg = f"jira: no {name} set"
        raise JiraValidationError(error_msg)
    return value


def require_payload(payload: Any) -> None:
    """
    Reject a missing request body.

    Raises:
        JiraValidationError: If the payload is None
    """
    if payload is None:
        error_msg = "jira: no payload set"
        raise JiraValidationError(error_msg)


def require_choice(value: str, choices: tuple[str, ...], name: str) -> None:
    """
    Reject a value outside a fixed set.

    Args:
        value: The value to check
        choices: The accepted values
        name: Human readable name used in the error

    Raises:
        JiraValidationError: If the value is not one of the choices
    """
    if value not in choices:
        error_msg = f"jira: invalid {name} {value!r}, please provide one of the following: {','.join(choices)}"
        raise JiraValidationError(error_msg)
