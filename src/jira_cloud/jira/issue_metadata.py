"""Module for Jira issue metadata operations."""

from typing import Any

from ..models.jira import IssueMetadataCreateOptions
from .client import JiraClient
from .constants import API_V2
from .response import JiraResponse
from .utils import require_identifier

# Any JSON value; the shape depends on each site's project and screen configuration
RawJson = Any


class IssueMetadataService:
    """Issue create and edit metadata operations.

    Results are returned as parsed JSON rather than models.
    """

    def __init__(self, client: JiraClient) -> None:
        self.client = client

    def get(
        self,
        issue_key_or_id: str,
        override_screen_security: bool = False,
        override_editable_flag: bool = False,
    ) -> tuple[RawJson, JiraResponse]:
        """
        Get the edit screen fields of an issue visible to and editable by the user.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            override_screen_security: Return hidden fields too (admin only)
            override_editable_flag: Return non-editable fields too (admin only)

        Returns:
            The editmeta document and the response envelope
        """
        issue_key_or_id = require_identifier(issue_key_or_id, "issue key or ID")

        # Flags are only sent when set
        params = {
            "overrideScreenSecurity": True if override_screen_security else None,
            "overrideEditableFlag": True if override_editable_flag else None,
        }
        request = self.client.new_request(
            "GET", f"{API_V2}/issue/{issue_key_or_id}/editmeta", params=params
        )
        return self.client.call(request, RawJson)

    def create(
        self, options: IssueMetadataCreateOptions | None = None
    ) -> tuple[RawJson, JiraResponse]:
        """
        Get the projects and issue types the user can create issues in.

        With ``expand="projects.issuetypes.fields"`` the create screen fields
        of each issue type are included.

        Args:
            options: Optional project and issue type filters

        Returns:
            The createmeta document and the response envelope
        """
        params = options.to_query_params() if options is not None else None
        request = self.client.new_request(
            "GET", f"{API_V2}/issue/createmeta", params=params
        )
        return self.client.call(request, RawJson)
