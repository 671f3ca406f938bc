"""Module for Jira filter sharing operations."""

import logging

from ..models.jira import PermissionFilterPayload, ShareFilterScope, SharePermission
from .client import JiraClient
from .constants import API_V2, VALID_SHARE_SCOPES
from .response import JiraResponse
from .utils import require_choice, require_identifier, require_payload

logger = logging.getLogger("jira-cloud.filter_share")


class FilterShareService:
    """Filter sharing operations.

    A filter can be shared with groups, projects, all logged-in users, or the
    public. Sharing with all logged-in users or the public is known as a
    global share permission.
    """

    def __init__(self, client: JiraClient) -> None:
        self.client = client

    def scope(self) -> tuple[ShareFilterScope, JiraResponse]:
        """
        Get the default sharing scope for new filters and dashboards of the user.

        Returns:
            The default scope and the response envelope
        """
        request = self.client.new_request(
            "GET", f"{API_V2}/filter/defaultShareScope"
        )
        return self.client.call(request, ShareFilterScope)

    def set_scope(self, scope: str) -> JiraResponse:
        """
        Set the default sharing scope for new filters and dashboards of the user.

        Args:
            scope: One of GLOBAL, AUTHENTICATED or PRIVATE

        Returns:
            The response envelope

        Raises:
            JiraValidationError: If the scope is not one of the valid values
        """
        require_choice(scope, VALID_SHARE_SCOPES, "scope")

        request = self.client.new_request(
            "PUT",
            f"{API_V2}/filter/defaultShareScope",
            payload=ShareFilterScope(scope=scope),
        )
        _, response = self.client.call(request)
        logger.debug(f"Default share scope set to {scope}")
        return response

    def gets(self, filter_id: int) -> tuple[list[SharePermission], JiraResponse]:
        """
        Get the share permissions of a filter.

        Args:
            filter_id: The ID of the filter

        Returns:
            The share permissions and the response envelope
        """
        filter_id = require_identifier(filter_id, "filter ID")

        request = self.client.new_request(
            "GET", f"{API_V2}/filter/{filter_id}/permission"
        )
        return self.client.call(request, list[SharePermission])

    def add(
        self, filter_id: int, payload: PermissionFilterPayload
    ) -> tuple[list[SharePermission], JiraResponse]:
        """
        Add a share permission to a filter.

        Adding a global share permission (all logged-in users or the public)
        overwrites all share permissions of the filter.

        Args:
            filter_id: The ID of the filter
            payload: The share permission to add

        Returns:
            The share permissions of the filter after the change and the
            response envelope
        """
        filter_id = require_identifier(filter_id, "filter ID")
        require_payload(payload)

        request = self.client.new_request(
            "POST", f"{API_V2}/filter/{filter_id}/permission", payload=payload
        )
        return self.client.call(request, list[SharePermission])

    def get(
        self, filter_id: int, permission_id: int
    ) -> tuple[SharePermission, JiraResponse]:
        """
        Get a share permission of a filter.

        Args:
            filter_id: The ID of the filter
            permission_id: The ID of the share permission

        Returns:
            The share permission and the response envelope
        """
        filter_id = require_identifier(filter_id, "filter ID")
        permission_id = require_identifier(permission_id, "permission ID")

        request = self.client.new_request(
            "GET", f"{API_V2}/filter/{filter_id}/permission/{permission_id}"
        )
        return self.client.call(request, SharePermission)

    def delete(self, filter_id: int, permission_id: int) -> JiraResponse:
        """
        Delete a share permission from a filter.

        Args:
            filter_id: The ID of the filter
            permission_id: The ID of the share permission

        Returns:
            The response envelope
        """
        filter_id = require_identifier(filter_id, "filter ID")
        permission_id = require_identifier(permission_id, "permission ID")

        request = self.client.new_request(
            "DELETE", f"{API_V2}/filter/{filter_id}/permission/{permission_id}"
        )
        _, response = self.client.call(request)
        return response
