"""Module for Jira dashboard operations."""

import logging

from ..models.jira import (
    DashboardPage,
    DashboardPayload,
    DashboardSearchOptions,
    DashboardSearchPage,
    JiraDashboard,
)
from .client import JiraClient
from .constants import API_V3, VALID_DASHBOARD_FILTERS
from .response import JiraResponse
from .utils import require_choice, require_identifier, require_payload

logger = logging.getLogger("jira-cloud.dashboards")


class DashboardService:
    """Dashboard operations."""

    def __init__(self, client: JiraClient) -> None:
        self.client = client

    def gets(
        self, start_at: int = 0, max_results: int = 20, filter_type: str | None = None
    ) -> tuple[DashboardPage, JiraResponse]:
        """
        Get a page of the dashboards owned by or shared with the user.

        Args:
            start_at: Index of the first dashboard to return
            max_results: Maximum number of dashboards per page
            filter_type: "favourite" or "my" to narrow the list; all dashboards
                when omitted

        Returns:
            The page of dashboards and the response envelope
        """
        if filter_type:
            require_choice(filter_type, VALID_DASHBOARD_FILTERS, "dashboard filter")

        request = self.client.new_request(
            "GET",
            f"{API_V3}/dashboard",
            params={"filter": filter_type, "startAt": start_at, "maxResults": max_results},
        )
        return self.client.call(request, DashboardPage)

    def search(
        self,
        options: DashboardSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[DashboardSearchPage, JiraResponse]:
        """
        Search dashboards by name, owner, group or project.

        Args:
            options: Optional search filters
            start_at: Index of the first dashboard to return
            max_results: Maximum number of dashboards per page

        Returns:
            The page of dashboards and the response envelope
        """
        params = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            params.update(options.to_query_params())

        request = self.client.new_request(
            "GET", f"{API_V3}/dashboard/search", params=params
        )
        return self.client.call(request, DashboardSearchPage)

    def get(self, dashboard_id: str) -> tuple[JiraDashboard, JiraResponse]:
        """
        Get a dashboard.

        Args:
            dashboard_id: The ID of the dashboard

        Returns:
            The dashboard and the response envelope
        """
        dashboard_id = require_identifier(dashboard_id, "dashboard ID")

        request = self.client.new_request("GET", f"{API_V3}/dashboard/{dashboard_id}")
        return self.client.call(request, JiraDashboard)

    def create(self, payload: DashboardPayload) -> tuple[JiraDashboard, JiraResponse]:
        """
        Create a dashboard.

        Args:
            payload: The dashboard to create; `name` and both permission
                lists are required by Jira

        Returns:
            The created dashboard and the response envelope
        """
        require_payload(payload)

        request = self.client.new_request(
            "POST", f"{API_V3}/dashboard", payload=payload
        )
        dashboard, response = self.client.call(request, JiraDashboard)
        if dashboard is not None:
            logger.info(f"Created dashboard {dashboard.name} ({dashboard.id})")
        return dashboard, response

    def update(
        self, dashboard_id: str, payload: DashboardPayload
    ) -> tuple[JiraDashboard, JiraResponse]:
        """
        Update a dashboard, replacing its name, description and permissions.

        Args:
            dashboard_id: The ID of the dashboard
            payload: The new dashboard details

        Returns:
            The updated dashboard and the response envelope
        """
        dashboard_id = require_identifier(dashboard_id, "dashboard ID")
        require_payload(payload)

        request = self.client.new_request(
            "PUT", f"{API_V3}/dashboard/{dashboard_id}", payload=payload
        )
        return self.client.call(request, JiraDashboard)

    def delete(self, dashboard_id: str) -> JiraResponse:
        """
        Delete a dashboard.

        Args:
            dashboard_id: The ID of the dashboard

        Returns:
            The response envelope
        """
        dashboard_id = require_identifier(dashboard_id, "dashboard ID")

        request = self.client.new_request(
            "DELETE", f"{API_V3}/dashboard/{dashboard_id}"
        )
        _, response = self.client.call(request)
        return response

    def copy(
        self, dashboard_id: str, payload: DashboardPayload
    ) -> tuple[JiraDashboard, JiraResponse]:
        """
        Copy a dashboard.

        Args:
            dashboard_id: The ID of the dashboard to copy
            payload: Name, description and permissions of the copy

        Returns:
            The new dashboard and the response envelope
        """
        dashboard_id = require_identifier(dashboard_id, "dashboard ID")
        require_payload(payload)

        request = self.client.new_request(
            "POST", f"{API_V3}/dashboard/{dashboard_id}/copy", payload=payload
        )
        return self.client.call(request, JiraDashboard)
