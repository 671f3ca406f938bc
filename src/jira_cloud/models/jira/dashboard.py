"""
Jira dashboard models.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import UNKNOWN
from .common import JiraUser
from .filter import SharePermission


class JiraDashboard(ApiModel):
    """
    Model representing a Jira dashboard.
    """

    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    is_favourite: bool | None = None
    is_writable: bool | None = None
    system_dashboard: bool | None = None
    owner: JiraUser | None = None
    popularity: int | None = None
    rank: int | None = None
    view: str | None = None
    automatic_refresh_ms: int | None = None
    share_permissions: list[SharePermission] = Field(default_factory=list)
    edit_permissions: list[SharePermission] = Field(default_factory=list)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for display."""
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name or UNKNOWN,
        }
        if self.owner:
            result["owner"] = self.owner.to_simplified_dict()
        if self.view:
            result["view"] = self.view
        return result


class DashboardPage(ApiModel):
    """A page of dashboards as returned by GET dashboard."""

    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    prev: str | None = None
    next: str | None = None
    dashboards: list[JiraDashboard] = Field(default_factory=list)


class DashboardSearchPage(ApiModel):
    """A page of dashboards as returned by GET dashboard/search."""

    self_url: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[JiraDashboard] = Field(default_factory=list)


class DashboardPayload(ApiModel):
    """Body of a request creating, updating or copying a dashboard."""

    name: str | None = None
    description: str | None = None
    share_permissions: list[SharePermission] | None = None
    edit_permissions: list[SharePermission] | None = None


class DashboardSearchOptions(ApiModel):
    """Filters of GET dashboard/search."""

    dashboard_name: str | None = None
    account_id: str | None = None
    group_name: str | None = None
    group_id: str | None = None
    project_id: int | None = None
    order_by: str | None = None
    status: str | None = None
    expand: list[str] = Field(default_factory=list)

    def to_query_params(self) -> dict[str, Any]:
        """Query parameters for GET dashboard/search."""
        return {
            "dashboardName": self.dashboard_name,
            "accountId": self.account_id,
            "groupname": self.group_name,
            "groupId": self.group_id,
            "projectId": self.project_id,
            "orderBy": self.order_by,
            "status": self.status,
            "expand": ",".join(self.expand),
        }
