"""
Jira project version models.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import UNKNOWN


class VersionIssuesStatus(ApiModel):
    """Issue counts per status category for a fix version."""

    unmapped: int | None = None
    to_do: int | None = None
    in_progress: int | None = None
    done: int | None = None


class JiraVersion(ApiModel):
    """
    Model representing a Jira project version.
    """

    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    archived: bool | None = None
    released: bool | None = None
    overdue: bool | None = None
    start_date: str | None = None
    release_date: str | None = None
    user_start_date: str | None = None
    user_release_date: str | None = None
    project: str | None = None
    project_id: int | None = None
    move_unfixed_issues_to: str | None = None
    expand: str | None = None
    operations: list[dict[str, Any]] | None = None
    issues_status_for_fix_version: VersionIssuesStatus | None = None

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for display."""
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name or UNKNOWN,
            "released": bool(self.released),
            "archived": bool(self.archived),
        }
        if self.release_date:
            result["release_date"] = self.release_date
        if self.description:
            result["description"] = self.description
        return result


class VersionPayload(ApiModel):
    """Body of a request creating or updating a project version."""

    name: str | None = None
    description: str | None = None
    archived: bool | None = None
    released: bool | None = None
    start_date: str | None = None
    release_date: str | None = None
    project: str | None = None
    project_id: int | None = None
    move_unfixed_issues_to: str | None = None


class VersionPage(ApiModel):
    """A page of project versions."""

    self_url: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[JiraVersion] = Field(default_factory=list)


class VersionCustomFieldUsage(ApiModel):
    """Number of issues referencing a version through one custom field."""

    field_name: str | None = None
    custom_field_id: int | None = None
    issue_count_with_version_in_custom_field: int | None = None


class VersionIssueCounts(ApiModel):
    """Issues related to a version by fix version, affected version or custom field."""

    self_url: str | None = Field(default=None, alias="self")
    issues_fixed_count: int | None = None
    issues_affected_count: int | None = None
    issue_count_with_custom_fields_showing_version: int | None = None
    custom_field_usage: list[VersionCustomFieldUsage] = Field(default_factory=list)


class VersionUnresolvedIssuesCount(ApiModel):
    """Issue and unresolved issue counts of a version."""

    self_url: str | None = Field(default=None, alias="self")
    issues_unresolved_count: int | None = None
    issues_count: int | None = None


class VersionGetsOptions(ApiModel):
    """Optional filters of the paginated project versions search."""

    expand: list[str] = Field(default_factory=list)
    query: str | None = None
    status: str | None = None
    order_by: str | None = None

    def to_query_params(self) -> dict[str, Any]:
        """Query parameters for GET project/{key}/version."""
        return {
            "expand": ",".join(self.expand),
            "query": self.query,
            "status": self.status,
            "orderBy": self.order_by,
        }
