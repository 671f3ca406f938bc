"""
Jira issue metadata models.

Createmeta and editmeta responses depend on the project and screen
configuration of each site, so only the request options are modelled;
responses are returned as plain JSON.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel


class IssueMetadataCreateOptions(ApiModel):
    """Filters of GET issue/createmeta.

    List options are sent as repeated query keys, e.g.
    ``projectKeys=ABC&projectKeys=XYZ``.
    """

    project_ids: list[str] = Field(default_factory=list)
    project_keys: list[str] = Field(default_factory=list)
    issue_type_ids: list[str] = Field(default_factory=list)
    issue_type_names: list[str] = Field(default_factory=list)
    expand: str | None = None

    def to_query_params(self) -> dict[str, Any]:
        """Query parameters for GET issue/createmeta."""
        return {
            "projectIds": self.project_ids,
            "projectKeys": self.project_keys,
            "issuetypeIds": self.issue_type_ids,
            "issuetypeNames": self.issue_type_names,
            "expand": self.expand,
        }
