"""
Jira filter sharing models.
"""

from pydantic import Field

from ..base import ApiModel
from .common import JiraUser


class ShareFilterScope(ApiModel):
    """Default sharing scope for new filters and dashboards."""

    scope: str | None = None


class SharePermissionProject(ApiModel):
    """Project a filter or dashboard is shared with."""

    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = None
    name: str | None = None
    project_type_key: str | None = None
    simplified: bool | None = None


class SharePermissionRole(ApiModel):
    """Project role a filter or dashboard is shared with."""

    self_url: str | None = Field(default=None, alias="self")
    id: int | None = None
    name: str | None = None
    description: str | None = None


class SharePermissionGroup(ApiModel):
    """Group a filter or dashboard is shared with."""

    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    group_id: str | None = None


class SharePermission(ApiModel):
    """
    Model representing a share permission of a filter or dashboard.

    `type` is one of user, group, project, projectRole, global (alias
    loggedin), authenticated or project-unknown; only the entity matching
    the type is populated.
    """

    id: int | None = None
    type: str | None = None
    project: SharePermissionProject | None = None
    role: SharePermissionRole | None = None
    group: SharePermissionGroup | None = None
    user: JiraUser | None = None


class PermissionFilterPayload(ApiModel):
    """Body of a request adding a share permission to a filter."""

    type: str | None = None
    project_id: str | None = None
    group_name: str | None = Field(default=None, alias="groupname")
    project_role_id: str | None = None
    account_id: str | None = None
    rights: int | None = None
