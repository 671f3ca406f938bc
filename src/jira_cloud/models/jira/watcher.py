"""
Jira issue watcher models.
"""

from pydantic import Field

from ..base import ApiModel
from .common import JiraUser


class IssueWatchers(ApiModel):
    """Watchers of an issue."""

    self_url: str | None = Field(default=None, alias="self")
    is_watching: bool | None = None
    watch_count: int | None = None
    watchers: list[JiraUser] = Field(default_factory=list)
