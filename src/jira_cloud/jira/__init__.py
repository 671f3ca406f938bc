"""Jira Cloud API module for jira_cloud.

This module provides the Jira client and one service per resource group.
"""

from requests import Session

from .client import JiraClient
from .config import JiraConfig
from .dashboards import DashboardService
from .filter_share import FilterShareService
from .issue_metadata import IssueMetadataService
from .project_versions import ProjectVersionService
from .response import JiraResponse
from .watchers import IssueWatcherService


class Jira(JiraClient):
    """
    The main Jira Cloud client providing access to all supported operations.

    Services share this client, its configuration and its session:
    - filter_share: Filter sharing operations
    - project_version: Project version operations
    - issue_metadata: Issue create/edit metadata operations
    - issue_watcher: Issue watcher operations
    - dashboard: Dashboard operations
    """

    def __init__(
        self, config: JiraConfig | None = None, session: Session | None = None
    ) -> None:
        super().__init__(config=config, session=session)
        self.filter_share = FilterShareService(self)
        self.project_version = ProjectVersionService(self)
        self.issue_metadata = IssueMetadataService(self)
        self.issue_watcher = IssueWatcherService(self)
        self.dashboard = DashboardService(self)


__all__ = [
    "Jira",
    "JiraClient",
    "JiraConfig",
    "JiraResponse",
    "DashboardService",
    "FilterShareService",
    "IssueMetadataService",
    "IssueWatcherService",
    "ProjectVersionService",
]
