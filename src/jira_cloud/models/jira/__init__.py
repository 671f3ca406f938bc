"""
Jira data models for the jira_cloud client.

This package provides Pydantic models for Jira API data structures,
organized by resource group.
"""

from .common import JiraUser
from .dashboard import (
    DashboardPage,
    DashboardPayload,
    DashboardSearchOptions,
    DashboardSearchPage,
    JiraDashboard,
)
from .filter import (
    PermissionFilterPayload,
    ShareFilterScope,
    SharePermission,
    SharePermissionGroup,
    SharePermissionProject,
    SharePermissionRole,
)
from .metadata import IssueMetadataCreateOptions
from .version import (
    JiraVersion,
    VersionCustomFieldUsage,
    VersionGetsOptions,
    VersionIssueCounts,
    VersionIssuesStatus,
    VersionPage,
    VersionPayload,
    VersionUnresolvedIssuesCount,
)
from .watcher import IssueWatchers

__all__ = [
    # Common models
    "JiraUser",
    # Filter sharing
    "ShareFilterScope",
    "SharePermission",
    "SharePermissionGroup",
    "SharePermissionProject",
    "SharePermissionRole",
    "PermissionFilterPayload",
    # Project versions
    "JiraVersion",
    "VersionCustomFieldUsage",
    "VersionGetsOptions",
    "VersionIssueCounts",
    "VersionIssuesStatus",
    "VersionPage",
    "VersionPayload",
    "VersionUnresolvedIssuesCount",
    # Issue metadata and watchers
    "IssueMetadataCreateOptions",
    "IssueWatchers",
    # Dashboards
    "JiraDashboard",
    "DashboardPage",
    "DashboardPayload",
    "DashboardSearchOptions",
    "DashboardSearchPage",
]
