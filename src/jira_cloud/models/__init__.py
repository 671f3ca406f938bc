"""
Pydantic models for Jira Cloud API requests and responses.

Models decode camelCase responses into snake_case fields and serialize
request payloads back to camelCase, leaving out fields that were not set.
"""

from .base import ApiModel
from .constants import UNASSIGNED, UNKNOWN
from .jira import (
    DashboardPage,
    DashboardPayload,
    DashboardSearchOptions,
    DashboardSearchPage,
    IssueMetadataCreateOptions,
    IssueWatchers,
    JiraDashboard,
    JiraUser,
    JiraVersion,
    PermissionFilterPayload,
    ShareFilterScope,
    SharePermission,
    SharePermissionGroup,
    SharePermissionProject,
    SharePermissionRole,
    VersionCustomFieldUsage,
    VersionGetsOptions,
    VersionIssueCounts,
    VersionIssuesStatus,
    VersionPage,
    VersionPayload,
    VersionUnresolvedIssuesCount,
)

__all__ = [
    # Base models
    "ApiModel",
    # Constants
    "UNASSIGNED",
    "UNKNOWN",
    # Jira models
    "JiraUser",
    "ShareFilterScope",
    "SharePermission",
    "SharePermissionGroup",
    "SharePermissionProject",
    "SharePermissionRole",
    "PermissionFilterPayload",
    "JiraVersion",
    "VersionCustomFieldUsage",
    "VersionGetsOptions",
    "VersionIssueCounts",
    "VersionIssuesStatus",
    "VersionPage",
    "VersionPayload",
    "VersionUnresolvedIssuesCount",
    "IssueMetadataCreateOptions",
    "IssueWatchers",
    "JiraDashboard",
    "DashboardPage",
    "DashboardPayload",
    "DashboardSearchOptions",
    "DashboardSearchPage",
]
