"""Module for Jira project version operations."""

import logging

from ..models.jira import (
    JiraVersion,
    VersionGetsOptions,
    VersionIssueCounts,
    VersionPage,
    VersionPayload,
    VersionUnresolvedIssuesCount,
)
from .client import JiraClient
from .constants import API_V2
from .response import JiraResponse
from .utils import require_identifier, require_payload

logger = logging.getLogger("jira-cloud.project_versions")


class ProjectVersionService:
    """Project version operations."""

    def __init__(self, client: JiraClient) -> None:
        self.client = client

    def gets(self, project_key_or_id: str) -> tuple[list[JiraVersion], JiraResponse]:
        """
        Get all versions of a project.

        The response is not paginated; use `search` for large projects.

        Args:
            project_key_or_id: The project key (e.g. 'PROJ') or ID

        Returns:
            The versions and the response envelope
        """
        project_key_or_id = require_identifier(project_key_or_id, "project ID")

        request = self.client.new_request(
            "GET", f"{API_V2}/project/{project_key_or_id}/versions"
        )
        return self.client.call(request, list[JiraVersion])

    def search(
        self,
        project_key_or_id: str,
        options: VersionGetsOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[VersionPage, JiraResponse]:
        """
        Get a page of the versions of a project.

        Args:
            project_key_or_id: The project key (e.g. 'PROJ') or ID
            options: Optional expand, query, status and ordering filters
            start_at: Index of the first version to return
            max_results: Maximum number of versions per page

        Returns:
            The page of versions and the response envelope
        """
        project_key_or_id = require_identifier(project_key_or_id, "project ID")

        params = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            params.update(options.to_query_params())

        request = self.client.new_request(
            "GET", f"{API_V2}/project/{project_key_or_id}/version", params=params
        )
        return self.client.call(request, VersionPage)

    def create(self, payload: VersionPayload) -> tuple[JiraVersion, JiraResponse]:
        """
        Create a project version.

        Args:
            payload: The version to create; `name` and `project_id` are required by Jira

        Returns:
            The created version and the response envelope
        """
        require_payload(payload)

        request = self.client.new_request("POST", f"{API_V2}/version", payload=payload)
        version, response = self.client.call(request, JiraVersion)
        if version is not None:
            logger.info(f"Created version {version.name} ({version.id})")
        return version, response

    def get(
        self, version_id: str, expand: list[str] | None = None
    ) -> tuple[JiraVersion, JiraResponse]:
        """
        Get a project version.

        Args:
            version_id: The ID of the version
            expand: Optional extra information to include, e.g.
                ['operations', 'issuesstatus']

        Returns:
            The version and the response envelope
        """
        version_id = require_identifier(version_id, "version ID")

        request = self.client.new_request(
            "GET",
            f"{API_V2}/version/{version_id}",
            params={"expand": ",".join(expand or [])},
        )
        return self.client.call(request, JiraVersion)

    def update(
        self, version_id: str, payload: VersionPayload
    ) -> tuple[JiraVersion, JiraResponse]:
        """
        Update a project version.

        Args:
            version_id: The ID of the version
            payload: The fields to change

        Returns:
            The updated version and the response envelope
        """
        version_id = require_identifier(version_id, "version ID")
        require_payload(payload)

        request = self.client.new_request(
            "PUT", f"{API_V2}/version/{version_id}", payload=payload
        )
        return self.client.call(request, JiraVersion)

    def merge(self, version_id: str, move_issues_to: str) -> JiraResponse:
        """
        Merge two project versions.

        The version `version_id` is deleted and every fix version reference to
        it is replaced by `move_issues_to`.

        Args:
            version_id: The ID of the version to delete
            move_issues_to: The ID of the version to merge into

        Returns:
            The response envelope
        """
        version_id = require_identifier(version_id, "version ID")
        move_issues_to = require_identifier(move_issues_to, "version ID")

        request = self.client.new_request(
            "PUT", f"{API_V2}/version/{version_id}/mergeto/{move_issues_to}"
        )
        _, response = self.client.call(request)
        logger.info(f"Merged version {version_id} into {move_issues_to}")
        return response

    def related_issue_counts(
        self, version_id: str
    ) -> tuple[VersionIssueCounts, JiraResponse]:
        """
        Get the number of issues related to a version.

        Counts issues whose fix version, affected version, or a version custom
        field is set to the version.

        Args:
            version_id: The ID of the version

        Returns:
            The counts and the response envelope
        """
        version_id = require_identifier(version_id, "version ID")

        request = self.client.new_request(
            "GET", f"{API_V2}/version/{version_id}/relatedIssueCounts"
        )
        return self.client.call(request, VersionIssueCounts)

    def unresolved_issue_count(
        self, version_id: str
    ) -> tuple[VersionUnresolvedIssuesCount, JiraResponse]:
        """
        Get the counts of issues and unresolved issues of a version.

        Args:
            version_id: The ID of the version

        Returns:
            The counts and the response envelope
        """
        version_id = require_identifier(version_id, "version ID")

        request = self.client.new_request(
            "GET", f"{API_V2}/version/{version_id}/unresolvedIssueCount"
        )
        return self.client.call(request, VersionUnresolvedIssuesCount)
