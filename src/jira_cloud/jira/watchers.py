"""Module for Jira issue watcher operations."""

import logging

from ..models.jira import IssueWatchers
from .client import JiraClient
from .constants import API_V3
from .response import JiraResponse
from .utils import require_identifier

logger = logging.getLogger("jira-cloud.watchers")


class IssueWatcherService:
    """Issue watcher operations."""

    def __init__(self, client: JiraClient) -> None:
        self.client = client

    def gets(self, issue_key_or_id: str) -> tuple[IssueWatchers, JiraResponse]:
        """
        Get the watchers of an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID

        Returns:
            The watchers and the response envelope
        """
        issue_key_or_id = require_identifier(issue_key_or_id, "issue key or ID")

        request = self.client.new_request(
            "GET", f"{API_V3}/issue/{issue_key_or_id}/watchers"
        )
        return self.client.call(request, IssueWatchers)

    def add(self, issue_key_or_id: str, account_id: str | None = None) -> JiraResponse:
        """
        Add a watcher to an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            account_id: The account ID of the user to add; the calling user
                is added when omitted

        Returns:
            The response envelope
        """
        issue_key_or_id = require_identifier(issue_key_or_id, "issue key or ID")

        # Jira expects the account ID as a bare JSON string
        request = self.client.new_request(
            "POST",
            f"{API_V3}/issue/{issue_key_or_id}/watchers",
            payload=account_id or None,
        )
        _, response = self.client.call(request)
        logger.debug(f"Added watcher {account_id or '(current user)'} to {issue_key_or_id}")
        return response

    def delete(
        self, issue_key_or_id: str, account_id: str | None = None
    ) -> JiraResponse:
        """
        Remove a watcher from an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            account_id: The account ID of the user to remove; Jira falls back
                to the calling user when omitted

        Returns:
            The response envelope
        """
        issue_key_or_id = require_identifier(issue_key_or_id, "issue key or ID")

        request = self.client.new_request(
            "DELETE",
            f"{API_V3}/issue/{issue_key_or_id}/watchers",
            params={"accountId": account_id},
        )
        _, response = self.client.call(request)
        return response
