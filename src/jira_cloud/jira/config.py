"""Configuration module for Jira Cloud API interactions."""

import logging
import os
from dataclasses import dataclass
from typing import Literal

from ..utils.urls import is_atlassian_cloud_url
from .constants import DEFAULT_USER_AGENT

logger = logging.getLogger("jira-cloud.config")


@dataclass
class JiraConfig:
    """Jira Cloud API configuration.

    Handles the two authentication schemes Jira Cloud accepts:
    - basic: account email and API token
    - token: bearer token (OAuth access token or personal access token)
    """

    url: str  # Site URL, e.g. https://your-domain.atlassian.net
    auth_type: Literal["basic", "token"]  # Authentication type
    username: str | None = None  # Account email (basic)
    api_token: str | None = None  # API token (basic)
    personal_token: str | None = None  # Bearer token (token)
    user_agent: str = DEFAULT_USER_AGENT  # Sent on every request
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float | None = None  # Seconds; None keeps the transport default
    http_proxy: str | None = None  # HTTP proxy URL
    https_proxy: str | None = None  # HTTPS proxy URL
    no_proxy: str | None = None  # Comma-separated list of hosts to bypass proxy

    @property
    def is_cloud(self) -> bool:
        """Check if the URL points to an Atlassian Cloud site.

        Returns:
            True for *.atlassian.net and friends, False otherwise
        """
        return is_atlassian_cloud_url(self.url)

    @property
    def proxies(self) -> dict[str, str]:
        """Proxy mapping in the shape requests expects."""
        proxies = {}
        if self.http_proxy:
            proxies["http"] = self.http_proxy
        if self.https_proxy:
            proxies["https"] = self.https_proxy
        return proxies

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("JIRA_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ValueError(error_msg)

        username = os.getenv("JIRA_USERNAME")
        api_token = os.getenv("JIRA_API_TOKEN")
        personal_token = os.getenv("JIRA_PERSONAL_TOKEN")

        # A bearer token wins when both schemes are configured
        if personal_token:
            auth_type = "token"
        elif username and api_token:
            auth_type = "basic"
        else:
            error_msg = "Jira authentication requires JIRA_USERNAME and JIRA_API_TOKEN, or JIRA_PERSONAL_TOKEN"
            raise ValueError(error_msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        timeout = None
        timeout_env = os.getenv("JIRA_TIMEOUT")
        if timeout_env:
            try:
                timeout = float(timeout_env)
            except ValueError as e:
                error_msg = f"JIRA_TIMEOUT must be a number of seconds, got {timeout_env!r}"
                raise ValueError(error_msg) from e

        config = cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            user_agent=os.getenv("JIRA_USER_AGENT", DEFAULT_USER_AGENT),
            ssl_verify=ssl_verify,
            timeout=timeout,
            http_proxy=os.getenv("JIRA_HTTP_PROXY", os.getenv("HTTP_PROXY")),
            https_proxy=os.getenv("JIRA_HTTPS_PROXY", os.getenv("HTTPS_PROXY")),
            no_proxy=os.getenv("JIRA_NO_PROXY", os.getenv("NO_PROXY")),
        )

        if not config.is_cloud:
            logger.warning(f"{url} does not look like a Jira Cloud site")

        return config

    def is_auth_configured(self) -> bool:
        """Check if the authentication configuration is complete.

        Returns:
            bool: True if authentication is fully configured, False otherwise.
        """
        if self.auth_type == "token":
            return bool(self.personal_token)
        elif self.auth_type == "basic":
            return bool(self.username and self.api_token)
        logger.warning(
            f"Unknown or unsupported auth_type: {self.auth_type} in JiraConfig"
        )
        return False
