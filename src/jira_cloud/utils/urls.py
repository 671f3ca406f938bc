"""URL-related utility functions for jira_cloud."""

import re
from urllib.parse import urlparse


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to an Atlassian Cloud site.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False otherwise
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    # Private and loopback hosts are never Cloud sites
    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return (
        hostname.endswith(".atlassian.net")
        or hostname.endswith(".jira.com")
        or hostname.endswith(".jira-dev.com")
    )


def join_url(base_url: str, path: str) -> str:
    """Join a site URL and a relative API path with exactly one slash.

    Args:
        base_url: The site URL, with or without a trailing slash
        path: The relative path, e.g. ``rest/api/2/version/10000``

    Returns:
        The absolute URL
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
