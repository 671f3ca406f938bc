"""Constants specific to Jira Cloud operations."""

# REST API prefixes; filters, versions and metadata live on v2, the rest on v3
API_V2 = "rest/api/2"
API_V3 = "rest/api/3"

DEFAULT_USER_AGENT = "jira-cloud-python"

# Sharing visibility accepted by filter/defaultShareScope
VALID_SHARE_SCOPES: tuple[str, ...] = ("GLOBAL", "AUTHENTICATED", "PRIVATE")

# Values accepted by the `filter` parameter of GET dashboard
VALID_DASHBOARD_FILTERS: tuple[str, ...] = ("favourite", "my")
