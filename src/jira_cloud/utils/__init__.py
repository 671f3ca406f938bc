"""
Utility functions for the jira_cloud client.
"""

from .logging import log_config_param, mask_sensitive, setup_logging
from .urls import is_atlassian_cloud_url, join_url

__all__ = [
    "is_atlassian_cloud_url",
    "join_url",
    "log_config_param",
    "mask_sensitive",
    "setup_logging",
]
