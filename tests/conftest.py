"""
Root pytest configuration file for jira_cloud tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_jira_loggers():
    """Keep log levels set by one test from leaking into the next."""
    yield
    for name in ("jira-cloud", "jira-cloud.cli", "urllib3"):
        logging.getLogger(name).setLevel(logging.NOTSET)
