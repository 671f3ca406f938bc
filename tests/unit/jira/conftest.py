"""Test fixtures for Jira unit tests."""

import json
import os
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from jira_cloud.jira import Jira
from jira_cloud.jira.config import JiraConfig
from tests.fixtures.jira_mocks import BASE_URL, make_response


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": BASE_URL,
            "JIRA_USERNAME": "test_username",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig for basic auth against the test site."""
    return JiraConfig(
        url=BASE_URL,
        auth_type="basic",
        username="test_username",
        api_token="test_token",
    )


@pytest.fixture
def mock_session():
    """A real requests.Session whose send is mocked; nothing leaves the process."""
    session = requests.Session()
    session.send = MagicMock(return_value=make_response(204))
    return session


@pytest.fixture
def jira(mock_config, mock_session):
    """Create a Jira client wired to the mocked session."""
    return Jira(config=mock_config, session=mock_session)


@pytest.fixture
def respond(mock_session) -> Callable[..., None]:
    """Set the response the mocked session returns."""

    def _respond(
        json_data: Any = None, status_code: int = 200, content: bytes | None = None
    ) -> None:
        mock_session.send.return_value = make_response(status_code, json_data, content)

    return _respond


@pytest.fixture
def sent_request(mock_session) -> Callable[[], requests.PreparedRequest]:
    """Return the single request handed to the session."""

    def _sent_request() -> requests.PreparedRequest:
        mock_session.send.assert_called_once()
        return mock_session.send.call_args.args[0]

    return _sent_request


@pytest.fixture
def sent_json(sent_request) -> Callable[[], Any]:
    """Return the decoded JSON body of the single request sent."""

    def _sent_json() -> Any:
        return json.loads(sent_request().body)

    return _sent_json
