"""Tests for the Jira ProjectVersionService."""

from urllib.parse import parse_qsl, urlparse

import pytest

from jira_cloud.exceptions import JiraValidationError
from jira_cloud.models import (
    JiraVersion,
    VersionGetsOptions,
    VersionIssueCounts,
    VersionPage,
    VersionPayload,
    VersionUnresolvedIssuesCount,
)
from tests.fixtures.jira_mocks import (
    BASE_URL,
    MOCK_VERSION_ISSUE_COUNTS_RESPONSE,
    MOCK_VERSION_PAGE_RESPONSE,
    MOCK_VERSION_RESPONSE,
    MOCK_VERSION_UNRESOLVED_COUNT_RESPONSE,
    MOCK_VERSIONS_RESPONSE,
)


def test_gets(jira, respond, sent_request):
    """Test getting all versions of a project."""
    respond(MOCK_VERSIONS_RESPONSE)

    versions, _ = jira.project_version.gets("PR")

    assert [v.id for v in versions] == ["10000", "10010"]
    assert all(isinstance(v, JiraVersion) for v in versions)
    request = sent_request()
    assert request.method == "GET"
    assert request.url == f"{BASE_URL}/rest/api/2/project/PR/versions"


def test_gets_without_project(jira, mock_session):
    """Test that gets requires a project."""
    with pytest.raises(JiraValidationError, match="no project ID"):
        jira.project_version.gets("")

    mock_session.send.assert_not_called()


def test_search_default_params(jira, respond, sent_request):
    """Test that only the offsets are sent when no options are given."""
    respond(MOCK_VERSION_PAGE_RESPONSE)

    page, _ = jira.project_version.search("PR", None, 0, 50)

    assert isinstance(page, VersionPage)
    assert page.total == 7
    assert page.is_last is False
    assert page.values[0].name == "New Version 1"
    request = sent_request()
    assert request.url == f"{BASE_URL}/rest/api/2/project/PR/version?startAt=0&maxResults=50"
    query = urlparse(request.url).query
    assert "startAt=0&maxResults=50" in query
    for omitted in ("expand", "query", "status", "orderBy"):
        assert omitted not in query


def test_search_empty_options(jira, respond, sent_request):
    """Test that an options object with nothing set adds no parameters."""
    respond(MOCK_VERSION_PAGE_RESPONSE)

    jira.project_version.search("PR", VersionGetsOptions(), 0, 50)

    assert urlparse(sent_request().url).query == "startAt=0&maxResults=50"


def test_search_with_options(jira, respond, sent_request):
    """Test that set options are encoded."""
    respond(MOCK_VERSION_PAGE_RESPONSE)
    options = VersionGetsOptions(
        expand=["issuesstatus", "operations"],
        query="Version 1",
        status="released,unreleased",
        order_by="-sequence",
    )

    jira.project_version.search("PR", options, 10, 25)

    params = dict(parse_qsl(urlparse(sent_request().url).query))
    assert params == {
        "startAt": "10",
        "maxResults": "25",
        "expand": "issuesstatus,operations",
        "query": "Version 1",
        "status": "released,unreleased",
        "orderBy": "-sequence",
    }


def test_search_without_project(jira, mock_session):
    """Test that search fails before any request without a project."""
    with pytest.raises(JiraValidationError, match="no project ID"):
        jira.project_version.search("", None, 0, 50)

    mock_session.send.assert_not_called()


def test_create(jira, respond, sent_request, sent_json):
    """Test creating a version."""
    respond(MOCK_VERSION_RESPONSE, status_code=201)
    payload = VersionPayload(
        name="New Version 1",
        description="An excellent version",
        project_id=10000,
        release_date="2010-07-06",
        released=True,
    )

    version, response = jira.project_version.create(payload)

    assert version.id == "10000"
    assert response.status_code == 201
    request = sent_request()
    assert request.method == "POST"
    assert request.url == f"{BASE_URL}/rest/api/2/version"
    assert sent_json() == {
        "name": "New Version 1",
        "description": "An excellent version",
        "projectId": 10000,
        "releaseDate": "2010-07-06",
        "released": True,
    }


def test_create_without_payload(jira, mock_session):
    """Test that create requires a payload."""
    with pytest.raises(JiraValidationError, match="no payload"):
        jira.project_version.create(None)

    mock_session.send.assert_not_called()


def test_get(jira, respond, sent_request):
    """Test getting a version without expansions."""
    respond(MOCK_VERSION_RESPONSE)

    version, _ = jira.project_version.get("10000")

    assert version.name == "New Version 1"
    assert version.user_release_date == "6/Jul/2010"
    assert sent_request().url == f"{BASE_URL}/rest/api/2/version/10000"


def test_get_with_expand(jira, respond, sent_request):
    """Test that expansions are joined with commas."""
    respond(MOCK_VERSION_RESPONSE)

    jira.project_version.get("10000", ["operations", "issuesstatus"])

    params = dict(parse_qsl(urlparse(sent_request().url).query))
    assert params == {"expand": "operations,issuesstatus"}


def test_get_without_version(jira, mock_session):
    """Test that get requires a version ID."""
    with pytest.raises(JiraValidationError, match="no version ID"):
        jira.project_version.get("")

    mock_session.send.assert_not_called()


def test_update(jira, respond, sent_request, sent_json):
    """Test updating a version."""
    respond(MOCK_VERSION_RESPONSE)

    version, _ = jira.project_version.update(
        "10000", VersionPayload(archived=True, description="Archived")
    )

    assert version.id == "10000"
    request = sent_request()
    assert request.method == "PUT"
    assert request.url == f"{BASE_URL}/rest/api/2/version/10000"
    assert sent_json() == {"archived": True, "description": "Archived"}


def test_update_without_version(jira, mock_session):
    """Test that update requires a version ID."""
    with pytest.raises(JiraValidationError, match="no version ID"):
        jira.project_version.update("", VersionPayload(name="x"))

    mock_session.send.assert_not_called()


def test_merge(jira, respond, sent_request):
    """Test merging two versions."""
    respond(status_code=204)

    response = jira.project_version.merge("10000", "10010")

    assert response.status_code == 204
    request = sent_request()
    assert request.method == "PUT"
    assert request.url == f"{BASE_URL}/rest/api/2/version/10000/mergeto/10010"
    assert request.body is None


@pytest.mark.parametrize(
    ("version_id", "move_issues_to"), [("", "10010"), ("10000", ""), ("", "")]
)
def test_merge_missing_ids(jira, mock_session, version_id, move_issues_to):
    """Test that merge fails before any request when an ID is missing."""
    with pytest.raises(JiraValidationError, match="no version ID"):
        jira.project_version.merge(version_id, move_issues_to)

    mock_session.send.assert_not_called()


def test_related_issue_counts(jira, respond, sent_request):
    """Test getting the related issue counts of a version."""
    respond(MOCK_VERSION_ISSUE_COUNTS_RESPONSE)

    counts, _ = jira.project_version.related_issue_counts("10000")

    assert isinstance(counts, VersionIssueCounts)
    assert counts.issues_fixed_count == 23
    assert counts.issues_affected_count == 101
    assert counts.issue_count_with_custom_fields_showing_version == 54
    assert [u.custom_field_id for u in counts.custom_field_usage] == [10000, 10010]
    assert sent_request().url == f"{BASE_URL}/rest/api/2/version/10000/relatedIssueCounts"


def test_unresolved_issue_count(jira, respond, sent_request):
    """Test getting the unresolved issue count of a version."""
    respond(MOCK_VERSION_UNRESOLVED_COUNT_RESPONSE)

    counts, _ = jira.project_version.unresolved_issue_count("10000")

    assert isinstance(counts, VersionUnresolvedIssuesCount)
    assert counts.issues_unresolved_count == 23
    assert counts.issues_count == 30
    assert (
        sent_request().url == f"{BASE_URL}/rest/api/2/version/10000/unresolvedIssueCount"
    )


@pytest.mark.parametrize(
    "method", ["related_issue_counts", "unresolved_issue_count"]
)
def test_counts_without_version(jira, mock_session, method):
    """Test that count lookups require a version ID."""
    with pytest.raises(JiraValidationError, match="no version ID"):
        getattr(jira.project_version, method)("")

    mock_session.send.assert_not_called()


def test_surrounding_whitespace_is_not_sent(jira, respond, sent_request):
    """Test that keys padded with whitespace are trimmed before building the path."""
    respond([])

    jira.project_version.gets("  PR ")

    assert sent_request().url == f"{BASE_URL}/rest/api/2/project/PR/versions"
