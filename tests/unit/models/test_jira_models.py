"""Tests for the Jira Pydantic models."""

from jira_cloud.models import (
    ApiModel,
    DashboardSearchOptions,
    IssueMetadataCreateOptions,
    IssueWatchers,
    JiraDashboard,
    JiraUser,
    JiraVersion,
    PermissionFilterPayload,
    SharePermission,
    VersionGetsOptions,
    VersionPayload,
)
from tests.fixtures.jira_mocks import (
    MOCK_DASHBOARD_RESPONSE,
    MOCK_SHARE_PERMISSIONS_RESPONSE,
    MOCK_VERSION_RESPONSE,
    MOCK_WATCHERS_RESPONSE,
)


class TestPermissionFilterPayload:
    """Tests for the share permission payload."""

    def test_group_payload_omits_unset_fields(self):
        """Test the group share body."""
        payload = PermissionFilterPayload(type="group", group_name="eng")

        assert payload.to_api_payload() == {"type": "group", "groupname": "eng"}

    def test_populate_by_alias(self):
        """Test that payloads can also be built from JSON keys."""
        payload = PermissionFilterPayload.model_validate(
            {"type": "project", "projectId": "10101"}
        )

        assert payload.project_id == "10101"
        assert payload.to_api_payload() == {"type": "project", "projectId": "10101"}

    def test_user_payload(self):
        """Test the user share body."""
        payload = PermissionFilterPayload(
            type="user", account_id="5b10ac8d82e05b22cc7d4ef5", rights=1
        )

        assert payload.to_api_payload() == {
            "type": "user",
            "accountId": "5b10ac8d82e05b22cc7d4ef5",
            "rights": 1,
        }


class TestJiraVersion:
    """Tests for the JiraVersion model."""

    def test_decode(self):
        """Test decoding a full version."""
        version = JiraVersion.model_validate(MOCK_VERSION_RESPONSE)

        assert version.self_url == "https://test.atlassian.net/rest/api/2/version/10000"
        assert version.project_id == 10000
        assert version.release_date == "2010-07-06"
        assert version.issues_status_for_fix_version.to_do == 10
        assert version.issues_status_for_fix_version.in_progress == 20

    def test_to_simplified_dict(self):
        """Test the display dictionary."""
        version = JiraVersion.model_validate(MOCK_VERSION_RESPONSE)

        assert version.to_simplified_dict() == {
            "id": "10000",
            "name": "New Version 1",
            "released": True,
            "archived": False,
            "release_date": "2010-07-06",
            "description": "An excellent version",
        }

    def test_to_simplified_dict_defaults(self):
        """Test the display dictionary of a bare version."""
        assert JiraVersion().to_simplified_dict() == {
            "id": None,
            "name": "Unknown",
            "released": False,
            "archived": False,
        }

    def test_payload_round_trips_through_aliases(self):
        """Test that a payload keeps only the fields that were set."""
        payload = VersionPayload(name="2.0", project_id=10000, released=False)

        assert payload.to_api_payload() == {
            "name": "2.0",
            "projectId": 10000,
            "released": False,
        }


class TestSharePermission:
    """Tests for the SharePermission model."""

    def test_nested_entities(self):
        """Test that only the entity matching the type is populated."""
        role_share = SharePermission.model_validate(MOCK_SHARE_PERMISSIONS_RESPONSE[3])

        assert role_share.type == "projectRole"
        assert role_share.project.key == "EX"
        assert role_share.role.name == "Developers"
        assert role_share.group is None
        assert role_share.user is None

    def test_ignores_unknown_keys(self):
        """Test that fields Jira adds later do not break decoding."""
        share = SharePermission.model_validate({"id": 1, "type": "global", "new": 1})

        assert share.model_dump(exclude_none=True) == {"id": 1, "type": "global"}


class TestWatchersAndUsers:
    """Tests for watcher and user models."""

    def test_watchers(self):
        """Test decoding the watchers of an issue."""
        watchers = IssueWatchers.model_validate(MOCK_WATCHERS_RESPONSE)

        assert watchers.watch_count == 1
        assert watchers.watchers[0].active is False

    def test_user_simplified_dict(self):
        """Test that users without a name show as unassigned."""
        assert JiraUser(account_id="abc").to_simplified_dict() == {
            "account_id": "abc",
            "display_name": "Unassigned",
            "active": None,
        }


class TestDashboard:
    """Tests for dashboard models."""

    def test_simplified_dict(self):
        """Test the display dictionary of a dashboard."""
        dashboard = JiraDashboard.model_validate(MOCK_DASHBOARD_RESPONSE)

        assert dashboard.to_simplified_dict() == {
            "id": "10000",
            "name": "System Dashboard",
            "view": "https://test.atlassian.net/secure/Dashboard.jspa?selectPageId=10000",
        }

    def test_search_options_query_params(self):
        """Test the search query parameters."""
        options = DashboardSearchOptions(group_name="jira-users", project_id=10000)

        params = options.to_query_params()

        assert params["groupname"] == "jira-users"
        assert params["projectId"] == 10000
        assert params["expand"] == ""


class TestOptions:
    """Tests for query option models."""

    def test_version_options(self):
        """Test the version search parameters."""
        options = VersionGetsOptions(expand=["operations"], order_by="name")

        assert options.to_query_params() == {
            "expand": "operations",
            "query": None,
            "status": None,
            "orderBy": "name",
        }

    def test_createmeta_options(self):
        """Test the createmeta parameter names."""
        options = IssueMetadataCreateOptions(project_ids=["10000"], issue_type_ids=["1"])

        params = options.to_query_params()

        assert params["projectIds"] == ["10000"]
        assert params["issuetypeIds"] == ["1"]
        assert params["projectKeys"] == []
        assert params["expand"] is None


def test_api_models_share_base():
    """Test that every model derives from ApiModel."""
    assert issubclass(JiraVersion, ApiModel)
    assert issubclass(PermissionFilterPayload, ApiModel)
