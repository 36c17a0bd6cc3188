"""Tests for tempo_api module."""

import math

import pytest
import requests
from unittest.mock import MagicMock, patch

from tempo_worklogs.tempo_api import (
    PAGE_SIZE,
    JiraClient,
    PaginationLimitExceeded,
    TempoClient,
)

from conftest import make_jira_response, make_page, make_worklog


class TestTempoClient:
    """Tests for TempoClient class."""

    def test_init(self, mock_requests_session):
        """Test initialization sets bearer auth and strips trailing slash."""
        client = TempoClient(api_token="tempo-token", base_url="https://api.tempo.io/4/")

        assert client.base_url == "https://api.tempo.io/4"
        headers = mock_requests_session.headers.update.call_args[0][0]
        assert headers["Authorization"] == "Bearer tempo-token"

    def test_single_page(self, mock_requests_session):
        """Test a page without a next marker ends pagination."""
        worklogs = [make_worklog(i) for i in range(3)]
        mock_requests_session.get.return_value = make_page(worklogs)

        client = TempoClient(api_token="tempo-token")
        result = client.get_worklogs("2026-01-01", "2026-01-31")

        assert result == worklogs
        mock_requests_session.get.assert_called_once()
        params = mock_requests_session.get.call_args[1]["params"]
        assert params == {"from": "2026-01-01", "to": "2026-01-31", "offset": 0, "limit": PAGE_SIZE}

    def test_empty_first_page(self, mock_requests_session):
        """Test an empty range stops after one call."""
        mock_requests_session.get.return_value = make_page([])

        client = TempoClient(api_token="tempo-token")

        assert client.get_worklogs("2026-01-01", "2026-01-01") == []
        assert mock_requests_session.get.call_count == 1

    def test_multiple_pages_preserve_order(self, mock_requests_session, two_pages):
        """Test pages are concatenated in order with advancing offsets."""
        mock_requests_session.get.side_effect = two_pages

        client = TempoClient(api_token="tempo-token")
        result = client.get_worklogs("2026-01-01", "2026-01-31")

        assert [w["tempoWorklogId"] for w in result] == list(range(62))
        offsets = [c[1]["params"]["offset"] for c in mock_requests_session.get.call_args_list]
        assert offsets == [0, 50]

    @pytest.mark.parametrize("total", [0, 1, 49, 50, 51, 120])
    def test_call_count(self, mock_requests_session, total):
        """Test N records take ceil((N+1)/50) calls when the last page has no next marker."""
        records = [make_worklog(i) for i in range(total)]
        pages = []
        for start in range(0, total + 1, PAGE_SIZE):
            chunk = records[start:start + PAGE_SIZE]
            pages.append(make_page(chunk, has_next=start + PAGE_SIZE <= total))
        mock_requests_session.get.side_effect = pages

        client = TempoClient(api_token="tempo-token")
        result = client.get_worklogs("2026-01-01", "2026-12-31")

        assert len(result) == total
        assert mock_requests_session.get.call_count == math.ceil((total + 1) / PAGE_SIZE)

    def test_empty_page_with_next_marker_stops(self, mock_requests_session):
        """Test a spurious next marker on an empty page does not loop."""
        mock_requests_session.get.side_effect = [
            make_page([make_worklog(1)], has_next=True),
            make_page([], has_next=True),
            make_page([make_worklog(2)]),
        ]

        client = TempoClient(api_token="tempo-token")
        result = client.get_worklogs("2026-01-01", "2026-01-31")

        assert len(result) == 1
        assert mock_requests_session.get.call_count == 2

    def test_page_cap(self, mock_requests_session):
        """Test pagination stops with an error past max_pages."""
        mock_requests_session.get.side_effect = lambda *a, **kw: make_page([make_worklog(1)], has_next=True)

        client = TempoClient(api_token="tempo-token", max_pages=3)

        with pytest.raises(PaginationLimitExceeded):
            client.get_worklogs("2026-01-01", "2026-01-31")
        assert mock_requests_session.get.call_count == 3

    def test_http_error_propagates(self, mock_requests_session):
        """Test a failed page aborts the fetch."""
        failing = MagicMock()
        failing.raise_for_status.side_effect = requests.exceptions.HTTPError("401 Unauthorized")
        mock_requests_session.get.side_effect = [make_page([make_worklog(1)], has_next=True), failing]

        client = TempoClient(api_token="tempo-token")

        with pytest.raises(requests.exceptions.HTTPError):
            client.get_worklogs("2026-01-01", "2026-01-31")


class TestJiraClient:
    """Tests for JiraClient class."""

    def test_init_pat_auth(self, mock_requests_session):
        """Test initialization with PAT authentication."""
        JiraClient(base_url="https://jira.example.com", token="test-pat", auth_type="pat")

        headers = mock_requests_session.headers.update.call_args_list[0][0][0]
        assert headers["Authorization"] == "Bearer test-pat"

    def test_init_basic_auth(self, mock_requests_session):
        """Test initialization with Basic authentication."""
        JiraClient(
            base_url="https://example.atlassian.net",
            token="api-token",
            email="user@example.com",
            auth_type="basic"
        )

        headers = mock_requests_session.headers.update.call_args_list[0][0][0]
        assert headers["Authorization"].startswith("Basic ")

    def test_base_url_strips_trailing_slash(self):
        """Test that trailing slash is stripped from base URL."""
        with patch("requests.Session"):
            client = JiraClient(base_url="https://jira.example.com/", token="test-pat")

            assert client.base_url == "https://jira.example.com"

    def test_search_issues_payload(self, mock_requests_session):
        """Test one JQL query bounded to the id count."""
        mock_requests_session.post.return_value = make_jira_response([10, 11])

        client = JiraClient(base_url="https://example.atlassian.net", token="t")
        issues = client.search_issues([10, 11])

        assert [i["key"] for i in issues] == ["PROJ-10", "PROJ-11"]
        mock_requests_session.post.assert_called_once()
        url = mock_requests_session.post.call_args[0][0]
        payload = mock_requests_session.post.call_args[1]["json"]
        assert url == "https://example.atlassian.net/rest/api/3/search/jql"
        assert payload == {"jql": "id in (10,11)", "fields": ["key", "summary"], "maxResults": 2}

    def test_search_issues_empty(self, mock_requests_session):
        """Test no request is made without ids."""
        client = JiraClient(base_url="https://example.atlassian.net", token="t")

        assert client.search_issues([]) == []
        mock_requests_session.post.assert_not_called()
