"""Pytest configuration and fixtures."""

import pytest
from unittest.mock import MagicMock, patch

from tempo_worklogs.config import Config


def make_worklog(worklog_id, issue_id=None, seconds=3600, **overrides):
    """Build a raw Tempo v4 worklog."""
    worklog = {
        "tempoWorklogId": worklog_id,
        "timeSpentSeconds": seconds,
        "startDate": "2026-01-15",
        "startTime": "09:00:00",
        "description": f"Work item {worklog_id}",
        "author": {"accountId": "user-123", "displayName": "Test User"},
        "createdAt": "2026-01-15T10:00:00Z",
        "updatedAt": "2026-01-15T10:00:00Z",
    }
    if issue_id is not None:
        worklog["issue"] = {"self": f"https://example.atlassian.net/rest/api/2/issue/{issue_id}", "id": issue_id}
    worklog.update(overrides)
    return worklog


def make_page(results, has_next=False):
    """Build a mocked Tempo /worklogs response."""
    metadata = {"count": len(results), "offset": 0, "limit": 50}
    if has_next:
        metadata["next"] = "https://api.tempo.io/4/worklogs?offset=50&limit=50"
    response = MagicMock()
    response.json.return_value = {"results": results, "metadata": metadata}
    return response


def make_jira_response(issue_ids):
    """Build a mocked Jira /search/jql response covering the given ids."""
    response = MagicMock()
    response.json.return_value = {
        "issues": [
            {"id": str(i), "key": f"PROJ-{i}", "fields": {"summary": f"Issue {i}"}}
            for i in issue_ids
        ]
    }
    return response


@pytest.fixture
def sample_config():
    """Configuration with Tempo and Jira Cloud credentials."""
    return Config(
        tempo_api_token="tempo-token",
        jira_api_token="jira-token",
        jira_email="test@example.com",
        jira_base_url="https://example.atlassian.net",
    )


@pytest.fixture
def tempo_only_config():
    """Configuration without Jira credentials."""
    return Config(tempo_api_token="tempo-token")


@pytest.fixture
def two_pages():
    """50 + 12 worklogs across two Tempo pages, issues 1000-1061."""
    first = [make_worklog(i, issue_id=1000 + i, seconds=1800) for i in range(50)]
    second = [make_worklog(i, issue_id=1000 + i, seconds=1800) for i in range(50, 62)]
    return [make_page(first, has_next=True), make_page(second)]


@pytest.fixture
def mock_requests_session():
    """Mock requests session for API testing."""
    with patch("requests.Session") as mock_session:
        mock_instance = MagicMock()
        mock_session.return_value = mock_instance
        yield mock_instance
