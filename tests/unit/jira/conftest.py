"""Test fixtures for Jira unit tests."""

import json
import os
from unittest.mock import MagicMock, patch

import pytest
import requests

from jira_dashboard.jira import JiraFetcher


def _make_response(
    status_code=200,
    json_data=None,
    text=None,
    content_type="application/json",
    reason="",
):
    """Build a mock requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    response.headers = {"Content-Type": content_type}
    if text is None:
        text = json.dumps(json_data) if json_data is not None else ""
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects."""
    return _make_response


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://jira.example.com",
            "JIRA_PERSONAL_TOKEN": "env-token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def search_response(sample_issue):
    return {"issues": [sample_issue], "total": 1, "startAt": 0, "maxResults": 100}


@pytest.fixture
def mock_atlassian_jira(sample_issue):
    """Mock the Atlassian Jira client."""
    mock_jira = MagicMock()
    mock_jira.myself.return_value = {
        "name": "jdoe",
        "displayName": "Jane Doe",
        "emailAddress": "Jane.Doe@example.com",
    }
    mock_jira.get_issue.return_value = sample_issue
    return mock_jira


@pytest.fixture
def jira_fetcher(jira_config, mock_atlassian_jira):
    """Create a JiraFetcher with a mocked session and atlassian client."""
    fetcher = JiraFetcher(config=jira_config)
    fetcher.session = MagicMock()
    with patch.object(JiraFetcher, "_jira_api", return_value=mock_atlassian_jira):
        yield fetcher
