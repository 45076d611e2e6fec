"""Test fixtures for Confluence unit tests."""

from unittest.mock import MagicMock, patch

import pytest

from jira_dashboard.confluence import ConfluenceFetcher

@pytest.fixture
def page_payload():
    return {
        "id": "123456789",
        "title": "Design Doc",
        "version": {"number": 4},
        "body": {
            "storage": {
                "value": "<h2>Summary</h2><p>Build the dashboard.</p><h2>Scope</h2>"
            }
        },
    }


@pytest.fixture
def mock_atlassian_confluence(page_payload):
    """Mock the Atlassian Confluence client."""
    mock_confluence = MagicMock()
    mock_confluence.get_page_by_id.return_value = page_payload
    return mock_confluence


@pytest.fixture
def confluence_fetcher(confluence_config, mock_atlassian_confluence):
    """Create a ConfluenceFetcher whose REST client is mocked."""
    fetcher = ConfluenceFetcher(config=confluence_config)
    with patch.object(
        ConfluenceFetcher, "_confluence_api", return_value=mock_atlassian_confluence
    ):
        yield fetcher
