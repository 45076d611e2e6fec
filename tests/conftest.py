"""
Root pytest configuration file for Jira dashboard tests.
"""

import pytest

from jira_dashboard.confluence.config import ConfluenceConfig
from jira_dashboard.jira.config import JiraConfig


@pytest.fixture
def jira_config():
    """A Jira configuration with basic-auth fallbacks enabled."""
    return JiraConfig(
        url="https://jira.example.com/",
        personal_token="config-token",
        username="jdoe",
        basic_auth_domain="example.com",
    )


@pytest.fixture
def confluence_config():
    """A Confluence configuration with a base URL and fallback token."""
    return ConfluenceConfig(
        url="https://wiki.example.com/wiki",
        personal_token="wiki-token",
    )


@pytest.fixture
def sample_issue():
    """A raw Jira issue as returned by the search API."""
    return {
        "key": "PROJ-1",
        "fields": {
            "summary": "Fix the login page",
            "status": {"name": "In Progress"},
            "assignee": {"displayName": "Jane Doe", "name": "jdoe"},
            "priority": {"name": "High"},
            "issuetype": {"name": "Bug"},
            "created": "2024-01-15T10:30:00",
            "updated": "2024-02-01T16:05:09",
            "labels": ["Backend", "urgent"],
            "components": [{"name": "API"}, {"name": "Auth"}],
            "customfield_10100": {"value": "Gold"},
        },
    }
