"""Test fixtures for the Starlette server."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.testclient import TestClient

from jira_dashboard.columns import ColumnConfigStore, load_column_schema
from jira_dashboard.confluence import ConfluenceFetcher
from jira_dashboard.jira import JiraFetcher
from jira_dashboard.models.jira import JiraSearchResult
from jira_dashboard.servers import AppContext, create_app


@pytest.fixture
def jira_fetcher(jira_config, sample_issue):
    """A real JiraFetcher whose network-facing methods are mocked."""
    fetcher = JiraFetcher(config=jira_config)
    fetcher.search = MagicMock(
        return_value=JiraSearchResult(total=1, issues=[sample_issue])
    )
    fetcher.get_issue_details = MagicMock(return_value=sample_issue)
    fetcher.test_token = MagicMock(
        return_value={"user": {"name": "jdoe"}, "emailMatches": True}
    )
    return fetcher


@pytest.fixture
def confluence_fetcher(confluence_config):
    fetcher = ConfluenceFetcher(config=confluence_config)
    fetcher.get_summary = MagicMock()
    fetcher.get_summaries = AsyncMock()
    return fetcher


@pytest.fixture
def column_store(tmp_path):
    return ColumnConfigStore(
        schema=load_column_schema(tmp_path / "missing-config.json"),
        user_config_path=tmp_path / "user-config.json",
    )


@pytest.fixture
def app_context(
    jira_config, confluence_config, column_store, jira_fetcher, confluence_fetcher
):
    return AppContext(
        jira_config=jira_config,
        confluence_config=confluence_config,
        columns=column_store,
        jira=jira_fetcher,
        confluence=confluence_fetcher,
    )


@pytest.fixture
def client(app_context):
    with TestClient(create_app(app_context)) as test_client:
        yield test_client
