"""Tests for the Jira authentication strategies."""

from requests.auth import HTTPBasicAuth

from jira_dashboard.jira.auth import (
    basic_usernames,
    bearer_strategy,
    build_strategies,
)
from jira_dashboard.jira.config import JiraConfig
from jira_dashboard.jira.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    TOKEN_REQUEST_TIMEOUT,
)


def test_caller_token_yields_only_bearer(jira_config):
    strategies = build_strategies(jira_config, " caller-token\n")
    assert len(strategies) == 1
    assert strategies[0].headers == {"Authorization": "Bearer caller-token"}
    assert strategies[0].timeout == TOKEN_REQUEST_TIMEOUT


def test_fallback_order_without_caller_token(jira_config):
    strategies = build_strategies(jira_config)
    headers = [s.headers for s in strategies]
    assert headers[:4] == [
        {"X-API-Token": "config-token"},
        {"X-Auth-Token": "config-token"},
        {"Authorization": "Token config-token"},
        {"Authorization": "PAT config-token"},
    ]
    # bare and domain forms; the smart form duplicates the domain form
    assert [s.auth for s in strategies[4:]] == [
        HTTPBasicAuth("jdoe", "config-token"),
        HTTPBasicAuth("jdoe@example.com", "config-token"),
    ]
    assert all(s.headers == {} for s in strategies[4:])
    assert all(s.auth is None for s in strategies[:4])
    assert all(s.timeout == TOKEN_REQUEST_TIMEOUT for s in strategies[:4])
    assert all(s.timeout == DEFAULT_REQUEST_TIMEOUT for s in strategies[4:])


def test_no_username_skips_basic_auth():
    config = JiraConfig(url="https://jira.example.com", personal_token="token")
    strategies = build_strategies(config)
    assert len(strategies) == 4
    assert all(s.auth is None for s in strategies)


def test_basic_usernames():
    assert basic_usernames("jdoe", None) == ["jdoe"]
    assert basic_usernames("jdoe", "example.com") == ["jdoe", "jdoe@example.com"]
    assert basic_usernames("jdoe@corp.com", "example.com") == [
        "jdoe@corp.com",
        "jdoe@corp.com@example.com",
    ]


def test_request_headers_merge_json_headers():
    headers = bearer_strategy("t").request_headers()
    assert headers["Accept"] == "application/json"
    assert headers["Content-Type"] == "application/json"
    assert headers["Authorization"] == "Bearer t"


def test_basic_auth_leaves_authorization_to_requests(jira_config):
    basic = build_strategies(jira_config)[4]
    headers = basic.request_headers()
    assert "Authorization" not in headers
    assert isinstance(basic.auth, HTTPBasicAuth)
    assert basic.auth.username == "jdoe"
    assert basic.auth.password == "config-token"
