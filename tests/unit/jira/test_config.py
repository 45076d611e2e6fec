"""Tests for the Jira config module."""

import os
from unittest.mock import patch

import pytest

from jira_dashboard.exceptions import ConfigurationError
from jira_dashboard.jira.config import (
    DEFAULT_JQL,
    DEFAULT_MAX_RESULTS,
    JiraConfig,
    read_token_file,
)


def test_from_env_personal_token(mock_env_vars):
    """Test that from_env loads the URL and personal token."""
    config = JiraConfig.from_env()
    assert config.url == "https://jira.example.com"
    assert config.personal_token == "env-token"
    assert config.username is None
    assert config.jql == DEFAULT_JQL
    assert config.max_results == DEFAULT_MAX_RESULTS
    assert config.ssl_verify is True


def test_from_env_alternative_names():
    """Test JIRA_BASE_URL and JIRA_API_TOKEN are accepted."""
    with patch.dict(
        os.environ,
        {
            "JIRA_BASE_URL": "https://jira.example.com/",
            "JIRA_API_TOKEN": "  api-token\n",
            "JIRA_USERNAME": "jdoe",
            "JIRA_BASIC_AUTH_DOMAIN": "example.com",
            "JIRA_JQL": "project = PROJ",
            "JIRA_MAX_RESULTS": "25",
            "JIRA_SSL_VERIFY": "false",
        },
        clear=True,
    ):
        config = JiraConfig.from_env()
    assert config.base_url == "https://jira.example.com"
    assert config.personal_token == "api-token"
    assert config.username == "jdoe"
    assert config.basic_auth_domain == "example.com"
    assert config.jql == "project = PROJ"
    assert config.max_results == 25
    assert config.ssl_verify is False


def test_from_env_token_file(tmp_path):
    """Test the token is read from JIRA_TOKEN_FILE."""
    token_file = tmp_path / "jira-key.txt"
    token_file.write_text("file-token\r\n")
    with patch.dict(
        os.environ,
        {"JIRA_URL": "https://jira.example.com", "JIRA_TOKEN_FILE": str(token_file)},
        clear=True,
    ):
        config = JiraConfig.from_env()
    assert config.personal_token == "file-token"


def test_from_env_missing_url():
    """Test that a missing URL raises ConfigurationError."""
    with patch.dict(os.environ, {"JIRA_PERSONAL_TOKEN": "token"}, clear=True):
        with pytest.raises(ConfigurationError, match="JIRA_URL"):
            JiraConfig.from_env()


def test_from_env_missing_token():
    """Test that a missing token raises ConfigurationError (a ValueError)."""
    with patch.dict(os.environ, {"JIRA_URL": "https://jira.example.com"}, clear=True):
        with pytest.raises(ValueError, match="Missing Jira token"):
            JiraConfig.from_env()


def test_read_token_file_ignores_placeholder(tmp_path):
    token_file = tmp_path / "token.txt"
    token_file.write_text("YOUR_TOKEN_HERE")
    assert read_token_file(str(token_file)) is None
    assert read_token_file(str(tmp_path / "missing.txt")) is None
    assert read_token_file(None) is None


def test_proxies():
    config = JiraConfig(
        url="https://jira.example.com",
        personal_token="token",
        https_proxy="http://proxy:8080",
    )
    assert config.proxies == {"https": "http://proxy:8080"}
