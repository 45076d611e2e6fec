"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import ConfigurationError
from ..utils.http import build_proxies, clean_token
from ..utils.logging import log_config_param

logger = logging.getLogger("jira-dashboard.jira.config")

DEFAULT_JQL = "ORDER BY updated DESC"
DEFAULT_MAX_RESULTS = 100


def read_token_file(path: str | None) -> str | None:
    """Read a token from a file, returning None if it is missing or a placeholder."""
    if not path:
        return None
    token_path = Path(path)
    if not token_path.is_file():
        logger.debug(f"Token file not found: {path}")
        return None
    token = clean_token(token_path.read_text(encoding="utf-8"))
    if not token or "YOUR_" in token:
        return None
    return token


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    The personal token is used for bearer and PAT-header authentication and
    as the password for basic-auth fallbacks. A token sent by the browser
    overrides it per request.
    """

    url: str  # Base URL for Jira
    personal_token: str  # Personal access token
    username: str | None = None  # Username for basic-auth fallbacks
    basic_auth_domain: str | None = None  # Domain appended to bare usernames
    jql: str = DEFAULT_JQL  # Default query when the caller sends none
    max_results: int = DEFAULT_MAX_RESULTS
    ssl_verify: bool = True
    http_proxy: str | None = None
    https_proxy: str | None = None
    no_proxy: str | None = None

    @property
    def base_url(self) -> str:
        """The Jira URL without a trailing slash."""
        return self.url.rstrip("/")

    @property
    def proxies(self) -> dict[str, str]:
        return build_proxies(self.http_proxy, self.https_proxy, self.no_proxy)

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ConfigurationError: If the Jira URL or token is missing
        """
        url = os.getenv("JIRA_URL") or os.getenv("JIRA_BASE_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ConfigurationError(error_msg)

        token = clean_token(
            os.getenv("JIRA_PERSONAL_TOKEN") or os.getenv("JIRA_API_TOKEN")
        ) or read_token_file(os.getenv("JIRA_TOKEN_FILE"))
        if not token:
            error_msg = "Missing Jira token: set JIRA_PERSONAL_TOKEN, JIRA_API_TOKEN or JIRA_TOKEN_FILE"
            raise ConfigurationError(error_msg)

        max_results_env = os.getenv("JIRA_MAX_RESULTS", "")
        max_results = (
            int(max_results_env) if max_results_env.isdigit() else DEFAULT_MAX_RESULTS
        )

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        config = cls(
            url=url,
            personal_token=token,
            username=os.getenv("JIRA_USERNAME") or None,
            basic_auth_domain=os.getenv("JIRA_BASIC_AUTH_DOMAIN") or None,
            jql=os.getenv("JIRA_JQL") or DEFAULT_JQL,
            max_results=max_results,
            ssl_verify=ssl_verify,
            http_proxy=os.getenv("JIRA_HTTP_PROXY", os.getenv("HTTP_PROXY")),
            https_proxy=os.getenv("JIRA_HTTPS_PROXY", os.getenv("HTTPS_PROXY")),
            no_proxy=os.getenv("JIRA_NO_PROXY", os.getenv("NO_PROXY")),
        )
        log_config_param(logger, "Jira", "URL", config.url)
        log_config_param(logger, "Jira", "token", config.personal_token, sensitive=True)
        log_config_param(logger, "Jira", "username", config.username)
        return config
