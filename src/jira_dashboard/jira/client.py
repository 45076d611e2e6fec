"""Base client module for Jira API interactions."""

import logging
from typing import Any

import requests
from atlassian import Jira
from requests import Response, Session

from ..exceptions import (
    AuthExhaustedError,
    NetworkError,
    NotFoundError,
    TrackerError,
    TrackerHttpError,
    TrackerTimeoutError,
)
from ..utils.http import clean_token, configure_session, create_session
from .config import JiraConfig
from .constants import STATUS_MESSAGES, TOKEN_REQUEST_TIMEOUT

logger = logging.getLogger("jira-dashboard.jira")


class JiraClient:
    """Base client for Jira API interactions."""

    config: JiraConfig
    session: Session

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ConfigurationError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()
        # Raw session for the search auth-strategy loop; headers and auth are set per attempt
        self.session = create_session("Jira", self.config.ssl_verify, self.config.proxies)

    def _jira_api(self, token: str | None = None) -> Jira:
        """Create an atlassian-python-api client using bearer auth.

        Args:
            token: Caller-supplied token; the configured token is used if None

        Returns:
            A Jira REST client for the configured base URL
        """
        jira = Jira(
            url=self.config.base_url,
            token=clean_token(token) or self.config.personal_token,
            verify_ssl=self.config.ssl_verify,
            timeout=TOKEN_REQUEST_TIMEOUT,
        )
        configure_session(
            jira._session, "Jira", self.config.ssl_verify, self.config.proxies
        )
        return jira

    def extract_error_message(
        self,
        response: Response | None = None,
        error: Exception | None = None,
    ) -> str:
        """Pick the most useful error message from a Jira response or exception.

        Args:
            response: The HTTP response, if one was received
            error: The exception raised, if any

        Returns:
            A human-readable error message
        """
        if response is None and isinstance(error, requests.RequestException):
            response = error.response

        if response is not None:
            body: Any = None
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                error_messages = body.get("errorMessages")
                if isinstance(error_messages, list) and error_messages:
                    return "; ".join(str(m) for m in error_messages)
                if body.get("message"):
                    return str(body["message"])
            status = response.status_code
            if status in STATUS_MESSAGES:
                return STATUS_MESSAGES[status]
            return f"HTTP {status}: {response.reason or 'Unknown error'}"

        if isinstance(error, requests.exceptions.Timeout):
            return "Request timed out. Please check your network connection."
        if isinstance(error, requests.exceptions.ConnectionError):
            return (
                f"Cannot connect to {self.config.base_url}. "
                "Please check your network connection and VPN status."
            )
        if error is not None:
            return str(error) or "Unknown error occurred"
        return "Unknown error occurred"

    def _translate_error(self, error: Exception, context: str) -> TrackerError:
        """Map a requests/atlassian exception onto the dashboard error taxonomy."""
        if isinstance(error, TrackerError):
            return error
        if isinstance(error, requests.exceptions.Timeout):
            return TrackerTimeoutError(
                f"{context}: {self.extract_error_message(error=error)}"
            )
        if isinstance(error, requests.exceptions.ConnectionError):
            return NetworkError(f"{context}: {self.extract_error_message(error=error)}")

        response = getattr(error, "response", None)
        status = getattr(response, "status_code", None)
        message = f"{context}: {self.extract_error_message(response, error)}"
        if status == 404:
            return NotFoundError(message)
        if status in (401, 403):
            return AuthExhaustedError(message, status_code=401, upstream_status=status)
        if isinstance(status, int):
            return TrackerHttpError(status, message)
        return TrackerError(message)
