"""Module for Jira user operations."""

import logging
from typing import Any

import requests

from ..exceptions import AuthExhaustedError
from ..utils.http import clean_token
from ..utils.logging import mask_sensitive
from .client import JiraClient

logger = logging.getLogger("jira-dashboard.jira.users")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def test_token(self, token: str, email: str | None = None) -> dict[str, Any]:
        """
        Validate a bearer token by asking Jira who it belongs to.

        Args:
            token: The token to validate
            email: Optional email to compare against the token's user

        Returns:
            Dictionary with ``user`` (name, displayName, emailAddress) and,
            when an email was given, ``emailMatches``

        Raises:
            ValueError: If token is empty
            AuthExhaustedError: If Jira rejected the token
            TrackerError: For other failures
        """
        cleaned = clean_token(token)
        if not cleaned:
            raise ValueError("Token is required")

        logger.info(f"Testing Jira token {mask_sensitive(cleaned)}")
        try:
            myself = self._jira_api(cleaned).myself()
        except requests.RequestException as e:
            error = self._translate_error(e, "Token validation failed")
            logger.warning(
                f"Token validation failed (upstream status={error.upstream_status}): {error}"
            )
            raise error from e

        if not isinstance(myself, dict):
            # atlassian-python-api returns None when the body is not JSON,
            # which means Jira served its login page instead
            raise AuthExhaustedError(
                "Token validation failed: Jira did not return user details for this token",
                status_code=401,
            )

        user = {
            "name": myself.get("name") or myself.get("accountId"),
            "displayName": myself.get("displayName"),
            "emailAddress": myself.get("emailAddress"),
        }
        result: dict[str, Any] = {"user": user}
        if email:
            actual = (user["emailAddress"] or "").strip().lower()
            result["emailMatches"] = actual == email.strip().lower()
        logger.info(f"Token belongs to {user['displayName'] or user['name']}")
        return result
