"""Module for Jira issue operations."""

import logging
import time
from typing import Any

import requests

from ..exceptions import MalformedResponseError
from .client import JiraClient

logger = logging.getLogger("jira-dashboard.jira.issues")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue_details(
        self, issue_key: str, token: str | None = None
    ) -> dict[str, Any]:
        """
        Get a single issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            token: Optional caller token; the configured token is used otherwise

        Returns:
            The raw issue payload

        Raises:
            ValueError: If issue_key is empty
            NotFoundError: If the issue does not exist
            TrackerHttpError: For other HTTP failures
            NetworkError: If Jira could not be reached
            TrackerTimeoutError: If the request timed out
        """
        if not issue_key:
            raise ValueError("Issue key is required")

        started = time.monotonic()
        try:
            issue = self._jira_api(token).get_issue(issue_key)
        except requests.RequestException as e:
            error = self._translate_error(e, f"Failed to fetch issue details for {issue_key}")
            logger.error(
                f"Error fetching issue {issue_key} after {time.monotonic() - started:.2f}s "
                f"(upstream status={error.upstream_status}): {error}"
            )
            raise error from e

        if not isinstance(issue, dict):
            msg = f"Unexpected issue payload type for {issue_key}: {type(issue).__name__}"
            logger.error(msg)
            raise MalformedResponseError(f"Failed to fetch issue details: {msg}")

        logger.debug(f"Fetched issue {issue_key} in {time.monotonic() - started:.2f}s")
        return issue
