"""
Jira search result model.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel

logger = logging.getLogger("jira-dashboard.models.search")


class JiraSearchResult(ApiModel):
    """
    Model representing a Jira search (JQL) result.

    Issues are kept as raw dictionaries: their field bag is defined by the
    Jira instance and is reshaped later by the field projector.
    """

    total: int = 0
    issues: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: Unused

        Returns:
            A JiraSearchResult instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary data, returning default instance")
            return cls()

        issues_data = data.get("issues")
        if not isinstance(issues_data, list):
            logger.warning("Search response is missing an issues array")
            issues_data = []
        issues = [issue for issue in issues_data if isinstance(issue, dict)]

        raw_total = data.get("total")
        try:
            total = int(raw_total) if raw_total is not None else len(issues)
        except (ValueError, TypeError):
            total = len(issues)

        return cls(total=total, issues=issues)
