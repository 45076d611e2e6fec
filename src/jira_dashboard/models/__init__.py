"""
Pydantic models for the Jira dashboard.

Re-exports the Jira and Confluence models for convenient importing.
"""

from .base import ApiModel
from .confluence import ConfluenceSummaryResult
from .jira import ColumnDefinition, JiraSearchResult, parse_columns

__all__ = [
    "ApiModel",
    "ColumnDefinition",
    "ConfluenceSummaryResult",
    "JiraSearchResult",
    "parse_columns",
]
