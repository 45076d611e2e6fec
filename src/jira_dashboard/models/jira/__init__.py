"""
Jira data models for the dashboard.
"""

from .column import ColumnDefinition, parse_columns
from .search import JiraSearchResult

__all__ = ["ColumnDefinition", "JiraSearchResult", "parse_columns"]
