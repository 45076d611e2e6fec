"""Jira API module for the dashboard.

Combines search (with auth-strategy fallback), issue lookup, token
validation and row formatting into a single fetcher class.
"""

from .client import JiraClient
from .config import JiraConfig
from .formatting import FieldProjector, FormattingMixin
from .issues import IssuesMixin
from .search import SearchMixin
from .users import UsersMixin


class JiraFetcher(SearchMixin, IssuesMixin, UsersMixin, FormattingMixin):
    """
    The main Jira client class providing access to all dashboard operations.

    - SearchMixin: JQL search with authentication fallback
    - IssuesMixin: Single issue lookup
    - UsersMixin: Token validation
    - FormattingMixin: Projection of issues onto the column schema
    """

    pass


__all__ = ["FieldProjector", "JiraClient", "JiraConfig", "JiraFetcher"]
