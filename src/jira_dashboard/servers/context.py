from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jira_dashboard.columns import ColumnConfigStore
    from jira_dashboard.confluence import ConfluenceFetcher
    from jira_dashboard.confluence.config import ConfluenceConfig
    from jira_dashboard.jira import JiraFetcher
    from jira_dashboard.jira.config import JiraConfig


@dataclass(frozen=True)
class AppContext:
    """
    Context holding the configuration and fetchers built once at startup.
    Stored on ``app.state.context`` and shared by every request.
    """

    jira_config: JiraConfig
    confluence_config: ConfluenceConfig
    columns: ColumnConfigStore
    jira: JiraFetcher
    confluence: ConfluenceFetcher
    dev_mode: bool = False
