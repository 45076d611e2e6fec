"""Confluence API module for the dashboard's page summaries."""

from .client import ConfluenceClient
from .config import ConfluenceConfig
from .summary import SummaryMixin


class ConfluenceFetcher(SummaryMixin):
    """Main entry point for Confluence operations."""

    pass


__all__ = ["ConfluenceClient", "ConfluenceConfig", "ConfluenceFetcher"]
