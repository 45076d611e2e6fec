"""Base client module for Confluence API interactions."""

import logging

from atlassian import Confluence

from ..utils.http import clean_token, configure_session
from .config import ConfluenceConfig

logger = logging.getLogger("jira-dashboard.confluence")

PAGE_REQUEST_TIMEOUT = 10


class ConfluenceClient:
    """Base client for Confluence API interactions.

    Unlike the Jira client, no connection is made up front: the base URL may
    only be known once a page link arrives, and each request may carry its
    own token.
    """

    config: ConfluenceConfig

    def __init__(self, config: ConfluenceConfig | None = None) -> None:
        """Initialize the Confluence client with given or environment config.

        Args:
            config: Configuration for Confluence client. If None, will load from
                environment.
        """
        self.config = config or ConfluenceConfig.from_env()

    def resolve_token(self, token: str | None = None) -> str | None:
        """Return the caller token, falling back to the configured one."""
        return clean_token(token) or self.config.personal_token or None

    def _confluence_api(self, base_url: str, token: str) -> Confluence:
        """Create an atlassian-python-api client using bearer auth.

        Args:
            base_url: The Confluence base URL (including any ``/wiki`` prefix)
            token: The bearer token

        Returns:
            A Confluence REST client
        """
        confluence = Confluence(
            url=base_url,
            token=token,
            verify_ssl=self.config.ssl_verify,
            timeout=PAGE_REQUEST_TIMEOUT,
        )
        configure_session(
            confluence._session,
            "Confluence",
            self.config.ssl_verify,
            self.config.proxies,
        )
        return confluence
