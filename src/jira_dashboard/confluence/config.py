"""Configuration module for the Confluence summary client."""

import logging
import os
from dataclasses import dataclass

from ..jira.config import read_token_file
from ..utils.http import build_proxies, clean_token
from ..utils.logging import log_config_param

logger = logging.getLogger("jira-dashboard.confluence.config")


@dataclass(frozen=True)
class ConfluenceConfig:
    """Confluence API configuration.

    Every field is optional: without a URL the wiki base is derived from the
    page link being summarised, and without a token the caller must send one.
    """

    url: str | None = None  # Base URL, e.g. https://example.atlassian.net/wiki
    personal_token: str | None = None  # Fallback bearer token
    ssl_verify: bool = True
    http_proxy: str | None = None
    https_proxy: str | None = None
    no_proxy: str | None = None

    @property
    def base_url(self) -> str | None:
        return self.url.rstrip("/") if self.url else None

    @property
    def proxies(self) -> dict[str, str]:
        return build_proxies(self.http_proxy, self.https_proxy, self.no_proxy)

    @classmethod
    def from_env(cls) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        Returns:
            ConfluenceConfig with values from environment variables
        """
        token = clean_token(os.getenv("CONFLUENCE_PERSONAL_TOKEN")) or read_token_file(
            os.getenv("CONFLUENCE_TOKEN_FILE")
        )

        ssl_verify_env = os.getenv("CONFLUENCE_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        config = cls(
            url=os.getenv("CONFLUENCE_URL") or None,
            personal_token=token or None,
            ssl_verify=ssl_verify,
            http_proxy=os.getenv("CONFLUENCE_HTTP_PROXY", os.getenv("HTTP_PROXY")),
            https_proxy=os.getenv("CONFLUENCE_HTTPS_PROXY", os.getenv("HTTPS_PROXY")),
            no_proxy=os.getenv("CONFLUENCE_NO_PROXY", os.getenv("NO_PROXY")),
        )
        log_config_param(logger, "Confluence", "URL", config.url)
        log_config_param(
            logger, "Confluence", "token", config.personal_token, sensitive=True
        )
        return config
