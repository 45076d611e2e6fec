"""Request-scoped helpers: the application context and caller tokens."""

from __future__ import annotations

import logging

from starlette.requests import Request

from jira_dashboard.servers.context import AppContext
from jira_dashboard.utils.http import clean_token
from jira_dashboard.utils.logging import mask_sensitive

logger = logging.getLogger("jira-dashboard.servers.dependencies")

JIRA_TOKEN_HEADER = "x-jira-token"
CONFLUENCE_TOKEN_HEADER = "x-confluence-token"


def get_app_context(request: Request) -> AppContext:
    """Return the AppContext stored on the application at startup."""
    return request.app.state.context


def _header_token(request: Request, header: str) -> str | None:
    token = clean_token(request.headers.get(header))
    if token:
        logger.debug(
            f"{request.url.path}: {header} provided ({mask_sensitive(token)})"
        )
    return token or None


def get_jira_token(request: Request) -> str | None:
    """Extract the caller's Jira token from the ``x-jira-token`` header."""
    return _header_token(request, JIRA_TOKEN_HEADER)


def get_confluence_token(request: Request) -> str | None:
    """Extract the caller's Confluence token.

    ``x-confluence-token`` wins; ``x-jira-token`` is accepted as a fallback
    since both products often share a single Data Center token.
    """
    return _header_token(request, CONFLUENCE_TOKEN_HEADER) or get_jira_token(
        request
    )
