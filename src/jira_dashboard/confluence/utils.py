"""Utility functions for locating Confluence pages from Jira field values."""

import logging
import re
from typing import Any

logger = logging.getLogger("jira-dashboard.confluence.utils")

PAGE_ID_PATTERN = re.compile(r"pageId=(\d+)|pages/(\d+)")
SPACE_KEY_PATTERN = re.compile(r"/spaces/([^/?#]+)")
BASE_URL_MARKERS = ("/spaces/", "/pages/", "/display/")
URL_KEYS = ("url", "value", "href")


def extract_url(field_value: Any) -> str | None:
    """
    Pull a page URL out of a Jira field value.

    Jira stores Confluence links either as plain strings or as objects
    (remote links, URL custom fields) carrying the address in one of a few
    well-known members.

    Args:
        field_value: A string, a mapping, or anything else

    Returns:
        The URL, or None if the value holds nothing that looks like one
    """
    if not field_value:
        return None
    if isinstance(field_value, str):
        return field_value if field_value.startswith("http") else None
    if isinstance(field_value, dict):
        for key in URL_KEYS:
            candidate = field_value.get(key)
            if candidate:
                return str(candidate)
        return None
    candidate = str(field_value)
    return candidate if candidate.startswith("http") else None


def extract_page_id(url: str | None) -> str | None:
    """
    Extract the numeric page id from a Confluence URL.

    Handles both ``.../pages/123456789/Title`` and
    ``.../viewpage.action?pageId=123456789``.

    Args:
        url: The page URL

    Returns:
        The page id as a string, or None if the URL has none
    """
    if not url:
        return None
    match = PAGE_ID_PATTERN.search(url)
    if not match:
        return None
    return match.group(1) or match.group(2)


def extract_space_key(url: str | None) -> str | None:
    """Extract the space key from a ``/spaces/<KEY>/`` URL."""
    if not url:
        return None
    match = SPACE_KEY_PATTERN.search(url)
    return match.group(1) if match else None


def derive_base_url(url: str | None) -> str | None:
    """
    Derive the Confluence base URL from a page URL.

    Everything before the first ``/spaces/``, ``/pages/`` or ``/display/``
    segment is taken as the base, so
    ``https://example.atlassian.net/wiki/spaces/ENG/pages/1`` yields
    ``https://example.atlassian.net/wiki``.

    Args:
        url: The page URL

    Returns:
        The base URL, or None if no known segment was found
    """
    if not url:
        return None
    positions = [url.find(marker) for marker in BASE_URL_MARKERS]
    found = [pos for pos in positions if pos > 0]
    if not found:
        logger.debug(f"Could not derive a Confluence base URL from {url}")
        return None
    return url[: min(found)].rstrip("/")
