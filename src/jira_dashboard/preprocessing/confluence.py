"""Confluence storage-format preprocessing: markup cleanup and summary extraction."""

import logging
import re

from bs4 import BeautifulSoup

logger = logging.getLogger("jira-dashboard.preprocessing.confluence")

SUMMARY_FALLBACK_LENGTH = 500

# Ordered from most to least specific; the first match wins
SUMMARY_HEADING_PATTERN = re.compile(
    r"<h[23][^>]*>\s*Summary\s*</h[23]>(.*?)(?=<h[123]|$)",
    re.IGNORECASE | re.DOTALL,
)
SUMMARY_STRONG_PATTERN = re.compile(
    r"<p[^>]*>\s*<strong[^>]*>\s*Summary:?\s*</strong>(.*?)</p>",
    re.IGNORECASE | re.DOTALL,
)
FIRST_PARAGRAPH_PATTERN = re.compile(r"<p\b[^>]*>(.*?)</p>", re.IGNORECASE | re.DOTALL)
WHITESPACE_PATTERN = re.compile(r"\s+")


def clean_html(html: str | None) -> str:
    """
    Strip markup from an HTML fragment and normalise its whitespace.

    Entities (``&nbsp;``, ``&amp;`` and friends) are decoded by the parser.

    Args:
        html: The HTML fragment

    Returns:
        Plain text with runs of whitespace collapsed to single spaces
    """
    if not html:
        return ""
    text = BeautifulSoup(html, "html.parser").get_text(" ")
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def extract_summary(html: str | None) -> str | None:
    """
    Find the summary of a Confluence page.

    Looks, in order, for a ``Summary`` h2/h3 section, a paragraph led by a
    bold ``Summary:`` label, the first paragraph, and finally the opening
    characters of the whole page.

    Args:
        html: The page body in storage format

    Returns:
        The summary text, or None if the page has no text at all
    """
    if not html:
        return None

    for pattern in (
        SUMMARY_HEADING_PATTERN,
        SUMMARY_STRONG_PATTERN,
        FIRST_PARAGRAPH_PATTERN,
    ):
        match = pattern.search(html)
        if match:
            logger.debug(f"Summary matched {pattern.pattern[:24]!r}")
            return clean_html(match.group(1)) or None

    return clean_html(html)[:SUMMARY_FALLBACK_LENGTH] or None
