"""Text preprocessing for Confluence page bodies."""

from .confluence import clean_html, extract_summary

__all__ = ["clean_html", "extract_summary"]
