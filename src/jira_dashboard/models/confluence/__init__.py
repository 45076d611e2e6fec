"""
Confluence data models for the dashboard.
"""

from .summary import ConfluenceSummaryResult

__all__ = ["ConfluenceSummaryResult"]
