"""Starlette server for the Jira dashboard."""

from .context import AppContext
from .main import create_app

__all__ = ["AppContext", "create_app"]
