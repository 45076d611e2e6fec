"""Field projection: reshape raw Jira issues into dashboard rows.

Jira field values are heterogeneous (strings, numbers, user/status objects,
lists of versions or labels). The helpers here walk dotted field paths and
render each value as a display string according to its column type. None of
them raise on unexpected shapes: absence is data, not an error.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

from ..models.constants import (
    COLUMN_TYPE_BADGE,
    COLUMN_TYPE_CONFLUENCE,
    COLUMN_TYPE_DATE,
    COLUMN_TYPE_DATETIME,
    COLUMN_TYPE_LABEL_CHECK,
    COLUMN_TYPE_LINK,
    EMPTY_STRING,
    NO,
    UNKNOWN,
    YES,
)
from ..models.jira import ColumnDefinition
from ..utils.date import format_locale_date, format_locale_datetime
from .client import JiraClient

logger = logging.getLogger("jira-dashboard.jira.formatting")

FieldValue = str | int | float | bool | dict[str, Any] | list[Any] | None

LINK_KEYS = ("url", "value", "href")


def resolve_field(issue: dict[str, Any] | None, path: str | None) -> FieldValue:
    """
    Look up a dotted field path in an issue's ``fields`` bag.

    ``key`` resolves to the issue key itself. Digit segments index into
    lists, so ``components.0.name`` works.

    Args:
        issue: Raw issue payload
        path: Dotted path such as ``status.name``

    Returns:
        The value found, or None if any segment is missing
    """
    if not isinstance(issue, dict) or not path:
        return None
    if path == "key":
        return issue.get("key")

    value: Any = issue.get("fields")
    for part in path.split("."):
        if isinstance(value, dict):
            value = value.get(part)
        elif isinstance(value, list) and part.isascii() and part.isdecimal():
            index = int(part)
            value = value[index] if index < len(value) else None
        else:
            return None
        if value is None:
            return None
    return value


def to_display_string(value: FieldValue) -> str:
    """Render any field value as a plain string."""
    if value is None:
        return EMPTY_STRING
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, dict):
        inner = value.get("value")
        if isinstance(inner, str | int | float) and not isinstance(inner, bool):
            return to_display_string(inner)
        return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)
    if isinstance(value, list):
        return ",".join(to_display_string(item) for item in value)
    return str(value)


def _format_text(value: FieldValue) -> str:
    if isinstance(value, list):
        if not value:
            return EMPTY_STRING
        if isinstance(value[0], dict):
            return ", ".join(
                str(item["name"])
                if isinstance(item, dict) and item.get("name")
                else to_display_string(item)
                for item in value
            )
        return ", ".join(to_display_string(item) for item in value)
    if isinstance(value, dict):
        for key in ("displayName", "name"):
            if value.get(key):
                return str(value[key])
    return to_display_string(value)


def _format_badge(value: FieldValue) -> str:
    if isinstance(value, dict):
        for key in ("name", "displayName"):
            if value.get(key):
                return str(value[key])
    return to_display_string(value)


def _format_link(value: FieldValue) -> str:
    if isinstance(value, str) and value.startswith("http"):
        return value
    if isinstance(value, dict):
        for key in LINK_KEYS:
            if value.get(key):
                return str(value[key])
    return to_display_string(value)


def format_value(value: FieldValue, column_type: str | None = None) -> str:
    """
    Format a field value for display according to a column type.

    Args:
        value: The raw field value
        column_type: One of text, date, datetime, badge, link, confluence;
            anything else is treated as text

    Returns:
        The display string
    """
    if value is None:
        return UNKNOWN if column_type == COLUMN_TYPE_BADGE else EMPTY_STRING

    if column_type == COLUMN_TYPE_BADGE:
        return _format_badge(value)
    if column_type == COLUMN_TYPE_DATE:
        return format_locale_date(value)
    if column_type == COLUMN_TYPE_DATETIME:
        return format_locale_datetime(value)
    if column_type in (COLUMN_TYPE_LINK, COLUMN_TYPE_CONFLUENCE):
        return _format_link(value)
    return _format_text(value)


def check_label(labels: FieldValue, label_to_check: str) -> str:
    """
    Check whether a label is present, case-insensitively.

    Args:
        labels: A list of label strings/objects, or a single string
        label_to_check: The label to look for

    Returns:
        "Yes" or "No"
    """
    if not labels or not label_to_check:
        return NO
    wanted = label_to_check.lower()
    if isinstance(labels, list):
        for label in labels:
            if isinstance(label, dict):
                label_str = str(label.get("name") or to_display_string(label))
            else:
                label_str = to_display_string(label)
            if label_str.lower() == wanted:
                return YES
        return NO
    if isinstance(labels, str):
        return YES if wanted in labels.lower() else NO
    return NO


class FieldProjector:
    """Projects raw issues onto an ordered column schema."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def format_column(self, issue: dict[str, Any], column: ColumnDefinition) -> str:
        value = resolve_field(issue, column.source_field_path)
        if column.type == COLUMN_TYPE_LABEL_CHECK and column.label_to_check:
            return check_label(value, column.label_to_check)
        try:
            return format_value(value, column.type)
        except Exception as e:  # noqa: BLE001 - projection never raises
            logger.warning(
                f"Could not format {column.source_field_path} on {issue.get('key')}: {e}"
            )
            return to_display_string(value) if value is not None else EMPTY_STRING

    def project_issue(
        self, issue: dict[str, Any], columns: Iterable[ColumnDefinition]
    ) -> dict[str, str]:
        key = issue.get("key") or EMPTY_STRING
        row: dict[str, str] = {
            "url": f"{self.base_url}/browse/{key}",
            "key": str(key),
        }
        for column in columns:
            if not column.is_valid:
                continue
            row[column.output_key] = self.format_column(issue, column)
        return row

    def project(
        self, issues: Any, columns: Iterable[ColumnDefinition]
    ) -> list[dict[str, str]]:
        """
        Reshape issues into formatted rows.

        Args:
            issues: Raw issue payloads (anything else yields an empty list)
            columns: Ordered column definitions; invalid ones are skipped

        Returns:
            One row per issue with ``url``, ``key`` and each column's output key
        """
        if not isinstance(issues, list):
            logger.warning(f"Expected a list of issues, got {type(issues).__name__}")
            return []
        column_list = list(columns)
        return [
            self.project_issue(issue if isinstance(issue, dict) else {}, column_list)
            for issue in issues
        ]


class FormattingMixin(JiraClient):
    """Mixin that projects search results onto a column schema."""

    def format_issues(
        self, issues: Any, columns: Iterable[ColumnDefinition]
    ) -> list[dict[str, str]]:
        return FieldProjector(self.config.base_url).project(issues, columns)
