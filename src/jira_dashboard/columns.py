"""Load the dashboard column schema from JSON and persist user column choices."""

import json
import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .models.jira import ColumnDefinition, parse_columns

logger = logging.getLogger("jira-dashboard.columns")

DEFAULT_COLUMN_CONFIG_PATH = "config.json"
DEFAULT_USER_CONFIG_PATH = "user-config.json"

DEFAULT_COLUMNS: tuple[dict[str, str], ...] = (
    {"key": "summary", "jiraField": "summary", "type": "text", "label": "Summary"},
    {"key": "status", "jiraField": "status", "type": "badge", "label": "Status"},
    {"key": "assignee", "jiraField": "assignee", "type": "text", "label": "Assignee"},
    {"key": "priority", "jiraField": "priority", "type": "badge", "label": "Priority"},
    {"key": "issueType", "jiraField": "issuetype", "type": "text", "label": "Type"},
    {"key": "created", "jiraField": "created", "type": "date", "label": "Created"},
    {"key": "updated", "jiraField": "updated", "type": "date", "label": "Updated"},
)

DEFAULT_ALL_POSSIBLE_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "assignee",
    "reporter",
    "priority",
    "issuetype",
    "project",
    "created",
    "updated",
    "duedate",
    "labels",
    "components",
    "fixVersions",
    "resolution",
)

FALLBACK_FIELDS: tuple[str, ...] = ("key", "summary", "status")


@dataclass(frozen=True)
class ColumnSchema:
    """The backend column schema, fixed for the lifetime of the process."""

    default_columns: tuple[ColumnDefinition, ...]
    all_possible_fields: tuple[str, ...]
    jql: str | None = None

    @property
    def column_fields(self) -> list[str]:
        """Jira fields needed to render the default columns, in column order."""
        fields: list[str] = []
        for column in self.default_columns:
            if not column.is_valid:
                continue
            # Only the top-level field is requested; nested paths are walked locally
            top_level = column.source_field_path.split(".", 1)[0]
            if top_level not in fields:
                fields.append(top_level)
        return fields or list(FALLBACK_FIELDS)

    @property
    def broadest_fields(self) -> list[str]:
        """The widest field set: every known field, else the column fields."""
        if self.all_possible_fields:
            return list(self.all_possible_fields)
        return self.column_fields

    def to_backend_config(self) -> dict[str, Any]:
        return {
            "defaultColumns": [c.to_simplified_dict() for c in self.default_columns],
            "allPossibleFields": list(self.all_possible_fields),
        }


def _default_schema() -> ColumnSchema:
    return ColumnSchema(
        default_columns=tuple(parse_columns(list(DEFAULT_COLUMNS))),
        all_possible_fields=DEFAULT_ALL_POSSIBLE_FIELDS,
    )


def load_column_schema(path: str | Path | None) -> ColumnSchema:
    """Load the column schema from a JSON file.

    The file holds ``defaultColumns``, ``allPossibleFields`` and optionally
    ``jira.jql``/``jql``. A missing or unreadable file falls back to the
    built-in defaults.
    """
    if not path or not Path(path).is_file():
        logger.info(f"No column config at {path!r}, using built-in columns")
        return _default_schema()
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read column config {path}: {e}")
        return _default_schema()
    if not isinstance(data, dict):
        logger.error(f"Column config {path} is not a JSON object, using defaults")
        return _default_schema()

    columns = parse_columns(data.get("defaultColumns"))
    if not columns:
        logger.warning(f"Column config {path} has no defaultColumns, using defaults")
        columns = list(_default_schema().default_columns)

    raw_fields = data.get("allPossibleFields")
    all_fields = (
        tuple(str(f) for f in raw_fields if f)
        if isinstance(raw_fields, list)
        else DEFAULT_ALL_POSSIBLE_FIELDS
    )

    jira_section = data.get("jira") if isinstance(data.get("jira"), dict) else {}
    jql = data.get("jql") or jira_section.get("jql") or None

    logger.info(
        f"Loaded {len(columns)} columns and {len(all_fields)} fields from {path}"
    )
    return ColumnSchema(
        default_columns=tuple(columns), all_possible_fields=all_fields, jql=jql
    )


@dataclass
class ColumnConfigStore:
    """Backend column schema plus the user's saved column choice."""

    schema: ColumnSchema
    user_config_path: Path | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @classmethod
    def from_env(cls) -> "ColumnConfigStore":
        """Create the store from COLUMN_CONFIG_PATH and USER_CONFIG_PATH."""
        schema = load_column_schema(
            os.getenv("COLUMN_CONFIG_PATH", DEFAULT_COLUMN_CONFIG_PATH)
        )
        user_path = os.getenv("USER_CONFIG_PATH", DEFAULT_USER_CONFIG_PATH)
        return cls(schema=schema, user_config_path=Path(user_path) if user_path else None)

    def load_user_columns(self) -> list[dict[str, Any]] | None:
        """Return the saved user columns, or None if nothing was saved."""
        if not self.user_config_path or not self.user_config_path.is_file():
            return None
        try:
            data = json.loads(self.user_config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read user config {self.user_config_path}: {e}")
            return None
        columns = data.get("userColumns") if isinstance(data, dict) else None
        return columns if isinstance(columns, list) else None

    def save_user_columns(self, user_columns: list[Any]) -> None:
        """Persist the user's column subset/order.

        Raises:
            ValueError: If user_columns is not a list or no path is configured
            OSError: If the file cannot be written
        """
        if not isinstance(user_columns, list):
            raise ValueError("userColumns must be an array")
        if not self.user_config_path:
            raise ValueError("No user config path configured")
        payload = json.dumps({"userColumns": user_columns}, indent=2)
        with self._lock:
            self.user_config_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.user_config_path.with_suffix(".tmp")
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self.user_config_path)
        logger.info(
            f"Saved {len(user_columns)} user columns to {self.user_config_path}"
        )

    def table_config(self) -> dict[str, Any]:
        backend = self.schema.to_backend_config()
        user_columns = self.load_user_columns()
        backend["userColumns"] = (
            user_columns
            if user_columns is not None
            else [c.output_key for c in self.schema.default_columns if c.is_valid]
        )
        return backend
