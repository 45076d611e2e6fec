"""
Column definition model.

A column maps a Jira field path (``jiraField``) to an output key (``key``)
and names the formatter used to render it.
"""

import logging
from typing import Any

from pydantic import ConfigDict, Field, ValidationError, field_validator

from ..base import ApiModel
from ..constants import COLUMN_TYPE_TEXT, COLUMN_TYPES

logger = logging.getLogger("jira-dashboard.models.column")


class ColumnDefinition(ApiModel):
    """A single dashboard column.

    Unknown keys (widths, display hints) are kept so the browser gets back
    exactly what it saved.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    output_key: str = Field(default="", alias="key")
    source_field_path: str = Field(default="", alias="jiraField")
    type: str = COLUMN_TYPE_TEXT
    label_to_check: str | None = Field(default=None, alias="labelToCheck")
    label: str | None = None

    @field_validator("output_key", "source_field_path", "type", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_valid(self) -> bool:
        """Whether the column can be applied (non-empty key and field path)."""
        return bool(self.output_key and self.source_field_path)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ColumnDefinition":
        if not isinstance(data, dict):
            return cls()
        return cls.model_validate(data)


def parse_columns(raw_columns: Any) -> list[ColumnDefinition]:
    """Parse a list of column dictionaries, dropping entries that fail validation.

    Invalid entries are not errors: they are logged and left out, so one bad
    column in a config file never disables the whole table.
    """
    if not isinstance(raw_columns, list):
        return []
    columns: list[ColumnDefinition] = []
    for raw in raw_columns:
        try:
            column = ColumnDefinition.from_api_response(raw)
        except ValidationError as e:
            logger.warning(f"Skipping malformed column definition {raw!r}: {e}")
            continue
        if column.type not in COLUMN_TYPES:
            logger.debug(
                f"Column {column.output_key!r} has unknown type {column.type!r}, "
                "rendering as text"
            )
        columns.append(column)
    return columns
