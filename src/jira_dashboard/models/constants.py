"""
Constants and default values used when rendering dashboard rows.
"""

EMPTY_STRING = ""
UNKNOWN = "Unknown"
YES = "Yes"
NO = "No"

# Column types understood by the field projector
COLUMN_TYPE_TEXT = "text"
COLUMN_TYPE_DATE = "date"
COLUMN_TYPE_DATETIME = "datetime"
COLUMN_TYPE_BADGE = "badge"
COLUMN_TYPE_LINK = "link"
COLUMN_TYPE_CONFLUENCE = "confluence"
COLUMN_TYPE_LABEL_CHECK = "labelCheck"

COLUMN_TYPES = frozenset(
    {
        COLUMN_TYPE_TEXT,
        COLUMN_TYPE_DATE,
        COLUMN_TYPE_DATETIME,
        COLUMN_TYPE_BADGE,
        COLUMN_TYPE_LINK,
        COLUMN_TYPE_CONFLUENCE,
        COLUMN_TYPE_LABEL_CHECK,
    }
)
