"""Headless presentation helpers: table projection and the user editor."""

from userdesk.ui.editor import UserDraft, UserEditor
from userdesk.ui.table import TABLE_COLUMNS, table_rows

__all__ = [
    "TABLE_COLUMNS",
    "UserDraft",
    "UserEditor",
    "table_rows",
]
