"""Tabular projection of the user collection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from userdesk.models.user import User

TABLE_COLUMNS: tuple[str, ...] = ("ID", "Name", "Email", "Phone", "City", "Zip Code")


def table_row(user: User) -> tuple[str, ...]:
    return (
        "" if user.id is None else str(user.id),
        user.name,
        user.email,
        user.phone,
        user.address.city,
        user.address.zipcode,
    )


def table_rows(users: Iterable[User]) -> Iterator[tuple[str, ...]]:
    """Yield one display row per user, in store order."""
    for user in users:
        yield table_row(user)


def render_table(users: Iterable[User]) -> str:
    """Render users as a fixed-width text table."""
    rows = [TABLE_COLUMNS, *table_rows(users)]
    widths = [max(len(row[i]) for row in rows) for i in range(len(TABLE_COLUMNS))]
    lines = ["  ".join(cell.ljust(width) for cell, width in zip(row, widths, strict=True)).rstrip() for row in rows]
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)
