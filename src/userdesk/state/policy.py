"""Id assignment policy for locally inserted users.

This module intentionally knows nothing about actions or subscribers; the
reducer asks it for the next id and nothing else.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from userdesk.models.user import User


class IdStrategy(StrEnum):
    """How the store picks an id for a user inserted without one."""

    SEQUENCE = "sequence"
    """``max(highest id ever seen, highest id present) + 1``."""
    LENGTH = "length"
    """``len(users) + 1``. Collides with surviving ids after a delete."""


def highest_id(users: Iterable[User]) -> int:
    """Return the largest id in *users*, or ``0`` when none carry one."""
    return max((user.id for user in users if user.id is not None), default=0)


def next_user_id(strategy: IdStrategy, users: tuple[User, ...], last_id: int) -> int:
    """Pick the id for the next inserted user.

    Both strategies agree while the collection has only ever grown from
    empty through id-less inserts.
    """
    if strategy == IdStrategy.LENGTH:
        return len(users) + 1
    return max(last_id, highest_id(users)) + 1
