"""Store actions.

Every mutation of the record store is expressed as one of these frozen
actions. Only :func:`userdesk.state.reducer.users_reducer` interprets them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from userdesk.models.user import User


class ActionType(StrEnum):
    FETCH_USERS = "FETCH_USERS"
    ADD_USER = "ADD_USER"
    EDIT_USER = "EDIT_USER"
    DELETE_USER = "DELETE_USER"


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SeedReplace(_Action):
    """Replace the whole collection with *users* (seed-replace)."""

    type: Literal[ActionType.FETCH_USERS] = ActionType.FETCH_USERS
    users: tuple[User, ...] = ()


class Insert(_Action):
    """Append *user*, assigning an id when it has none (insert)."""

    type: Literal[ActionType.ADD_USER] = ActionType.ADD_USER
    user: User


class UpdateById(_Action):
    """Replace the users whose id equals ``user.id`` (update-by-id)."""

    type: Literal[ActionType.EDIT_USER] = ActionType.EDIT_USER
    user: User


class DeleteById(_Action):
    """Remove the users whose id equals *user_id* (delete-by-id)."""

    type: Literal[ActionType.DELETE_USER] = ActionType.DELETE_USER
    user_id: int | None


Action = SeedReplace | Insert | UpdateById | DeleteById
