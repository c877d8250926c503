"""Pure reducer over immutable user snapshots.

Transitions never mutate the incoming state. A transition that changes
nothing returns the very same snapshot object, so consumers can detect
changes by identity.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from userdesk.models.user import User
from userdesk.state.actions import Action, DeleteById, Insert, SeedReplace, UpdateById
from userdesk.state.policy import IdStrategy, highest_id, next_user_id


class UsersState(BaseModel):
    """Immutable snapshot of the record store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    users: tuple[User, ...] = ()
    last_id: int = 0
    """Highest id ever observed, including ids since deleted."""


EMPTY_STATE = UsersState()


def users_reducer(
    state: UsersState,
    action: Action,
    *,
    id_strategy: IdStrategy = IdStrategy.SEQUENCE,
) -> UsersState:
    """Apply *action* to *state* and return the resulting snapshot."""
    if isinstance(action, SeedReplace):
        users = tuple(action.users)
        return UsersState(users=users, last_id=max(state.last_id, highest_id(users)))

    if isinstance(action, Insert):
        user = action.user
        if user.id is None:
            user = user.with_id(next_user_id(id_strategy, state.users, state.last_id))
        # No uniqueness check: an explicit id is appended as given.
        return UsersState(users=(*state.users, user), last_id=max(state.last_id, user.id or 0))

    if isinstance(action, UpdateById):
        target = action.user.id
        if target is None or not any(u.id == target for u in state.users):
            return state
        # Every element with a matching id is replaced.
        users = tuple(action.user if u.id == target else u for u in state.users)
        return state.model_copy(update={"users": users})

    if isinstance(action, DeleteById):
        users = tuple(u for u in state.users if u.id != action.user_id)
        if len(users) == len(state.users):
            return state
        return state.model_copy(update={"users": users})

    return state
