"""In-memory record store.

This is the only component allowed to change the user collection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from userdesk.models.user import User
from userdesk.state.actions import Action, DeleteById, Insert, SeedReplace, UpdateById
from userdesk.state.policy import IdStrategy
from userdesk.state.reducer import EMPTY_STATE, UsersState, users_reducer

_logger = logging.getLogger(__name__)

Reducer = Callable[..., UsersState]
Listener = Callable[[UsersState], None]


class UserStore:
    """Owned, injectable container for the user collection.

    Each dispatch runs the reducer to completion and swaps in the new
    snapshot. Subscribers are told only when the snapshot object changed.

    Usage::

        store = UserStore()
        unsubscribe = store.subscribe(render)
        store.insert(User(name="Ada"))
    """

    def __init__(
        self,
        *,
        reducer: Reducer = users_reducer,
        id_strategy: IdStrategy = IdStrategy.SEQUENCE,
        initial: UsersState = EMPTY_STATE,
    ) -> None:
        self._reducer = reducer
        self._id_strategy = id_strategy
        self._state = initial
        self._listeners: list[Listener] = []
        self._closed = False

    @property
    def state(self) -> UsersState:
        return self._state

    @property
    def users(self) -> tuple[User, ...]:
        return self._state.users

    @property
    def closed(self) -> bool:
        return self._closed

    def dispatch(self, action: Action) -> UsersState:
        """Run *action* through the reducer and publish the result."""
        if self._closed:
            _logger.debug("Store closed; discarding %s", action.type)
            return self._state

        previous = self._state
        self._state = self._reducer(previous, action, id_strategy=self._id_strategy)
        if self._state is previous:
            _logger.debug("%s left the store unchanged", action.type)
            return self._state

        _logger.debug("%s -> %d users", action.type, len(self._state.users))
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                _logger.exception("Store listener %r failed", listener)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Stop accepting actions. Later deliveries are dropped silently."""
        self._closed = True
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Named operations
    # ------------------------------------------------------------------

    def seed_replace(self, users: Iterable[User]) -> UsersState:
        return self.dispatch(SeedReplace(users=tuple(users)))

    def insert(self, user: User) -> UsersState:
        return self.dispatch(Insert(user=user))

    def update(self, user: User) -> UsersState:
        return self.dispatch(UpdateById(user=user))

    def delete(self, user_id: int | None) -> UsersState:
        return self.dispatch(DeleteById(user_id=user_id))
