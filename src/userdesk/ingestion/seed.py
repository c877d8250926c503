"""One-shot seed load of the record store.

The loader performs a single GET and, on success, hands the response to
the store as a seed-replace action. It never retries and never falls back
to other data; a failed load leaves the store as it was.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from userdesk._api.users import fetch_users
from userdesk._transport import Transport
from userdesk.exceptions import UserDeskError
from userdesk.models.user import User
from userdesk.state.actions import SeedReplace
from userdesk.state.store import UserStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SeedResult:
    """Outcome of a seed load, delivered through the loader's task."""

    users: tuple[User, ...] = ()
    error: UserDeskError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SeedLoader:
    """Single-shot task that seeds a :class:`UserStore` from the remote API."""

    def __init__(self, store: UserStore, transport: Transport, url: str) -> None:
        self._store = store
        self._transport = transport
        self._url = url
        self._task: asyncio.Task[SeedResult] | None = None

    @property
    def task(self) -> asyncio.Task[SeedResult] | None:
        return self._task

    def start(self) -> asyncio.Task[SeedResult]:
        """Schedule the load. Later calls return the same task."""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self.run(), name="userdesk-seed-load")
        return self._task

    async def run(self) -> SeedResult:
        try:
            users = await fetch_users(self._transport, self._url)
        except UserDeskError as exc:
            _logger.warning("Seed load from %s failed: %s", self._url, exc)
            return SeedResult(error=exc)

        if self._store.closed:
            _logger.debug("Seed load finished after teardown; discarding %d users", len(users))
        else:
            _logger.debug("Seeding store with %d users", len(users))
        self._store.dispatch(SeedReplace(users=tuple(users)))
        return SeedResult(users=tuple(users))

    def cancel(self) -> None:
        """Cancel a load that has not completed yet."""
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def stop(self) -> None:
        """Cancel a pending load and wait for its task to finish."""
        task = self._task
        if task is None:
            return
        self.cancel()
        (outcome,) = await asyncio.gather(task, return_exceptions=True)
        if isinstance(outcome, BaseException) and not isinstance(outcome, asyncio.CancelledError):
            _logger.debug("Seed task ended with %r", outcome)
