"""High-level async client tying the transport, store and seed loader together."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from userdesk._transport import HttpTransport, Transport
from userdesk.config import UserDeskConfig
from userdesk.exceptions import UserDeskError
from userdesk.ingestion.seed import SeedLoader, SeedResult
from userdesk.models.user import User
from userdesk.state.reducer import UsersState
from userdesk.state.store import UserStore
from userdesk.ui.editor import UserEditor

_logger = logging.getLogger(__name__)


class UserDeskClient:
    """Async facade over the user record store.

    Usage::

        async with UserDeskClient(UserDeskConfig()) as client:
            await client.load_users()
            client.add_user(User(name="Ada"))
    """

    def __init__(
        self,
        config: UserDeskConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        store: UserStore | None = None,
    ) -> None:
        self._config = config or UserDeskConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = None
        self._loader: SeedLoader | None = None
        self.store = store or UserStore(id_strategy=self._config.id_strategy)
        self.editor = UserEditor(self.store)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> UserDeskClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        if self._transport is None:
            self._transport = HttpTransport(self._http_session, timeout=self._config.request_timeout)
        if self._config.autoload:
            self.start_loading()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._loader is not None:
            await self._loader.stop()
        self.store.close()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Seed load
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise UserDeskError("Client not initialized. Use 'async with UserDeskClient(...) as client:'")
        return self._transport

    def start_loading(self) -> asyncio.Task[SeedResult]:
        """Start the one-time seed load (idempotent)."""
        if self._loader is None:
            self._loader = SeedLoader(self.store, self._require_transport(), self._config.users_url)
        return self._loader.start()

    async def load_users(self) -> SeedResult:
        """Wait for the seed load, starting it if needed."""
        return await self.start_loading()

    # ------------------------------------------------------------------
    # Store operations
    # ------------------------------------------------------------------

    @property
    def users(self) -> tuple[User, ...]:
        return self.store.users

    def add_user(self, user: User) -> UsersState:
        return self.store.insert(user)

    def edit_user(self, user: User) -> UsersState:
        return self.store.update(user)

    def delete_user(self, user_id: int | None) -> UsersState:
        return self.store.delete(user_id)
