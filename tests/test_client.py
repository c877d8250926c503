from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from userdesk.client import UserDeskClient
from userdesk.config import UserDeskConfig
from userdesk.exceptions import UserDeskError, UserDeskTransportError
from userdesk.models.user import User
from userdesk.state.policy import IdStrategy


@dataclass
class FakeUsersBackend:
    body: Any = field(default_factory=list)
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    async def get_json(self, url: str) -> Any:
        self.calls.append(url)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.body


def _client(backend: FakeUsersBackend, **config: Any) -> UserDeskClient:
    client = UserDeskClient(UserDeskConfig(users_url="https://example.test/users", **config))
    client._transport = backend  # type: ignore[assignment]
    return client


@pytest.mark.asyncio
async def test_autoload_seeds_on_enter(remote_users: list[dict[str, Any]]) -> None:
    backend = FakeUsersBackend(body=remote_users)

    async with _client(backend) as client:
        assert client.users == ()
        result = await client.load_users()

        assert result.ok
        assert [u.name for u in client.users] == ["Leanne Graham", "Ervin Howell"]
    assert backend.calls == ["https://example.test/users"]


@pytest.mark.asyncio
async def test_crud_after_seed(remote_users: list[dict[str, Any]]) -> None:
    async with _client(FakeUsersBackend(body=remote_users), autoload=False) as client:
        await client.load_users()

        client.add_user(User(name="Clementine"))
        client.edit_user(User(id=1, name="Leanne"))
        client.delete_user(2)

        assert [(u.id, u.name) for u in client.users] == [(1, "Leanne"), (3, "Clementine")]


@pytest.mark.asyncio
async def test_length_strategy_from_config(remote_users: list[dict[str, Any]]) -> None:
    async with _client(FakeUsersBackend(body=remote_users), id_strategy=IdStrategy.LENGTH) as client:
        await client.load_users()
        client.delete_user(1)

        client.add_user(User(name="C"))

        assert [u.id for u in client.users] == [2, 2]


@pytest.mark.asyncio
async def test_failed_seed_keeps_store_empty() -> None:
    backend = FakeUsersBackend(error=UserDeskTransportError("boom"))

    async with _client(backend) as client:
        result = await client.load_users()

        assert not result.ok
        assert client.users == ()


@pytest.mark.asyncio
async def test_exit_closes_store_and_cancels_pending_load(remote_users: list[dict[str, Any]]) -> None:
    client = _client(FakeUsersBackend(body=remote_users))

    async with client:
        task = client.start_loading()

    assert task.cancelled()
    assert client.store.closed
    assert client.users == ()


@pytest.mark.asyncio
async def test_load_outside_context_raises() -> None:
    client = UserDeskClient(UserDeskConfig(autoload=False))

    with pytest.raises(UserDeskError):
        await client.load_users()
