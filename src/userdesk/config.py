"""Client configuration for userdesk."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from userdesk._constants import DEFAULT_REQUEST_TIMEOUT, USERS_URL
from userdesk.exceptions import UserDeskConfigError
from userdesk.state.policy import IdStrategy


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _parse_id_strategy(value: IdStrategy | str) -> IdStrategy:
    try:
        return IdStrategy(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(s.value for s in IdStrategy)
        raise UserDeskConfigError(f"id_strategy must be one of {choices}, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class UserDeskConfig:
    """Client configuration.

    Parameters
    ----------
    users_url : str
        Endpoint returning the JSON array used to seed the store.
    request_timeout : float
        Total timeout in seconds for the seed request.
    id_strategy : IdStrategy
        How ids are assigned to users inserted without one.
        ``"sequence"`` never reuses an id; ``"length"`` reproduces the
        ``len(users) + 1`` rule, which collides after deletions.
    autoload : bool
        Start the seed load as soon as the client is entered.
    """

    users_url: str = USERS_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    id_strategy: IdStrategy = IdStrategy.SEQUENCE
    autoload: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "id_strategy", _parse_id_strategy(self.id_strategy))
        if not self.users_url:
            raise UserDeskConfigError("users_url must be non-empty")
        if self.request_timeout <= 0:
            raise UserDeskConfigError(f"request_timeout must be positive, got {self.request_timeout}")

    @classmethod
    def from_env(cls, **overrides: Any) -> UserDeskConfig:
        """Create configuration from ``USERDESK_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        url = env.get("USERDESK_USERS_URL")
        if url is not None:
            config_kwargs["users_url"] = url.strip()

        timeout_env = env.get("USERDESK_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise UserDeskConfigError(f"USERDESK_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        strategy_env = env.get("USERDESK_ID_STRATEGY")
        if strategy_env is not None:
            config_kwargs["id_strategy"] = strategy_env

        if "autoload" not in overrides:
            config_kwargs["autoload"] = _env_bool(env.get("USERDESK_AUTOLOAD"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
