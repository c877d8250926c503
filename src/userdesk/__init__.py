"""userdesk - Async Python client for a locally edited user list."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("userdesk")
except PackageNotFoundError:
    __version__ = "0+local"
from userdesk.client import UserDeskClient
from userdesk.config import UserDeskConfig
from userdesk.exceptions import (
    UserDeskConfigError,
    UserDeskEditorError,
    UserDeskError,
    UserDeskTransportError,
)
from userdesk.ingestion.seed import SeedLoader, SeedResult
from userdesk.models import Address, User
from userdesk.state.actions import ActionType, DeleteById, Insert, SeedReplace, UpdateById
from userdesk.state.policy import IdStrategy
from userdesk.state.reducer import UsersState, users_reducer
from userdesk.state.store import UserStore

__all__ = [
    "__version__",
    "ActionType",
    "Address",
    "DeleteById",
    "IdStrategy",
    "Insert",
    "SeedLoader",
    "SeedReplace",
    "SeedResult",
    "UpdateById",
    "User",
    "UserDeskClient",
    "UserDeskConfig",
    "UserDeskConfigError",
    "UserDeskEditorError",
    "UserDeskError",
    "UserDeskTransportError",
    "UserStore",
    "UsersState",
    "users_reducer",
]
