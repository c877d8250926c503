"""Custom exception hierarchy for userdesk."""

from __future__ import annotations


class UserDeskError(Exception):
    """Base exception for all userdesk errors."""


class UserDeskConfigError(UserDeskError):
    """Invalid or missing configuration."""


class UserDeskTransportError(UserDeskError):
    """Seed load failed (network, non-200, invalid JSON, unexpected shape)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class UserDeskEditorError(UserDeskError):
    """The user editor was driven out of order (e.g. save while closed)."""
