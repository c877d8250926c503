"""Data models for userdesk records."""

from userdesk.models.user import Address, User

__all__ = [
    "Address",
    "User",
]
