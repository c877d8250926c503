"""User record model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from userdesk.ingestion.normalize import safe_int, safe_str


class Address(BaseModel):
    """Postal address nested under a user."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    city: str = ""
    zipcode: str = ""

    @field_validator("city", "zipcode", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return safe_str(value)


class User(BaseModel):
    """A user record as held by the record store.

    Fields mirror the ``/users`` response of the remote API. Text fields
    carry no format constraint; the remote value is kept as-is.

    Parameters
    ----------
    id : int or None
        Record id. ``None`` until the store assigns one on insert.
    name : str
        Display name.
    email : str
        E-mail address (not validated).
    phone : str
        Phone number (not validated).
    address : Address
        City and zip code.
    raw : dict
        Original remote object, including fields this model ignores.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    id: int | None = None
    name: str = ""
    email: str = ""
    phone: str = ""
    address: Address = Field(default_factory=Address)

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Full API response dict for access to additional fields."""

    @model_validator(mode="before")
    @classmethod
    def _ensure_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        merged = dict(values)
        merged.setdefault("raw", values)
        if merged.get("address") is None:
            merged.pop("address", None)
        return merged

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return safe_str(value)

    def with_id(self, user_id: int) -> User:
        """Return a copy carrying *user_id*."""
        return self.model_copy(update={"id": user_id})
