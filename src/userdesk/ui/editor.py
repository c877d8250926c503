"""Modal-style user editor.

The editor owns the draft buffer: edits accumulate in a mutable
:class:`UserDraft` and reach the store only when :meth:`UserEditor.save`
is called.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from userdesk.exceptions import UserDeskEditorError
from userdesk.models.user import User
from userdesk.state.store import UserStore

_logger = logging.getLogger(__name__)

EDITABLE_FIELDS: frozenset[str] = frozenset({"name", "email", "phone", "city", "zipcode"})


@dataclasses.dataclass
class UserDraft:
    """Uncommitted form state for one user."""

    id: int | None = None
    name: str = ""
    email: str = ""
    phone: str = ""
    city: str = ""
    zipcode: str = ""
    source: User | None = None

    @classmethod
    def from_user(cls, user: User) -> UserDraft:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            city=user.address.city,
            zipcode=user.address.zipcode,
            source=user,
        )

    def to_user(self) -> User:
        """Build the user to dispatch, keeping the source record's extras."""
        values: dict[str, Any] = dict(self.source.raw) if self.source is not None else {}
        address = values.get("address")
        values.update(
            id=self.id,
            name=self.name,
            email=self.email,
            phone=self.phone,
            address={**(address if isinstance(address, dict) else {}), "city": self.city, "zipcode": self.zipcode},
        )
        return User.model_validate(values)


class UserEditor:
    """Add/edit dialog bound to a :class:`UserStore`."""

    def __init__(self, store: UserStore) -> None:
        self._store = store
        self._draft: UserDraft | None = None
        self._edit_mode = False

    @property
    def is_open(self) -> bool:
        return self._draft is not None

    @property
    def edit_mode(self) -> bool:
        return self._edit_mode

    @property
    def title(self) -> str:
        return "Edit User" if self._edit_mode else "Add User"

    @property
    def draft(self) -> UserDraft:
        if self._draft is None:
            raise UserDeskEditorError("Editor is not open")
        return self._draft

    def open(self, user: User | None = None) -> UserDraft:
        """Show the editor; a user with an id opens in edit mode."""
        self._edit_mode = user is not None and user.id is not None
        self._draft = UserDraft.from_user(user) if user is not None and self._edit_mode else UserDraft()
        return self._draft

    def set_field(self, name: str, value: str) -> None:
        if name not in EDITABLE_FIELDS:
            raise UserDeskEditorError(f"Unknown field {name!r}; expected one of {sorted(EDITABLE_FIELDS)}")
        setattr(self.draft, name, value)

    def save(self) -> User:
        """Commit the draft to the store and close the editor."""
        draft = self.draft
        if self._edit_mode:
            user = draft.to_user()
            self._store.update(user)
        else:
            draft.id = None
            previous = self._store.state
            state = self._store.insert(draft.to_user())
            # The store assigns the id; a closed store leaves it unset.
            user = state.users[-1] if state is not previous else draft.to_user()
        _logger.debug("Saved user %s (%s)", user.id, "edit" if self._edit_mode else "add")
        self.close()
        return user

    def close(self) -> None:
        """Hide the editor and drop the draft."""
        self._draft = None
        self._edit_mode = False
