from __future__ import annotations

import pytest

from userdesk.exceptions import UserDeskEditorError
from userdesk.models.user import Address, User
from userdesk.state.store import UserStore
from userdesk.ui.editor import UserEditor
from userdesk.ui.table import TABLE_COLUMNS, render_table, table_rows


@pytest.fixture
def store() -> UserStore:
    s = UserStore()
    s.seed_replace(
        [
            User.model_validate(
                {
                    "id": 1,
                    "name": "Leanne Graham",
                    "email": "Sincere@april.biz",
                    "phone": "1-770-736-8031",
                    "address": {"city": "Gwenborough", "zipcode": "92998-3874"},
                    "username": "Bret",
                }
            )
        ]
    )
    return s


class TestUserEditor:
    def test_open_without_user_is_add_mode(self, store: UserStore) -> None:
        editor = UserEditor(store)

        draft = editor.open()

        assert editor.is_open
        assert not editor.edit_mode
        assert editor.title == "Add User"
        assert draft.id is None and draft.name == ""

    def test_open_with_user_is_edit_mode(self, store: UserStore) -> None:
        editor = UserEditor(store)

        draft = editor.open(store.users[0])

        assert editor.edit_mode
        assert editor.title == "Edit User"
        assert draft.city == "Gwenborough"

    def test_user_without_id_opens_blank_add_form(self, store: UserStore) -> None:
        editor = UserEditor(store)

        draft = editor.open(User(name="ghost"))

        assert not editor.edit_mode
        assert draft.name == ""

    def test_save_in_add_mode_inserts_with_assigned_id(self, store: UserStore) -> None:
        editor = UserEditor(store)
        editor.open()
        editor.set_field("name", "Ervin Howell")
        editor.set_field("city", "Wisokyburgh")

        saved = editor.save()

        assert saved.id == 2
        assert store.users[-1] == saved
        assert saved.address == Address(city="Wisokyburgh", zipcode="")
        assert not editor.is_open

    def test_save_in_edit_mode_updates_in_place(self, store: UserStore) -> None:
        editor = UserEditor(store)
        editor.open(store.users[0])
        editor.set_field("email", "leanne@example.org")

        editor.save()

        assert len(store.users) == 1
        assert store.users[0].email == "leanne@example.org"
        assert store.users[0].name == "Leanne Graham"
        assert store.users[0].raw["username"] == "Bret"

    def test_draft_is_not_committed_until_save(self, store: UserStore) -> None:
        editor = UserEditor(store)
        editor.open(store.users[0])
        editor.set_field("name", "Changed")

        editor.close()

        assert store.users[0].name == "Leanne Graham"
        assert not editor.is_open

    def test_set_field_rejects_unknown_field(self, store: UserStore) -> None:
        editor = UserEditor(store)
        editor.open()

        with pytest.raises(UserDeskEditorError):
            editor.set_field("id", "5")

    def test_save_while_closed_raises(self, store: UserStore) -> None:
        with pytest.raises(UserDeskEditorError):
            UserEditor(store).save()


    def test_save_validates_draft_values_and_refreshes_raw(self, store: UserStore) -> None:
        editor = UserEditor(store)
        editor.open(store.users[0])
        editor.set_field("email", "leanne@example.org")
        editor.set_field("zipcode", 12345)  # type: ignore[arg-type]

        saved = editor.save()

        assert saved.address.zipcode == "12345"
        assert saved.raw["email"] == "leanne@example.org"
        assert saved.raw["address"]["city"] == "Gwenborough"
        assert saved.raw["username"] == "Bret"


class TestTable:
    def test_rows_follow_store_order(self, store: UserStore) -> None:
        store.insert(User(name="B"))

        rows = list(table_rows(store.users))

        assert rows[0] == ("1", "Leanne Graham", "Sincere@april.biz", "1-770-736-8031", "Gwenborough", "92998-3874")
        assert rows[1] == ("2", "B", "", "", "", "")

    def test_render_table_has_header(self, store: UserStore) -> None:
        text = render_table(store.users)

        lines = text.splitlines()
        assert lines[0].split() == ["ID", "Name", "Email", "Phone", "City", "Zip", "Code"]
        assert set(lines[1]) <= {"-", " "}
        assert "Gwenborough" in lines[2]
        assert len(TABLE_COLUMNS) == 6
