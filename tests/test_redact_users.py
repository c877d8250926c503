from __future__ import annotations

from userdesk._redact import redact_for_log


def test_redact_for_log_masks_personal_fields() -> None:
    payload = [
        {
            "id": 1,
            "name": "Leanne Graham",
            "email": "Sincere@april.biz",
            "phone": "1-770-736-8031",
            "address": {"city": "Gwenborough", "zipcode": "92998-3874"},
        }
    ]

    redacted = redact_for_log(payload)

    assert redacted[0]["id"] == 1
    assert redacted[0]["name"] == "Leanne Graham"
    assert redacted[0]["email"] == "<redacted>"
    assert redacted[0]["phone"] == "<redacted>"
    assert redacted[0]["address"] == "<redacted>"


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_caps_long_lists() -> None:
    redacted = redact_for_log(list(range(30)), max_items=5)

    assert redacted == [0, 1, 2, 3, 4, "<25 more>"]
