from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def remote_users() -> list[dict[str, Any]]:
    """Two records shaped like the public /users endpoint."""
    return [
        {
            "id": 1,
            "name": "Leanne Graham",
            "username": "Bret",
            "email": "Sincere@april.biz",
            "address": {
                "street": "Kulas Light",
                "suite": "Apt. 556",
                "city": "Gwenborough",
                "zipcode": "92998-3874",
                "geo": {"lat": "-37.3159", "lng": "81.1496"},
            },
            "phone": "1-770-736-8031 x56442",
            "website": "hildegard.org",
        },
        {
            "id": 2,
            "name": "Ervin Howell",
            "username": "Antonette",
            "email": "Shanna@melissa.tv",
            "address": {"city": "Wisokyburgh", "zipcode": "90566-7771"},
            "phone": "010-692-6593 x09125",
            "website": "anastasia.net",
        },
    ]
