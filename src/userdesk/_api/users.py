"""User list endpoint: GET /users."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from userdesk._redact import redact_for_log
from userdesk._transport import Transport
from userdesk.exceptions import UserDeskTransportError
from userdesk.models.user import User

_logger = logging.getLogger(__name__)

_USER_LIST = TypeAdapter(list[User])


async def fetch_users(transport: Transport, url: str) -> list[User]:
    """Fetch and parse the remote user list.

    The body is taken verbatim: no merge, no deduplication. Anything other
    than a JSON array of objects is a failed load.
    """
    decoded = await transport.get_json(url)
    _logger.debug("Users response from %s: %s", url, redact_for_log(decoded))

    if not isinstance(decoded, list):
        raise UserDeskTransportError(
            f"Expected a JSON array from {url}, got {type(decoded).__name__}",
            url=url,
        )
    if not all(isinstance(item, dict) for item in decoded):
        raise UserDeskTransportError(f"Non-object entry in user list from {url}", url=url)

    try:
        return _USER_LIST.validate_python(decoded)
    except ValidationError as exc:
        raise UserDeskTransportError(f"Malformed user list from {url}: {exc}", url=url) from exc
