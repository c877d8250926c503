"""HTTP transport for the remote users API."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from userdesk._constants import USER_AGENT
from userdesk.exceptions import UserDeskTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the API modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, url: str) -> Any:
        ...


class HttpTransport:
    """Plain JSON-over-HTTP transport backed by an aiohttp session."""

    def __init__(self, http_session: aiohttp.ClientSession, *, timeout: float) -> None:
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def get_json(self, url: str) -> Any:
        """GET *url* and return the decoded JSON body.

        Raises :class:`UserDeskTransportError` for network failures,
        non-200 statuses and bodies that are not JSON.
        """
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                body = await resp.read()
                if resp.status != 200:
                    snippet = body[:200].decode("utf-8", errors="replace")
                    raise UserDeskTransportError(
                        f"HTTP {resp.status} from {url}: {snippet}",
                        status_code=resp.status,
                        url=url,
                    )
        except UserDeskTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise UserDeskTransportError(f"Request to {url} failed: {exc!r}", url=url) from exc

        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
            raise UserDeskTransportError(f"Invalid JSON from {url}: {body[:200]!r}", url=url) from exc
