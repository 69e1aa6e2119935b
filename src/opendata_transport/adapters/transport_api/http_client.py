"""HTTP client for transport API requests."""

import asyncio
import logging
from typing import TYPE_CHECKING

import aiohttp
from yarl import URL

from opendata_transport.adapters.api_request_logger import log_api_request
from opendata_transport.adapters.transport_api.constants import DEFAULT_HEADERS
from opendata_transport.domain.exceptions import TransportError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class TransportHttpClient:
    """Performs GET requests against fully built transport API URLs."""

    def __init__(self, session: "ClientSession") -> None:
        """Initialize with the aiohttp session used for all requests."""
        self._session = session

    @staticmethod
    async def _read_body(response: "ClientResponse", url: str) -> bytes:
        """Return the body of a 2xx response, raise TransportError otherwise."""
        if 200 <= response.status < 300:
            return await response.read()

        response_text = await response.text(errors="replace")
        raise TransportError(
            f"Transport API returned status {response.status} for {url}: {response_text[:200]}",
            status_code=response.status,
        )

    async def get(self, url: str) -> bytes:
        """Fetch a URL and return the raw response body.

        The URL is sent exactly as built; it is not re-encoded.

        Raises:
            TransportError: On network errors, timeouts and non-2xx responses.
        """
        log_api_request("GET", url, headers=DEFAULT_HEADERS)
        logger.debug(f"Requesting {url}")

        try:
            async with self._session.get(
                URL(url, encoded=True), headers=DEFAULT_HEADERS
            ) as response:
                return await self._read_body(response, url)
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
