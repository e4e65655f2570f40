"""
Async HTTP Client for stickersync

This module provides the asynchronous HTTP GET used to read remote assets and
their checksum sidecars, with aiohttp session management and error mapping.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout, TCPConnector

from stickersync.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    HTTP_STATUS_ERROR_THRESHOLD,
)
from stickersync.exceptions import HTTPError, NetworkError
from stickersync.log_utils import logger
from stickersync.utils import get_user_agent


class AsyncAssetClient:
    """
    Asynchronous asset client using aiohttp.

    Example:
        async with AsyncAssetClient() as client:
            payload = await client.get_bytes("https://example.com/aqua.png")
    """

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        connector_limit: int = 10,
    ) -> None:
        """
        Initialize the async asset client.

        Parameters:
            timeout (float): Total request timeout in seconds.
            connector_limit (int): Maximum total connections in the pool.
        """
        try:
            parsed_limit = int(connector_limit)
        except (TypeError, ValueError):
            logger.warning(
                "Invalid connector_limit value %r; using default of 10",
                connector_limit,
            )
            parsed_limit = 10
        if parsed_limit <= 0:
            logger.warning("connector_limit must be >= 1; clamping %d to 1", parsed_limit)
            parsed_limit = 1

        self.timeout = ClientTimeout(total=timeout)
        self.connector_limit = parsed_limit
        self._session: Optional[ClientSession] = None

    async def __aenter__(self) -> "AsyncAssetClient":
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _ensure_session(self) -> ClientSession:
        """
        Ensure a session exists, creating one if needed.

        Returns:
            ClientSession: The active aiohttp session.
        """
        if self._session is None or self._session.closed:
            connector = TCPConnector(
                limit=self.connector_limit,
                enable_cleanup_closed=True,
            )
            self._session = ClientSession(
                connector=connector,
                timeout=self.timeout,
                headers=self._get_default_headers(),
            )
        return self._session

    def _get_default_headers(self) -> Dict[str, str]:
        return {"User-Agent": get_user_agent()}

    async def close(self) -> None:
        """Close the client session and release resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def get_bytes(self, url: str) -> bytes:
        """
        Perform a GET request and return the fully drained response body.

        Parameters:
            url (str): Resource to read.

        Returns:
            bytes: The complete response body.

        Raises:
            HTTPError: If the server answers with a non-success status.
            NetworkError: On connection failures and timeouts.
        """
        session = await self._ensure_session()
        try:
            async with session.get(url) as response:
                if response.status >= HTTP_STATUS_ERROR_THRESHOLD:
                    raise HTTPError(
                        f"HTTP error {response.status}",
                        status_code=response.status,
                        url=url,
                    )
                body = await response.read()
        except aiohttp.ClientError as e:
            raise NetworkError(f"Network error: {e}", url=url) from e
        except asyncio.TimeoutError as e:
            raise NetworkError("Request timed out", url=url) from e

        logger.debug(f"Fetched {url} ({len(body)} bytes)")
        return body


@asynccontextmanager
async def create_async_client(
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> AsyncIterator[AsyncAssetClient]:
    """
    Provide a configured AsyncAssetClient and ensure it is closed after use.

    Parameters:
        timeout (float): Total request timeout in seconds.
    """
    client = AsyncAssetClient(timeout=timeout)
    try:
        yield client
    finally:
        await client.close()
