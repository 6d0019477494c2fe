"""
Async API client.

Asynchronous transport built on aiohttp. Requests are sent one at a time
by the callers; this client does no batching and no retries.
"""
import asyncio
from typing import Dict, Optional, Any

import aiohttp

from .config import APIConfig
from .request import EncodedRequest, ResponseHandler
from .session import SessionManager
from ..exceptions import TransportError
from ..logging import get_logger


class AsyncAPIClient:
    """
    Asynchronous asset service API client.

    Example:
        >>> async with AsyncAPIClient(APIConfig.default()) as client:
        ...     result = await client.send(encoded_request)
    """

    def __init__(self, config: Optional[APIConfig] = None, session_manager: Optional[SessionManager] = None):
        """
        Initialize async API client.

        Args:
            config: API configuration (uses defaults if not provided)
            session_manager: Optional shared session manager
        """
        self._config = config or APIConfig.default()
        self._sessions = session_manager or SessionManager(self._config)
        self._closed = False
        self._logger = get_logger('cldpy.api')

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._sessions.get_async_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close client and release resources."""
        self._closed = True
        await self._sessions.close()

    async def send(self, request: EncodedRequest) -> Dict[str, Any]:
        """
        Send an encoded request.

        Args:
            request: Encoded request from RequestBuilder

        Returns:
            Decoded JSON object

        Raises:
            TransportError: If the request could not be sent
            RemoteError: On non-2xx status
            DecodeError: On malformed response body
        """
        if self._closed:
            raise RuntimeError("API client is closed")

        session = await self._sessions.get_async_session()
        self._logger.debug(f"{request.method} {request.url}")
        try:
            async with session.request(
                request.method,
                request.url,
                data=request.body,
                headers=request.headers
            ) as response:
                body = await response.read()
                return ResponseHandler.handle(
                    response.status,
                    response.reason,
                    response.headers,
                    body
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._logger.error(f"{request.method} {request.url} failed: {e}")
            raise TransportError(f"Request failed: {e}") from e
