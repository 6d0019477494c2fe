"""Session manager for HTTP connections."""
from typing import Optional

import aiohttp
import requests

from .session_factory import SessionFactory
from ..config import APIConfig


class SessionManager:
    """Manages HTTP sessions, created lazily on first use."""

    def __init__(self, config: APIConfig):
        """Initializes session manager."""
        self.config = config
        self._sync_session: Optional[requests.Session] = None
        self._async_session: Optional[aiohttp.ClientSession] = None

    def get_sync_session(self) -> requests.Session:
        """Gets or creates synchronous session."""
        if self._sync_session is None:
            self._sync_session = SessionFactory.create_sync_session(self.config)
        return self._sync_session

    async def get_async_session(self) -> aiohttp.ClientSession:
        """Gets or creates asynchronous session."""
        if self._async_session is None or self._async_session.closed:
            self._async_session = await SessionFactory.create_async_session(self.config)
        return self._async_session

    def close_sync(self):
        """Closes the synchronous session."""
        if self._sync_session is not None:
            self._sync_session.close()
            self._sync_session = None

    async def close(self):
        """Closes all sessions."""
        self.close_sync()

        if self._async_session and not self._async_session.closed:
            await self._async_session.close()
        self._async_session = None
