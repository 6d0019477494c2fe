"""Session factory using Factory Pattern."""
import requests
import aiohttp

from ..config import APIConfig


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    def create_sync_session(config: APIConfig) -> requests.Session:
        """Creates a synchronous HTTP session without retries."""
        session = requests.Session()
        session.headers.update(config.get_headers())
        return session

    @staticmethod
    async def create_async_session(config: APIConfig) -> aiohttp.ClientSession:
        """Creates an asynchronous HTTP session."""
        return aiohttp.ClientSession(**config.get_session_kwargs())
