"""Synchronous API client using composition."""
from typing import Dict, Optional, Any

from ..config import APIConfig
from ..session import SessionManager
from ..request import RequestHandler, EncodedRequest


class APIClient:
    """Blocking transport for the asset service API."""

    def __init__(self, config: Optional[APIConfig] = None, session_manager: Optional[SessionManager] = None):
        """Initializes API client."""
        self.config = config or APIConfig.default()
        self.session_manager = session_manager or SessionManager(self.config)
        self.request_handler = RequestHandler(
            self.session_manager.get_sync_session(),
            timeout=self.config.timeout.to_requests_timeout()
        )
        self.closed = False

    def send(self, request: EncodedRequest) -> Dict[str, Any]:
        """Sends an encoded request and returns the decoded JSON object."""
        if self.closed:
            raise RuntimeError("API client is closed")
        return self.request_handler.execute(request)

    def close(self):
        """Closes the HTTP session."""
        self.closed = True
        self.session_manager.close_sync()

    def __enter__(self) -> 'APIClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
