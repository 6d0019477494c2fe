"""Request handler for the synchronous transport."""
from typing import Dict, Any, Optional, Tuple

import requests

from .request_builder import EncodedRequest
from .response_handler import ResponseHandler
from ...exceptions import TransportError
from ...logging import get_logger


class RequestHandler:
    """Sends encoded requests over a requests session. Never retries."""

    def __init__(self, session: requests.Session, timeout: Optional[Tuple] = None):
        """Initializes request handler."""
        self.session = session
        self.timeout = timeout
        self.logger = get_logger('cldpy.api')

    def execute(self, request: EncodedRequest) -> Dict[str, Any]:
        """
        Executes request and decodes the response.

        Raises:
            TransportError: If the request could not be sent
            RemoteError: On non-2xx status
            DecodeError: On malformed response body
        """
        self.logger.debug(f"{request.method} {request.url}")
        try:
            response = self.session.request(
                request.method,
                request.url,
                data=request.body,
                headers=request.headers,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            self.logger.error(f"{request.method} {request.url} failed: {e}")
            raise TransportError(f"Request failed: {e}") from e

        return ResponseHandler.handle(
            response.status_code,
            response.reason,
            response.headers,
            response.content
        )
