"""
Protocol definitions for upload module.

Defines interfaces (protocols) for dependency injection, so coordinators
can be driven by any transport, including test doubles.
"""
from typing import Protocol, Dict, Any

from ..api.request import EncodedRequest


class TransportProtocol(Protocol):
    """Protocol for blocking transports."""

    def send(self, request: EncodedRequest) -> Dict[str, Any]:
        """
        Send an encoded request.

        Args:
            request: Encoded request

        Returns:
            Decoded JSON object
        """
        ...


class AsyncTransportProtocol(Protocol):
    """Protocol for async transports."""

    async def send(self, request: EncodedRequest) -> Dict[str, Any]:
        """
        Send an encoded request.

        Args:
            request: Encoded request

        Returns:
            Decoded JSON object
        """
        ...
