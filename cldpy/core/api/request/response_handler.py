"""Response handler for API responses."""
import json
from typing import Any, Dict, Optional, Mapping

from ...exceptions import DecodeError, RemoteError


CLD_ERROR_HEADER = 'X-Cld-Error'


class ResponseHandler:
    """Turns raw HTTP responses into decoded JSON or exceptions."""

    @staticmethod
    def parse_body(body: bytes) -> Any:
        """Parses JSON response."""
        try:
            return json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            raise DecodeError(f"Empty or invalid response: {e}") from e

    @staticmethod
    def error_message(payload: Any) -> Optional[str]:
        """
        Extract the message of an error envelope.

        JSON errors look like {"error": {"message": "Missing required parameter - public_id"}}

        Returns:
            The message, or None if payload is not an error envelope

        Raises:
            DecodeError: If the envelope is present but malformed
        """
        if not isinstance(payload, dict) or 'error' not in payload:
            return None
        error = payload['error']
        if not isinstance(error, dict) or not isinstance(error.get('message'), str):
            raise DecodeError("Malformed error envelope")
        return error['message']

    @classmethod
    def handle(
        cls,
        status: int,
        reason: Optional[str],
        headers: Mapping[str, str],
        body: bytes
    ) -> Dict[str, Any]:
        """
        Check the status and decode the body.

        Args:
            status: HTTP status code
            reason: HTTP reason phrase
            headers: Response headers (case-insensitive mapping)
            body: Raw response body

        Returns:
            Decoded JSON object

        Raises:
            RemoteError: On non-2xx status
            DecodeError: On undecodable or wrongly shaped body
        """
        if not 200 <= status < 300:
            message = None
            try:
                message = cls.error_message(json.loads(body))
            except (ValueError, UnicodeDecodeError, DecodeError):
                # Error bodies are best effort; the status is what matters
                message = None
            status_text = f"{status} {reason}" if reason else str(status)
            raise RemoteError(status, status_text, headers.get(CLD_ERROR_HEADER), message)

        payload = cls.parse_body(body)
        if not isinstance(payload, dict):
            raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")
        message = cls.error_message(payload)
        if message is not None:
            status_text = f"{status} {reason}" if reason else str(status)
            raise RemoteError(status, status_text, headers.get(CLD_ERROR_HEADER), message)
        return payload
