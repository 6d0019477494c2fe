"""Tests for response decoding."""
import pytest
from requests.structures import CaseInsensitiveDict

from cldpy.core.api import ResponseHandler
from cldpy.core.exceptions import DecodeError, RemoteError, TransportError


class TestResponseHandler:
    """Test suite for ResponseHandler.handle."""

    def test_success(self):
        """Test 2xx JSON object is returned."""
        payload = ResponseHandler.handle(200, 'OK', {}, b'{"public_id": "images/logo"}')

        assert payload == {'public_id': 'images/logo'}

    def test_remote_error_fields(self):
        """Test non-2xx status builds a RemoteError."""
        headers = CaseInsensitiveDict({'x-cld-error': 'Invalid Signature'})
        body = b'{"error": {"message": "Invalid Signature abc"}}'

        with pytest.raises(RemoteError) as exc_info:
            ResponseHandler.handle(401, 'Unauthorized', headers, body)

        error = exc_info.value
        assert error.status == 401
        assert error.status_text == '401 Unauthorized'
        assert error.cld_error == 'Invalid Signature'
        assert error.remote_message == 'Invalid Signature abc'
        assert error.error_code == 401
        assert 'Request error: 401 Unauthorized' in str(error)

    def test_remote_error_without_body(self):
        """Test error bodies are optional."""
        with pytest.raises(RemoteError) as exc_info:
            ResponseHandler.handle(502, 'Bad Gateway', {}, b'<html>oops</html>')

        assert exc_info.value.remote_message is None
        assert exc_info.value.cld_error is None

    def test_remote_error_is_transport_error(self):
        assert issubclass(RemoteError, TransportError)

    def test_invalid_json(self):
        """Test 2xx with undecodable body."""
        with pytest.raises(DecodeError):
            ResponseHandler.handle(200, 'OK', {}, b'not json')

    def test_empty_body(self):
        with pytest.raises(DecodeError):
            ResponseHandler.handle(200, 'OK', {}, b'')

    def test_non_object(self):
        """Test 2xx with a JSON array."""
        with pytest.raises(DecodeError):
            ResponseHandler.handle(200, 'OK', {}, b'[1, 2]')

    def test_error_envelope_on_success_status(self):
        """Test an error envelope is reported even with 200."""
        with pytest.raises(RemoteError) as exc_info:
            ResponseHandler.handle(200, 'OK', {}, b'{"error": {"message": "Resource not found"}}')

        assert exc_info.value.remote_message == 'Resource not found'

    def test_malformed_error_envelope(self):
        """Test error envelope with wrong shape."""
        with pytest.raises(DecodeError):
            ResponseHandler.handle(200, 'OK', {}, b'{"error": "nope"}')


class TestErrorMessage:
    """Test suite for ResponseHandler.error_message."""

    def test_not_an_envelope(self):
        assert ResponseHandler.error_message({'result': 'ok'}) is None

    def test_message(self):
        assert ResponseHandler.error_message({'error': {'message': 'x'}}) == 'x'
