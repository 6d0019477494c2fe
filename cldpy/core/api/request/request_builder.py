"""Request builder for API requests."""
import base64
import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Callable, Iterable, List, Tuple, Union
from urllib.parse import urlencode

from urllib3.filepost import encode_multipart_formdata

from ..credentials import Credentials
from ...crypto import sign, SIGNED_UPLOAD_KEYS
from ...exceptions import EncodingError


FieldValue = Union[str, Tuple[str, bytes, str]]


@dataclass(frozen=True)
class UploadRequest:
    """
    A single upload call, built fresh for every file.

    Exactly one of file_payload and file_source_url is set.

    Attributes:
        uri: Upload endpoint
        http_method: HTTP method
        body_fields: Form fields other than api_key, timestamp and signature
        file_payload: File content read into memory
        file_name: File name sent with the file part
        file_source_url: Remote URL the service fetches the file from
    """
    uri: str
    http_method: str = 'POST'
    body_fields: Dict[str, str] = field(default_factory=dict)
    file_payload: Optional[bytes] = None
    file_name: str = 'file'
    file_source_url: Optional[str] = None

    def __post_init__(self):
        if self.file_payload is None and self.file_source_url is None:
            raise EncodingError("Nothing to upload: no file content or source URL")
        if self.file_payload is not None and self.file_source_url is not None:
            raise EncodingError("Both file content and source URL given")

    @property
    def is_remote(self) -> bool:
        """True when the service fetches the file itself."""
        return self.file_source_url is not None


@dataclass(frozen=True)
class EncodedRequest:
    """
    A fully encoded HTTP request, ready for either transport.

    Attributes:
        url: Target URL
        method: HTTP method
        body: Encoded body (None for GET)
        headers: Request headers, including Content-Type for bodies
        fields: Signed fields that went into the body, for logging and tests
    """
    url: str
    method: str = 'POST'
    body: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)
    fields: Dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get('Content-Type')


class RequestBuilder:
    """Builds signed API requests."""

    def __init__(self, credentials: Credentials, clock: Callable[[], float] = time.time):
        """
        Initializes request builder.

        Args:
            credentials: Account credentials used for api_key and signing
            clock: Source of the current time in seconds
        """
        self.credentials = credentials
        self._clock = clock

    def timestamp(self) -> str:
        """Seconds since epoch, stringified."""
        return str(int(self._clock()))

    def signed_fields(self, fields: Dict[str, str], signed_keys: Iterable[str]) -> Dict[str, str]:
        """
        Add api_key, timestamp and signature to fields.

        The timestamp is generated once and used for both the field and the
        signature input.
        """
        for key, value in fields.items():
            if not isinstance(value, str):
                raise EncodingError(f"Field {key!r} must be a string, got {type(value).__name__}")

        result = dict(fields)
        result['api_key'] = self.credentials.api_key
        result['timestamp'] = self.timestamp()
        result['signature'] = sign(result, self.credentials.api_secret, signed_keys)
        return result

    def build_upload(
        self,
        request: UploadRequest,
        signed_keys: Iterable[str] = SIGNED_UPLOAD_KEYS
    ) -> EncodedRequest:
        """
        Build a signed multipart upload request.

        Args:
            request: Upload request
            signed_keys: Fields that participate in the signature

        Returns:
            Encoded request whose Content-Type carries the encoder's boundary

        Raises:
            EncodingError: If the body cannot be encoded
        """
        fields = self.signed_fields(request.body_fields, signed_keys)

        parts: List[Tuple[str, FieldValue]] = list(fields.items())
        if request.is_remote:
            parts.append(('file', request.file_source_url))
        else:
            parts.append(('file', (request.file_name, request.file_payload, 'application/octet-stream')))

        # The encoder writes the closing boundary before returning
        try:
            body, content_type = encode_multipart_formdata(parts)
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Cannot encode multipart body: {e}") from e

        return EncodedRequest(
            url=request.uri,
            method=request.http_method,
            body=body,
            headers={'Content-Type': content_type},
            fields=fields,
        )

    def build_form(self, url: str, fields: Dict[str, str], signed_keys: Iterable[str]) -> EncodedRequest:
        """Build a signed application/x-www-form-urlencoded POST request."""
        fields = self.signed_fields(fields, signed_keys)
        return EncodedRequest(
            url=url,
            method='POST',
            body=urlencode(list(fields.items())).encode('ascii'),
            headers={'Content-Type': 'application/x-www-form-urlencoded'},
            fields=fields,
        )

    def build_admin_get(self, url: str, params: Optional[Dict[str, str]] = None) -> EncodedRequest:
        """Build an admin API GET request authenticated with HTTP basic auth."""
        if params:
            url = f"{url}?{urlencode(params)}"
        userpass = f"{self.credentials.api_key}:{self.credentials.api_secret}".encode('utf-8')
        return EncodedRequest(
            url=url,
            method='GET',
            headers={'Authorization': 'Basic ' + base64.b64encode(userpass).decode('ascii')},
        )
