"""Request building, execution and response decoding."""
from .request_handler import RequestHandler
from .request_builder import RequestBuilder, UploadRequest, EncodedRequest
from .response_handler import ResponseHandler

__all__ = [
    'RequestHandler',
    'RequestBuilder',
    'UploadRequest',
    'EncodedRequest',
    'ResponseHandler',
]
