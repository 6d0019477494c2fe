"""Asset service API module."""
from .config import APIConfig, TimeoutConfig
from .endpoints import ResourceType, upload_api_url, admin_api_url, resource_url
from .credentials import Credentials, resolve
from .request import RequestBuilder, RequestHandler, ResponseHandler, UploadRequest, EncodedRequest
from .session import SessionFactory, SessionManager
from .client import APIClient
from .async_client import AsyncAPIClient

__all__ = [
    # Clients
    'APIClient',
    'AsyncAPIClient',

    # Credentials and endpoints
    'Credentials',
    'resolve',
    'ResourceType',
    'upload_api_url',
    'admin_api_url',
    'resource_url',

    # Requests
    'RequestBuilder',
    'RequestHandler',
    'ResponseHandler',
    'UploadRequest',
    'EncodedRequest',

    # Sessions
    'SessionFactory',
    'SessionManager',

    # Configuration
    'APIConfig',
    'TimeoutConfig',
]
