"""
Upload module.

Turns local paths, streams and remote URLs into signed upload requests and
drives them through a transport.
"""
from .coordinator import BaseUploadCoordinator, UploadCoordinator, AsyncUploadCoordinator
from .models import (
    UploadOptions,
    UploadResponse,
    UploadResult,
    Resource,
    ResourceDetails,
    ResourceList,
    Derived
)
from .protocols import TransportProtocol, AsyncTransportProtocol
from .services import FileValidator, FileReader, AsyncFileReader, discover_files

__all__ = [
    # Main classes
    'BaseUploadCoordinator',
    'UploadCoordinator',
    'AsyncUploadCoordinator',

    # Models
    'UploadOptions',
    'UploadResponse',
    'UploadResult',
    'Resource',
    'ResourceDetails',
    'ResourceList',
    'Derived',

    # Protocols
    'TransportProtocol',
    'AsyncTransportProtocol',

    # Services
    'FileValidator',
    'FileReader',
    'AsyncFileReader',
    'discover_files',
]
