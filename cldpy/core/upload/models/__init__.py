"""Upload models."""
from .upload_models import (
    UploadOptions,
    UploadResponse,
    UploadResult,
    Resource,
    ResourceDetails,
    ResourceList,
    Derived
)

__all__ = [
    'UploadOptions',
    'UploadResponse',
    'UploadResult',
    'Resource',
    'ResourceDetails',
    'ResourceList',
    'Derived'
]
