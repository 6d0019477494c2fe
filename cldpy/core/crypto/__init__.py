"""Request signing."""
from .signature import (
    sign,
    string_to_sign,
    SIGNED_UPLOAD_KEYS,
    SIGNED_DESTROY_KEYS,
    SIGNED_RENAME_KEYS,
    UNSIGNED_KEYS,
)

__all__ = [
    'sign',
    'string_to_sign',
    'SIGNED_UPLOAD_KEYS',
    'SIGNED_DESTROY_KEYS',
    'SIGNED_RENAME_KEYS',
    'UNSIGNED_KEYS',
]
