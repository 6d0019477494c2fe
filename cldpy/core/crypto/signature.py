"""
Request signature computation.

The signature is the lowercase hex SHA-1 of the sorted `key=value` pairs
joined with `&`, with the API secret appended directly after the last pair.
"""
import hashlib
from typing import Mapping, Iterable, Optional, Any


# Parameters that never participate in a signature
UNSIGNED_KEYS = frozenset({'file', 'signature', 'api_key', 'resource_type'})

SIGNED_UPLOAD_KEYS = ('public_id', 'timestamp')
SIGNED_DESTROY_KEYS = ('public_id', 'timestamp')
SIGNED_RENAME_KEYS = ('from_public_id', 'timestamp', 'to_public_id')


def string_to_sign(params: Mapping[str, Any], keys: Optional[Iterable[str]] = None) -> str:
    """
    Build the canonical parameter string.

    Args:
        params: Request parameters
        keys: Parameters that participate. Keys absent from params are
            ignored, so optional fields (e.g. public_id) may be listed.
            Defaults to every key not in UNSIGNED_KEYS.

    Returns:
        `k1=v1&k2=v2...` sorted by key
    """
    if keys is None:
        selected = [k for k in params if k not in UNSIGNED_KEYS]
    else:
        selected = [k for k in set(keys) if k in params]
    return '&'.join(f"{key}={params[key]}" for key in sorted(selected))


def sign(params: Mapping[str, Any], secret: str, keys: Optional[Iterable[str]] = None) -> str:
    """
    Compute the request signature.

    Args:
        params: Request parameters
        secret: API secret
        keys: Parameters that participate (see string_to_sign)

    Returns:
        Lowercase hex digest
    """
    payload = string_to_sign(params, keys) + secret
    return hashlib.sha1(payload.encode('utf-8')).hexdigest()
