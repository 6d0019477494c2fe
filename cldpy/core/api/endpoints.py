"""
Endpoint construction.

Pure functions mapping (base, cloud name, resource type, action) to URLs.
The resource type enum selects the path segment directly.
"""
from enum import Enum
from typing import Optional, Union
from urllib.parse import quote


class ResourceType(Enum):
    """Asset classification used for endpoint routing."""

    IMAGE = 'image'
    PDF = 'pdf'
    VIDEO = 'video'
    RAW = 'raw'

    @property
    def wire_name(self) -> str:
        """Path segment used by the remote API (pdf is stored as image)."""
        if self is ResourceType.PDF:
            return 'image'
        return self.value

    @classmethod
    def parse(cls, value: Union[str, 'ResourceType']) -> 'ResourceType':
        """Accept an enum member or its name/value, case-insensitive."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown resource type: {value!r}") from None


def upload_api_url(base: str, cloud_name: str, resource_type: ResourceType, action: str) -> str:
    """Build `{base}/{cloud}/{type}/{action}` for the upload API."""
    return f"{base.rstrip('/')}/{cloud_name}/{resource_type.wire_name}/{action}"


def admin_api_url(
    base: str,
    cloud_name: str,
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None
) -> str:
    """Build `{base}/{cloud}`, embedding basic-auth credentials when given."""
    base = base.rstrip('/')
    if api_key is not None and api_secret is not None:
        scheme, rest = base.split('://', 1)
        userinfo = f"{quote(api_key, safe='')}:{quote(api_secret, safe='')}"
        base = f"{scheme}://{userinfo}@{rest}"
    return f"{base}/{cloud_name}"


def resource_url(base: str, cloud_name: str, resource_type: ResourceType, public_id: str) -> str:
    """Public delivery URL of an asset. No network call."""
    return f"{base.rstrip('/')}/{cloud_name}/{resource_type.wire_name}/upload/{public_id}"
