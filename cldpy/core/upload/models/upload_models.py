"""
Data models for upload module.

Uses dataclasses for immutable, type-safe data structures. Response models
decode through `from_dict`, which checks the shape of the JSON it is given.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List, Tuple, Type, Union

from ...api.endpoints import ResourceType
from ...exceptions import DecodeError


def _get(data: Dict[str, Any], key: str, types: Union[Type, Tuple[Type, ...]], default: Any = None) -> Any:
    """Read an optional field, raising DecodeError when its type is wrong."""
    value = data.get(key, default)
    if value is None:
        return default
    # bool is an int subclass
    if isinstance(value, bool) and bool not in (types if isinstance(types, tuple) else (types,)):
        raise DecodeError(f"Field {key!r} has unexpected type bool")
    if not isinstance(value, types):
        raise DecodeError(f"Field {key!r} has unexpected type {type(value).__name__}")
    return value


def _require_object(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class UploadOptions:
    """
    Per-call upload options.

    Passed explicitly into every upload; the client never stores them.

    Attributes:
        resource_type: Target resource type
        base_path_dir: Directory the public id is computed relative to
        prepend_path: Remote prefix added in front of the public id
        random_public_id: Let the service pick a random public id
    """
    resource_type: ResourceType = ResourceType.IMAGE
    base_path_dir: Optional[str] = None
    prepend_path: str = ''
    random_public_id: bool = False


@dataclass(frozen=True)
class UploadResponse:
    """
    Decoded upload (or destroy) response.

    Every field is optional; the service omits fields that do not apply.
    """
    public_id: Optional[str] = None
    secure_url: Optional[str] = None
    url: Optional[str] = None
    version: Optional[int] = None
    format: Optional[str] = None
    resource_type: Optional[str] = None
    size_bytes: Optional[int] = None
    result: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Any) -> 'UploadResponse':
        """Create from decoded JSON."""
        data = _require_object(data, 'upload response')
        return cls(
            public_id=_get(data, 'public_id', str),
            secure_url=_get(data, 'secure_url', str),
            url=_get(data, 'url', str),
            version=_get(data, 'version', int),
            format=_get(data, 'format', str),
            resource_type=_get(data, 'resource_type', str),
            size_bytes=_get(data, 'bytes', int),
            result=_get(data, 'result', str),
            raw=data,
        )


@dataclass(frozen=True)
class UploadResult:
    """
    Result of one file upload.

    Attributes:
        path: Local path (or source URL) that was uploaded
        public_id: Public id returned by the service, or the computed one
            in simulate mode, or the original path for skipped files
        response: Decoded service response (None when nothing was sent)
        skipped: True for zero-byte files that were not uploaded
        simulated: True when simulate mode suppressed the network call
    """
    path: str
    public_id: str
    response: Optional[UploadResponse] = None
    skipped: bool = False
    simulated: bool = False

    @property
    def secure_url(self) -> Optional[str]:
        return self.response.secure_url if self.response else None


@dataclass(frozen=True)
class Derived:
    """A derived (transformed) version of a resource."""
    transformation: Optional[str] = None
    size_bytes: Optional[int] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'Derived':
        data = _require_object(data, 'derived resource')
        return cls(
            transformation=_get(data, 'transformation', str),
            size_bytes=_get(data, 'bytes', int),
            url=_get(data, 'url', str),
        )


@dataclass(frozen=True)
class Resource:
    """Information about an image or a raw file."""
    public_id: Optional[str] = None
    version: Optional[int] = None
    resource_type: Optional[str] = None
    size_bytes: Optional[int] = None
    url: Optional[str] = None
    secure_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'Resource':
        data = _require_object(data, 'resource')
        return cls(
            public_id=_get(data, 'public_id', str),
            version=_get(data, 'version', int),
            resource_type=_get(data, 'resource_type', str),
            size_bytes=_get(data, 'bytes', int),
            url=_get(data, 'url', str),
            secure_url=_get(data, 'secure_url', str),
        )


@dataclass(frozen=True)
class ResourceDetails:
    """Detailed information about a single resource."""
    public_id: Optional[str] = None
    format: Optional[str] = None
    version: Optional[int] = None
    resource_type: Optional[str] = None
    size_bytes: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    url: Optional[str] = None
    secure_url: Optional[str] = None
    derived: List[Derived] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> 'ResourceDetails':
        data = _require_object(data, 'resource details')
        return cls(
            public_id=_get(data, 'public_id', str),
            format=_get(data, 'format', str),
            version=_get(data, 'version', int),
            resource_type=_get(data, 'resource_type', str),
            size_bytes=_get(data, 'bytes', int),
            width=_get(data, 'width', int),
            height=_get(data, 'height', int),
            url=_get(data, 'url', str),
            secure_url=_get(data, 'secure_url', str),
            derived=[Derived.from_dict(d) for d in _get(data, 'derived', list, [])],
        )


@dataclass(frozen=True)
class ResourceList:
    """One page of the admin resource listing."""
    resources: List[Resource] = field(default_factory=list)
    next_cursor: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'ResourceList':
        data = _require_object(data, 'resource list')
        return cls(
            resources=[Resource.from_dict(r) for r in _get(data, 'resources', list, [])],
            next_cursor=_get(data, 'next_cursor', str),
        )

    @property
    def has_more(self) -> bool:
        return bool(self.next_cursor)
