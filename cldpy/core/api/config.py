"""
Endpoint bases and HTTP session settings.

Both transports read the same frozen APIConfig; pass a modified copy to
point the clients at another host or to bound request latency.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple


DEFAULT_UPLOAD_BASE = 'https://api.cloudinary.com/v1_1'
DEFAULT_ADMIN_BASE = 'https://api.cloudinary.com/v1_1'
DEFAULT_RESOURCE_BASE = 'https://res.cloudinary.com'


@dataclass(frozen=True)
class TimeoutConfig:
    """
    Request timeouts in seconds.

    None leaves the HTTP library default in place. Requests are never
    retried, so these are the only latency bounds the clients apply.

    requests has no total bound: the sync transport applies `total` as the
    read timeout, i.e. the longest wait between two bytes of the response.
    aiohttp applies it to the whole request.
    """
    total: Optional[float] = None  # Whole request (async), per read (sync)
    connect: Optional[float] = None  # Connection timeout

    @property
    def is_default(self) -> bool:
        return self.total is None and self.connect is None

    def to_requests_timeout(self) -> Optional[Tuple[Optional[float], Optional[float]]]:
        """Convert to a requests (connect, read) timeout tuple; total becomes the read timeout."""
        if self.is_default:
            return None
        return (self.connect, self.total)

    def to_aiohttp_timeout(self):
        """Build the aiohttp ClientTimeout, None when aiohttp's default applies."""
        import aiohttp
        if self.is_default:
            return None
        return aiohttp.ClientTimeout(total=self.total, connect=self.connect)


@dataclass(frozen=True)
class APIConfig:
    """Settings shared by the sync and async clients."""
    # Endpoint bases
    upload_base: str = DEFAULT_UPLOAD_BASE
    admin_base: str = DEFAULT_ADMIN_BASE
    resource_base: str = DEFAULT_RESOURCE_BASE

    user_agent: str = 'cldpy/1.0.0'

    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Level restored when verbose output is turned off
    log_level: int = logging.INFO

    @classmethod
    def default(cls) -> 'APIConfig':
        """Configuration pointing at the public service."""
        return cls()

    @classmethod
    def with_timeout(cls, total: float, connect: Optional[float] = None, **kwargs) -> 'APIConfig':
        """Create configuration with request timeouts."""
        return cls(timeout=TimeoutConfig(total=total, connect=connect), **kwargs)

    def get_headers(self) -> Dict[str, str]:
        """Get default headers for every request."""
        return {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for aiohttp.ClientSession."""
        kwargs: Dict[str, Any] = {'headers': self.get_headers()}
        timeout = self.timeout.to_aiohttp_timeout()
        # Omitted so aiohttp keeps its own default timeout
        if timeout is not None:
            kwargs['timeout'] = timeout
        return kwargs
