"""
Upload coordinator.

Orchestrates the upload process using injected dependencies. The decision
tree (stream, single file or directory) and the request preparation are
shared; the sync and async coordinators only differ in how they read files
and send requests.
"""
import os
from dataclasses import replace
from typing import Iterator, List, Optional, Tuple, Union

from .models import UploadOptions, UploadResponse, UploadResult
from .protocols import TransportProtocol, AsyncTransportProtocol
from .services import FileValidator, FileReader, AsyncFileReader, discover_files
from .services.file_service import Payload
from ..api.config import APIConfig
from ..api.credentials import Credentials
from ..api.endpoints import upload_api_url
from ..api.request import RequestBuilder, UploadRequest, EncodedRequest
from ..crypto import SIGNED_UPLOAD_KEYS
from ..path import clean_asset_name
from ..logging import get_logger

logger = get_logger('cldpy.upload')

PathLike = Union[str, 'os.PathLike[str]']


class BaseUploadCoordinator:
    """
    Shared upload logic.

    Holds only immutable collaborators; every per-call setting arrives
    through UploadOptions.
    """

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[APIConfig] = None,
        builder: Optional[RequestBuilder] = None,
        validator: Optional[FileValidator] = None
    ):
        """
        Initialize upload coordinator.

        Args:
            credentials: Account credentials
            config: API configuration
            builder: Request builder (created from credentials if omitted)
            validator: File validator
        """
        self._credentials = credentials
        self._config = config or APIConfig.default()
        self._builder = builder or RequestBuilder(credentials)
        self._validator = validator or FileValidator()

    def plan(
        self,
        path: PathLike,
        data: Optional[Payload],
        options: UploadOptions
    ) -> Iterator[Tuple[str, UploadOptions]]:
        """
        Yield (file path, options) for every file a call has to upload.

        Raises:
            PathError: If path does not exist and no data is given
        """
        path = os.fspath(path)
        if data is not None:
            yield path, replace(options, base_path_dir=None)
            return

        if self._validator.is_dir(path):
            dir_options = replace(options, base_path_dir=path)
            for file_path in discover_files(path):
                yield file_path, dir_options
        else:
            yield path, replace(options, base_path_dir=None)

    def public_id_for(self, path: str, options: UploadOptions) -> Optional[str]:
        """Public id for a local path, None when the service picks one."""
        if options.random_public_id:
            return None
        return clean_asset_name(path, options.base_path_dir, options.prepend_path)

    def should_skip(self, path: str) -> bool:
        """Zero-byte files are not uploaded."""
        if self._validator.is_empty(path):
            logger.debug(f"Not uploading empty file: {path}")
            return True
        return False

    def endpoint(self, options: UploadOptions) -> str:
        """Upload endpoint for the resource type of this call."""
        return upload_api_url(
            self._config.upload_base,
            self._credentials.cloud_name,
            options.resource_type,
            'upload'
        )

    def build_file_request(self, path: str, content: bytes, options: UploadOptions) -> Tuple[EncodedRequest, Optional[str]]:
        """Encode the upload of one file. Returns the request and the public id."""
        public_id = self.public_id_for(path, options)
        fields = {'public_id': public_id} if public_id is not None else {}
        request = UploadRequest(
            uri=self.endpoint(options),
            body_fields=fields,
            file_payload=content,
            file_name=os.path.basename(path) or 'file',
        )
        return self._builder.build_upload(request, SIGNED_UPLOAD_KEYS), public_id

    def build_url_request(
        self,
        source_url: str,
        public_id: Optional[str],
        options: UploadOptions
    ) -> EncodedRequest:
        """Encode an upload the service fetches from a remote URL."""
        fields = {'public_id': public_id} if public_id else {}
        request = UploadRequest(
            uri=self.endpoint(options),
            body_fields=fields,
            file_source_url=source_url,
        )
        return self._builder.build_upload(request, SIGNED_UPLOAD_KEYS)

    @staticmethod
    def skipped_result(path: str) -> UploadResult:
        return UploadResult(path=path, public_id=path, skipped=True)

    @staticmethod
    def simulated_result(path: str, public_id: Optional[str]) -> UploadResult:
        return UploadResult(path=path, public_id=public_id or path, simulated=True)

    @staticmethod
    def sent_result(path: str, public_id: Optional[str], payload: dict) -> UploadResult:
        response = UploadResponse.from_dict(payload)
        return UploadResult(
            path=path,
            public_id=response.public_id or public_id or path,
            response=response,
        )


class UploadCoordinator(BaseUploadCoordinator):
    """
    Coordinates blocking uploads.

    Files are uploaded one after another in traversal order. The first
    failure stops a directory upload; files already sent stay uploaded.
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: TransportProtocol,
        config: Optional[APIConfig] = None,
        builder: Optional[RequestBuilder] = None,
        file_reader: Optional[FileReader] = None
    ):
        super().__init__(credentials, config, builder)
        self._transport = transport
        self._reader = file_reader or FileReader()

    def upload(
        self,
        path: PathLike,
        data: Optional[Payload] = None,
        options: Optional[UploadOptions] = None,
        simulate: bool = False
    ) -> List[UploadResult]:
        """
        Upload a file, a stream or a whole directory.

        Args:
            path: File or directory; with data, only names the asset
            data: Optional content to upload instead of reading path
            options: Per-call upload options
            simulate: Build everything but skip the network call

        Returns:
            One result per file, in upload order
        """
        options = options or UploadOptions()
        return [
            self.upload_file(file_path, data, file_options, simulate)
            for file_path, file_options in self.plan(path, data, options)
        ]

    def upload_file(
        self,
        path: str,
        data: Optional[Payload],
        options: UploadOptions,
        simulate: bool = False
    ) -> UploadResult:
        """Upload a single file (or stream named by path)."""
        if self.should_skip(path):
            return self.skipped_result(path)

        content = self._reader.read_payload(path, data)
        encoded, public_id = self.build_file_request(path, content, options)
        if simulate:
            logger.info(f"Simulating upload of {path} as {public_id or '<random>'}")
            return self.simulated_result(path, public_id)

        logger.info(f"Uploading {path}")
        payload = self._transport.send(encoded)
        return self.sent_result(path, public_id, payload)

    def upload_remote(
        self,
        source_url: str,
        public_id: Optional[str] = None,
        options: Optional[UploadOptions] = None,
        simulate: bool = False
    ) -> UploadResult:
        """Ask the service to fetch and store a remote file."""
        options = options or UploadOptions(random_public_id=True)
        encoded = self.build_url_request(source_url, public_id, options)
        if simulate:
            return self.simulated_result(source_url, public_id)
        logger.info(f"Uploading from {source_url}")
        payload = self._transport.send(encoded)
        return self.sent_result(source_url, public_id, payload)


class AsyncUploadCoordinator(BaseUploadCoordinator):
    """
    Coordinates uploads over an async transport.

    Same decision tree as UploadCoordinator; files are still awaited one
    at a time, never fanned out.
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: AsyncTransportProtocol,
        config: Optional[APIConfig] = None,
        builder: Optional[RequestBuilder] = None,
        file_reader: Optional[AsyncFileReader] = None
    ):
        super().__init__(credentials, config, builder)
        self._transport = transport
        self._reader = file_reader or AsyncFileReader()

    async def upload(
        self,
        path: PathLike,
        data: Optional[Payload] = None,
        options: Optional[UploadOptions] = None,
        simulate: bool = False
    ) -> List[UploadResult]:
        """Upload a file, a stream or a whole directory."""
        options = options or UploadOptions()
        results = []
        for file_path, file_options in self.plan(path, data, options):
            results.append(await self.upload_file(file_path, data, file_options, simulate))
        return results

    async def upload_file(
        self,
        path: str,
        data: Optional[Payload],
        options: UploadOptions,
        simulate: bool = False
    ) -> UploadResult:
        """Upload a single file (or stream named by path)."""
        if self.should_skip(path):
            return self.skipped_result(path)

        content = await self._reader.read_payload_async(path, data)
        encoded, public_id = self.build_file_request(path, content, options)
        if simulate:
            logger.info(f"Simulating upload of {path} as {public_id or '<random>'}")
            return self.simulated_result(path, public_id)

        logger.info(f"Uploading {path}")
        payload = await self._transport.send(encoded)
        return self.sent_result(path, public_id, payload)

    async def upload_remote(
        self,
        source_url: str,
        public_id: Optional[str] = None,
        options: Optional[UploadOptions] = None,
        simulate: bool = False
    ) -> UploadResult:
        """Ask the service to fetch and store a remote file."""
        options = options or UploadOptions(random_public_id=True)
        encoded = self.build_url_request(source_url, public_id, options)
        if simulate:
            return self.simulated_result(source_url, public_id)
        logger.info(f"Uploading from {source_url}")
        payload = await self._transport.send(encoded)
        return self.sent_result(source_url, public_id, payload)
