"""DriveExportService: saves content to Drive (auth -> parents -> session -> upload)."""

from __future__ import annotations

import copy
from typing import Any, Optional

import httpx

from driveexport.auth import AuthConfig, Authorizer, GoogleAuthorizer, obtain_token
from driveexport.drive import FolderCache, FolderResolver, UploadSession
from driveexport.drive.endpoints import bearer_headers, file_url
from driveexport.errors import DownloadError, NetworkError, parse_drive_error
from driveexport.models import FileResource, MediaPayload, SaveRequest
from driveexport.settings import DriveExportSettings
from driveexport.util.log import get_logger

logger = get_logger(__name__)


class DriveExportService:
    """
    Creates and updates Drive files from save requests.

    Notes:
        - The folder cache belongs to this instance unless one is injected.
        - The HTTP client is closed by `aclose()` only when this instance
          created it.
    """

    def __init__(
        self,
        settings: Optional[DriveExportSettings] = None,
        *,
        authorizer: Optional[Authorizer] = None,
        client: Optional[httpx.AsyncClient] = None,
        folder_cache: Optional[FolderCache] = None,
    ) -> None:
        self._settings = settings or DriveExportSettings()
        self._authorizer = authorizer or GoogleAuthorizer(self._settings)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self._settings.timeout)
        self._folder_cache = folder_cache or FolderCache()

        self._session = UploadSession(self._client, self._settings.upload_url)
        self._folders = FolderResolver(
            self._client,
            self._authorizer,
            self._folder_cache,
            files_url=self._settings.files_url,
            folder_create_url=self._settings.folder_create_url,
        )

    @property
    def settings(self) -> DriveExportSettings:
        return self._settings

    @property
    def folders(self) -> FolderResolver:
        return self._folders

    @property
    def folder_cache(self) -> FolderCache:
        return self._folder_cache

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> DriveExportService:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ----------------------------
    # Request building
    # ----------------------------
    def build_resource(self, request: SaveRequest) -> FileResource:
        """Return a copy of `request.meta` with the default description applied."""
        resource: FileResource = copy.deepcopy(request.meta) if request.meta else {}
        if not resource.get("description") and self._settings.file_description:
            resource["description"] = self._settings.file_description
        return resource

    def build_media(self, request: SaveRequest) -> MediaPayload:
        mime_type = request.type or self._settings.file_type or ""
        return MediaPayload.build(request.body, mime_type)

    # ----------------------------
    # Public API
    # ----------------------------
    async def save(self, request: SaveRequest) -> FileResource:
        """Create a file, or update it when `request.id` is set."""
        resource = self.build_resource(request)
        media = self.build_media(request)
        if request.id:
            return await self.update(request.id, resource, media, request.auth)
        return await self.create(resource, media, request.auth)

    async def create(
        self,
        resource: FileResource,
        media: MediaPayload,
        auth: Optional[AuthConfig] = None,
    ) -> FileResource:
        """
        Create a Drive file.

        Parent references in `resource["parents"]` are resolved (and missing
        folders created) before the upload session is opened. The returned
        resource carries the resolved parent objects under `parents`.
        """
        self._apply_default_mime(resource)
        token = await self.authorize(auth)

        resolved = None
        if resource.get("parents"):
            resolved = await self._folders.resolve_all(resource["parents"], token)
            if resolved:
                resource["parents"] = [p.id for p in resolved]
            else:
                del resource["parents"]
        else:
            resource.pop("parents", None)

        session_url = await self._session.initialize(token, resource)
        result = await self._session.upload(token, session_url, media.body, media.mime_type)

        if isinstance(result, dict):
            if resolved is not None:
                result["parents"] = [p.to_dict() for p in resolved]
            logger.info(f"Created Drive file {result.get('id')}")
        return result

    async def update(
        self,
        file_id: str,
        resource: FileResource,
        media: MediaPayload,
        auth: Optional[AuthConfig] = None,
    ) -> FileResource:
        """Upload new content (and metadata) for an existing Drive file."""
        self._apply_default_mime(resource)
        token = await self.authorize(auth)

        session_url = await self._session.initialize(token, resource, file_id)
        result = await self._session.upload(token, session_url, media.body, media.mime_type)
        logger.info(f"Updated Drive file {file_id}")
        return result

    async def authorize(self, auth: Optional[AuthConfig] = None) -> str:
        """Return the access token for a request (see `obtain_token`)."""
        return await obtain_token(self._authorizer, auth)

    async def list_app_folders(self, interactive: bool = True) -> list[dict[str, str]]:
        return await self._folders.list_app_folders(interactive)

    async def get_file(self, file_id: str) -> str:
        """
        Download the content of a file as text.

        Raises:
            DownloadError: on HTTP status >= 400. The message is `"<code>: <message>"`
                from a Drive error body when available, else the raw body.
        """
        token = await self.authorize()
        url = file_url(self._settings.files_url, file_id)

        try:
            response = await self._client.get(
                url,
                params={"alt": "media"},
                headers=bearer_headers(token),
            )
        except httpx.TransportError as exc:
            raise NetworkError(
                "Network error while downloading file",
                details={"file_id": file_id},
                cause=exc,
            ) from exc

        body = response.text
        if response.status_code >= 400:
            info = parse_drive_error(body)
            message = (info.describe() if info else None) or body
            raise DownloadError(
                message,
                details={"status_code": response.status_code, "file_id": file_id},
            )
        return body

    def clear_folder_cache(self) -> None:
        self._folder_cache.clear()

    # ----------------------------
    # Internals
    # ----------------------------
    def _apply_default_mime(self, resource: FileResource) -> None:
        if not resource.get("mimeType") and self._settings.mime:
            resource["mimeType"] = self._settings.mime
