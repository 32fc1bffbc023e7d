from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from ass_client.common.config import Settings, get_settings
from ass_client.common.logging import setup_logging
from ass_client.common.urls import QueryParams
from ass_client.domain.account import Account
from ass_client.domain.document import AssData
from ass_client.domain.records import FileData, ImageData
from ass_client.infra.http.client import HttpClient
from ass_client.infra.http.requests_client import RequestsHttpClient

from .file_service import FileService
from .image_service import ImageService


@dataclass
class AssClient:
    """Lazily constructs services sharing one account and one HTTP client."""

    account: Account
    http_client: HttpClient
    settings: Settings = field(default_factory=get_settings)
    _files: FileService | None = field(default=None, init=False, repr=False)
    _images: ImageService | None = field(default=None, init=False, repr=False)

    def files(self) -> FileService:
        if self._files is None:
            self._files = FileService(
                self.account, http_client=self.http_client, settings=self.settings
            )
        return self._files

    def images(self) -> ImageService:
        if self._images is None:
            self._images = ImageService(
                self.account, http_client=self.http_client, settings=self.settings
            )
        return self._images

    def sign_url(self, url: str) -> str:
        return self.account.sign_url(url)

    def search(self, queries: QueryParams) -> list[AssData]:
        return self.files().search(queries)

    def upload_file(self, path: str | os.PathLike, destination: str) -> FileData:
        return self.files().upload_file(path, destination)

    def upload_file_with_headers(
        self,
        path: str | os.PathLike,
        destination: str,
        headers: Mapping[str, str],
    ) -> FileData:
        return self.files().upload_file_with_headers(path, destination, headers)

    def upload_file_with_cache(
        self, path: str | os.PathLike, destination: str, expiration: int
    ) -> FileData:
        return self.files().upload_file_with_cache(path, destination, expiration)

    def get_file_url(self, path: str) -> str:
        return self.files().get_file_url(path)

    def get_file_information(self, file_id: int) -> FileData:
        return self.files().get_file_information(file_id)

    def get_file_analysis(self, file_id: int) -> AssData:
        return self.files().get_file_analysis(file_id)

    def get_file_render(self, file_id: int) -> FileData:
        return self.files().get_file_render(file_id)

    def upload_image(self, path: str | os.PathLike) -> ImageData:
        return self.images().upload_image(path)

    def get_image_information(self, image_id: int) -> ImageData:
        return self.images().get_image_information(image_id)

    def get_image_url(self, image_id: int) -> str:
        return self.images().get_image_url(image_id)

    def close(self) -> None:
        close = getattr(self.http_client, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "AssClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def create_client(
    settings: Settings | None = None,
    *,
    account: Account | None = None,
    http_client: HttpClient | None = None,
    configure_logging: bool = False,
) -> AssClient:
    """Build a client from settings.

    The account comes from ``account`` or ``Settings.load_account()``; the
    HTTP client defaults to a ``requests`` session using the configured
    timeout.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.ASS_LOG_LEVEL, settings.ASS_LOG_JSON)
    return AssClient(
        account=account or settings.load_account(),
        http_client=http_client or RequestsHttpClient.from_settings(settings),
        settings=settings,
    )
