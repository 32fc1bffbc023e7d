from __future__ import annotations

import os

from ass_client.common.errors import file_access_error
from ass_client.common.paths import filename_of
from ass_client.domain.records import ImageData
from ass_client.domain.signing import sign_url
from ass_client.infra.http.client import MultipartFile
from ass_client.infra.http.decoding import decode_record
from ass_client.services.base import BaseService
from ass_client.services.file_service import UPLOAD_FIELD


class ImageService(BaseService):
    """Application service for stored images."""

    def upload_image(self, path: str | os.PathLike) -> ImageData:
        filename = filename_of(path)
        url = self._url("images")
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise file_access_error(os.fsdecode(path), exc) from exc
        with handle:
            response = self._request(
                "POST",
                url,
                operation="images.upload",
                files=[MultipartFile(UPLOAD_FIELD, filename, handle)],
            )
        return decode_record(response.body, ImageData)

    def get_image_information(self, image_id: int) -> ImageData:
        url = self._url(f"images/{image_id}")
        response = self._request("GET", url, operation="images.get")
        return decode_record(response.body, ImageData)

    def get_image_url(self, image_id: int) -> str:
        """Signed public URL of the JPEG rendition of an image."""
        url = self._url(f"users/{self._account.name}/images/{image_id}.jpg")
        return sign_url(self._account, url)
