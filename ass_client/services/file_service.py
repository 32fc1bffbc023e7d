"""File operations against the storage.

Search, upload and metadata lookups for files, plus signed public URLs.
"""

from __future__ import annotations

import os
from typing import Mapping

from ass_client.common.errors import file_access_error
from ass_client.common.paths import filename_of
from ass_client.common.urls import QueryParams
from ass_client.domain.document import AssData
from ass_client.domain.records import FileData
from ass_client.domain.signing import sign_url
from ass_client.infra.http.client import MultipartFile
from ass_client.infra.http.decoding import decode_document, decode_documents, decode_record
from ass_client.infra.http.request_builder import resolve_with_query
from ass_client.services.base import BaseService

UPLOAD_FIELD = "file"


class FileService(BaseService):
    """Application service for stored files."""

    def search(self, queries: QueryParams) -> list[AssData]:
        """Search files; each hit is returned as a generic document.

        Args:
            queries: Search filters sent as query parameters.
        """
        url = resolve_with_query(self._url("files"), queries)
        response = self._request("GET", url, operation="files.search")
        return decode_documents(response.body)

    def upload_file(self, path: str | os.PathLike, destination: str) -> FileData:
        """Upload a local file to ``files/<destination><filename>``.

        ``destination`` is resolved as a relative URL, so it should end with
        ``/`` to be used as a directory.

        Raises:
            InvalidFileNameError: If ``path`` has no file name.
            NotFoundError: If the local file does not exist.
            TransportError: If the request fails.
            JsonError: If the response is not a file record.
        """
        return self.upload_file_with_headers(path, destination, {})

    def upload_file_with_headers(
        self,
        path: str | os.PathLike,
        destination: str,
        headers: Mapping[str, str],
    ) -> FileData:
        """Upload a local file, sending additional request headers."""
        filename = filename_of(path)
        url = self._url(f"files/{destination}", filename)
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise file_access_error(os.fsdecode(path), exc) from exc
        with handle:
            response = self._request(
                "POST",
                url,
                operation="files.upload",
                extra_headers=headers,
                files=[MultipartFile(UPLOAD_FIELD, filename, handle)],
            )
        return decode_record(response.body, FileData)

    def upload_file_with_cache(
        self,
        path: str | os.PathLike,
        destination: str,
        expiration: int,
    ) -> FileData:
        """Upload a local file with a cache lifetime of ``expiration`` seconds."""
        return self.upload_file_with_headers(
            path,
            destination,
            {"Cache-Control": f"max-age: {int(expiration)}"},
        )

    def get_file_url(self, path: str) -> str:
        """Signed public URL for the file stored at ``path``."""
        url = self._url(f"users/{self._account.name}/files/{path}")
        return sign_url(self._account, url)

    def get_file_information(self, file_id: int) -> FileData:
        url = self._url(f"files/{file_id}")
        response = self._request("GET", url, operation="files.get")
        return decode_record(response.body, FileData)

    def get_file_analysis(self, file_id: int) -> AssData:
        # The analysis payload has no fixed schema.
        url = self._url(f"files/{file_id}/analysis")
        response = self._request("GET", url, operation="files.analysis")
        return decode_document(response.body)

    def get_file_render(self, file_id: int) -> FileData:
        url = self._url(f"files/{file_id}/image")
        response = self._request("GET", url, operation="files.render")
        return decode_record(response.body, FileData)
