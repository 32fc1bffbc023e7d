"""HTTP client protocol and data types.

This module defines the transport interface the services send requests
through. The library ships a ``requests`` implementation; callers may
inject any object that satisfies :class:`HttpClient`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Mapping, Protocol, Sequence


@dataclass(frozen=True, slots=True)
class MultipartFile:
    """A file part of a multipart/form-data request body."""

    field_name: str
    filename: str
    content: bytes | BinaryIO
    content_type: str | None = None


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Status, headers and raw body of a completed request."""

    status_code: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HttpClient(Protocol):
    """Protocol defining the transport used by the services."""

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        files: Sequence[MultipartFile] | None = None,
    ) -> HttpResponse:
        """Send a request and return the response.

        Args:
            method: HTTP method, e.g. ``GET``.
            url: Absolute request URL including the query string.
            headers: Request headers.
            files: Parts to send as a multipart/form-data body.

        Returns:
            HttpResponse for any status code the server answered with.

        Raises:
            TransportError: If no response could be obtained.
        """
        ...


__all__ = ["HttpClient", "HttpResponse", "MultipartFile"]
