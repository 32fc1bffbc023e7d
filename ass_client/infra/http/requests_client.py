"""``requests`` based HTTP client.

Dependencies:
    - requests
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Sequence

import requests

from ass_client.common.errors import TransportError
from ass_client.infra.http.client import HttpResponse, MultipartFile

if TYPE_CHECKING:
    from ass_client.common.config import Settings


class RequestsHttpClient:
    """HTTP client backed by a single ``requests.Session``.

    Create one per application and share it; the session is closed by
    :meth:`close` or when used as a context manager.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout = timeout
        self._session = session or self._build_session()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RequestsHttpClient":
        return cls(timeout=settings.ASS_HTTP_TIMEOUT)

    @staticmethod
    def _build_session() -> requests.Session:
        return requests.Session()

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        files: Sequence[MultipartFile] | None = None,
    ) -> HttpResponse:
        """Send a request through the session."""
        kwargs: dict[str, Any] = {"headers": dict(headers), "timeout": self._timeout}
        if files:
            kwargs["files"] = [
                (part.field_name, (part.filename, part.content, part.content_type))
                for part in files
            ]

        try:
            response = self._session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise TransportError(f"{method} request failed: {exc}") from exc

        return HttpResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "RequestsHttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
