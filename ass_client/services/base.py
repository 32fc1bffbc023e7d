from __future__ import annotations

import json
import logging
import re
import time
from typing import Any, Mapping, Sequence

from ass_client.common.config import Settings, get_settings
from ass_client.common.errors import TransportError
from ass_client.common.urls import strip_query
from ass_client.domain.account import Account
from ass_client.infra.http.client import HttpClient, HttpResponse, MultipartFile
from ass_client.infra.http.request_builder import build_headers, resolve, validate_headers
from ass_client.infra.http.requests_client import RequestsHttpClient
from ass_client.infra.observability.metrics import record_request

logger = logging.getLogger("ass_client.http")

# Response bodies included in trace logs are cut to this many characters.
TRACE_BODY_LIMIT = 2048

SENSITIVE_KEYS = {
    "password",
    "secret",
    "token",
    "access_token",
    "accesstoken",
    "refresh_token",
    "api_key",
    "apikey",
    "x-api-key",
    "authorization",
}

_SENSITIVE_TEXT = (
    re.compile(r"(?i)authorization\s*:\s*bearer\s+[A-Za-z0-9\-_.]+"),
    re.compile(
        r"(?i)(accesstoken|token|secret|apikey|api_key|x-api-key|password|authorization)"
        r"\s*[:=]\s*[^\s&\"]+"
    ),
)


def _mask_mapping(obj: Any) -> Any:
    if isinstance(obj, dict):
        masked: dict[Any, Any] = {}
        for key, value in obj.items():
            if isinstance(key, str) and key.lower() in SENSITIVE_KEYS:
                masked[key] = "***"
            else:
                masked[key] = _mask_mapping(value)
        return masked
    if isinstance(obj, list):
        return [_mask_mapping(item) for item in obj]
    return obj


def _mask_text(text: str) -> str:
    # token=xxxx, apikey: xxxx, Authorization: bearer xxxx
    for pattern in _SENSITIVE_TEXT:
        text = pattern.sub(
            lambda m: re.split(r"\s*[:=]", m.group(0), maxsplit=1)[0] + ": ***",
            text,
        )
    return text


def mask_body(body: str) -> str:
    """Mask credentials in a response body before it is logged."""
    try:
        parsed = json.loads(body)
    except ValueError:
        return _mask_text(body)
    return json.dumps(_mask_mapping(parsed), ensure_ascii=False)


class BaseService:
    """Shared plumbing for the storage services.

    Holds the account and the injected HTTP client, and sends authenticated
    requests with logging and metrics around them.
    """

    def __init__(
        self,
        account: Account,
        *,
        http_client: HttpClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._account = account
        self._settings = settings or get_settings()
        # A client built here is owned, and closed, by the service.
        self._owns_http = http_client is None
        self._http = http_client or RequestsHttpClient.from_settings(self._settings)

    @property
    def account(self) -> Account:
        return self._account

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _url(self, *segments: str) -> str:
        return resolve(self._account.url(), *segments)

    def _request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        extra_headers: Mapping[str, str] | None = None,
        files: Sequence[MultipartFile] | None = None,
    ) -> HttpResponse:
        headers = build_headers(self._account)
        if extra_headers:
            headers.update(validate_headers(dict(extra_headers)))

        start = time.perf_counter()
        try:
            response = self._http.send(method, url, headers=headers, files=files)
        except TransportError:
            elapsed = time.perf_counter() - start
            self._record(method, operation, "error", elapsed)
            logger.warning(
                "request_error method=%s operation=%s url=%s duration_ms=%.3f",
                method,
                operation,
                strip_query(url),
                round(elapsed * 1000, 3),
                exc_info=True,
            )
            raise

        elapsed = time.perf_counter() - start
        self._record(method, operation, str(response.status_code), elapsed)
        self._log_response(method, operation, url, response, elapsed)

        if not response.ok:
            raise TransportError(
                f"{method} {strip_query(url)} failed with status {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def _record(self, method: str, operation: str, status: str, elapsed: float) -> None:
        if self._settings.ENABLE_METRICS:
            record_request(method, operation, status, elapsed)

    def _log_response(
        self,
        method: str,
        operation: str,
        url: str,
        response: HttpResponse,
        elapsed: float,
    ) -> None:
        level = logging.DEBUG if response.ok else logging.WARNING
        if not logger.isEnabledFor(level):
            return
        duration_ms = round(elapsed * 1000, 3)
        extra_payload: dict[str, object] = {
            "method": method,
            "operation": operation,
            "url": strip_query(url),
            "status": response.status_code,
            "duration_ms": duration_ms,
        }
        if self._settings.TRACE_HTTP:
            body = mask_body(response.text)
            if len(body) > TRACE_BODY_LIMIT:
                body = body[:TRACE_BODY_LIMIT] + "...<truncated>"
            extra_payload["response_body"] = body
        logger.log(
            level,
            "request method=%s operation=%s url=%s status=%s duration_ms=%.3f",
            method,
            operation,
            strip_query(url),
            response.status_code,
            duration_ms,
            extra={"extra": extra_payload},
        )
