"""Authenticated headers and URL resolution for storage requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from requests.exceptions import InvalidHeader
from requests.utils import check_header_validity

from ass_client.common.errors import TransportError
from ass_client.common.urls import QueryParams, join_url, with_query

if TYPE_CHECKING:
    from ass_client.domain.account import Account

ACL_HEADER = "x-ass-acl"


def build_headers(account: "Account") -> dict[str, str]:
    """Headers authenticating a request for ``account``.

    Built fresh for every request so a rotated key is picked up.

    Raises:
        TransportError: If the API key cannot be sent as a header value.
    """
    headers = {
        "Authorization": f"bearer {account.api_key}",
        "Accept": "application/json",
        ACL_HEADER: "public",
    }
    for name, value in headers.items():
        _validate_header(name, value)
    return headers


def _validate_header(name: str, value: str) -> None:
    try:
        check_header_validity((name, value))
        value.encode("latin-1")
    except InvalidHeader as exc:
        raise TransportError(f"Invalid value for header {name}") from exc
    except UnicodeEncodeError as exc:
        raise TransportError(f"Header {name} is not latin-1 encodable") from exc


def validate_headers(headers: dict[str, str]) -> dict[str, str]:
    for name, value in headers.items():
        _validate_header(name, value)
    return headers


def resolve(base_url: str, *segments: str) -> str:
    """Join ``segments`` onto ``base_url`` one at a time.

    Each join follows relative-URL resolution, so ``files/dir/`` then
    ``name.txt`` yields ``files/dir/name.txt`` while a base without a
    trailing slash has its last segment replaced.
    """
    return join_url(base_url, *segments)


def resolve_with_query(url: str, params: QueryParams) -> str:
    return with_query(url, params)


__all__ = [
    "ACL_HEADER",
    "build_headers",
    "resolve",
    "resolve_with_query",
    "validate_headers",
]
