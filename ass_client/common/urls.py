"""URL parsing, normalization and joining helpers."""

from __future__ import annotations

from typing import Iterable, Mapping
from urllib.parse import SplitResult, unquote_plus, urlencode, urljoin, urlsplit, urlunsplit

from requests.utils import requote_uri

from ass_client.common.errors import InvalidUrlError

QueryParams = Mapping[str, object] | Iterable[tuple[str, object]]


def parse_absolute_url(url: str) -> SplitResult:
    """Split ``url`` and check it is absolute (scheme and host present)."""
    if not isinstance(url, str):
        raise InvalidUrlError(repr(url), "not a string")
    candidate = url.strip()
    try:
        parts = urlsplit(candidate)
        # Accessing the port validates it.
        parts.port
    except ValueError as exc:
        raise InvalidUrlError(url, str(exc)) from exc
    if not parts.scheme:
        raise InvalidUrlError(url, "missing scheme")
    if not parts.netloc or not parts.hostname:
        raise InvalidUrlError(url, "missing host")
    if any(ch.isspace() for ch in parts.netloc):
        raise InvalidUrlError(url, "invalid host")
    return parts


def normalize_url(url: str) -> str:
    """Re-serialize an absolute URL with a lower-case scheme and host.

    Characters that are not legal in a URL (spaces, non-ASCII) are
    percent-encoded as UTF-8; existing escapes are kept.
    """
    parts = parse_absolute_url(url)
    userinfo, _, hostport = parts.netloc.rpartition("@")
    netloc = hostport.lower()
    if userinfo:
        netloc = f"{userinfo}@{netloc}"
    path = parts.path or "/"
    return requote_uri(
        urlunsplit((parts.scheme.lower(), netloc, path, parts.query, parts.fragment))
    )


def join_url(base: str, *segments: str) -> str:
    """Resolve each segment against the result of the previous join."""
    url = normalize_url(base)
    for segment in segments:
        if not isinstance(segment, str):
            raise InvalidUrlError(repr(segment), "path segment is not a string")
        try:
            url = urljoin(url, segment)
        except ValueError as exc:
            raise InvalidUrlError(segment, str(exc)) from exc
    return normalize_url(url)


def _pairs(params: QueryParams) -> list[tuple[str, str]]:
    items = params.items() if isinstance(params, Mapping) else params
    return [(str(key), "" if value is None else str(value)) for key, value in items]


def with_query(url: str, params: QueryParams) -> str:
    """Set query parameters on ``url``.

    Existing query pieces are kept verbatim unless their key is being set,
    in which case they are dropped; the new pairs are appended in order.
    """
    parts = parse_absolute_url(url)
    pairs = _pairs(params)
    if not pairs:
        return urlunsplit(parts)
    keys = {key for key, _ in pairs}
    kept = [
        piece
        for piece in parts.query.split("&")
        if piece and unquote_plus(piece.partition("=")[0]) not in keys
    ]
    kept.append(urlencode(pairs))
    return urlunsplit(parts._replace(query="&".join(kept)))


def strip_query(url: str) -> str:
    """Drop query string and fragment, for logging."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


__all__ = [
    "QueryParams",
    "join_url",
    "normalize_url",
    "parse_absolute_url",
    "strip_query",
    "with_query",
]
