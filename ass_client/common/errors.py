"""Error taxonomy for the storage client.

Every failure surfaced to callers is an :class:`AssError`. The ``kind``
attribute identifies the cause; the concrete subclass allows catching a
single kind directly. Underlying exceptions are chained as ``__cause__``.
"""

from __future__ import annotations

from enum import Enum


class AssErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    URL_DOES_NOT_MATCH_ACCOUNT = "url_does_not_match_account"
    INVALID_FILE_NAME = "invalid_file_name"
    INVALID_ACCOUNT_FILE = "invalid_account_file"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IO = "io"
    TRANSPORT = "transport"
    JSON = "json"


class AssError(Exception):
    """Base class for all storage client errors."""

    kind: AssErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidUrlError(AssError):
    """Raised when a string does not parse as an absolute URL."""

    kind = AssErrorKind.INVALID_URL

    def __init__(self, url: str, reason: str | None = None) -> None:
        message = f"Invalid url: {url}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.url = url


class UrlDoesNotMatchAccountError(AssError):
    """Raised when signing a URL that does not belong to the account."""

    kind = AssErrorKind.URL_DOES_NOT_MATCH_ACCOUNT

    def __init__(self, url: str) -> None:
        super().__init__(f"Url does not match the given account: {url}")
        self.url = url


class _FileError(AssError):
    _label = "File error"

    def __init__(self, file: str, err: str) -> None:
        super().__init__(f"{self._label} ({file}): {err}")
        self.file = file
        self.err = err


class InvalidFileNameError(_FileError):
    kind = AssErrorKind.INVALID_FILE_NAME
    _label = "Error accessing file"


class InvalidAccountFileError(_FileError):
    kind = AssErrorKind.INVALID_ACCOUNT_FILE
    _label = "Invalid account file"


class NotFoundError(_FileError):
    kind = AssErrorKind.NOT_FOUND
    _label = "File not found"


class PermissionDeniedError(_FileError):
    kind = AssErrorKind.PERMISSION_DENIED
    _label = "Permission denied"


class IOFailureError(_FileError):
    kind = AssErrorKind.IO
    _label = "IO error"


class TransportError(AssError):
    """Raised when the HTTP layer reports a failure."""

    kind = AssErrorKind.TRANSPORT

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class JsonError(AssError):
    """Raised when a response body cannot be decoded."""

    kind = AssErrorKind.JSON


def file_access_error(path: str, exc: OSError) -> AssError:
    """Map a local file access failure onto the error taxonomy."""
    if isinstance(exc, FileNotFoundError):
        return NotFoundError(path, str(exc))
    if isinstance(exc, PermissionError):
        return PermissionDeniedError(path, str(exc))
    return IOFailureError(path, str(exc))


__all__ = [
    "AssError",
    "AssErrorKind",
    "InvalidAccountFileError",
    "InvalidFileNameError",
    "InvalidUrlError",
    "IOFailureError",
    "JsonError",
    "NotFoundError",
    "PermissionDeniedError",
    "TransportError",
    "UrlDoesNotMatchAccountError",
    "file_access_error",
]
