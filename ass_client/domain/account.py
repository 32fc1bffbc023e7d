"""Storage account credentials.

An :class:`Account` bundles the storage base URL, the account name and the
API key. It is immutable and safe to share between threads.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ass_client.common.errors import (
    InvalidAccountFileError,
    InvalidUrlError,
    file_access_error,
)
from ass_client.common.urls import normalize_url, parse_absolute_url
from ass_client.domain.signing import sign_url

# Field names of the persisted account descriptor.
DESCRIPTOR_FIELDS: tuple[str, ...] = ("url", "name", "apikey")


@dataclass(frozen=True, slots=True)
class Account:
    base_url: str
    name: str
    api_key: str = field(repr=False)

    def __post_init__(self) -> None:
        parse_absolute_url(self.base_url)

    @classmethod
    def create(cls, base_url: str, name: str, api_key: str) -> "Account":
        """Build an account, validating that ``base_url`` is absolute.

        Raises:
            InvalidUrlError: If ``base_url`` is not an absolute URL.
        """
        return cls(base_url=base_url, name=name, api_key=api_key)

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> "Account":
        """Load an account from a JSON descriptor file.

        The file must hold an object with exactly the string fields
        ``url``, ``name`` and ``apikey``.

        Raises:
            NotFoundError: If the file does not exist.
            PermissionDeniedError: If the file cannot be read.
            InvalidAccountFileError: If the content is not a valid descriptor.
        """
        file_path = Path(path)
        try:
            contents = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidAccountFileError(str(file_path), str(exc)) from exc
        except OSError as exc:
            raise file_access_error(str(file_path), exc) from exc
        return cls.from_json(contents, source=str(file_path))

    @classmethod
    def from_json(cls, contents: str, *, source: str = "<string>") -> "Account":
        try:
            payload = json.loads(contents)
        except json.JSONDecodeError as exc:
            raise InvalidAccountFileError(source, str(exc)) from exc
        return cls.from_dict(payload, source=source)

    @classmethod
    def from_dict(cls, payload: Any, *, source: str = "<dict>") -> "Account":
        if not isinstance(payload, dict):
            raise InvalidAccountFileError(source, "expected a JSON object")
        missing = [key for key in DESCRIPTOR_FIELDS if key not in payload]
        if missing:
            raise InvalidAccountFileError(
                source, f"missing field(s): {', '.join(missing)}"
            )
        unknown = sorted(set(payload) - set(DESCRIPTOR_FIELDS))
        if unknown:
            raise InvalidAccountFileError(
                source, f"unknown field(s): {', '.join(unknown)}"
            )
        for key in DESCRIPTOR_FIELDS:
            if not isinstance(payload[key], str):
                raise InvalidAccountFileError(source, f"field '{key}' must be a string")
        try:
            return cls.create(payload["url"], payload["name"], payload["apikey"])
        except InvalidUrlError as exc:
            raise InvalidAccountFileError(source, exc.message) from exc

    def to_dict(self) -> dict[str, str]:
        return {"url": self.base_url, "name": self.name, "apikey": self.api_key}

    def url(self) -> str:
        """Normalized absolute base URL, e.g. ``http://url`` -> ``http://url/``."""
        return normalize_url(self.base_url)

    def base_url_string(self) -> str:
        return self.url()

    def sign_url(self, url: str) -> str:
        return sign_url(self, url)


__all__ = ["Account", "DESCRIPTOR_FIELDS"]
