"""Typed records returned by the storage.

These mirror the JSON payloads for files and images. Unknown fields are
ignored so that additions on the service side do not break decoding.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class FileData(_Record):
    """Metadata of a stored file."""

    id: int
    user_id: int
    path: str
    md5: str
    content_type: str
    original_url: str
    created: datetime
    updated: datetime


class ImageData(_Record):
    """Metadata of a stored image."""

    id: int
    user_id: int
    md5: str
    original_url: str
    width: int
    height: int
    name: str
    title: str | None = None
    description: str | None = None
    author: str | None = None
    source_url: str | None = None
    created: datetime
    updated: datetime


__all__ = ["FileData", "ImageData"]
