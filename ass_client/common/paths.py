from __future__ import annotations

import os
from pathlib import PurePath

from ass_client.common.errors import InvalidFileNameError


def _display(path: str | bytes | os.PathLike) -> str:
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw.encode("utf-8", errors="replace").decode("utf-8")


def filename_of(path: str | bytes | os.PathLike) -> str:
    """Return the final segment of ``path`` as text.

    Only the path string is inspected; the file does not need to exist.

    Raises:
        InvalidFileNameError: If the path has no final segment or the
            segment cannot be represented as UTF-8 text.
    """
    name = PurePath(os.fsdecode(path)).name
    if name in ("", ".", ".."):
        raise InvalidFileNameError(_display(path), "Error parsing filename")
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidFileNameError(_display(path), "Error parsing filename") from exc
    return name


__all__ = ["filename_of"]
