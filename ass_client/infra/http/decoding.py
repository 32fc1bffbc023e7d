"""Decoding of storage response bodies.

Bodies are decoded either into typed records (pydantic models) or into
generic :class:`AssData` documents when the schema is not known ahead of
time. Both malformed bodies and records with missing fields raise
:class:`JsonError`.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ass_client.common.errors import JsonError
from ass_client.domain.document import AssData

RecordT = TypeVar("RecordT", bound=BaseModel)


def _load(body: bytes | str) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise JsonError(f"Response body is not valid JSON: {exc}") from exc


def decode_record(body: bytes | str, model: type[RecordT]) -> RecordT:
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise JsonError(
            f"Response body does not match {model.__name__}: {exc}"
        ) from exc


def decode_records(body: bytes | str, model: type[RecordT]) -> list[RecordT]:
    try:
        return TypeAdapter(list[model]).validate_json(body)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise JsonError(
            f"Response body is not a list of {model.__name__}: {exc}"
        ) from exc


def decode_document(body: bytes | str) -> AssData:
    return AssData(_load(body))


def decode_documents(body: bytes | str) -> list[AssData]:
    """Decode a JSON array into documents; any other value gives ``[]``."""
    return decode_document(body).items()


__all__ = [
    "decode_document",
    "decode_documents",
    "decode_record",
    "decode_records",
]
