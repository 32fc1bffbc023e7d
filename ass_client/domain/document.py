from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from ass_client.common.errors import JsonError


@dataclass(frozen=True, slots=True)
class AssData:
    """Untyped JSON document returned by the storage.

    Used where the response schema is not known ahead of time (search
    results, analysis payloads). Accessors return ``None`` when a field is
    absent or has an unexpected type instead of raising.
    """

    value: Any

    @classmethod
    def parse(cls, text: str | bytes) -> "AssData":
        try:
            return cls(json.loads(text))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise JsonError(f"Invalid JSON document: {exc}") from exc

    def get(self, key: str) -> Any | None:
        if isinstance(self.value, dict):
            return self.value.get(key)
        return None

    def get_str(self, key: str) -> str | None:
        found = self.get(key)
        return found if isinstance(found, str) else None

    def get_int(self, key: str) -> int | None:
        found = self.get(key)
        if isinstance(found, bool) or not isinstance(found, int):
            return None
        return found

    def get_id(self) -> int | None:
        return self.get_int("id")

    def get_path(self) -> str | None:
        return self.get_str("path")

    def items(self) -> list["AssData"]:
        if isinstance(self.value, list):
            return [AssData(item) for item in self.value]
        return []

    def as_dict(self) -> dict[str, Any] | None:
        return self.value if isinstance(self.value, dict) else None

    def __str__(self) -> str:
        return json.dumps(self.value, ensure_ascii=False)


__all__ = ["AssData"]
