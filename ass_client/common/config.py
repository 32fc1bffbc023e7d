from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from ass_client.domain.account import Account

ENV_FILE = Path(".env")

DEFAULT_HTTP_TIMEOUT = 30.0
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _load_env_file() -> None:
    if not ENV_FILE.exists():
        return
    for raw_line in ENV_FILE.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "y", "on"}


def _as_optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass
class Settings:
    ASS_ACCOUNT_FILE: str | None = None
    ASS_URL: str | None = None
    ASS_ACCOUNT: str | None = None
    ASS_APIKEY: str | None = None
    ASS_HTTP_TIMEOUT: float = DEFAULT_HTTP_TIMEOUT
    ASS_LOG_LEVEL: str = "INFO"
    ASS_LOG_JSON: bool = True
    ENABLE_METRICS: bool = True
    TRACE_HTTP: bool = False

    def __post_init__(self) -> None:
        if self.ASS_HTTP_TIMEOUT <= 0:
            raise ValueError("ASS_HTTP_TIMEOUT must be a positive number of seconds.")
        self.ASS_LOG_LEVEL = self.ASS_LOG_LEVEL.upper()
        if self.ASS_LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(
                f"ASS_LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}."
            )

    @property
    def has_account(self) -> bool:
        return bool(
            self.ASS_ACCOUNT_FILE
            or (self.ASS_URL and self.ASS_ACCOUNT and self.ASS_APIKEY)
        )

    def load_account(self) -> Account:
        """Build the configured account.

        ``ASS_ACCOUNT_FILE`` takes priority over the explicit
        ``ASS_URL``/``ASS_ACCOUNT``/``ASS_APIKEY`` triple.
        """
        if self.ASS_ACCOUNT_FILE:
            return Account.from_file(self.ASS_ACCOUNT_FILE)
        if self.ASS_URL and self.ASS_ACCOUNT and self.ASS_APIKEY:
            return Account.create(self.ASS_URL, self.ASS_ACCOUNT, self.ASS_APIKEY)
        raise ValueError(
            "No storage account configured: set ASS_ACCOUNT_FILE or "
            "ASS_URL, ASS_ACCOUNT and ASS_APIKEY."
        )

    @classmethod
    def from_environment(cls) -> "Settings":
        _load_env_file()
        return cls(
            ASS_ACCOUNT_FILE=_as_optional(os.environ.get("ASS_ACCOUNT_FILE")),
            ASS_URL=_as_optional(os.environ.get("ASS_URL")),
            ASS_ACCOUNT=_as_optional(os.environ.get("ASS_ACCOUNT")),
            ASS_APIKEY=_as_optional(os.environ.get("ASS_APIKEY")),
            ASS_HTTP_TIMEOUT=float(
                os.environ.get("ASS_HTTP_TIMEOUT", cls.ASS_HTTP_TIMEOUT)
            ),
            ASS_LOG_LEVEL=os.environ.get("ASS_LOG_LEVEL", cls.ASS_LOG_LEVEL),
            ASS_LOG_JSON=_as_bool(os.environ.get("ASS_LOG_JSON"), cls.ASS_LOG_JSON),
            ENABLE_METRICS=_as_bool(
                os.environ.get("ENABLE_METRICS"), cls.ENABLE_METRICS
            ),
            TRACE_HTTP=_as_bool(os.environ.get("TRACE_HTTP"), cls.TRACE_HTTP),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_environment()
