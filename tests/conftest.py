from __future__ import annotations

from pathlib import Path

import pytest

from ass_client.common.config import Settings, get_settings
from ass_client.domain.account import Account
from tests.services.mock_http import MockHttpClient

DATA_DIR = Path(__file__).parent / "data"
ACCOUNT_FILE = DATA_DIR / "account.json"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def account_file() -> Path:
    return ACCOUNT_FILE


@pytest.fixture()
def account() -> Account:
    return Account.from_file(ACCOUNT_FILE)


@pytest.fixture()
def settings() -> Settings:
    return Settings(ENABLE_METRICS=True)


@pytest.fixture()
def mock_http() -> MockHttpClient:
    return MockHttpClient()
