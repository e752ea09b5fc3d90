from pathlib import Path

import pytest
from pydantic import ValidationError

from catsapi.cats.dependencies import build_repository
from catsapi.cats.store import InMemoryCatRepository, JsonFileCatRepository
from catsapi.config import DATA_FILE, Settings

CATS_VARIABLES = [
    "CATS_HOST",
    "CATS_PORT",
    "CATS_STORE_BACKEND",
    "CATS_DATA_FILE",
    "CATS_CATAAS_URL",
    "CATS_CATAAS_TIMEOUT",
    "CATS_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in CATS_VARIABLES:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.store_backend == "json"
    assert settings.data_file == DATA_FILE
    assert settings.cataas_url == "https://cataas.com"
    assert settings.cataas_timeout is None
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CATS_HOST", "0.0.0.0")
    monkeypatch.setenv("CATS_PORT", "9000")
    monkeypatch.setenv("CATS_STORE_BACKEND", "memory")
    monkeypatch.setenv("CATS_DATA_FILE", str(tmp_path / "cats.json"))
    monkeypatch.setenv("CATS_CATAAS_URL", "http://cats.local")
    monkeypatch.setenv("CATS_CATAAS_TIMEOUT", "3")
    monkeypatch.setenv("CATS_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.store_backend == "memory"
    assert settings.data_file == Path(tmp_path / "cats.json")
    assert settings.cataas_url == "http://cats.local"
    assert settings.cataas_timeout == 3.0
    assert settings.log_level == "debug"


def test_empty_variables_keep_defaults(monkeypatch):
    monkeypatch.setenv("CATS_CATAAS_TIMEOUT", "")
    monkeypatch.setenv("CATS_STORE_BACKEND", "")

    settings = Settings()

    assert settings.cataas_timeout is None
    assert settings.store_backend == "json"


def test_unknown_backend_is_rejected(monkeypatch):
    monkeypatch.setenv("CATS_STORE_BACKEND", "mongo")

    with pytest.raises(ValidationError):
        Settings()


def test_build_repository(tmp_path):
    settings = Settings(data_file=tmp_path / "cats.json")
    assert isinstance(build_repository(settings), JsonFileCatRepository)

    settings = Settings(store_backend="memory")
    assert isinstance(build_repository(settings), InMemoryCatRepository)
