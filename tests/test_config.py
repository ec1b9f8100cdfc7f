from __future__ import annotations

from pathlib import Path

import pytest

from contactbook.config import AppConfig, configure_logging
from contactbook.errors import ConfigError

ENV_VARS = (
    "CONTACTBOOK_DB_PATH",
    "CONTACTBOOK_LOG_DIR",
    "CONTACTBOOK_LOG_LEVEL",
    "CONTACTBOOK_PHONE_FORMAT",
    "CONTACTBOOK_DEFAULT_REGION",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults() -> None:
    cfg = AppConfig.from_env(dotenv=False)

    assert cfg.db_path == Path("data/contacts.db")
    assert cfg.log_dir == Path("logs")
    assert cfg.log_level == "INFO"
    assert cfg.phone_format == "any"
    assert cfg.default_region == "US"


def test_from_env_reads_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONTACTBOOK_DB_PATH", str(tmp_path / "book.db"))
    monkeypatch.setenv("CONTACTBOOK_LOG_LEVEL", "debug")
    monkeypatch.setenv("CONTACTBOOK_PHONE_FORMAT", "E164")
    monkeypatch.setenv("CONTACTBOOK_DEFAULT_REGION", "gb")

    cfg = AppConfig.from_env(dotenv=False)

    assert cfg.db_path == tmp_path / "book.db"
    assert cfg.log_level == "DEBUG"
    assert cfg.phone_format == "e164"
    assert cfg.default_region == "GB"


def test_unknown_phone_format_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONTACTBOOK_PHONE_FORMAT", "strict")

    with pytest.raises(ConfigError) as ei:
        AppConfig.from_env(dotenv=False)

    assert ei.value.key == "phone_format"
    assert "strict" in str(ei.value)


def test_unknown_log_level_raises() -> None:
    with pytest.raises(ConfigError):
        AppConfig(log_level="chatty")


def test_string_paths_become_paths() -> None:
    cfg = AppConfig(db_path="x/y.db", log_dir="z")

    assert cfg.db_path == Path("x/y.db")
    assert cfg.log_dir == Path("z")
    assert cfg.to_dict()["db_path"] == str(Path("x/y.db"))


def test_configure_logging_creates_dated_file(tmp_path: Path) -> None:
    cfg = AppConfig(log_dir=tmp_path / "logs")

    log_file = configure_logging(cfg)

    assert log_file.parent == tmp_path / "logs"
    assert log_file.name.startswith("contactbook_")
    assert log_file.exists()
