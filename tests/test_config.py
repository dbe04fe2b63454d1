from __future__ import annotations

import pytest

from config import DEFAULT_DB_DSN, DEFAULT_PORT, ConfigError, load_config, parse_port


def test_defaults() -> None:
    config = load_config({})
    assert config.db_dsn == DEFAULT_DB_DSN
    assert config.port == DEFAULT_PORT
    assert config.log_level == "INFO"
    assert config.socketio_async_mode is None


def test_environment_values() -> None:
    config = load_config(
        {
            "DB_DSN": "postgresql://user@db/sudoku",
            "APP_PORT": ":9090",
            "APP_HOST": "127.0.0.1",
            "LOG_LEVEL": "debug",
            "SOCKETIO_ASYNC_MODE": "threading",
        }
    )
    assert config.db_dsn == "postgresql://user@db/sudoku"
    assert config.port == 9090
    assert config.host == "127.0.0.1"
    assert config.log_level == "DEBUG"
    assert config.socketio_async_mode == "threading"


@pytest.mark.parametrize("value", ["abc", "0", "70000", ":"])
def test_invalid_port(value) -> None:
    with pytest.raises(ConfigError):
        parse_port(value)


def test_dotenv_file_is_loaded(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("APP_PORT=7000\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APP_PORT", "")
    monkeypatch.delenv("APP_PORT")
    assert load_config().port == 7000
