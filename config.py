import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_DB_DSN = "sqlite:///sudoku.db"
DEFAULT_PORT = 8080
DEFAULT_STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


class ConfigError(ValueError):
    pass


@dataclass
class Config:
    db_dsn: str = DEFAULT_DB_DSN
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    static_dir: str = DEFAULT_STATIC_DIR
    log_level: str = "INFO"
    socketio_async_mode: Optional[str] = None


def parse_port(value):
    # Accept both "8080" and the ":8080" listen-address form.
    text = str(value).strip().lstrip(":")
    try:
        port = int(text)
    except ValueError:
        raise ConfigError(f"APP_PORT must be a port number, got {value!r}")
    if not 0 < port < 65536:
        raise ConfigError(f"APP_PORT out of range: {port}")
    return port


def load_config(env=None):
    """Build a :class:`Config` from the environment.

    A ``.env`` file in the working directory (or a parent) is loaded first
    when ``env`` is not given; real environment variables win over it.
    """
    if env is None:
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)
        else:
            logger.warning(".env file not found")
        env = os.environ

    db_dsn = env.get("DB_DSN")
    if not db_dsn:
        logger.warning("DB_DSN is not set, using %s", DEFAULT_DB_DSN)
        db_dsn = DEFAULT_DB_DSN

    port = env.get("APP_PORT")
    return Config(
        db_dsn=db_dsn,
        host=env.get("APP_HOST", "0.0.0.0"),
        port=parse_port(port) if port else DEFAULT_PORT,
        static_dir=env.get("STATIC_DIR", DEFAULT_STATIC_DIR),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        socketio_async_mode=env.get("SOCKETIO_ASYNC_MODE") or None,
    )


def setup_logging(level="INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
