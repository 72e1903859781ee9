"""
Service Configuration

Reads database settings from the environment (and a .env file, if present).
The listening address is fixed and not configurable.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from dagstore.errors import ConfigurationError


HOST = "127.0.0.1"
PORT = 3000

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def load_environment() -> None:
    """Load .env into the process environment without overriding real variables"""
    load_dotenv(override=False)


def _read_int(env: Mapping[str, str], name: str, default: int, minimum: int = 1) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}")
    return value


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


@dataclass
class PoolConfig:
    """Connection pool configuration"""
    dsn: str
    min_size: int = 2
    max_size: int = 10
    command_timeout: float = 60.0
    acquire_timeout: float = 30.0

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "PoolConfig":
        """
        Create config from environment variables.

        Environment Variables:
            DATABASE_URL: PostgreSQL connection string (required)
            DB_POOL_MIN_SIZE: Minimum pool connections (default: 2)
            DB_POOL_MAX_SIZE: Maximum pool connections (default: 10)
            DB_COMMAND_TIMEOUT: Statement timeout in seconds (default: 60)
            DB_ACQUIRE_TIMEOUT: Connection checkout timeout in seconds (default: 30)

        Raises:
            ConfigurationError: If DATABASE_URL is unset or a value is invalid
        """
        if env is None:
            env = os.environ

        dsn = (env.get("DATABASE_URL") or "").strip()
        if not dsn:
            raise ConfigurationError("DATABASE_URL must be set")

        config = cls(
            dsn=dsn,
            min_size=_read_int(env, "DB_POOL_MIN_SIZE", cls.min_size, minimum=0),
            max_size=_read_int(env, "DB_POOL_MAX_SIZE", cls.max_size),
            command_timeout=_read_float(env, "DB_COMMAND_TIMEOUT", cls.command_timeout),
            acquire_timeout=_read_float(env, "DB_ACQUIRE_TIMEOUT", cls.acquire_timeout),
        )

        if config.min_size > config.max_size:
            raise ConfigurationError(
                f"DB_POOL_MIN_SIZE ({config.min_size}) exceeds DB_POOL_MAX_SIZE ({config.max_size})"
            )

        return config

    @property
    def redacted_dsn(self) -> str:
        """DSN safe for logging (password removed)"""
        scheme, sep, rest = self.dsn.partition("://")
        if not sep or "@" not in rest:
            return self.dsn
        credentials, _, location = rest.rpartition("@")
        user = credentials.split(":", 1)[0]
        return f"{scheme}://{user}:***@{location}"


def log_level(env: Optional[Mapping[str, str]] = None) -> str:
    """Logging level name from LOG_LEVEL (default: INFO)"""
    if env is None:
        env = os.environ
    return (env.get("LOG_LEVEL") or "INFO").upper()
