"""
Centralized configuration management for todolist.

Provides a unified interface for accessing environment variables and
configuration with defaults and validation.
"""

import os
from dataclasses import dataclass
from typing import Optional


class Config:
    """
    Centralized configuration management.

    Provides access to environment variables and configuration with
    sensible defaults and validation.
    """

    @staticmethod
    def get(key: str, default: Optional[str] = None) -> str:
        """
        Get an environment variable with an optional default.

        Args:
            key: Environment variable name
            default: Default value if not set

        Returns:
            Environment variable value, default, or empty string
        """
        return os.getenv(key, default) or ""

    @staticmethod
    def get_int(key: str, default: int) -> int:
        """
        Get an integer environment variable.

        Raises:
            ValueError: If the variable is set but is not an integer
        """
        value = os.getenv(key, "").strip()
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Environment variable {key} must be an integer, got {value!r}")

    @staticmethod
    def db_host() -> Optional[str]:
        """
        Get the database host from environment.

        Either a hostname or an absolute unix-socket directory such as
        /cloudsql/project:region:instance.
        """
        return Config.get("DB_HOST") or None

    @staticmethod
    def db_user() -> Optional[str]:
        """Get the database user from environment."""
        return Config.get("DB_USER") or None

    @staticmethod
    def db_password() -> Optional[str]:
        """Get the database password from environment."""
        return Config.get("DB_PASSWORD") or None

    @staticmethod
    def db_name() -> Optional[str]:
        """Get the database name from environment."""
        return Config.get("DB_NAME") or None

    @staticmethod
    def db_pool_size() -> int:
        """
        Get the maximum number of pooled database connections.

        Returns:
            Pool size (defaults to 10)
        """
        size = Config.get_int("DB_POOL_SIZE", 10)
        if size < 1:
            raise ValueError(f"DB_POOL_SIZE must be at least 1, got {size}")
        return size

    @staticmethod
    def server_host() -> str:
        """Get the interface the HTTP server binds to (defaults to 0.0.0.0)."""
        return Config.get("HOST", "0.0.0.0")

    @staticmethod
    def server_port() -> int:
        """Get the HTTP server port (defaults to 8000)."""
        return Config.get_int("PORT", 8000)

    @staticmethod
    def log_level() -> str:
        """Get the log level name (defaults to INFO)."""
        return Config.get("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters for the todo database."""

    host: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None
    pool_size: int = 10

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        """Build settings from DB_HOST, DB_USER, DB_PASSWORD, DB_NAME and DB_POOL_SIZE."""
        return cls(
            host=Config.db_host(),
            user=Config.db_user(),
            password=Config.db_password(),
            database=Config.db_name(),
            pool_size=Config.db_pool_size(),
        )

    @property
    def is_socket(self) -> bool:
        """True when host names a unix-socket directory rather than a hostname."""
        return bool(self.host) and self.host.startswith("/")

