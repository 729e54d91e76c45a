"""Unit tests for configuration management."""

import pytest

from todolist.config import Config, DatabaseSettings


class TestConfig:
    """Test cases for Config accessors."""

    def test_get_default(self, monkeypatch):
        """Test default value when the variable is unset."""
        monkeypatch.delenv("TODOLIST_TEST_VAR", raising=False)
        assert Config.get("TODOLIST_TEST_VAR", "fallback") == "fallback"

    def test_get_int_invalid(self, monkeypatch):
        """Test that a non-integer value is rejected with the variable name."""
        monkeypatch.setenv("PORT", "eighty")
        with pytest.raises(ValueError, match="PORT must be an integer"):
            Config.server_port()

    def test_server_defaults(self, monkeypatch):
        """Test server host, port and log level defaults."""
        monkeypatch.delenv("HOST", raising=False)
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert Config.server_host() == "0.0.0.0"
        assert Config.server_port() == 8000
        assert Config.log_level() == "INFO"

    def test_pool_size_default(self, monkeypatch):
        """Test that the pool holds ten connections by default."""
        monkeypatch.delenv("DB_POOL_SIZE", raising=False)
        assert Config.db_pool_size() == 10

    def test_pool_size_must_be_positive(self, monkeypatch):
        """Test that a zero pool size is rejected."""
        monkeypatch.setenv("DB_POOL_SIZE", "0")
        with pytest.raises(ValueError, match="at least 1"):
            Config.db_pool_size()


class TestDatabaseSettings:
    """Test cases for DatabaseSettings."""

    def test_from_env(self, monkeypatch):
        """Test reading every connection setting from the environment."""
        monkeypatch.setenv("DB_HOST", "db.internal")
        monkeypatch.setenv("DB_USER", "todos_user")
        monkeypatch.setenv("DB_PASSWORD", "secret")
        monkeypatch.setenv("DB_NAME", "todos_db")
        monkeypatch.setenv("DB_POOL_SIZE", "4")

        settings = DatabaseSettings.from_env()

        assert settings == DatabaseSettings(
            host="db.internal",
            user="todos_user",
            password="secret",
            database="todos_db",
            pool_size=4,
        )
        assert settings.is_socket is False

    def test_from_env_unset(self, monkeypatch):
        """Test that unset variables become None rather than empty strings."""
        for key in ("DB_HOST", "DB_USER", "DB_PASSWORD", "DB_NAME", "DB_POOL_SIZE"):
            monkeypatch.delenv(key, raising=False)
        settings = DatabaseSettings.from_env()
        assert settings.host is None
        assert settings.database is None
        assert settings.pool_size == 10
        assert settings.is_socket is False

    def test_socket_host(self):
        """Test that an absolute path is recognized as a socket directory."""
        settings = DatabaseSettings(host="/cloudsql/project:region:instance")
        assert settings.is_socket is True
