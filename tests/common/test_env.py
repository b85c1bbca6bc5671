"""Tests for environment configuration interface."""

from common.env import Environment, env


class TestEnvironment:
    """Tests for Environment class."""

    def test_log_level_default(self, monkeypatch):
        """Test log_level returns default value."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert Environment.log_level() == "INFO"

    def test_log_level_custom_default(self, monkeypatch):
        """Test log_level falls back to the passed default."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert Environment.log_level(default="warning") == "WARNING"

    def test_log_level_from_env(self, monkeypatch):
        """Test log_level reads from environment and upper-cases it."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Environment.log_level() == "DEBUG"

    def test_reference_tie_break_default(self, monkeypatch):
        """Test reference_tie_break returns default value."""
        monkeypatch.delenv("NOTES_TIE_BREAK", raising=False)
        assert Environment.reference_tie_break() == "first"

    def test_reference_tie_break_from_env(self, monkeypatch):
        """Test reference_tie_break reads from environment."""
        monkeypatch.setenv("NOTES_TIE_BREAK", "Shortest")
        assert Environment.reference_tie_break() == "shortest"


class TestEnvSingleton:
    """Tests for env singleton instance."""

    def test_env_is_environment_instance(self):
        """Test that env is an instance of Environment."""
        assert isinstance(env, Environment)

    def test_env_singleton_methods_work(self, monkeypatch):
        """Test that env singleton methods work."""
        monkeypatch.setenv("NOTES_TIE_BREAK", "shortest")
        assert env.reference_tie_break() == "shortest"
