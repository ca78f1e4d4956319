"""Tests for AppConfig."""

from linkding_sync.config import AppConfig


class TestAppConfig:
    def test_defaults(self, monkeypatch):
        """Without environment overrides the documented defaults apply."""
        monkeypatch.delenv("LINKDING_SYNC_VAULT_DIR", raising=False)
        config = AppConfig(_env_file=None)
        assert config.settings_path == "./data/settings.yaml"
        assert config.vault_dir == "./vault"
        assert config.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        """LINKDING_SYNC_* variables override the defaults."""
        monkeypatch.setenv("LINKDING_SYNC_VAULT_DIR", "/srv/vault")
        monkeypatch.setenv("LINKDING_SYNC_PORT", "8080")
        config = AppConfig(_env_file=None)
        assert config.vault_dir == "/srv/vault"
        assert config.port == 8080
