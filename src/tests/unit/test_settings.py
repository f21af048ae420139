"""Tests for settings loading."""

from pathlib import Path

from stevedore.config import CodefreshSettings, LogFormat, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("KUBECONFIG", raising=False)
        monkeypatch.delenv("CODEFRESH_API_URL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.kubeconfig == Path("~/.kube/config").expanduser()
        assert settings.default_namespace == "default"
        assert settings.default_service_account == "default"
        assert settings.codefresh.api_url == "https://g.codefresh.io"

    def test_kubeconfig_list_uses_first_entry(self, monkeypatch):
        """Test KUBECONFIG with several paths keeps the first."""
        monkeypatch.setenv("KUBECONFIG", "/etc/kube/a:/etc/kube/b")

        settings = Settings(_env_file=None)

        assert settings.kubeconfig == Path("/etc/kube/a")

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")

        assert Settings(_env_file=None).log_format == LogFormat.JSON


class TestCodefreshSettings:
    def test_env_prefix(self, monkeypatch):
        """Test CODEFRESH_ variables populate the nested settings."""
        monkeypatch.setenv("CODEFRESH_API_URL", "https://cf.example.com/")
        monkeypatch.setenv("CODEFRESH_API_TOKEN", "secret")

        settings = CodefreshSettings()

        assert settings.api_url == "https://cf.example.com"
        assert settings.api_token == "secret"
