"""Tests de carga de configuración."""

from common.config import get_settings


class TestSettings:

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GFN_ENV_FILE", str(tmp_path / "missing.env"))
        for name in ("GFN_API_BASE_URL", "GFN_USER_AGENT", "GFN_DISPLAY_TZ", "GFN_HTTP_MAX_ATTEMPTS"):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.api_base_url == "https://api.printedwaste.com"
        assert settings.user_agent == "PrintedWasteApp/1.0"
        assert settings.display_timezone is None
        assert settings.http_max_attempts == 3

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GFN_ENV_FILE", str(tmp_path / "missing.env"))
        monkeypatch.setenv("GFN_API_BASE_URL", "http://localhost:9000/")
        monkeypatch.setenv("GFN_DISPLAY_TZ", "Europe/Madrid")
        monkeypatch.setenv("GFN_HTTP_MAX_ATTEMPTS", "0")

        settings = get_settings()

        assert settings.api_base_url == "http://localhost:9000"
        assert settings.display_timezone == "Europe/Madrid"
        assert settings.http_max_attempts == 1

    def test_env_file_does_not_override_real_env(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GFN_REFRESH_SECONDS=30\nGFN_LOG_LEVEL=debug\n")
        monkeypatch.setenv("GFN_ENV_FILE", str(env_file))
        # setenv + delenv registra el estado original para restaurarlo al final
        monkeypatch.setenv("GFN_REFRESH_SECONDS", "0")
        monkeypatch.delenv("GFN_REFRESH_SECONDS")
        monkeypatch.setenv("GFN_LOG_LEVEL", "WARNING")

        settings = get_settings()

        assert settings.refresh_seconds == 30.0
        assert settings.log_level == "WARNING"
