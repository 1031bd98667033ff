from pathlib import Path

import pytest

from autocomment.config.settings import DEFAULT_CONFIG_RELPATH, load_settings
from autocomment.core.exceptions import ConfigurationError


class TestLoadSettings:
    def test_defaults(self, monkeypatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        for name in (
            "AUTOCOMMENT_CONFIG_FILE",
            "AUTOCOMMENT_LOGGER_BACKEND",
            "AUTOCOMMENT_LOGGER_NAME",
            "AUTOCOMMENT_LOG_LEVEL",
            "AUTOCOMMENT_LOGFIRE_TOKEN",
            "AUTOCOMMENT_HTTP_TIMEOUT",
        ):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        settings = load_settings()

        assert settings.config_file == tmp_path / DEFAULT_CONFIG_RELPATH
        assert settings.logging.backend == "console"
        assert settings.logging.name == "autocomment"
        assert settings.logging.level == "WARNING"
        assert settings.logging.logfire_token is None
        assert settings.http.timeout == 10.0

    def test_environment_overrides(self, monkeypatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("AUTOCOMMENT_CONFIG_FILE", str(tmp_path / "creds.yaml"))
        monkeypatch.setenv("AUTOCOMMENT_LOGGER_BACKEND", "Logfire")
        monkeypatch.setenv("AUTOCOMMENT_LOG_LEVEL", "debug")
        monkeypatch.setenv("AUTOCOMMENT_HTTP_TIMEOUT", "2.5")

        settings = load_settings()

        assert settings.config_file == Path(tmp_path / "creds.yaml")
        assert settings.logging.backend == "logfire"
        assert settings.logging.level == "DEBUG"
        assert settings.http.timeout == 2.5

    def test_invalid_timeout(self, monkeypatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("AUTOCOMMENT_HTTP_TIMEOUT", "ten")

        with pytest.raises(ConfigurationError) as excinfo:
            load_settings()

        assert excinfo.value.message == "AUTOCOMMENT_HTTP_TIMEOUT must be a number, got 'ten'"

    def test_timeout_must_be_positive(self, monkeypatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("AUTOCOMMENT_HTTP_TIMEOUT", "-1")

        with pytest.raises(ConfigurationError):
            load_settings()
