import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from autocomment.core.exceptions import ConfigurationError

DEFAULT_CONFIG_RELPATH = Path(".autocomment") / "config.yaml"


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class HttpSettings:
    timeout: float


@dataclass(frozen=True, slots=True)
class Settings:
    config_file: Path
    logging: LoggingSettings
    http: HttpSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    config_file = _ge_env_or_default("AUTOCOMMENT_CONFIG_FILE")
    logging_backend = _ge_env_or_default("AUTOCOMMENT_LOGGER_BACKEND", "console").lower()
    logging_name = _ge_env_or_default("AUTOCOMMENT_LOGGER_NAME", "autocomment")
    logging_level = _ge_env_or_default("AUTOCOMMENT_LOG_LEVEL", "WARNING").upper()
    logfire_token = _ge_env_or_default("AUTOCOMMENT_LOGFIRE_TOKEN")
    http_timeout = _env_positive_float("AUTOCOMMENT_HTTP_TIMEOUT", 10.0)

    return Settings(
        config_file=Path(config_file).expanduser() if config_file else default_config_file(),
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            level=logging_level,
            logfire_token=logfire_token,
        ),
        http=HttpSettings(timeout=http_timeout),
    )


def default_config_file() -> Path:
    try:
        return Path.home() / DEFAULT_CONFIG_RELPATH
    except RuntimeError:
        return DEFAULT_CONFIG_RELPATH


def _ge_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_float(name: str, default: float) -> float:
    value = _ge_env_or_default(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from error


def _env_positive_float(name: str, default: float) -> float:
    value = _env_float(name, default)
    if value <= 0:
        raise ConfigurationError(f"{name} must be greater than zero, got {value!r}")
    return value
