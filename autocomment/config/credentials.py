"""Credentials for both services, kept in a YAML file.

The file lives at ``~/.autocomment/config.yaml`` unless
``AUTOCOMMENT_CONFIG_FILE`` points elsewhere.
"""
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml

from autocomment.core.exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class Credentials:
    jira_user: str = ""
    jira_pass: str = ""
    jira_domain: str = ""
    github_user: str = ""
    github_pass: str = ""
    github_domain: str = ""

    def merged(self, **updates: Optional[str]) -> "Credentials":
        changes = {key: value for key, value in updates.items() if value is not None}
        return replace(self, **changes)

    def missing_fields(self) -> list[str]:
        return [field.name for field in fields(self) if not getattr(self, field.name)]

    def require_complete(self) -> "Credentials":
        missing = self.missing_fields()
        if missing:
            raise ConfigurationError(
                "Missing credentials: " + ", ".join(missing)
                + ". Set them with `autocomment credentials`."
            )
        return self


def load_credentials(path: Path) -> Credentials:
    try:
        with open(path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as error:
        raise ConfigurationError(f"Credentials file {path} not found") from error
    except yaml.YAMLError as error:
        raise ConfigurationError(f"Credentials file {path} is not valid YAML") from error

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Credentials file {path} must contain a mapping")

    known = {field.name for field in fields(Credentials)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in credentials file {path}: {', '.join(unknown)}"
        )
    return Credentials(**{key: str(value) for key, value in data.items() if value is not None})


def load_credentials_or_default(path: Path) -> Credentials:
    if not path.exists():
        return Credentials()
    return load_credentials(path)


def save_credentials(credentials: Credentials, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(asdict(credentials), handle, default_flow_style=False, sort_keys=False)
