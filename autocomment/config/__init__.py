from autocomment.config.credentials import (
    Credentials,
    load_credentials,
    load_credentials_or_default,
    save_credentials,
)
from autocomment.config.settings import (
    HttpSettings,
    LoggingSettings,
    Settings,
    default_config_file,
    load_settings,
)

__all__ = [
    'Settings',
    'LoggingSettings',
    'HttpSettings',
    'default_config_file',
    'load_settings',
    'Credentials',
    'load_credentials',
    'load_credentials_or_default',
    'save_credentials',
]
