from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from wireconf._internal.emitter import DEFAULT_VARIABLE
from wireconf.factory import SERVICE_MANAGER_CONFIGURATION_KEY


class DumperSettings(BaseSettings):
    """Defaults for ``ConfigDumper`` and the command line, read from ``WIRECONF_*``.

    Example:
        ``WIRECONF_SERVICE_MANAGER_KEY=dependencies wireconf app.services.Mailer``

    """

    model_config = SettingsConfigDict(env_prefix="WIRECONF_", extra="ignore")

    service_manager_key: str = SERVICE_MANAGER_CONFIGURATION_KEY
    """Key of the service-registration section holding ``factories``."""
    ignore_unresolved: bool = False
    """Leave out classes with untyped or built-in required parameters instead of failing."""
    config_variable: str = DEFAULT_VARIABLE
    """Module-level variable that holds the configuration in generated files."""


__all__ = ["DumperSettings"]
