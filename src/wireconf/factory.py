from __future__ import annotations

from typing import Final

from wireconf._internal.class_loader import qualified_name


class ConfigFactory:
    """Identify the generic factory in generated configuration.

    A container that understands wireconf output constructs every class listed
    under this key by resolving each of its configured dependencies, in order,
    and passing them positionally to the constructor. The same identifier is
    assigned as the factory of each such class in the ``factories`` mapping of
    the service-registration section.
    """


CONFIG_FACTORY: Final[str] = qualified_name(ConfigFactory)
"""Dotted name of ``ConfigFactory``, the key of the class-dependency section."""

SERVICE_MANAGER_CONFIGURATION_KEY: Final[str] = "service_manager"
"""Default service-registration section key."""

DEPENDENCIES_CONFIGURATION_KEY: Final[str] = "dependencies"
"""Alternate service-registration section key used by middleware-style applications."""

FACTORIES_KEY: Final[str] = "factories"
"""Sub-mapping of the service-registration section from class name to factory."""


__all__ = [
    "CONFIG_FACTORY",
    "DEPENDENCIES_CONFIGURATION_KEY",
    "FACTORIES_KEY",
    "SERVICE_MANAGER_CONFIGURATION_KEY",
    "ConfigFactory",
]
