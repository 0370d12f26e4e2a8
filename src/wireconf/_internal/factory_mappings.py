from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from wireconf.exceptions import InvalidConfigurationError
from wireconf.factory import CONFIG_FACTORY, FACTORIES_KEY, SERVICE_MANAGER_CONFIGURATION_KEY

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FactoryMappingMerger:
    """Assign the generic factory to classes in the service-registration section."""

    service_manager_key: str = SERVICE_MANAGER_CONFIGURATION_KEY

    def merge_one(self, config: Mapping[Any, Any], class_name: str) -> dict[Any, Any]:
        """Return ``config`` with the generic factory assigned to ``class_name``.

        An existing factory assignment for the class is kept as is.

        Args:
            config: Configuration to extend.
            class_name: Dotted name of the class to map.

        """
        services = self._mapping_at(config, self.service_manager_key, label=self.service_manager_key)
        factories = self._mapping_at(
            services,
            FACTORIES_KEY,
            label=f"{self.service_manager_key}.{FACTORIES_KEY}",
        )
        if class_name in factories:
            return dict(config)

        logger.debug("Mapping %s to %s", class_name, CONFIG_FACTORY)
        return {
            **config,
            self.service_manager_key: {
                **services,
                FACTORIES_KEY: {**factories, class_name: CONFIG_FACTORY},
            },
        }

    def merge_all(self, config: Mapping[Any, Any]) -> dict[Any, Any]:
        """Return ``config`` with every class of the dependency section mapped.

        Args:
            config: Configuration whose class-dependency section lists the classes.

        Raises:
            InvalidConfigurationError: If the class-dependency section, the
                service-registration section or its ``factories`` mapping is
                not a mapping.

        """
        if CONFIG_FACTORY not in config:
            return dict(config)

        section = self._mapping_at(config, CONFIG_FACTORY, label=CONFIG_FACTORY)
        merged = dict(config)
        for class_name in section:
            merged = self.merge_one(merged, class_name)
        return merged

    def _mapping_at(self, config: Mapping[Any, Any], key: str, *, label: str) -> Mapping[Any, Any]:
        value = config.get(key, {})
        if not isinstance(value, Mapping):
            msg = f"Config key for {label} should be a mapping, {type(value).__name__} given."
            raise InvalidConfigurationError(msg)
        return value


__all__ = ["FactoryMappingMerger"]
