from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from wireconf._internal.dependency_graph import DependencyGraphBuilder, ServiceRegistry
from wireconf._internal.emitter import DEFAULT_VARIABLE, DocumentEmitter
from wireconf._internal.factory_mappings import FactoryMappingMerger
from wireconf.factory import SERVICE_MANAGER_CONFIGURATION_KEY

if TYPE_CHECKING:
    from typing_extensions import Self

    from wireconf.settings import DumperSettings


class ConfigDumper:
    """Generate generic-factory configuration for classes and dump it as Python source.

    The dumper introspects required constructor parameters to record which
    classes need which other classes, maps every recorded class to the generic
    ``ConfigFactory`` in the service-registration section, and renders the
    result as an importable module. All methods return new configuration
    dicts and leave their arguments untouched.

    Example:
        >>> dumper = ConfigDumper()
        >>> config = dumper.create_dependency_config({}, "app.services.Mailer")
        >>> config = dumper.create_factory_mappings_from_config(config)
        >>> source = dumper.dump_config_file(config)

    """

    def __init__(
        self,
        registry: ServiceRegistry | None = None,
        service_manager_key: str = SERVICE_MANAGER_CONFIGURATION_KEY,
        *,
        config_variable: str = DEFAULT_VARIABLE,
    ) -> None:
        """Initialize the dumper.

        Args:
            registry: Container consulted with ``has(name)`` for classes whose
                constructors cannot be described; such classes are skipped
                instead of failing.
            service_manager_key: Key of the service-registration section.
            config_variable: Variable name assigned in dumped modules.

        """
        self._builder = DependencyGraphBuilder(registry=registry)
        self._merger = FactoryMappingMerger(service_manager_key=service_manager_key)
        self._emitter = DocumentEmitter(variable=config_variable)

    @classmethod
    def from_settings(
        cls,
        settings: DumperSettings,
        registry: ServiceRegistry | None = None,
    ) -> Self:
        """Create a dumper configured from ``DumperSettings``.

        Args:
            settings: Loaded settings.
            registry: Optional container to consult, see ``__init__``.

        """
        return cls(
            registry=registry,
            service_manager_key=settings.service_manager_key,
            config_variable=settings.config_variable,
        )

    def create_dependency_config(
        self,
        config: Mapping[Any, Any],
        class_name: str | type[Any],
        ignore_unresolved: bool = False,  # noqa: FBT001, FBT002
    ) -> dict[Any, Any]:
        """Add dependency entries for a class and everything it requires.

        Args:
            config: Existing configuration.
            class_name: Dotted name of the class, or the class itself.
            ignore_unresolved: Return ``config`` unchanged instead of failing when
                a required parameter has no class type.

        """
        return self._builder.build(config, class_name, ignore_unresolved=ignore_unresolved)

    def create_factory_mappings(self, config: Mapping[Any, Any], class_name: str) -> dict[Any, Any]:
        """Map one class to the generic factory unless it already has a factory.

        Args:
            config: Existing configuration.
            class_name: Dotted class name.

        """
        return self._merger.merge_one(config, class_name)

    def create_factory_mappings_from_config(self, config: Mapping[Any, Any]) -> dict[Any, Any]:
        """Map every class of the dependency section to the generic factory.

        Args:
            config: Configuration produced by ``create_dependency_config``.

        """
        return self._merger.merge_all(config)

    def dump_config_file(
        self,
        config: Mapping[Any, Any],
        *,
        generated_at: datetime | None = None,
    ) -> str:
        """Render ``config`` as the text of a Python module.

        Args:
            config: Configuration to dump.
            generated_at: Timestamp for the header. Defaults to now.

        """
        return self._emitter.emit(config, generated_at=generated_at)


__all__ = ["ConfigDumper"]
