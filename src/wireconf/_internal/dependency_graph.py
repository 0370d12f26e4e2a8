from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from wireconf._internal.class_loader import import_class, qualified_name
from wireconf._internal.introspection import ConstructorParametersExtractor
from wireconf.exceptions import (
    ClassNotFoundError,
    CyclicDependencyError,
    InvalidConfigurationError,
)
from wireconf.factory import CONFIG_FACTORY

logger = logging.getLogger(__name__)


class ServiceRegistry(Protocol):
    """Container capability consulted for classes that cannot be introspected."""

    def has(self, name: str) -> bool:
        """Return whether a service with this name is already registered."""
        ...


@dataclass(slots=True)
class DependencyGraphBuilder:
    """Build class dependency entries by walking required constructor parameters.

    Every discovered class gets an entry under the generic factory key that
    lists the dotted names of its required constructor dependencies. The input
    configuration is never mutated; each call returns a new version.
    """

    registry: ServiceRegistry | None = None
    extractor: ConstructorParametersExtractor = field(default_factory=ConstructorParametersExtractor)

    def build(
        self,
        config: Mapping[Any, Any],
        class_name: str | type[Any],
        *,
        ignore_unresolved: bool = False,
    ) -> dict[Any, Any]:
        """Return ``config`` extended with entries for a class and its dependencies.

        Args:
            config: Existing configuration to extend.
            class_name: Dotted class name, or the class itself.
            ignore_unresolved: Leave a class out silently instead of failing when
                one of its required parameters has no class type.

        Raises:
            ClassNotFoundError: If ``class_name`` does not import to a class.
            InvalidConfigurationError: If a required parameter has no class type,
                ``ignore_unresolved`` is false and the registry does not already
                know the class.
            CyclicDependencyError: If required constructor dependencies form a cycle.

        """
        if isinstance(class_name, type):
            class_name = qualified_name(class_name)
        if import_class(class_name) is None:
            msg = f"Cannot create config for '{class_name}': class cannot be imported."
            raise ClassNotFoundError(msg)
        return self._build(
            dict(config),
            class_name,
            ignore_unresolved=ignore_unresolved,
            resolving=(),
        )

    def _build(
        self,
        config: dict[Any, Any],
        class_name: str,
        *,
        ignore_unresolved: bool,
        resolving: tuple[str, ...],
    ) -> dict[Any, Any]:
        if class_name in resolving:
            raise CyclicDependencyError((*resolving, class_name))
        resolving = (*resolving, class_name)

        cls = import_class(class_name)
        if cls is None:  # pragma: no cover - callers only recurse into loadable names
            return config

        parameters = self.extractor.extract_required(cls)
        if not parameters:
            logger.debug("Treating %s as invokable", class_name)
            return _with_dependencies(config, class_name, [])

        dependency_names: list[str] = []
        updated = config
        for parameter in parameters:
            if parameter.type_name is None:
                if ignore_unresolved:
                    logger.debug(
                        "Skipping %s: parameter '%s' has no class type hint",
                        class_name,
                        parameter.name,
                    )
                    return config

                if self.registry is not None and self.registry.has(class_name):
                    logger.debug("Skipping %s: already registered as a service", class_name)
                    return config

                msg = (
                    f'Cannot create config for constructor argument "{parameter.name}" '
                    f"of '{class_name}', it has no type hint, or non-class/interface type hint."
                )
                raise InvalidConfigurationError(msg)

            dependency_names.append(parameter.type_name)
            if import_class(parameter.type_name) is None:
                logger.debug(
                    "Recording %s for %s without recursion: type cannot be imported",
                    parameter.type_name,
                    class_name,
                )
                continue

            updated = self._build(
                updated,
                parameter.type_name,
                ignore_unresolved=ignore_unresolved,
                resolving=resolving,
            )

        return _with_dependencies(updated, class_name, dependency_names)


def _with_dependencies(
    config: dict[Any, Any],
    class_name: str,
    dependency_names: list[str],
) -> dict[Any, Any]:
    section = config.get(CONFIG_FACTORY, {})
    if not isinstance(section, Mapping):
        msg = (
            f"Config key for {CONFIG_FACTORY} should be a mapping, "
            f"{type(section).__name__} given."
        )
        raise InvalidConfigurationError(msg)
    return {**config, CONFIG_FACTORY: {**section, class_name: dependency_names}}


__all__ = ["DependencyGraphBuilder", "ServiceRegistry"]
