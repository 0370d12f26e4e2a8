from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wireconf._internal.class_loader import is_importable_class, locate_class
from wireconf._internal.type_checks import is_runtime_class
from wireconf.exceptions import InvalidConfigurationError

if TYPE_CHECKING:
    from typing_extensions import Self

_INDENT = " " * 4
_SCALAR_TYPES = (bool, int, float, str, bytes, type(None))


@dataclass(frozen=True, slots=True)
class ClassReference:
    """A configuration leaf that always renders as a symbolic class reference.

    Plain strings are rendered as references only when they import to a
    class. Wrap a name in ``ClassReference`` to skip that check and to keep
    the rendering decision explicit in the data.
    """

    module: str
    """Module that has to be imported for the reference to evaluate."""
    qualname: str
    """Attribute path of the class inside ``module``."""

    @classmethod
    def of(cls, target: type[Any]) -> Self:
        """Create a reference to a runtime class.

        Args:
            target: Class to reference. It must be importable by its dotted name.

        """
        if not is_importable_class(target):
            msg = f"Class {target!r} cannot be referenced by its dotted name."
            raise InvalidConfigurationError(msg)
        return cls(module=target.__module__, qualname=target.__qualname__)

    @classmethod
    def parse(cls, name: str) -> Self | None:
        """Create a reference from a dotted name, or return ``None`` if it does not load.

        Args:
            name: Dotted class name.

        """
        located = locate_class(name)
        if located is None:
            return None
        module, _ = located
        return cls(module=module, qualname=name[len(module) + 1 :])

    @property
    def name(self) -> str:
        """Return the dotted name the reference renders as."""
        return f"{self.module}.{self.qualname}"


@dataclass(frozen=True, slots=True)
class ConfigSerializer:
    """Render nested configuration structures as Python literal source text.

    Mappings render as dict displays and lists or tuples as list or tuple
    displays, one entry per line. Class objects, ``ClassReference`` values and
    strings naming an importable class render as dotted references, so the
    generated module has to import ``collect_modules(config)``. Every other
    leaf renders with ``repr``, which ``ast.literal_eval`` parses back to an
    equal value.
    """

    def serialize(self, config: Any, indent_level: int = 1) -> str:
        """Render a mapping, list or tuple at the given indentation level.

        Entries are indented by ``indent_level * 4`` spaces and the closing
        bracket by ``(indent_level - 1) * 4`` spaces.

        Args:
            config: Configuration structure to render.
            indent_level: Nesting depth of the entries, starting at 1.

        Raises:
            InvalidConfigurationError: If a leaf has no literal representation.

        """
        indent = _INDENT * indent_level
        outer_indent = _INDENT * (indent_level - 1)

        if isinstance(config, Mapping):
            opening, closing = "{", "}"
            entries = [
                f"{indent}{self._render_key(key)}: {self._render_value(value, indent_level)},"
                for key, value in config.items()
            ]
        elif isinstance(config, list | tuple):
            opening, closing = ("[", "]") if isinstance(config, list) else ("(", ")")
            entries = [f"{indent}{self._render_value(value, indent_level)}," for value in config]
        else:
            msg = f"Config should be a mapping, list or tuple, {type(config).__name__} given."
            raise InvalidConfigurationError(msg)

        if not entries:
            return f"{opening}{closing}"
        body = "\n".join(entries)
        return f"{opening}\n{body}\n{outer_indent}{closing}"

    def collect_modules(self, config: Any) -> list[str]:
        """Return the sorted module names the class references in ``config`` need.

        Args:
            config: Configuration structure that is going to be serialized.

        """
        return sorted({reference.module for reference in self._references(config)})

    def _references(self, config: Any) -> Iterator[ClassReference]:
        if isinstance(config, Mapping):
            for key, value in config.items():
                reference = self._as_class_reference(key)
                if reference is not None:
                    yield reference
                yield from self._references(value)
        elif isinstance(config, list | tuple):
            for value in config:
                yield from self._references(value)
        else:
            reference = self._as_class_reference(config)
            if reference is not None:
                yield reference

    def _render_key(self, key: Any) -> str:
        reference = self._as_class_reference(key)
        if reference is not None:
            return reference.name
        return self._render_scalar(key)

    def _render_value(self, value: Any, indent_level: int) -> str:
        if isinstance(value, Mapping | list | tuple):
            return self.serialize(value, indent_level + 1)
        reference = self._as_class_reference(value)
        if reference is not None:
            return reference.name
        return self._render_scalar(value)

    def _render_scalar(self, value: Any) -> str:
        if type(value) not in _SCALAR_TYPES:
            msg = f"Config value of type {type(value).__name__} has no literal representation."
            raise InvalidConfigurationError(msg)
        if isinstance(value, float) and not math.isfinite(value):
            msg = f"Config value {value!r} has no literal representation."
            raise InvalidConfigurationError(msg)
        return repr(value)

    def _as_class_reference(self, value: Any) -> ClassReference | None:
        if isinstance(value, ClassReference):
            return value
        if is_runtime_class(value):
            return ClassReference.of(value)
        if isinstance(value, str):
            return ClassReference.parse(value)
        return None


__all__ = ["ClassReference", "ConfigSerializer"]
