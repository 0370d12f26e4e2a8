from __future__ import annotations

import importlib
from typing import Any

from wireconf._internal.type_checks import is_runtime_class

_LOCALS_MARKER = "<locals>"
_MIN_NAME_PARTS = 2


def qualified_name(cls: type[Any]) -> str:
    """Return the fully-qualified dotted name used as a class key in configurations.

    Args:
        cls: Runtime class to name.

    """
    return f"{cls.__module__}.{cls.__qualname__}"


def locate_class(name: str) -> tuple[str, type[Any]] | None:
    """Import a class from its dotted name and report the module it was found in.

    The longest importable module prefix is imported and the remaining
    segments are looked up as attributes, so nested classes and re-exported
    names resolve as well. Names without a module part, or with segments that
    are not identifiers, never trigger an import.

    Args:
        name: Dotted class name such as ``"package.module.Outer.Inner"``.

    Returns:
        The imported module name and the class, or ``None`` when the name does
        not load to a runtime class.

    """
    parts = name.split(".")
    if len(parts) < _MIN_NAME_PARTS or not all(part.isidentifier() for part in parts):
        return None

    for split_at in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split_at])
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError:
            continue
        for attribute in parts[split_at:]:
            target = getattr(target, attribute, None)
            if target is None:
                return None
        if is_runtime_class(target):
            return module_name, target
        return None
    return None


def import_class(name: str) -> type[Any] | None:
    """Return the class a dotted name refers to, or ``None`` when it does not load.

    Args:
        name: Dotted class name.

    """
    located = locate_class(name)
    if located is None:
        return None
    return located[1]


def is_importable_class(cls: type[Any]) -> bool:
    """Return whether a class object can be referenced by its dotted name.

    Classes defined inside functions carry ``<locals>`` in their qualified
    name and cannot be imported back.

    Args:
        cls: Runtime class to check.

    """
    if _LOCALS_MARKER in cls.__qualname__:
        return False
    return import_class(qualified_name(cls)) is cls


__all__ = ["import_class", "is_importable_class", "locate_class", "qualified_name"]
