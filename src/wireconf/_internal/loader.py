from __future__ import annotations

import logging
import runpy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from wireconf._internal.class_loader import qualified_name
from wireconf._internal.serializer import ClassReference
from wireconf._internal.type_checks import is_runtime_class
from wireconf.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


def load_config_file(path: str | Path, variable: str = "CONFIG") -> dict[Any, Any]:
    """Execute a configuration module and return its configuration variable.

    Class references in the module evaluate to class objects; they are turned
    back into dotted names so the result can be extended and merged again.

    Args:
        path: Path of the Python module to run.
        variable: Name of the module-level variable holding the configuration.

    Raises:
        InvalidConfigurationError: If the file is missing, does not define
            ``variable``, or defines it as something other than a mapping.

    """
    path = Path(path)
    if not path.is_file():
        msg = f"Config file '{path}' does not exist."
        raise InvalidConfigurationError(msg)

    namespace = runpy.run_path(str(path))
    if variable not in namespace:
        msg = f"Config file '{path}' does not define '{variable}'."
        raise InvalidConfigurationError(msg)

    config = namespace[variable]
    if not isinstance(config, Mapping):
        msg = f"Config '{variable}' in '{path}' should be a mapping, {type(config).__name__} given."
        raise InvalidConfigurationError(msg)

    logger.debug("Loaded %d config entries from %s", len(config), path)
    return normalize_config(config)


def normalize_config(value: Any) -> Any:
    """Replace class objects and ``ClassReference`` values with their dotted names.

    Mappings become dicts and lists stay lists, recursively; tuples are kept
    as tuples.

    Args:
        value: Configuration structure or leaf.

    """
    if isinstance(value, Mapping):
        return {normalize_config(key): normalize_config(item) for key, item in value.items()}
    if isinstance(value, list):
        return [normalize_config(item) for item in value]
    if isinstance(value, tuple):
        return tuple(normalize_config(item) for item in value)
    if isinstance(value, ClassReference):
        return value.name
    if is_runtime_class(value):
        return qualified_name(value)
    return value


__all__ = ["load_config_file", "normalize_config"]
