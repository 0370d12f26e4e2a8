from __future__ import annotations

import types
from typing import Annotated, Any, TypeGuard, Union, get_args, get_origin

_BUILTINS_MODULE = "builtins"


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_builtin_class(candidate: type[Any]) -> bool:
    """Return true when candidate is a built-in type such as ``int`` or ``list``.

    Args:
        candidate: Runtime class to check.

    """
    return candidate.__module__ == _BUILTINS_MODULE


def unwrap_named_type(annotation: Any) -> Any:
    """Strip ``Annotated`` metadata and a single ``None`` member off a type hint.

    ``Annotated[Db, ...]``, ``Db | None`` and ``Optional[Db]`` all unwrap to
    ``Db``. Unions of several non-``None`` members are returned unchanged.

    Args:
        annotation: Annotation value to inspect or normalize.

    """
    origin = get_origin(annotation)
    if origin is Annotated:
        return unwrap_named_type(get_args(annotation)[0])
    if origin is Union or origin is types.UnionType:
        members = [member for member in get_args(annotation) if member is not type(None)]
        if len(members) == 1:
            return unwrap_named_type(members[0])
    return annotation


__all__ = ["is_builtin_class", "is_runtime_class", "unwrap_named_type"]
