from __future__ import annotations

import builtins
import inspect
import logging
import re
import sys
from dataclasses import dataclass
from inspect import Parameter
from typing import Any, get_type_hints

from wireconf._internal.class_loader import qualified_name
from wireconf._internal.type_checks import is_builtin_class, is_runtime_class, unwrap_named_type

_MISSING_ANNOTATION: Any = object()
_NONE_SPELLINGS = frozenset({"None", "NoneType", "type(None)"})
_WRAPPER_PATTERN = re.compile(
    r"(?:typing\.|typing_extensions\.)?(?:Optional|Annotated)\[(?P<arguments>.*)\]",
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConstructorParameter:
    """Describe a required constructor parameter and its declared class type."""

    name: str
    """The parameter name as declared in the constructor signature."""
    type_name: str | None
    """Dotted name of the declared class or interface.

    ``None`` when the parameter has no annotation or is annotated with a
    built-in or non-class type. An annotation that cannot be evaluated at all
    is kept verbatim as written.
    """

    @property
    def is_resolved(self) -> bool:
        """Return whether the parameter declares a class or interface type."""
        return self.type_name is not None


@dataclass(slots=True)
class ConstructorParametersExtractor:
    """Extracts required constructor parameters from user-defined classes."""

    def extract_required(self, cls: type[Any]) -> list[ConstructorParameter]:
        """Return the required constructor parameters of a class in declaration order.

        A class without its own constructor, or whose constructor cannot be
        introspected, has no required parameters.

        Args:
            cls: Concrete class to inspect.

        """
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            logger.debug("No introspectable constructor for %s", qualified_name(cls))
            return []

        required = [
            parameter
            for parameter in signature.parameters.values()
            if self._is_required_parameter(parameter)
        ]
        if not required:
            return []

        annotations = self._resolved_type_hints(cls)
        return [
            ConstructorParameter(
                name=parameter.name,
                type_name=self._type_name(cls, parameter, annotations),
            )
            for parameter in required
        ]

    def _type_name(
        self,
        cls: type[Any],
        parameter: Parameter,
        annotations: dict[str, Any],
    ) -> str | None:
        annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
        if annotation is _MISSING_ANNOTATION:
            annotation = parameter.annotation
        if annotation is Parameter.empty:
            return None
        if isinstance(annotation, str):
            evaluated = self._evaluate_annotation(cls, parameter.name, annotation)
            if evaluated is _MISSING_ANNOTATION:
                return self._forward_reference_name(annotation)
            annotation = evaluated

        annotation = unwrap_named_type(annotation)
        if not is_runtime_class(annotation) or is_builtin_class(annotation):
            return None
        return qualified_name(annotation)

    def _evaluate_annotation(self, cls: type[Any], parameter_name: str, annotation: str) -> Any:
        def holder() -> None: ...

        holder.__annotations__ = {parameter_name: annotation}
        module = sys.modules.get(cls.__module__)
        globalns = vars(module) if module is not None else {}
        try:
            return get_type_hints(holder, globalns=globalns, include_extras=True)[parameter_name]
        except (AttributeError, NameError, SyntaxError, TypeError) as error:
            logger.debug(
                "Unable to evaluate annotation %r of parameter '%s': %s",
                annotation,
                parameter_name,
                error,
            )
            return _MISSING_ANNOTATION

    def _forward_reference_name(self, annotation: str) -> str | None:
        # Unevaluated hints keep their spelling unless they spell a builtin or non-class type.
        text = annotation.strip().strip("'\"").strip()
        members = [
            member
            for member in _split_top_level(text, "|")
            if member not in _NONE_SPELLINGS
        ]
        if len(members) != 1:
            return None
        text = members[0]

        wrapper = _WRAPPER_PATTERN.fullmatch(text)
        if wrapper is not None:
            return self._forward_reference_name(_split_top_level(wrapper["arguments"], ",")[0])
        if "[" in text or is_runtime_class(getattr(builtins, text, None)):
            return None
        return text or None

    def _resolved_type_hints(self, cls: type[Any]) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for member in (cls.__init__, cls.__new__, cls):
            try:
                member_annotations = get_type_hints(member, include_extras=True)
            except (AttributeError, NameError, TypeError) as error:
                logger.debug("Unable to evaluate type hints of %r: %s", member, error)
                continue
            for parameter_name, parameter_annotation in member_annotations.items():
                merged.setdefault(parameter_name, parameter_annotation)
        return merged

    def _is_required_parameter(self, parameter: Parameter) -> bool:
        return (
            parameter.default is Parameter.empty
            and parameter.kind is not Parameter.VAR_POSITIONAL
            and parameter.kind is not Parameter.VAR_KEYWORD
        )


def _split_top_level(text: str, separator: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == separator and depth == 0:
            parts.append(text[start:index].strip())
            start = index + 1
    parts.append(text[start:].strip())
    return parts


__all__ = ["ConstructorParameter", "ConstructorParametersExtractor"]
