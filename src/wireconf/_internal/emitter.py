from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from textwrap import dedent
from typing import Any

from wireconf._internal.serializer import ConfigSerializer

DOCUMENT_TEMPLATE = dedent(
    '''
    """
    This file generated by {generator}.
    Generated {generated_at}
    """
    {imports_block}
    {variable} = {config_block}
    ''',
).lstrip()

DEFAULT_GENERATOR = "wireconf.dumper.ConfigDumper"
DEFAULT_VARIABLE = "CONFIG"
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DocumentEmitter:
    """Wrap a serialized configuration into an importable Python module."""

    generator: str = DEFAULT_GENERATOR
    variable: str = DEFAULT_VARIABLE
    serializer: ConfigSerializer = field(default_factory=ConfigSerializer)

    def emit(self, config: Any, *, generated_at: datetime | None = None) -> str:
        """Render the module text for ``config``.

        Args:
            config: Configuration structure to serialize.
            generated_at: Timestamp written to the header. Defaults to now.

        """
        if generated_at is None:
            generated_at = datetime.now()  # noqa: DTZ005

        modules = self.serializer.collect_modules(config)
        imports_block = "".join(f"\nimport {module}" for module in modules)
        if imports_block:
            imports_block += "\n"

        document = DOCUMENT_TEMPLATE.format(
            generator=self.generator,
            generated_at=generated_at.strftime(_TIMESTAMP_FORMAT),
            imports_block=imports_block,
            variable=self.variable,
            config_block=self.serializer.serialize(config),
        )
        logger.info(
            "Emitted config document: entries=%d imports=%d",
            len(config),
            len(modules),
        )
        return document


__all__ = ["DEFAULT_GENERATOR", "DEFAULT_VARIABLE", "DOCUMENT_TEMPLATE", "DocumentEmitter"]
