from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from wireconf._internal.loader import load_config_file
from wireconf.dumper import ConfigDumper
from wireconf.exceptions import WireconfError
from wireconf.settings import DumperSettings

_DESCRIPTION = (
    "Generate generic-factory configuration for a class and its required "
    "constructor dependencies."
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the ``wireconf`` command."""
    parser = argparse.ArgumentParser(prog="wireconf", description=_DESCRIPTION)
    parser.add_argument("class_name", help="Dotted name of the class to generate config for.")
    parser.add_argument(
        "-c",
        "--config-file",
        type=Path,
        help="Existing configuration module to extend.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="File to write the generated module to. Defaults to stdout.",
    )
    parser.add_argument(
        "-i",
        "--ignore-unresolved",
        action="store_true",
        default=None,
        help="Skip classes with untyped or built-in required parameters instead of failing.",
    )
    parser.add_argument("--service-key", help="Key of the service-registration section.")
    parser.add_argument("--variable", help="Variable holding the configuration.")
    parser.add_argument(
        "--app-dir",
        type=Path,
        default=Path(),
        help="Directory prepended to the import path. Defaults to the current directory.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the process exit code.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.

    """
    args = build_parser().parse_args(argv)
    app_dir = str(args.app_dir.resolve())
    if app_dir not in sys.path:
        sys.path.insert(0, app_dir)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = DumperSettings()
    overrides: dict[str, Any] = {
        "service_manager_key": args.service_key,
        "ignore_unresolved": args.ignore_unresolved,
        "config_variable": args.variable,
    }
    settings = settings.model_copy(
        update={key: value for key, value in overrides.items() if value is not None},
    )

    dumper = ConfigDumper.from_settings(settings)
    try:
        config: dict[Any, Any] = {}
        if args.config_file is not None:
            config = load_config_file(args.config_file, settings.config_variable)
        config = dumper.create_dependency_config(
            config,
            args.class_name,
            ignore_unresolved=settings.ignore_unresolved,
        )
        config = dumper.create_factory_mappings_from_config(config)
        document = dumper.dump_config_file(config)
    except WireconfError as error:
        sys.stderr.write(f"wireconf: {error}\n")
        return 1

    if args.output is None:
        sys.stdout.write(document)
    else:
        args.output.write_text(document, encoding="utf-8")
        logger.info("Wrote config for %s to %s", args.class_name, args.output)
    return 0


__all__ = ["build_parser", "main"]
