# ==============================================
# CLI: Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Inspect and try out a bindable class without writing code.
#
# COMMANDS:
# ---------
# 1. Show the resolved registry of a class:
#    python -m propbind.cli describe myapp.settings:Settings
#
# 2. Apply a properties file to a fresh instance and print what
#    extract_properties() returns afterwards:
#    python -m propbind.cli check myapp.settings:Settings settings.properties
#
# IMPLEMENTATION:
# ---------------
# - argparse for parsing
# - The class is instantiated with no arguments
# - Exit code 1 on any PropertyError, with the message on stderr
#
# ==============================================

import argparse
import dataclasses
import importlib
import json
import logging
import sys
from typing import List, Optional

from .binding.binder import PropertiesBinder
from .config import configure_logging, get_config
from .errors import PropertyError
from .formats import dumps, load

logger = logging.getLogger(__name__)


def _load_class(target: str) -> type:
    module_name, _, class_name = target.partition(":")
    if not module_name or not class_name:
        raise argparse.ArgumentTypeError(f"expected module:Class, got '{target}'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, class_name)
    except AttributeError:
        raise argparse.ArgumentTypeError(
            f"module '{module_name}' has no attribute '{class_name}'"
        ) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="propbind",
        description="Bind key=value properties files to Python objects.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    describe = commands.add_parser("describe", help="print the property registry of a class")
    describe.add_argument("target", type=_load_class, help="module:Class")

    check = commands.add_parser("check", help="apply a properties file to a new instance")
    check.add_argument("target", type=_load_class, help="module:Class")
    check.add_argument("path", help="properties file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    config = get_config()
    if args.verbose:
        config = dataclasses.replace(config, log_level="DEBUG")
    configure_logging(config)

    try:
        binder = PropertiesBinder(args.target(), config=config)

        if args.command == "describe":
            print(json.dumps(binder.describe(), indent=2))
            return 0

        with open(args.path, encoding="utf-8") as fp:
            raw = load(fp)
        logger.info("Loaded %d entries from %s", len(raw), args.path)
        binder.apply_properties(raw)
        sys.stdout.write(dumps(binder.extract_properties()))
        return 0
    except PropertyError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
