"""Command-line interface for generating TypeScript declarations from XAPI schemas."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from xapi_typegen.errors import GeneratorError
from xapi_typegen.run import run
from xapi_typegen.schema import GenerateOptions

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Setup for the parser.

    Returns:
        argparse.ArgumentParser: The parser after setup.
    """
    parser = argparse.ArgumentParser(
        prog="xapi-typegen",
        description="Generate TypeScript declarations for an XAPI schema.",
    )

    parser.add_argument("schema", type=str, help="path to the JSON schema file.")

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="",
        help="file to write the declarations to; defaults to the schema path with a .ts suffix.",
    )

    parser.add_argument(
        "-m",
        "--module",
        type=str,
        default=GenerateOptions.module_name,
        help="module that the base class and connectGen are imported from.",
    )

    parser.add_argument(
        "--main-class",
        dest="main_class",
        type=str,
        default=GenerateOptions.main_class,
        help="name of the generated connectable class.",
    )

    parser.add_argument(
        "--base",
        type=str,
        default=GenerateOptions.base,
        help="name of the class the main class extends.",
    )

    parser.add_argument(
        "--tsc",
        default=False,
        action="store_true",
        help="validate the generated file with tsc --noEmit.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        default=False,
        action="store_true",
        help="print debug output.",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the declaration generator.

    Args:
        argv (Sequence[str] | None, optional): Run arguments. Defaults to None.

    Returns:
        int: Error code.
    """
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    root_directory = os.getcwd()
    logger.debug("Working from root directory: %s", root_directory)

    try:
        run(args, root_directory)
    except OSError as e:
        logger.error("Could not process %s: %s", args.schema, e)
        return 1
    except GeneratorError as e:
        logger.error("%s", e)
        return 1

    return 0
