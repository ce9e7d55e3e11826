"""Top-level module for declaration generation."""

from __future__ import annotations

import argparse
import json
import logging
import os.path
import subprocess
from typing import Any

from xapi_typegen.errors import InvalidSchemaError, TscValidationError
from xapi_typegen.helper import replace_json_suffix
from xapi_typegen.schema import GenerateOptions, dumps, generate

logger = logging.getLogger(__name__)


def load_schema(schema_path: str) -> Any:
    """Read a JSON schema file.

    Raises:
        InvalidSchemaError: If the file is not valid JSON.
    """
    with open(schema_path, encoding="utf8") as schema_file:
        try:
            return json.load(schema_file)
        except json.JSONDecodeError as e:
            raise InvalidSchemaError(f"{schema_path} is not valid JSON: {e}") from e


def generate_declarations(schema_path: str, output_path: str, options: GenerateOptions) -> None:
    """Entry-point for generating a declaration module from a schema file.

    Args:
        schema_path (str): Path of the JSON schema.
        output_path (str): Path of the TypeScript file to write.
        options (GenerateOptions): Naming options for the generated module.
    """
    schema = load_schema(schema_path)
    root = generate(schema, options)

    output_directory = os.path.dirname(output_path)
    if output_directory:
        os.makedirs(output_directory, exist_ok=True)

    with open(output_path, "w", encoding="utf8") as output_file:
        output_file.write(dumps(root, options))

    logger.info("Wrote declarations to '%s'.", output_path)


def validate_with_tsc(output_path: str) -> None:
    """Validate a generated file using the TypeScript compiler.

    Args:
        output_path: Path of the generated file.

    Raises:
        TscValidationError: If tsc reports errors or cannot be run.
    """
    logger.info("Validating '%s' with tsc...", output_path)

    try:
        result = subprocess.run(
            ["tsc", "--noEmit", "--strict", output_path],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        logger.error("tsc not found. Please install TypeScript: npm install -g typescript")
        raise TscValidationError("tsc command not found. Please install TypeScript.")
    except subprocess.SubprocessError as e:
        error_msg = f"Error running tsc: {e}"
        logger.error(error_msg)
        raise TscValidationError(error_msg)

    if result.returncode != 0:
        error_count = result.stdout.count(" error TS")
        error_msg = f"tsc validation failed with {error_count} error(s):\n\n{result.stdout}"
        logger.error(error_msg)
        raise TscValidationError(error_msg)

    logger.info("tsc validation passed")


def run(args: argparse.Namespace, root_directory: str):
    """Run the generator on one schema file.

    Args:
        args (argparse.Namespace): The arguments that were passed when calling the generator.
        root_directory (str): The directory, from which the generator is executed.
    """
    schema_path = os.path.join(root_directory, args.schema)
    output: str = getattr(args, "output", "") or replace_json_suffix(args.schema)
    output_path = os.path.join(root_directory, output)

    options = GenerateOptions(
        main_class=getattr(args, "main_class", GenerateOptions.main_class),
        base=getattr(args, "base", GenerateOptions.base),
        module_name=getattr(args, "module", GenerateOptions.module_name),
    )

    generate_declarations(schema_path, output_path, options)

    if getattr(args, "tsc", False):
        validate_with_tsc(output_path)
