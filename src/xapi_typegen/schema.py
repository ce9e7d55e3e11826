"""Build declaration trees from decoded XAPI schema data.

The schema is a mapping of sections (`Command`, `Config`, `Status`) to nested
groups. Groups are mappings of names to child nodes. Leaves are recognised by
their keys:

- a command has a truthy `command` key and optional `params`;
- a config or status leaf has a `valuespace` key.

Valuespaces are either a primitive type name (`"Integer"`), a list of
string constants, or a mapping with `type`, `values` and `list` keys.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from xapi_typegen.errors import InvalidSchemaError, InvalidValueSpaceError
from xapi_typegen.helper import is_identifier
from xapi_typegen.nodes import (
    DEFAULT_BASE,
    DEFAULT_MAIN_CLASS,
    DEFAULT_MODULE,
    Command,
    Config,
    ImportStatement,
    Member,
    Node,
    Root,
    Status,
    Tree,
)
from xapi_typegen.types import List, Literal, Plain, Type

logger = logging.getLogger(__name__)

SECTIONS = ("Command", "Config", "Status")

PRIMITIVE_TYPES = {
    "Integer": "number",
    "String": "string",
    "Boolean": "boolean",
}

ARRAY_SUFFIX = "Array"


@dataclass
class GenerateOptions:
    """Options controlling the shape of the generated module.

    Attributes:
        main_class: Name of the generated connectable class.
        base: Name of the class it extends, imported from `module_name`.
        module_name: Module the base class and `connectGen` are imported from.
    """

    main_class: str = DEFAULT_MAIN_CLASS
    base: str = DEFAULT_BASE
    module_name: str = DEFAULT_MODULE


def parse_valuespace(valuespace: Any, path: list[str]) -> Type:
    """Turn a valuespace descriptor into a type.

    Args:
        valuespace (Any): A primitive type name, a list of string constants,
            or a mapping with `type`, `values` and `list` keys.
        path (list[str]): Schema path of the node, used in error messages.

    Returns:
        Type: The parsed type.

    Raises:
        InvalidValueSpaceError: If the descriptor is not understood.
    """
    if isinstance(valuespace, str):
        valuespace = {"type": valuespace}
    elif isinstance(valuespace, list):
        valuespace = {"type": "Literal", "values": valuespace}
    elif not isinstance(valuespace, Mapping):
        raise InvalidValueSpaceError(f"Invalid valuespace: {valuespace!r}", path)

    type_name = valuespace.get("type")
    if not isinstance(type_name, str):
        raise InvalidValueSpaceError(f"Valuespace has no type: {dict(valuespace)!r}", path)

    is_list = valuespace.get("list", False)
    if not isinstance(is_list, bool):
        raise InvalidValueSpaceError(f"Valuespace list flag must be a boolean: {is_list!r}", path)
    if type_name.endswith(ARRAY_SUFFIX):
        type_name = type_name[: -len(ARRAY_SUFFIX)]
        is_list = True

    vstype: Type
    if type_name in PRIMITIVE_TYPES:
        vstype = Plain(PRIMITIVE_TYPES[type_name])
    elif type_name == "Literal":
        values = valuespace.get("values", [])
        if not isinstance(values, list):
            raise InvalidValueSpaceError(f"Literal values must be a list: {values!r}", path)
        if not all(isinstance(value, str) for value in values):
            raise InvalidValueSpaceError(f"Literal values must be strings: {values!r}", path)
        if not values:
            raise InvalidValueSpaceError("Literal valuespace has no values", path)
        vstype = Literal(*values)
    else:
        raise InvalidValueSpaceError(f"Invalid valuespace type: {type_name}", path)

    return List(vstype) if is_list else vstype


def parse_parameters(params: Mapping[str, Any], path: list[str]) -> list[Member]:
    """Turn command parameters into interface members.

    Parameters are optional unless they carry a truthy `required` key.

    Args:
        params (Mapping[str, Any]): Parameter name to parameter descriptor.
        path (list[str]): Schema path of the command.

    Returns:
        list[Member]: One member per parameter, in schema order.
    """
    members = []
    for name, param in params.items():
        param_path = [*path, name]
        _expect_mapping(param, param_path)
        if "valuespace" not in param:
            raise InvalidSchemaError("Parameter has no valuespace", param_path)
        vstype = parse_valuespace(param["valuespace"], param_path)
        members.append(Member(name, vstype, required=bool(param.get("required", False))))
    return members


def _expect_mapping(node: Any, path: list[str]) -> None:
    if not isinstance(node, Mapping):
        raise InvalidSchemaError(f"Expected an object, got {type(node).__name__}", path)


def _is_command(node: Mapping[str, Any]) -> bool:
    return bool(node.get("command"))


def _is_leaf(node: Mapping[str, Any]) -> bool:
    return "valuespace" in node


def _parse_command_tree(root: Root, parent: Node, schema: Mapping[str, Any], path: list[str]) -> None:
    for name, node in schema.items():
        node_path = [*path, name]
        _expect_mapping(node, node_path)
        if _is_command(node):
            params = node.get("params") or {}
            _expect_mapping(params, node_path)
            if params:
                args_name = f"{''.join(node_path)}Args"
                if not is_identifier(args_name):
                    raise InvalidSchemaError(f"Cannot name argument interface {args_name!r}", node_path)
                args = root.add_interface(args_name)
                args.add_children(parse_parameters(params, node_path))
                parent.add_child(Command(name, args))
            else:
                parent.add_child(Command(name))
            logger.debug("Added command %s", " ".join(node_path))
        else:
            tree = parent.add_child(Tree(name))
            _parse_command_tree(root, tree, node, node_path)


def _parse_value_tree(
    parent: Node,
    schema: Mapping[str, Any],
    path: list[str],
    leaf_class: type[Config] | type[Status],
) -> None:
    for name, node in schema.items():
        node_path = [*path, name]
        _expect_mapping(node, node_path)
        if _is_leaf(node):
            vstype = parse_valuespace(node["valuespace"], node_path)
            parent.add_child(leaf_class(name, vstype))
            logger.debug("Added %s %s", leaf_class.__name__.lower(), " ".join(node_path))
        else:
            tree = parent.add_child(Tree(name))
            _parse_value_tree(tree, node, node_path, leaf_class)


def generate(schema: Mapping[str, Any], options: GenerateOptions | None = None) -> Root:
    """Build the declaration tree for a schema.

    The main class gets one required member per section present in the
    schema, typed by a `<Section>Tree` interface holding that section.

    Args:
        schema (Mapping[str, Any]): The decoded schema.
        options (GenerateOptions | None): Naming options, defaults if omitted.

    Returns:
        Root: The fully built tree.
    """
    options = options or GenerateOptions()
    _expect_mapping(schema, [])

    for section in schema:
        if section not in SECTIONS:
            logger.warning("Skipping unknown schema section: %s", section)

    root = Root()
    main = root.add_main(options.main_class, options.base)

    for section in SECTIONS:
        if section not in schema:
            continue
        section_schema = schema[section]
        _expect_mapping(section_schema, [section])

        tree = root.add_interface(f"{section}Tree")
        main.add_child(Member(section, tree))

        if section == "Command":
            _parse_command_tree(root, tree, section_schema, [])
        elif section == "Config":
            _parse_value_tree(tree, section_schema, [], Config)
        else:
            _parse_value_tree(tree, section_schema, [], Status)

    logger.debug("Generated %d top-level declarations", len(root.children))
    return root


def dumps(root: Root, options: GenerateOptions | None = None) -> str:
    """Render a complete declaration module, import line included."""
    options = options or GenerateOptions()
    header = ImportStatement(options.module_name, options.base).serialize()
    return f"{header}\n\n{root.serialize()}\n"
