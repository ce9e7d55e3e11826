"""Generate TypeScript declarations for XAPI command, config and status schemas."""

from xapi_typegen.errors import (
    EmptyTypeError,
    EmptyUnionError,
    GeneratorError,
    InterfaceExistsError,
    InvalidIdentifierError,
    InvalidSchemaError,
    InvalidValueSpaceError,
    MainClassExistsError,
    NoMainClassError,
    TscValidationError,
)
from xapi_typegen.nodes import (
    Command,
    Config,
    Function,
    ImportStatement,
    Interface,
    MainClass,
    Member,
    Node,
    Root,
    Status,
    Tree,
)
from xapi_typegen.schema import GenerateOptions, dumps, generate, parse_parameters, parse_valuespace
from xapi_typegen.types import List, Literal, Plain, Type, to_type

__all__ = [
    "Command",
    "Config",
    "EmptyTypeError",
    "EmptyUnionError",
    "Function",
    "GenerateOptions",
    "GeneratorError",
    "ImportStatement",
    "Interface",
    "InterfaceExistsError",
    "InvalidIdentifierError",
    "InvalidSchemaError",
    "InvalidValueSpaceError",
    "List",
    "Literal",
    "MainClass",
    "MainClassExistsError",
    "Member",
    "NoMainClassError",
    "Node",
    "Plain",
    "Root",
    "Status",
    "TscValidationError",
    "Tree",
    "Type",
    "dumps",
    "generate",
    "parse_parameters",
    "parse_valuespace",
    "to_type",
]
