"""Helper functionality that is used in other modules of this package."""

from __future__ import annotations

import json
import re
import textwrap
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xapi_typegen.nodes import Node

INDENT = "  "

BARE_MEMBER_NAME = re.compile(r"[a-z][a-z0-9]*", re.IGNORECASE)


def is_identifier(name: str) -> bool:
    """Whether a name is a letter followed by letters and digits."""
    return BARE_MEMBER_NAME.fullmatch(name) is not None


def member_name(name: str) -> str:
    """Format a member name as a key of an object type.

    Names made of a letter followed by letters and digits are emitted bare,
    everything else becomes a double-quoted string key.

    Args:
        name (str): The member name.

    Returns:
        str: The name, quoted if it is not a plain identifier.

    Examples:
        >>> member_name("Volume")
        'Volume'
        >>> member_name("weird-name!")
        '"weird-name!"'
    """
    if is_identifier(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def quote_literal(value: str) -> str:
    """Turn a raw string into a single-quoted string literal type.

    Args:
        value (str): The string constant.

    Returns:
        str: The quoted literal, e.g. `'On'`.
    """
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_tree(nodes: Iterable[Node], terminator: str) -> str:
    """Render the body of a braced block.

    Every node is serialized and terminated. A non-empty body is surrounded by
    empty lines so that it sits between the braces on its own lines, and all
    non-blank lines are indented by two spaces.

    Args:
        nodes (Iterable[Node]): The children of the block, in output order.
        terminator (str): Appended to every child, e.g. `;` or `,`.

    Returns:
        str: The block body, empty if there are no nodes.
    """
    serialized = [f"{node.serialize()}{terminator}" for node in nodes]
    if serialized:
        serialized.insert(0, "")
        serialized.append("")
    return textwrap.indent(textwrap.dedent("\n".join(serialized)), INDENT)


def replace_json_suffix(original: str) -> str:
    """If found, replaces the .json suffix of a schema path with .ts.

    For example, `room-kit.json` becomes `room-kit.ts`. Paths without a
    .json suffix get .ts appended.

    Args:
        original (str): The schema file path.

    Returns:
        str: The path of the declaration file.
    """
    if original.endswith(".json"):
        return original[: -len(".json")] + ".ts"
    return original + ".ts"
