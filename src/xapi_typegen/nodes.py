"""Declaration tree nodes and their TypeScript serialization."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import TypeVar, override

from xapi_typegen.errors import InterfaceExistsError, InvalidIdentifierError, MainClassExistsError, NoMainClassError
from xapi_typegen.helper import is_identifier, member_name, render_tree
from xapi_typegen.types import Type, Valuespace, to_type

logger = logging.getLogger(__name__)

DEFAULT_MAIN_CLASS = "TypedXAPI"
DEFAULT_BASE = "XAPI"
DEFAULT_MODULE = "jsxapi"

N = TypeVar("N", bound="Node")


class Node(ABC):
    """An ordered container of child nodes that can render itself."""

    def __init__(self):
        self.children: list[Node] = []

    def add_child(self, child: N) -> N:
        """Append a child and return it, so construction can be chained."""
        self.children.append(child)
        return child

    def add_children(self, children: Iterable[Node]) -> None:
        """Append a batch of children, keeping their order."""
        for child in children:
            self.add_child(child)

    def register(self, root: Root) -> None:
        """Claim whatever this node needs to be unique within a root.

        Called by `Root.add_child` before the node is appended. Most nodes
        claim nothing.
        """

    @abstractmethod
    def serialize(self) -> str:
        """Render this node as TypeScript text."""


class Function(Node, Type):
    """A function signature, usable as a method declaration or a function type."""

    grouped = True

    def __init__(
        self,
        name: str,
        args: Sequence[tuple[str, Valuespace]] = (),
        ret: Valuespace = "void",
    ):
        super().__init__()
        self.name = name
        self.args = [(arg_name, to_type(arg_type)) for arg_name, arg_type in args]
        self.ret = to_type(ret)

    @override
    def get_type(self, separator: str = " =>") -> str:
        """Render the signature.

        Args:
            separator (str): Placed between the argument list and the return
                type. `" =>"` gives a function type, `":"` a method declaration.

        Returns:
            str: E.g. `(value: string) => void`.
        """
        args = ", ".join(f"{arg_name}: {arg_type.get_type()}" for arg_name, arg_type in self.args)
        return f"({args}){separator} {self.ret.get_type()}"

    @override
    def serialize(self) -> str:
        return f"{member_name(self.name)}{self.get_type(':')}"


class Member(Node):
    """A named, typed field."""

    def __init__(self, name: str, type: Valuespace, required: bool = True):
        super().__init__()
        self.name = name
        self.type = to_type(type)
        self.required = required

    @override
    def serialize(self) -> str:
        optional = "" if self.required else "?"
        return f"{member_name(self.name)}{optional}: {self.type.get_type()}"


class Command(Node):
    """An asynchronous command taking an optional argument.

    Empty params or return value text counts as absent.
    """

    def __init__(self, name: str, params: Valuespace | None = None, retval: Valuespace | None = None):
        super().__init__()
        self.name = name
        self.params = to_type(params) if params else None
        self.retval = to_type(retval) if retval else None

    @override
    def serialize(self) -> str:
        args = f"args: {self.params.get_type()}" if self.params else ""
        retval = self.retval.get_type() if self.retval else "any"
        return f"{member_name(self.name)}({args}): Promise<{retval}>"


class Tree(Node):
    """A named nested object type."""

    def __init__(self, name: str):
        super().__init__()
        self.name = name

    @override
    def serialize(self) -> str:
        tree = render_tree(self.children, ",")
        return f"{member_name(self.name)}: {{{tree}}}"


class Config(Tree):
    """A configuration leaf with `get`, `set`, `on` and `once` accessors."""

    def __init__(self, name: str, valuespace: Valuespace):
        super().__init__(name)
        self.valuespace = to_type(valuespace)
        self.add_child(Command("get", retval=self.valuespace))
        self.add_child(Command("set", self.valuespace))
        self.add_children(_feedback_accessors(self.valuespace))


class Status(Tree):
    """A status leaf with `get`, `on` and `once` accessors."""

    def __init__(self, name: str, valuespace: Valuespace):
        super().__init__(name)
        self.valuespace = to_type(valuespace)
        self.add_child(Command("get", retval=self.valuespace))
        self.add_children(_feedback_accessors(self.valuespace))


def _feedback_accessors(valuespace: Type) -> list[Function]:
    handler = Function("handler", [("value", valuespace)])
    return [
        Function("on", [("handler", handler)]),
        Function("once", [("handler", handler)]),
    ]


class Interface(Node, Type):
    """A named top-level interface."""

    def __init__(self, name: str):
        super().__init__()
        if not is_identifier(name):
            raise InvalidIdentifierError(name)
        self.name = name

    @override
    def register(self, root: Root) -> None:
        root.claim_interface_name(self.name)

    @override
    def get_type(self) -> str:
        return self.name

    @override
    def serialize(self) -> str:
        tree = render_tree(self.children, ";")
        return f"export interface {self.name} {{{tree}}}"


class MainClass(Interface):
    """The connectable class of a generated module, merged with its interface."""

    def __init__(self, name: str | None = None, base: str | None = None):
        super().__init__(name or DEFAULT_MAIN_CLASS)
        self.base = base or DEFAULT_BASE
        if not is_identifier(self.base):
            raise InvalidIdentifierError(self.base)

    @override
    def register(self, root: Root) -> None:
        if root.has_main:
            raise MainClassExistsError()
        super().register(root)
        root.claim_main(self)

    @override
    def serialize(self) -> str:
        # The trailing space after the interface keeps output identical to
        # previously generated files.
        return (
            f"export class {self.name} extends {self.base} {{}}\n"
            "\n"
            f"export default {self.name};\n"
            f"export const connect = connectGen({self.name});\n"
            "\n"
            f"{super().serialize()} "
        )


class ImportStatement(Node):
    """The import line that brings in the base class and connection factory."""

    def __init__(self, module_name: str = DEFAULT_MODULE, import_name: str = DEFAULT_BASE):
        super().__init__()
        self.module_name = module_name
        self.import_name = import_name

    @override
    def serialize(self) -> str:
        return f'import {{ {self.import_name}, connectGen }} from "{self.module_name}";'


class Root(Node):
    """Top-level owner of all interfaces and the main class."""

    def __init__(self):
        super().__init__()
        self.interface_names: set[str] = set()
        self._main: MainClass | None = None

    @property
    def has_main(self) -> bool:
        return self._main is not None

    @override
    def add_child(self, child: N) -> N:
        child.register(self)
        return super().add_child(child)

    def claim_interface_name(self, name: str) -> None:
        """Reserve an interface name.

        Raises:
            InterfaceExistsError: If the name was already claimed.
        """
        if name in self.interface_names:
            raise InterfaceExistsError(name)
        self.interface_names.add(name)
        logger.debug("Registered interface %s", name)

    def claim_main(self, main: MainClass) -> None:
        """Reserve the main class slot.

        Raises:
            MainClassExistsError: If a main class was already added.
        """
        if self._main is not None:
            raise MainClassExistsError()
        self._main = main
        logger.debug("Registered main class %s extends %s", main.name, main.base)

    def add_interface(self, name: str) -> Interface:
        """Add a new, empty interface.

        Raises:
            InterfaceExistsError: If an interface with this name exists.
        """
        return self.add_child(Interface(name))

    def add_main(self, name: str | None = None, base: str | None = None) -> MainClass:
        """Add the main class.

        Args:
            name (str | None): Class name, `TypedXAPI` if omitted.
            base (str | None): Base class name, `XAPI` if omitted.

        Raises:
            MainClassExistsError: If this root already has a main class.
        """
        if self.has_main:
            raise MainClassExistsError()
        return self.add_child(MainClass(name, base))

    def get_main(self) -> MainClass:
        """Return the main class.

        Raises:
            NoMainClassError: If no main class was added yet.
        """
        if self._main is None:
            raise NoMainClassError()
        return self._main

    @override
    def serialize(self) -> str:
        return "\n\n".join(child.serialize() for child in self.children)
