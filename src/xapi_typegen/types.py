"""Type algebra used to render TypeScript type expressions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import override

from xapi_typegen.errors import EmptyTypeError, EmptyUnionError
from xapi_typegen.helper import quote_literal


class Type(ABC):
    """Anything that can report its own type text."""

    # Whether the text must be parenthesised inside a list or a union.
    grouped = False

    @abstractmethod
    def get_type(self) -> str:
        """Return the TypeScript text of this type."""


type Valuespace = Type | str


def to_type(valuespace: Valuespace, literal: bool = False) -> Type:
    """Normalize a type or raw string to a `Type`.

    Args:
        valuespace (Valuespace): A type, or a string to be converted.
        literal (bool): Convert strings to string literal types (`'On'`)
            instead of plain type names (`number`).

    Returns:
        Type: The normalized type.
    """
    if isinstance(valuespace, Type):
        return valuespace
    if literal:
        return Plain(quote_literal(valuespace))
    return Plain(valuespace)


class Plain(Type):
    """A literal piece of type text, e.g. `number` or `'On'`."""

    def __init__(self, text: str):
        if not text:
            raise EmptyTypeError()
        self.text = text

    @override
    def get_type(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Plain({self.text!r})"


class List(Type):
    """An array of some element type."""

    def __init__(self, element_type: Valuespace):
        self.element_type = to_type(element_type)

    @override
    def get_type(self) -> str:
        element = self.element_type.get_type()
        if self.element_type.grouped:
            element = f"({element})"
        return f"{element}[]"


class Literal(Type):
    """A union of types. Raw string members become string literal types.

    Nested unions are flattened into this one. Other grouped members, such as
    function types, are parenthesised.
    """

    grouped = True

    def __init__(self, *members: Valuespace):
        if not members:
            raise EmptyUnionError()
        self.members: list[Type] = []
        for member in members:
            member = to_type(member, literal=True)
            if isinstance(member, Literal):
                self.members.extend(member.members)
            else:
                self.members.append(member)

    @override
    def get_type(self) -> str:
        return " | ".join(f"({member.get_type()})" if member.grouped else member.get_type() for member in self.members)
