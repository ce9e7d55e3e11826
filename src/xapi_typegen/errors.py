"""Exceptions raised while building or writing declaration trees."""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all errors raised by the declaration generator."""

    pass


class InterfaceExistsError(GeneratorError):
    """Raised when an interface name is registered twice on the same root."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Interface already exists: {name}")


class MainClassExistsError(GeneratorError):
    """Raised when a root already holds a main class."""

    def __init__(self):
        super().__init__("Main class already defined")


class NoMainClassError(GeneratorError):
    """Raised when the main class is requested before it was added."""

    def __init__(self):
        super().__init__("No main class defined")


class EmptyUnionError(GeneratorError, ValueError):
    """Raised when a union type is constructed without any members."""

    def __init__(self):
        super().__init__("A literal union needs at least one member")


class EmptyTypeError(GeneratorError, ValueError):
    """Raised when a type is constructed from empty type text."""

    def __init__(self):
        super().__init__("Type text must not be empty")


class InvalidIdentifierError(GeneratorError, ValueError):
    """Raised when a declaration name is not a plain identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Not a valid declaration name: {name!r}")


class InvalidSchemaError(GeneratorError, ValueError):
    """Raised when a schema node does not have the expected shape."""

    def __init__(self, message: str, path: list[str] | None = None):
        self.path = list(path or [])
        if self.path:
            message = f"{' '.join(self.path)}: {message}"
        super().__init__(message)


class InvalidValueSpaceError(InvalidSchemaError):
    """Raised when a valuespace descriptor cannot be turned into a type."""

    pass


class TscValidationError(GeneratorError):
    """Raised when tsc validation finds errors in generated declarations."""

    pass
