"""Tests for the serialization of individual declaration nodes."""

from __future__ import annotations

import pytest

from xapi_typegen.errors import InvalidIdentifierError
from xapi_typegen.nodes import (
    Command,
    Config,
    Function,
    ImportStatement,
    Interface,
    MainClass,
    Member,
    Status,
    Tree,
)
from xapi_typegen.types import List, Literal, Plain


class TestMember:
    def test_bare_name(self):
        assert Member("value1", "number").serialize() == "value1: number"

    def test_quoted_name(self):
        assert Member("weird-name!", "number").serialize() == '"weird-name!": number'

    def test_optional(self):
        assert Member("Protocol", "string", required=False).serialize() == "Protocol?: string"

    def test_type_object(self):
        member = Member("Mode", Literal("On", "Off"))
        assert member.serialize() == "Mode: 'On' | 'Off'"

    def test_interface_as_type(self):
        assert Member("Command", Interface("CommandTree")).serialize() == "Command: CommandTree"


class TestFunction:
    """Function signatures in method and function type position."""

    def test_default_return_is_void(self):
        assert Function("ping").serialize() == "ping(): void"

    def test_function_type(self):
        handler = Function("handler", [("value", "string")])
        assert handler.get_type() == "(value: string) => void"

    def test_declare_separator(self):
        handler = Function("handler", [("value", "string")])
        assert handler.get_type(":") == "(value: string): void"

    def test_multiple_arguments_and_return(self):
        fn = Function("add", [("a", "number"), ("b", Plain("number"))], "number")
        assert fn.serialize() == "add(a: number, b: number): number"

    def test_nested_function_argument(self):
        handler = Function("handler", [("value", List("number"))])
        on = Function("on", [("handler", handler)])
        assert on.serialize() == "on(handler: (value: number[]) => void): void"


class TestCommand:
    def test_no_params_returns_any(self):
        assert Command("Mute").serialize() == "Mute(): Promise<any>"

    def test_params(self):
        assert Command("Dial", Interface("DialArgs")).serialize() == "Dial(args: DialArgs): Promise<any>"

    def test_return_value(self):
        assert Command("get", retval="string").serialize() == "get(): Promise<string>"

    def test_empty_params_are_absent(self):
        assert Command("x", "").serialize() == "x(): Promise<any>"

    def test_empty_return_value_is_any(self):
        assert Command("x", retval="").serialize() == "x(): Promise<any>"

    def test_params_and_return_value(self):
        command = Command("Lookup", "string", Literal("Found", "Missing"))
        assert command.serialize() == "Lookup(args: string): Promise<'Found' | 'Missing'>"


class TestTree:
    def test_empty(self):
        assert Tree("Audio").serialize() == "Audio: {}"

    def test_members_are_comma_terminated(self):
        tree = Tree("Audio")
        tree.add_children([Member("Volume", "number"), Member("Muted", "boolean")])
        assert tree.serialize() == "Audio: {\n  Volume: number,\n  Muted: boolean,\n}"

    def test_add_child_returns_child(self):
        tree = Tree("Audio")
        child = Tree("Microphones")
        assert tree.add_child(child) is child
        assert tree.children == [child]

    def test_add_children_preserves_order(self):
        tree = Tree("Audio")
        children = [Member(name, "number") for name in ("c", "a", "b")]
        tree.add_children(children)
        assert tree.children == children


class TestConfig:
    """Accessor expansion for configuration leaves."""

    def test_string_valuespace(self):
        assert Config("n", "string").serialize() == (
            "n: {\n"
            "  get(): Promise<string>,\n"
            "  set(args: string): Promise<any>,\n"
            "  on(handler: (value: string) => void): void,\n"
            "  once(handler: (value: string) => void): void,\n"
            "}"
        )

    def test_accessor_order(self):
        config = Config("n", "string")
        assert [child.name for child in config.children] == ["get", "set", "on", "once"]

    def test_literal_valuespace(self):
        rendered = Config("Mode", Literal("On", "Off")).serialize()
        assert "  set(args: 'On' | 'Off'): Promise<any>," in rendered
        assert "  on(handler: (value: 'On' | 'Off') => void): void," in rendered

    def test_valuespace_is_normalized(self):
        assert Config("n", "number").valuespace.get_type() == "number"


class TestStatus:
    def test_string_valuespace(self):
        assert Status("n", "string").serialize() == (
            "n: {\n"
            "  get(): Promise<string>,\n"
            "  on(handler: (value: string) => void): void,\n"
            "  once(handler: (value: string) => void): void,\n"
            "}"
        )

    def test_accessor_order(self):
        status = Status("n", "string")
        assert [child.name for child in status.children] == ["get", "on", "once"]


class TestInterface:
    def test_empty(self):
        assert Interface("X").serialize() == "export interface X {}"

    def test_members_are_semicolon_terminated(self):
        interface = Interface("DialArgs")
        interface.add_child(Member("Number", "string"))
        interface.add_child(Member("Protocol", Literal("H323", "Sip"), required=False))
        assert interface.serialize() == (
            "export interface DialArgs {\n  Number: string;\n  Protocol?: 'H323' | 'Sip';\n}"
        )

    def test_nested_trees(self):
        interface = Interface("StatusTree")
        audio = interface.add_child(Tree("Audio"))
        audio.add_child(Status("Volume", "number"))
        assert interface.serialize() == (
            "export interface StatusTree {\n"
            "  Audio: {\n"
            "    Volume: {\n"
            "      get(): Promise<number>,\n"
            "      on(handler: (value: number) => void): void,\n"
            "      once(handler: (value: number) => void): void,\n"
            "    },\n"
            "  };\n"
            "}"
        )

    @pytest.mark.parametrize("name", ["Video-InputArgs", "1Tree", "", "Snake_Case"])
    def test_invalid_name_is_rejected(self, name):
        with pytest.raises(InvalidIdentifierError):
            Interface(name)

    def test_type_is_name(self):
        assert Interface("CommandTree").get_type() == "CommandTree"


class TestMainClass:
    def test_defaults(self):
        assert MainClass().serialize() == (
            "export class TypedXAPI extends XAPI {}\n"
            "\n"
            "export default TypedXAPI;\n"
            "export const connect = connectGen(TypedXAPI);\n"
            "\n"
            "export interface TypedXAPI {} "
        )

    def test_members_and_names(self):
        main = MainClass("Desk", "Base")
        main.add_child(Member("Command", Interface("CommandTree")))
        assert main.serialize() == (
            "export class Desk extends Base {}\n"
            "\n"
            "export default Desk;\n"
            "export const connect = connectGen(Desk);\n"
            "\n"
            "export interface Desk {\n"
            "  Command: CommandTree;\n"
            "} "
        )


    def test_invalid_class_name_is_rejected(self):
        with pytest.raises(InvalidIdentifierError):
            MainClass("Typed-XAPI")

    def test_invalid_base_is_rejected(self):
        with pytest.raises(InvalidIdentifierError):
            MainClass("Desk", "x.Base")


class TestImportStatement:
    def test_default_module(self):
        assert ImportStatement().serialize() == 'import { XAPI, connectGen } from "jsxapi";'

    def test_custom_module(self):
        statement = ImportStatement("@acme/xapi", "Base")
        assert statement.serialize() == 'import { Base, connectGen } from "@acme/xapi";'
