# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.

"""Tests for the toyidl line parser."""

from textwrap import dedent

import pytest

from toyidl.frontend.base import FrontendError
from toyidl.frontend.tidl import TIDLFrontend
from toyidl.frontend.tidl.parser import (
    GrammarError,
    ParseError,
    Parser,
    StructuralError,
    parse,
)
from toyidl.ir.ast import Argument, Interface, Method
from toyidl.ir.types import IncompleteType


class TestValidDocuments:
    """Documents that parse successfully."""

    def test_greeter(self):
        interface = parse("interface Greeter;\nstring greet(string name);")

        assert interface == Interface(
            name="Greeter",
            methods=(
                Method(
                    return_type=IncompleteType.STRING,
                    name="greet",
                    arguments=(Argument(IncompleteType.STRING, "name"),),
                ),
            ),
        )

    def test_multiple_methods_keep_order(self):
        source = dedent(
            """
            interface Calculator
            int add(int a, int b);
            float divide(float x, float y)
            void reset();
            string describe()
            """
        )
        interface = parse(source)

        assert interface.name == "Calculator"
        assert [m.name for m in interface.methods] == [
            "add",
            "divide",
            "reset",
            "describe",
        ]
        add, _, reset, _ = interface.methods
        assert add.return_type is IncompleteType.INT
        assert [(a.type, a.name) for a in add.arguments] == [
            (IncompleteType.INT, "a"),
            (IncompleteType.INT, "b"),
        ]
        assert reset.arguments == ()
        assert reset.return_type is IncompleteType.VOID

    def test_whitespace_tolerance(self):
        source = "   interface   Spaced  ;  \n\t int   sum ( int a ,int b ,  float  c )  ;  "
        interface = parse(source)

        method = interface.methods[0]
        assert interface.name == "Spaced"
        assert method.name == "sum"
        assert [a.name for a in method.arguments] == ["a", "b", "c"]
        assert method.arguments[2].type is IncompleteType.FLOAT

    def test_empty_argument_list_with_spaces(self):
        interface = parse("interface Clock\nint now(   )")
        assert interface.methods[0].arguments == ()

    def test_duplicate_argument_names_allowed(self):
        interface = parse("interface Dup\nvoid twice(int x, string x)")
        assert [a.name for a in interface.methods[0].arguments] == ["x", "x"]

    def test_blank_lines_are_skipped(self):
        source = "\n\n   \ninterface Gaps\n\n\t\nvoid ping()\n\n"
        interface = parse(source)
        assert interface.name == "Gaps"
        assert len(interface.methods) == 1

    def test_windows_line_endings(self):
        interface = parse("interface Crlf;\r\nvoid ping();\r\nint pong();\r\n")
        assert [m.name for m in interface.methods] == ["ping", "pong"]

    def test_keyword_spelled_names(self):
        interface = parse("interface string\nint float(int void_value)")
        assert interface.name == "string"
        assert interface.methods[0].name == "float"


class TestGrammarErrors:
    """Lines that do not match the grammar expected at their position."""

    def test_bad_header_reports_its_line(self):
        with pytest.raises(GrammarError) as exc_info:
            parse("\n\nclass Foo;\nvoid ping();")

        assert exc_info.value.line == 3
        assert str(exc_info.value) == "line 3 is not a valid interface declaration"

    @pytest.mark.parametrize(
        "header",
        [
            "interface",
            "interface 1Bad",
            "interface Two Names",
            "interface Foo;;",
            "Interface Foo",
            "interfaceFoo",
            "void ping();",
        ],
    )
    def test_invalid_headers(self, header):
        with pytest.raises(GrammarError, match="not a valid interface declaration"):
            parse(f"{header}\nvoid ping();")

    def test_void_argument_is_rejected(self):
        with pytest.raises(GrammarError) as exc_info:
            parse("interface Bad\nint f(void x);")

        assert exc_info.value.line == 2
        assert str(exc_info.value) == "line 2 is not a valid method declaration"

    @pytest.mark.parametrize(
        "method",
        [
            "int f();",
            "int add(int a,);",
            "int add(int a int b);",
            "int add(a);",
            "double half(double x);",
            "add(int a);",
            "int add(int 1a);",
            "int add(int a)) ;",
            "int add(int a);;",
            "int add(int a); // sum",
            "interface Other;",
        ],
    )
    def test_invalid_methods(self, method):
        with pytest.raises(GrammarError, match="not a valid method declaration"):
            parse(f"interface Foo\nvoid ok();\n{method}")

    def test_line_numbers_count_blank_lines(self):
        source = "interface Foo\n\nvoid ok()\n\n\nnot a method\nvoid later()"
        with pytest.raises(GrammarError) as exc_info:
            parse(source)
        assert exc_info.value.line == 6

    def test_form_feed_does_not_start_a_line(self):
        with pytest.raises(GrammarError) as exc_info:
            parse("interface Foo\x0c\nbad")
        assert exc_info.value.line == 2

        with pytest.raises(GrammarError) as exc_info:
            parse("interface A\x0cvoid go()")
        assert str(exc_info.value) == "line 1 is not a valid interface declaration"

    @pytest.mark.parametrize("separator", ["\x0b", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_unicode_separators_stay_inside_a_line(self, separator):
        with pytest.raises(GrammarError) as exc_info:
            parse(f"interface Foo\nvoid ok(){separator}void more()\nbad")
        assert exc_info.value.line == 2

    def test_mixed_line_endings_are_counted(self):
        with pytest.raises(GrammarError) as exc_info:
            parse("interface Foo\r\nvoid a()\rvoid b()\n\r\nbad")
        assert exc_info.value.line == 5

    def test_first_error_wins(self):
        with pytest.raises(GrammarError) as exc_info:
            parse("interface Foo\nbad one\nbad two")
        assert exc_info.value.line == 2


class TestStructuralErrors:
    """Documents whose lines are valid but incomplete."""

    @pytest.mark.parametrize("source", ["", "\n\n", "   \n\t\n  "])
    def test_missing_interface(self, source):
        with pytest.raises(StructuralError) as exc_info:
            parse(source)
        assert str(exc_info.value) == "interface declaration missing"
        assert exc_info.value.line is None

    def test_interface_without_methods(self):
        with pytest.raises(StructuralError) as exc_info:
            parse("interface Empty;")
        assert str(exc_info.value) == "interface with no method declarations"

    def test_structural_errors_are_parse_errors(self):
        with pytest.raises(ParseError):
            parse("interface Empty;\n\n")


class TestFrontend:
    """Tests for the .tidl frontend wrapper."""

    def test_parse_error_carries_file_and_line(self):
        with pytest.raises(FrontendError) as exc_info:
            TIDLFrontend().parse("interface Bad\nint f(void x);", "bad.tidl")

        error = exc_info.value
        assert error.file == "bad.tidl"
        assert error.line == 2
        assert str(error) == "bad.tidl:2: line 2 is not a valid method declaration"
        assert isinstance(error.__cause__, GrammarError)

    def test_structural_error_has_no_line(self):
        with pytest.raises(FrontendError) as exc_info:
            TIDLFrontend().parse("", "empty.tidl")
        assert exc_info.value.line is None
        assert str(exc_info.value) == "empty.tidl: interface declaration missing"

    def test_parse_file(self, tmp_path):
        path = tmp_path / "greeter.tidl"
        path.write_text("interface Greeter;\nstring greet(string name);\n")

        frontend = TIDLFrontend()
        assert frontend.supports_file(path)
        assert not frontend.supports_file(tmp_path / "greeter.idl")
        assert frontend.parse_file(path).name == "Greeter"

    def test_parser_class_matches_function(self):
        source = "interface Same\nvoid go()"
        assert Parser(source).parse() == parse(source)
