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

"""Line-oriented parser for toyidl source.

The grammar has two kinds of statements, each on its own line::

    interface <identifier>[;]
    <return-type> <method-name>(<type> <identifier>, ...)[;]

The first non-blank line must be the interface header; every following
non-blank line must be a method declaration. Blank lines are skipped but
still counted for error messages.
"""

import logging
import re
from typing import List, Optional

from toyidl.ir.ast import Argument, Interface, Method
from toyidl.ir.types import (
    COMPLETE_TYPES,
    IDENTIFIER_PATTERN,
    INCOMPLETE_TYPES,
    METHOD_NAME_PATTERN,
    lookup_complete_type,
    lookup_incomplete_type,
)

logger = logging.getLogger(__name__)

# \r\n, \r or \n. Form feeds and Unicode separators stay inside a line.
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

_IDENT = IDENTIFIER_PATTERN.pattern
_RETURN_TYPE = "|".join(INCOMPLETE_TYPES)
_ARG_TYPE = "|".join(COMPLETE_TYPES)
_ARGUMENT = rf"(?:{_ARG_TYPE})\s+(?:{_IDENT})"

INTERFACE_PATTERN = re.compile(
    r"\s*interface\s+"
    rf"(?P<interface_name>{_IDENT})"
    r"\s*(?:;\s*)?"
)

METHOD_PATTERN = re.compile(
    rf"\s*(?P<return_type>{_RETURN_TYPE})\s+"
    rf"(?P<method_name>{METHOD_NAME_PATTERN.pattern})\s*"
    r"\("
    rf"(?:(?P<arguments>\s*{_ARGUMENT}\s*(?:,\s*{_ARGUMENT}\s*)*)|\s*)"
    r"\)"
    r"\s*(?:;\s*)?"
)


class ParseError(Exception):
    """Error during parsing. ``line`` is 1-based, or None for end-of-input errors."""

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line


class GrammarError(ParseError):
    """A line does not match the grammar expected at its position."""

    def __init__(self, message: str, line: int):
        super().__init__(message, line)


class StructuralError(ParseError):
    """The document as a whole is missing a required declaration."""

    def __init__(self, message: str):
        super().__init__(message, None)


class Parser:
    """Parses one toyidl document into an Interface."""

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

    def parse(self) -> Interface:
        """Parse the whole document. Raises ParseError on the first bad line."""
        interface_name: Optional[str] = None
        methods: List[Method] = []

        lines = LINE_BREAK_PATTERN.split(self.source)
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            if interface_name is None:
                interface_name = self.parse_interface_header(line, line_no)
            else:
                methods.append(self.parse_method(line, line_no))

        if interface_name is None:
            raise StructuralError("interface declaration missing")
        if not methods:
            raise StructuralError("interface with no method declarations")

        interface = Interface(name=interface_name, methods=methods)
        logger.debug(
            "Parsed interface %s with %d method(s) from %s",
            interface.name,
            len(interface.methods),
            self.filename,
        )
        return interface

    def parse_interface_header(self, line: str, line_no: int) -> str:
        match = INTERFACE_PATTERN.fullmatch(line)
        if match is None:
            raise GrammarError(
                f"line {line_no} is not a valid interface declaration", line_no
            )
        return match.group("interface_name")

    def parse_method(self, line: str, line_no: int) -> Method:
        match = METHOD_PATTERN.fullmatch(line)
        if match is None:
            raise GrammarError(
                f"line {line_no} is not a valid method declaration", line_no
            )
        return_type = lookup_incomplete_type(match.group("return_type"))
        arguments = self.parse_arguments(match.group("arguments"))
        return Method(
            return_type=return_type,
            name=match.group("method_name"),
            arguments=arguments,
        )

    def parse_arguments(self, argument_list: Optional[str]) -> List[Argument]:
        """Split a matched argument list into typed arguments."""
        if argument_list is None:
            return []
        arguments = []
        for arg_string in argument_list.split(","):
            type_name, name = arg_string.split()
            arguments.append(Argument(type=lookup_complete_type(type_name), name=name))
        return arguments


def parse(source: str, filename: str = "<input>") -> Interface:
    """Parse toyidl source and return the declared interface."""
    return Parser(source, filename).parse()
