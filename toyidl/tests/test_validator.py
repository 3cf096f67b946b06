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

"""Tests for interface validation."""

from toyidl.frontend.tidl.parser import parse
from toyidl.ir.ast import Argument, Interface, Method
from toyidl.ir.types import IncompleteType
from toyidl.ir.validator import InterfaceValidator, validate_interface


def test_parsed_interface_is_valid():
    interface = parse("interface Greeter\nstring greet(string name)")
    validator = InterfaceValidator(interface)

    assert validator.validate()
    assert validator.errors == []


def test_empty_interface_is_invalid():
    errors = validate_interface(Interface("Empty", []))
    assert errors == ["Empty: interface with no method declarations"]


def test_void_argument_is_invalid():
    interface = Interface(
        "Bad", [Method(IncompleteType.INT, "f_", [Argument(IncompleteType.VOID, "x")])]
    )
    errors = validate_interface(interface)

    assert errors == ["Bad.f_: Argument 'x' cannot have type void"]


def test_identifier_rules():
    interface = Interface(
        "1Bad",
        [Method(IncompleteType.VOID, "f", [Argument(IncompleteType.INT, "a-b")])],
    )
    validator = InterfaceValidator(interface)

    assert not validator.validate()
    messages = [issue.message for issue in validator.errors]
    assert "Invalid interface name: '1Bad'" in messages
    assert "Invalid method name: 'f'" in messages
    assert "Invalid argument name: 'a-b'" in messages


def test_validate_resets_errors():
    validator = InterfaceValidator(Interface("Empty", []))
    validator.validate()
    validator.validate()
    assert len(validator.errors) == 1
