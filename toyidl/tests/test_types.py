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

"""Tests for the toyidl type registry."""

import pytest

from toyidl.ir.types import (
    COMPLETE_TYPES,
    INCOMPLETE_TYPES,
    IncompleteType,
    UnknownTypeError,
    is_identifier,
    is_method_name,
    lookup_complete_type,
    lookup_incomplete_type,
)


def test_registry_is_closed():
    assert set(INCOMPLETE_TYPES) == {"void", "int", "float", "string"}
    assert set(COMPLETE_TYPES) == {"int", "float", "string"}


def test_complete_types_are_incomplete_types():
    for name, idl_type in COMPLETE_TYPES.items():
        assert INCOMPLETE_TYPES[name] is idl_type
        assert idl_type.is_complete


def test_void_is_not_complete():
    assert not IncompleteType.VOID.is_complete
    assert "void" not in COMPLETE_TYPES


def test_lookup_returns_singletons():
    assert lookup_incomplete_type("string") is IncompleteType.STRING
    assert lookup_complete_type("string") is IncompleteType.STRING
    assert lookup_incomplete_type("void") is IncompleteType.VOID


def test_lookup_complete_rejects_void():
    with pytest.raises(UnknownTypeError) as exc_info:
        lookup_complete_type("void")
    assert exc_info.value.type_name == "void"


def test_lookup_unknown_type():
    with pytest.raises(UnknownTypeError):
        lookup_incomplete_type("double")
    with pytest.raises(KeyError):
        lookup_complete_type("bool")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("x", True),
        ("_private", True),
        ("name2", True),
        ("2name", False),
        ("with-dash", False),
        ("", False),
    ],
)
def test_is_identifier(name, expected):
    assert is_identifier(name) is expected


def test_method_names_need_two_characters():
    assert is_method_name("go")
    assert not is_method_name("f")
    assert not is_method_name("9f")
