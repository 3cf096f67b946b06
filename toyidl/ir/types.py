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

"""Primitive type registry for toyidl."""

import re
from enum import Enum as PyEnum


class IncompleteType(PyEnum):
    """Every type a method may return, including the void marker.

    Only complete types (see ``is_complete``) may appear as argument types.
    """

    VOID = "void"
    INT = "int"
    FLOAT = "float"
    STRING = "string"

    @property
    def is_complete(self) -> bool:
        """True if the type carries a value and may be used as an argument."""
        return self is not IncompleteType.VOID


INCOMPLETE_TYPES = {t.value: t for t in IncompleteType}

COMPLETE_TYPES = {t.value: t for t in IncompleteType if t.is_complete}

IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

# Method names are at least two characters long.
METHOD_NAME_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]+")


class UnknownTypeError(KeyError):
    """Raised when a type name is not in the requested registry table."""

    def __init__(self, type_name: str):
        super().__init__(type_name)
        self.type_name = type_name

    def __str__(self) -> str:
        return f"Unknown type: {self.type_name}"


def lookup_incomplete_type(name: str) -> IncompleteType:
    """Resolve a return-position type name, ``void`` included."""
    try:
        return INCOMPLETE_TYPES[name]
    except KeyError:
        raise UnknownTypeError(name) from None


def lookup_complete_type(name: str) -> IncompleteType:
    """Resolve an argument-position type name; ``void`` is rejected."""
    try:
        return COMPLETE_TYPES[name]
    except KeyError:
        raise UnknownTypeError(name) from None


def is_identifier(name: str) -> bool:
    return IDENTIFIER_PATTERN.fullmatch(name) is not None


def is_method_name(name: str) -> bool:
    return METHOD_NAME_PATTERN.fullmatch(name) is not None


__all__ = [
    "IncompleteType",
    "INCOMPLETE_TYPES",
    "COMPLETE_TYPES",
    "IDENTIFIER_PATTERN",
    "METHOD_NAME_PATTERN",
    "UnknownTypeError",
    "lookup_incomplete_type",
    "lookup_complete_type",
    "is_identifier",
    "is_method_name",
]
