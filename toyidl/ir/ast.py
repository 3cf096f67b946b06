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

"""Declaration model for toyidl interfaces."""

from dataclasses import dataclass, field
from typing import Tuple

from toyidl.ir.types import IncompleteType


@dataclass(frozen=True)
class Argument:
    """A method argument. The type is always a complete type."""

    type: IncompleteType
    name: str


@dataclass(frozen=True)
class Method:
    """A method declaration."""

    return_type: IncompleteType
    name: str
    arguments: Tuple[Argument, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "arguments", tuple(self.arguments))


@dataclass(frozen=True)
class Interface:
    """An interface declaration.

    An empty ``methods`` tuple is structurally allowed here; the parser never
    produces one.
    """

    name: str
    methods: Tuple[Method, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "methods", tuple(self.methods))


__all__ = ["Argument", "Method", "Interface"]
