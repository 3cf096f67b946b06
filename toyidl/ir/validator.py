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

"""Structural validation for toyidl interfaces built outside the parser."""

from dataclasses import dataclass
from typing import List

from toyidl.ir.ast import Interface, Method
from toyidl.ir.types import is_identifier, is_method_name


@dataclass
class ValidationIssue:
    """A validation issue, scoped to the declaration it was found in."""

    message: str
    scope: str

    def __str__(self) -> str:
        return f"{self.scope}: {self.message}"


class InterfaceValidator:
    """Validates an interface against the identifier and type rules."""

    def __init__(self, interface: Interface):
        self.interface = interface
        self.errors: List[ValidationIssue] = []

    def validate(self) -> bool:
        self.errors = []
        self._check_interface()
        for method in self.interface.methods:
            self._check_method(method)
        return not self.errors

    def _error(self, message: str, scope: str) -> None:
        self.errors.append(ValidationIssue(message, scope))

    def _check_interface(self) -> None:
        name = self.interface.name
        if not is_identifier(name):
            self._error(f"Invalid interface name: {name!r}", "interface")
        if not self.interface.methods:
            self._error("interface with no method declarations", name)

    def _check_method(self, method: Method) -> None:
        scope = f"{self.interface.name}.{method.name}"
        if not is_method_name(method.name):
            self._error(f"Invalid method name: {method.name!r}", scope)
        for arg in method.arguments:
            if not is_identifier(arg.name):
                self._error(f"Invalid argument name: {arg.name!r}", scope)
            if not arg.type.is_complete:
                self._error(
                    f"Argument {arg.name!r} cannot have type {arg.type.value}",
                    scope,
                )


def validate_interface(interface: Interface) -> List[str]:
    """Validate an interface and return a list of error messages."""
    validator = InterfaceValidator(interface)
    validator.validate()
    return [str(err) for err in validator.errors]
