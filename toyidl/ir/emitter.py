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

"""Emit a toyidl interface as IDL source."""

from typing import List

from toyidl.ir.ast import Argument, Interface, Method


class IDLEmitter:
    """Emit an interface back to the textual IDL form.

    The output parses back to an equal interface.
    """

    def __init__(self, interface: Interface):
        self.interface = interface

    def emit(self) -> str:
        """Generate IDL source for the interface."""
        lines: List[str] = [f"interface {self.interface.name};"]
        for method in self.interface.methods:
            lines.append(self._emit_method(method))
        return "\n".join(lines) + "\n"

    def _emit_method(self, method: Method) -> str:
        args = ", ".join(self._emit_argument(arg) for arg in method.arguments)
        return f"{method.return_type.value} {method.name}({args});"

    def _emit_argument(self, arg: Argument) -> str:
        return f"{arg.type.value} {arg.name}"
