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

"""Intermediate representation for toyidl."""

from toyidl.ir.ast import Argument, Method, Interface  # noqa: F401
from toyidl.ir.types import (  # noqa: F401
    IncompleteType,
    INCOMPLETE_TYPES,
    COMPLETE_TYPES,
    UnknownTypeError,
    lookup_complete_type,
    lookup_incomplete_type,
)
from toyidl.ir.validator import InterfaceValidator, validate_interface  # noqa: F401

__all__ = [
    "Argument",
    "Method",
    "Interface",
    "IncompleteType",
    "INCOMPLETE_TYPES",
    "COMPLETE_TYPES",
    "UnknownTypeError",
    "lookup_complete_type",
    "lookup_incomplete_type",
    "InterfaceValidator",
    "validate_interface",
]
