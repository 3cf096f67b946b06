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

"""Frontend utilities for locating and parsing IDL files."""

from pathlib import Path

from toyidl.frontend.base import BaseFrontend
from toyidl.frontend.tidl import TIDLFrontend
from toyidl.ir.ast import Interface

FRONTENDS = [TIDLFrontend()]


def get_frontend(file_path: Path) -> BaseFrontend:
    """Select the correct frontend for a file."""
    for frontend in FRONTENDS:
        if frontend.supports_file(file_path):
            return frontend
    raise ValueError(f"Unsupported file extension: {file_path.suffix}")


def parse_idl_file(file_path: Path) -> Interface:
    """Parse a single IDL file and return its interface."""
    frontend = get_frontend(file_path)
    return frontend.parse_file(file_path)
