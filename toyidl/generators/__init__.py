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

"""Code generators for toyidl."""

from typing import Dict, Type

from toyidl.generators.base import (  # noqa: F401
    BaseGenerator,
    GeneratedFile,
    GeneratorConfigError,
    GeneratorOptions,
)
from toyidl.generators.csharp import CSharpGenerator
from toyidl.generators.java import JavaGenerator
from toyidl.ir.ast import Interface

GENERATORS: Dict[str, Type[BaseGenerator]] = {
    "java": JavaGenerator,
    "csharp": CSharpGenerator,
}


def get_generator(lang: str) -> Type[BaseGenerator]:
    """Look up a generator class by language name."""
    try:
        return GENERATORS[lang.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown language: {lang}. Available: {', '.join(GENERATORS)}"
        ) from None


def render(interface: Interface, lang: str, qualifier: str) -> str:
    """Render ``interface`` with the named generator."""
    return get_generator(lang).render(interface, qualifier)


__all__ = [
    "BaseGenerator",
    "GeneratedFile",
    "GeneratorConfigError",
    "GeneratorOptions",
    "JavaGenerator",
    "CSharpGenerator",
    "GENERATORS",
    "get_generator",
    "render",
]
