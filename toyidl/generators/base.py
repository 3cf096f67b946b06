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

"""Base class for code generators."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from toyidl.ir.ast import Argument, Interface, Method
from toyidl.ir.types import IncompleteType

logger = logging.getLogger(__name__)


class GeneratorConfigError(Exception):
    """A generator's type table or template is incomplete."""


@dataclass
class GeneratedFile:
    """A generated source file."""

    path: str
    content: str


@dataclass
class GeneratorOptions:
    """Options for code generation."""

    output_dir: Path
    qualifier: str


class BaseGenerator:
    """Base class for language-specific interface generators.

    A subclass supplies a type-name table and a template. The template holds
    three placeholders: the namespace or package (``qualifier_placeholder``),
    the interface name and the method declaration block. Method lines after
    the first are indented like the template line holding the method block.
    """

    # Override in subclasses
    language_name: str = "base"
    file_extension: str = ".txt"
    type_names: Dict[IncompleteType, str] = {}
    template: str = ""
    qualifier_placeholder: str = "{qualifier}"
    interface_placeholder: str = "{interfaceName}"
    methods_placeholder: str = "{methodDeclarations}"

    # Derived from the template when the subclass is defined
    method_indent: str = ""

    def __init__(self, interface: Interface, options: GeneratorOptions):
        self.interface = interface
        self.options = options

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.method_indent = cls.derive_method_indent()

    @classmethod
    def derive_method_indent(cls) -> str:
        """Return the text between the start of the method-block line and the placeholder."""
        index = cls.template.find(cls.methods_placeholder)
        if index < 0:
            raise GeneratorConfigError(
                f"{cls.language_name} template has no {cls.methods_placeholder}"
            )
        line_start = cls.template.rfind("\n", 0, index) + 1
        return cls.template[line_start:index]

    @classmethod
    def type_name(cls, idl_type: IncompleteType) -> str:
        """Map an IDL type to its spelling in the target language."""
        try:
            return cls.type_names[idl_type]
        except KeyError:
            raise GeneratorConfigError(
                f"{cls.language_name} generator has no mapping for type {idl_type.value}"
            ) from None

    @classmethod
    def format_argument(cls, arg: Argument) -> str:
        return f"{cls.type_name(arg.type)} {arg.name}"

    @classmethod
    def format_method(cls, method: Method) -> str:
        args = ", ".join(cls.format_argument(arg) for arg in method.arguments)
        return f"{cls.type_name(method.return_type)} {method.name}({args});"

    @classmethod
    def render(cls, interface: Interface, qualifier: str) -> str:
        """Render an interface into the template under ``qualifier``."""
        methods = f"\n{cls.method_indent}".join(
            cls.format_method(method) for method in interface.methods
        )
        return (
            cls.template.replace(cls.qualifier_placeholder, qualifier)
            .replace(cls.interface_placeholder, interface.name)
            .replace(cls.methods_placeholder, methods)
        )

    def generate(self) -> List[GeneratedFile]:
        """Generate code and return a list of generated files."""
        path = f"{self.interface.name}{self.file_extension}"
        logger.debug("Rendering %s for interface %s", path, self.interface.name)
        content = self.render(self.interface, self.options.qualifier)
        return [GeneratedFile(path=path, content=content)]

    def write_files(self, files: List[GeneratedFile]) -> List[Path]:
        """Write generated files to disk and return their paths."""
        written = []
        for file in files:
            path = self.options.output_dir / file.path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(file.content)
            written.append(path)
        return written
