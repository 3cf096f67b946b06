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

"""C# interface generator."""

from toyidl.generators.base import BaseGenerator
from toyidl.ir.types import IncompleteType

INTERFACE_TEMPLATE = """\
namespace {namespace}
{
    public interface {interfaceName}
    {
        {methodDeclarations}
    }
}
"""


class CSharpGenerator(BaseGenerator):
    """Generates a C# interface inside a namespace."""

    language_name = "csharp"
    file_extension = ".cs"
    qualifier_placeholder = "{namespace}"
    template = INTERFACE_TEMPLATE

    type_names = {
        IncompleteType.VOID: "void",
        IncompleteType.STRING: "string",
        IncompleteType.INT: "int",
        IncompleteType.FLOAT: "float",
    }
