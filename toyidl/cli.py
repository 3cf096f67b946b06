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

"""CLI entry point for the toyidl compiler."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from toyidl.frontend.base import FrontendError
from toyidl.frontend.utils import parse_idl_file
from toyidl.generators import GENERATORS, GeneratorOptions, get_generator
from toyidl.ir.ast import Interface
from toyidl.ir.emitter import IDLEmitter
from toyidl.ir.validator import InterfaceValidator

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 24


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="toyidl",
        description="toyidl interface compiler",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    # Options shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # compile command
    compile_parser = subparsers.add_parser(
        "compile",
        parents=[common],
        help="Compile .tidl files to interface declarations",
    )

    compile_parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        metavar="FILE",
        help="Path to the .tidl files to compile",
    )

    compile_parser.add_argument(
        "--lang",
        "-l",
        type=str,
        required=True,
        choices=sorted(GENERATORS),
        help="Target language",
    )

    compile_parser.add_argument(
        "--package",
        "--namespace",
        "-p",
        "-n",
        dest="qualifier",
        type=str,
        required=True,
        metavar="NAME",
        help="Package (Java) or namespace (C#) the generated interface belongs to",
    )

    compile_parser.add_argument(
        "--directory",
        "-d",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory for the output files. Default: next to each input file",
    )

    # check command
    check_parser = subparsers.add_parser(
        "check",
        parents=[common],
        help="Parse .tidl files and print the declared interfaces",
    )

    check_parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        metavar="FILE",
        help="Path to the .tidl files to check",
    )

    return parser.parse_args(args)


def load_interface(file_path: Path) -> Optional[Interface]:
    """Parse a single IDL file, reporting failures to stderr."""
    try:
        return parse_idl_file(file_path)
    except OSError as e:
        print(f"{file_path} read error - {e}", file=sys.stderr)
    except FrontendError as e:
        logger.debug("%s failed at line %s", e.file, e.line)
        print(f"{file_path} parse error - {e.message}", file=sys.stderr)
    except ValueError as e:
        print(f"{file_path} parse error - {e}", file=sys.stderr)
    return None


def compile_file(
    file_path: Path,
    lang: str,
    qualifier: str,
    output_dir: Optional[Path] = None,
) -> bool:
    """Compile a single IDL file.

    Args:
        file_path: Path to the IDL file
        lang: Name of the target generator
        qualifier: Package or namespace for the generated interface
        output_dir: Output directory, or None for the input file's directory
    """
    logger.debug("Compiling %s with the %s generator", file_path, lang)
    interface = load_interface(file_path)
    if interface is None:
        return False

    validator = InterfaceValidator(interface)
    if not validator.validate():
        for error in validator.errors:
            print(f"{file_path} validation error - {error}", file=sys.stderr)
        return False

    options = GeneratorOptions(
        output_dir=output_dir if output_dir is not None else file_path.parent,
        qualifier=qualifier,
    )
    generator = get_generator(lang)(interface, options)
    try:
        written = generator.write_files(generator.generate())
    except OSError as e:
        print(f"{file_path} write error - {e}", file=sys.stderr)
        return False

    for path in written:
        print(f"{file_path} successfully compiled - written to {path}")
    return True


def check_file(file_path: Path) -> bool:
    """Parse a single IDL file and print the interface it declares."""
    interface = load_interface(file_path)
    if interface is None:
        return False

    print(f"{file_path} parsed successfully")
    print(SEPARATOR)
    print(IDLEmitter(interface).emit().rstrip())
    print(SEPARATOR)
    return True


def cmd_compile(args: argparse.Namespace) -> int:
    """Handle the compile command."""
    if args.directory is not None and not args.directory.is_dir():
        print(f"Error: {args.directory} is not a directory.", file=sys.stderr)
        return 1

    success = True
    for file_path in args.files:
        if not compile_file(file_path, args.lang, args.qualifier, args.directory):
            success = False

    return 0 if success else 1


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    success = True
    for file_path in args.files:
        if not check_file(file_path):
            success = False

    return 0 if success else 1


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if parsed.command is None:
        print("Usage: toyidl <command> [options]", file=sys.stderr)
        print("Commands: compile, check", file=sys.stderr)
        print("Use 'toyidl <command> --help' for more information", file=sys.stderr)
        return 1

    if parsed.command == "compile":
        return cmd_compile(parsed)
    if parsed.command == "check":
        return cmd_check(parsed)

    return 0


if __name__ == "__main__":
    sys.exit(main())
