#! /usr/bin/env python3
#
# phat/main.py

# phat
#
# Copyright 2026 The phat Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line front end.

Build, parse, encode and decode attribute strings from the shell.
"""

import json
import logging
import os
import sys

from . import __VERSION__, echo
from .attributes import parse_attribute_string
from .codec import decode_attribute_value
from .config import PhatConfig, load_config, setup_logging

logger = logging.getLogger(__name__)

COMMANDS = {
    "attname",
    "attrs",
    "decode",
    "encode",
    "parse",
    "tagname",
}


class UsageError(Exception):
    pass


def print_usage():
    progname = os.path.basename(sys.argv[0])
    print(
        f"""\
usage: {progname} [<args>] <command> <arg> [<name>]
       {progname} -h|--help
       {progname} --version

Arguments:
--config <file> YAML configuration file.
--strict        Attribute names must start with a letter or underscore
                (attname, attrs).

Commands:
attname <string>
                Print sanitized attribute name.
attrs <json>|<string>
                Print attribute string for JSON map/list or for
                attribute string.
decode <raw> [<name>]
                Print decoded value (as JSON).
encode <json> [<name>]
                Print encoded value.
parse <string>  Print parsed attributes (as JSON).
tagname <string>
                Print sanitized tag name.
""",
        end="",
    )


class ArgOpts:
    pass


def _load_json(s):
    try:
        return json.loads(s)
    except ValueError:
        return s


def run(argopts, config):
    """Run command.

    Returns:
        Exit status.
    """
    command, arg, name = argopts.command, argopts.arg, argopts.name
    logger.debug(f"{command=} {arg=} {name=}")

    strict = argopts.strict if argopts.strict is not None else config.is_strict()
    if command == "attname":
        echo.sanitize_attr_name(arg, strict=strict)
    elif command == "attrs":
        echo.build_attribute_string(_load_json(arg), strict=strict)
    elif command == "decode":
        sys.stdout.write(json.dumps(decode_attribute_value(arg, name)))
    elif command == "encode":
        echo.encode_attribute_value(_load_json(arg), name)
    elif command == "parse":
        sys.stdout.write(json.dumps(parse_attribute_string(arg)))
    elif command == "tagname":
        echo.sanitize_tag_name(arg)
    sys.stdout.write("\n")
    return 0


def parse_args(args):
    argopts = ArgOpts()
    argopts.config_filename = None
    argopts.command = None
    argopts.arg = None
    argopts.name = None
    argopts.strict = None

    while args:
        arg = args.pop(0)
        if arg in ["-h", "--help"]:
            print_usage()
            sys.exit(0)
        elif arg == "--version":
            print(__VERSION__)
            sys.exit(0)
        elif arg == "--config" and args:
            argopts.config_filename = args.pop(0)
        elif arg == "--strict":
            argopts.strict = True
        elif arg in COMMANDS and args:
            argopts.command = arg
            argopts.arg = args.pop(0)
            if args:
                argopts.name = args.pop(0)
            if args:
                raise UsageError(f"unexpected arguments ({' '.join(args)})")
        else:
            raise UsageError(f"bad argument ({arg})")

    if argopts.command is None:
        raise UsageError("missing command")
    return argopts


def main(args=None):
    try:
        argopts = parse_args(list(sys.argv[1:] if args is None else args))
    except UsageError as e:
        print(f"error: {e}", file=sys.stderr)
        print_usage()
        return 2

    try:
        if argopts.config_filename is not None:
            config = load_config(argopts.config_filename)
        else:
            config = PhatConfig()

        # logging
        setup_logging(config)

        config.setup_delimiters()
        return run(argopts, config)
    except Exception as e:
        logger.debug(f"EXCEPTION ({e})")
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
