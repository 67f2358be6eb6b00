#===============================================================================
#  Launcher | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Command-line frontend: parses argv, renders tables and messages, and calls
#  into the configuration store and the dispatcher. Every failure is reported
#  on the console and the process still exits 0.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import List, Optional

from .config_store import ConfigLocation, append_shortcut, find_shortcuts, read_configuration
from .constants import APP_NAME, APP_VERSION, CLI_NAME
from .launcher import launch, launch_shortcut, open_with_default_program
from .logs import configure_logging
from .table import format_shortcuts

log = logging.getLogger(__name__)

HELP_TEXT = f"""\
{APP_NAME}
  Launches shortcuts by name as defined in configuration file, for disk locations, urls, and executables.

Basic commands:
  {CLI_NAME} --help: Print help
  {CLI_NAME} --dir: Open configuration folder
  {CLI_NAME} --edit: Edit configuration with default editor
  {CLI_NAME} --create <Name> <Path>: Append a new entry
  {CLI_NAME} --list: List names
  {CLI_NAME} --search <keywords>: Search names/locations matching keywords (regular expression)
  {CLI_NAME} <Name> [<Arguments>...]: Open shortcut

Additional commands:
  {CLI_NAME} --print <Name>: Print path of shortcut (useful in shell and with other programs)
  {CLI_NAME} --open <Name> [<Arguments>...]: Open file with default program; Open other links with browser"""


class InvalidArguments(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise InvalidArguments(message)


OPEN_FLAGS = ("-o", "--open")

# flag -> number of values, taken verbatim from argv even when they start with "-"
VALUE_FLAGS = {
    "-s": 1, "--search": 1,
    "-p": 1, "--print": 1,
    "-c": 2, "--create": 2,
}


def build_parser() -> argparse.ArgumentParser:
    """Parser for the switch commands. Names, "--open" and VALUE_FLAGS bypass it."""
    parser = _Parser(prog=CLI_NAME, add_help=False, allow_abbrev=False)
    actions = parser.add_mutually_exclusive_group(required=True)
    actions.add_argument("-h", "--help", action="store_true")
    actions.add_argument("--version", action="store_true")
    actions.add_argument("-l", "--list", action="store_true")
    actions.add_argument("-e", "--edit", action="store_true")
    actions.add_argument("-d", "--dir", action="store_true")
    return parser


COMMAND_FLAGS = OPEN_FLAGS + tuple(VALUE_FLAGS) + (
    "-h", "--help", "--version", "-l", "--list", "-e", "--edit", "-d", "--dir",
)


def _launch_by_name(location: ConfigLocation, name: Optional[str], args: List[str], prefer_default: bool) -> None:
    if not name:
        print("Invalid number of arguments.")
        return
    try:
        result = launch_shortcut(name, args, prefer_default, location)
    except OSError as e:
        log.debug("Launching %s failed", name, exc_info=True)
        print(e)
        return
    if not result.ok:
        print(result.error)


def _print_path(location: ConfigLocation, name: str) -> None:
    shortcut = read_configuration(location).get(name)
    if shortcut is None:
        print(f"{name} is not defined.")
    else:
        print(shortcut.path)


def _search(location: ConfigLocation, pattern: str) -> None:
    try:
        matches = find_shortcuts(read_configuration(location), pattern)
    except re.error as e:
        print(f"Invalid search pattern: {e}")
        return
    print(format_shortcuts(matches))


def run(argv: List[str], location: ConfigLocation) -> None:
    if not argv:
        print(HELP_TEXT)
        return

    first = argv[0]
    if not first.startswith("-"):
        # a shortcut name; everything after it belongs to the target
        _launch_by_name(location, first, argv[1:], prefer_default=False)
        return

    # flags are matched case-insensitively
    first = first.lower()
    if first in OPEN_FLAGS:
        _launch_by_name(location, argv[1] if len(argv) > 1 else None, argv[2:], prefer_default=True)
        return

    if first in VALUE_FLAGS:
        values = argv[1:]
        if len(values) != VALUE_FLAGS[first]:
            print("Invalid number of arguments.")
        elif first in ("-s", "--search"):
            _search(location, values[0])
        elif first in ("-p", "--print"):
            _print_path(location, values[0])
        else:
            append_shortcut(location, values[0], values[1])
        return

    try:
        ns = build_parser().parse_args([first] + argv[1:])
    except InvalidArguments as e:
        log.debug("Rejected arguments %s: %s", argv, e)
        if first in COMMAND_FLAGS:
            print("Invalid number of arguments.")
        else:
            print(f"Invalid argument: {argv[0]}")
        return

    if ns.help:
        print(HELP_TEXT)
    elif ns.version:
        print(f"{CLI_NAME} {APP_VERSION}")
    elif ns.edit:
        open_with_default_program(str(location.path))
    elif ns.dir:
        result = launch(str(location.path))
        if not result.ok:
            print(result.error)
    elif ns.list:
        print(format_shortcuts(read_configuration(location).values()))


def main(argv: Optional[List[str]] = None, location: Optional[ConfigLocation] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    location = location or ConfigLocation.default()
    location.ensure()
    configure_logging(location.folder)
    log.debug("argv=%s config=%s", argv, location.path)
    run(argv, location)
    return 0
