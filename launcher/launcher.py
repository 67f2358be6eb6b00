#===============================================================================
#  Launcher | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Launches shortcut targets: executables, disk locations (reveal or open),
#  URLs, and verbatim command lines (optionally monitored, streaming output).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
import webbrowser
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Union

from .config_store import ConfigLocation, read_configuration
from .constants import MONITOR_PREFIX, URL_PREFIX, VERBATIM_PREFIX
from .errors import LaunchError, LauncherError, ShortcutNotFoundError
from .models import ShortcutType, classify

log = logging.getLogger(__name__)

LineHandler = Callable[[str], None]
Command = Union[str, List[str]]


@dataclass(frozen=True)
class LaunchResult:
    """Outcome of a launch request. Failures are carried, not raised."""
    target: str                         # path or shortcut name that was requested
    action: str                         # "spawn" | "monitor" | "reveal" | "open" | "none"
    error: Optional[LauncherError] = None
    returncode: Optional[int] = None    # only set for monitored runs

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


@dataclass(frozen=True)
class VerbatimCommand:
    program: str
    arguments: str  # everything after the first space, unparsed
    monitor: bool

    def argv(self) -> List[str]:
        return [self.program, *split_arguments(self.arguments)]

    def spawn_args(self) -> Command:
        # Windows receives the command line as written; elsewhere it is tokenized
        if _platform() == "windows":
            return f"{self.program} {self.arguments}".rstrip()
        return self.argv()


def _platform() -> str:
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "mac"
    return "linux"


def split_arguments(arguments: str) -> List[str]:
    """Whitespace-split, with only double quotes grouping words.

    Apostrophes and backslashes are kept literally. An unbalanced double quote
    falls back to a plain whitespace split.
    """
    lexer = shlex.shlex(arguments, posix=True)
    lexer.whitespace_split = True
    lexer.quotes = '"'
    lexer.escape = ""
    lexer.commenters = ""
    try:
        return list(lexer)
    except ValueError:
        log.warning("Unbalanced quotes in %r, splitting on whitespace", arguments)
        return arguments.split()


def parse_verbatim(path: str) -> VerbatimCommand:
    """Split "!cmd args" / "!?cmd args" into program and argument string."""
    command = path[len(VERBATIM_PREFIX):] if path.startswith(VERBATIM_PREFIX) else path
    monitor = command.startswith(MONITOR_PREFIX)
    if monitor:
        command = command[len(MONITOR_PREFIX):]
    # TODO: support program paths containing spaces (e.g. a quoted first token)
    program, _, arguments = command.partition(" ")
    return VerbatimCommand(program=program, arguments=arguments, monitor=monitor)


def quote_arguments(args: Sequence[str]) -> str:
    return " ".join(f'"{a}"' if " " in a else a for a in args)


def _print_line(line: str) -> None:
    print(line, flush=True)


def run_monitored(command: Command, on_line: Optional[LineHandler] = None) -> int:
    """Run command to completion, forwarding each output line as it arrives.

    stdout and stderr are merged into one stream. No timeout.
    """
    emit = on_line or _print_line
    kwargs = {}
    if os.name == "nt":
        kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW

    log.debug("Monitoring %s", command)
    with subprocess.Popen(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        bufsize=1,
        **kwargs,
    ) as p:
        for line in p.stdout:
            emit(line.rstrip("\r\n"))
    log.debug("%s exited with rc=%s", command, p.returncode)
    return p.returncode


def reveal_in_file_manager(path: str) -> None:
    """Show path selected in its containing folder."""
    system = _platform()
    if system == "windows":
        # explorer takes everything after /select, as the path, so no quotes
        subprocess.Popen(f"explorer.exe /select,{path}")
    elif system == "mac":
        subprocess.Popen(["open", "-R", path])
    else:
        folder = path if os.path.isdir(path) else (os.path.dirname(path) or ".")
        subprocess.Popen(["xdg-open", folder])


def open_with_default_program(path: str, args: Sequence[str] = ()) -> None:
    """Open path (file, folder or URL) with the OS-registered handler."""
    system = _platform()
    if system == "windows":
        command = f'explorer.exe "{path}"'
        if args:
            command += " " + quote_arguments(args)
        subprocess.Popen(command)
        return

    if system == "mac":
        subprocess.Popen(["open", path] + (["--args", *args] if args else []))
        return

    if args:
        log.warning("xdg-open cannot forward arguments, ignoring: %s", quote_arguments(args))
    if path.startswith(URL_PREFIX):
        webbrowser.open(path)
    else:
        subprocess.Popen(["xdg-open", path])


def _launch_executable(path: str, args: Sequence[str], prefer_default_program: bool) -> str:
    subprocess.Popen([path, *args])
    return "spawn"


def _launch_disk_location(path: str, args: Sequence[str], prefer_default_program: bool) -> str:
    if prefer_default_program:
        open_with_default_program(path, args)
        return "open"
    reveal_in_file_manager(path)
    return "reveal"


def _launch_url(path: str, args: Sequence[str], prefer_default_program: bool) -> str:
    open_with_default_program(path, args)
    return "open"


HANDLERS: Dict[ShortcutType, Callable[[str, Sequence[str], bool], str]] = {
    ShortcutType.EXECUTABLE: _launch_executable,
    ShortcutType.DISK_LOCATION: _launch_disk_location,
    ShortcutType.URL: _launch_url,
}


def launch(
    path: str,
    args: Optional[Sequence[str]] = None,
    prefer_default_program: bool = False,
    on_line: Optional[LineHandler] = None,
) -> LaunchResult:
    """Launch a raw target path.

    kinds:
      - "!cmd ..." : run verbatim, fire-and-forget
      - "!?cmd ...": run verbatim, stream output and wait for exit
      - exe        : spawn with args
      - disk       : reveal in file manager, or open with default program
      - url        : open with default program (browser)

    OSError from spawning is not wrapped and propagates to the caller.
    """
    args = list(args or [])

    if path.startswith(VERBATIM_PREFIX):
        command = parse_verbatim(path)
        if command.monitor:
            rc = run_monitored(command.spawn_args(), on_line)
            return LaunchResult(target=path, action="monitor", returncode=rc)
        subprocess.Popen(command.spawn_args())
        return LaunchResult(target=path, action="spawn")

    if not os.path.isdir(path) and not os.path.isfile(path) and not path.startswith(URL_PREFIX):
        return LaunchResult(target=path, action="none", error=LaunchError(path))

    shortcut_type = classify(path)
    handler = HANDLERS.get(shortcut_type)
    if handler is None:
        log.warning("Unexpected shortcut type: %s", shortcut_type)
        return LaunchResult(target=path, action="none")

    action = handler(path, args, prefer_default_program)
    log.info("Launched %s (%s, %s)", path, shortcut_type, action)
    return LaunchResult(target=path, action=action)


def launch_shortcut(
    name: str,
    args: Optional[Sequence[str]],
    prefer_default_program: bool,
    location: ConfigLocation,
    on_line: Optional[LineHandler] = None,
) -> LaunchResult:
    """Look up name in the configuration file and launch its target."""
    shortcut = read_configuration(location).get(name)
    if shortcut is None:
        return LaunchResult(target=name, action="none", error=ShortcutNotFoundError(name))
    return launch(shortcut.path, args, prefer_default_program, on_line)
