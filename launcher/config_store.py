#===============================================================================
#  Launcher | config_store.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Location, parsing and appending of the flat "<Name>: <Path>" configuration
#  file. The file on disk is the only source of truth and is re-read on every
#  call; nothing is cached between reads.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

from PySide6.QtCore import QCoreApplication, QStandardPaths

from .constants import (
    APP_NAME,
    COMMENT_PREFIX,
    CONFIG_FILE_NAME,
    CONFIG_HEADER,
    ENV_CONFIG_DIR,
    NAME_DELIMITER,
)
from .errors import MalformedLineError
from .models import Shortcut

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigLocation:
    """Where the configuration file lives.

    Resolved once at startup and passed to every reader/writer. Creating the
    folder and the boilerplate file is an explicit step (ensure()), never a
    side effect of asking for the path.
    """
    folder: Path

    @property
    def path(self) -> Path:
        return self.folder / CONFIG_FILE_NAME

    @classmethod
    def default(cls) -> "ConfigLocation":
        """Per-user application data folder, unless LAUNCHER_CONFIG_DIR is set.

        Resolution order:
          1) $LAUNCHER_CONFIG_DIR
          2) Qt AppDataLocation for the "Launcher" application
             (Windows: %APPDATA%/Launcher, Linux: ~/.local/share/Launcher)
        """
        override = os.environ.get(ENV_CONFIG_DIR, "").strip()
        if override:
            return cls(Path(override).expanduser())

        QCoreApplication.setApplicationName(APP_NAME)
        location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
        if not location:
            # Qt could not determine a writable location for this platform
            location = str(Path.home() / f".{APP_NAME.lower()}")
        return cls(Path(location))

    def ensure(self) -> Path:
        """Create the folder and a boilerplate configuration file if missing."""
        self.folder.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            log.info("Creating configuration file at %s", self.path)
            self.path.write_text(CONFIG_HEADER, encoding="utf-8")
        return self.path


def is_skippable(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def _unquote(value: str) -> str:
    # one quote from each end, not every quote
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def parse_line(line: str) -> Shortcut:
    """Parse "<Name>: <Path>", splitting on the first colon only."""
    name, sep, value = line.partition(NAME_DELIMITER)
    if not sep:
        raise MalformedLineError(line)
    return Shortcut(name=name.strip(), path=_unquote(value.strip()))


def parse_configuration(lines: Iterable[str], strict: bool = False) -> Dict[str, Shortcut]:
    """Build the name -> Shortcut mapping. Later duplicates overwrite earlier ones.

    A line without a colon raises MalformedLineError when strict, otherwise it
    is skipped with a warning.
    """
    shortcuts: Dict[str, Shortcut] = {}
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if is_skippable(line):
            continue
        try:
            shortcut = parse_line(line)
        except MalformedLineError as e:
            if strict:
                raise MalformedLineError(line, number) from e
            log.warning("Skipping malformed configuration line %d: %r", number, line)
            continue
        if shortcut.name in shortcuts:
            log.debug("Shortcut %s redefined on line %d", shortcut.name, number)
        shortcuts[shortcut.name] = shortcut
    return shortcuts


def read_configuration(location: ConfigLocation, strict: bool = False) -> Dict[str, Shortcut]:
    """Read and parse the configuration file from disk."""
    data = location.path.read_bytes()
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        log.warning("%s is not valid UTF-8 (%s); undecodable bytes shown as U+FFFD", location.path, e.reason)
        text = data.decode("utf-8-sig", errors="replace")
    return parse_configuration(text.splitlines(), strict=strict)


def append_shortcut(location: ConfigLocation, name: str, path: str) -> None:
    """Append a new "<name>: <path>" entry. No validation, no duplicate check."""
    with open(location.path, "a", encoding="utf-8") as f:
        f.write(f"\n{name}{NAME_DELIMITER} {path}")
    log.info("Appended shortcut %s -> %s", name, path)


def find_shortcuts(shortcuts: Dict[str, Shortcut], pattern: str) -> List[Shortcut]:
    """Shortcuts whose name or path matches pattern (regex, case-insensitive).

    Raises re.error for an invalid pattern.
    """
    regex = re.compile(pattern, re.IGNORECASE)
    return [s for s in shortcuts.values() if regex.search(s.name) or regex.search(s.path)]
