#===============================================================================
#  Launcher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models: the Shortcut record and the ShortcutType classifier.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import EXECUTABLE_SUFFIX, URL_PREFIX, VERBATIM_PREFIX


class ShortcutType(Enum):
    EXECUTABLE = "Executable"
    DISK_LOCATION = "DiskLocation"
    URL = "URL"
    VERBATIM = "Verbatim"

    def __str__(self) -> str:
        return self.value


def classify(path: str) -> ShortcutType:
    """Return the shortcut type for a raw configuration path.

    First match wins:
      - "!..."    -> Verbatim
      - "http..." -> URL
      - "...exe"  -> Executable
      - anything else (including "") -> DiskLocation
    """
    if path.startswith(VERBATIM_PREFIX):
        return ShortcutType.VERBATIM
    if path.startswith(URL_PREFIX):
        return ShortcutType.URL
    if path.endswith(EXECUTABLE_SUFFIX):
        return ShortcutType.EXECUTABLE
    return ShortcutType.DISK_LOCATION


@dataclass(frozen=True)
class Shortcut:
    """A named launch target as written in the configuration file."""
    name: str   # unique key within a configuration, already trimmed
    path: str   # raw target, trimmed and unquoted

    @property
    def type(self) -> ShortcutType:
        return classify(self.path)

    @property
    def is_url(self) -> bool:
        return self.type is ShortcutType.URL

    @property
    def is_executable(self) -> bool:
        return self.type is ShortcutType.EXECUTABLE

    @property
    def is_verbatim(self) -> bool:
        return self.type is ShortcutType.VERBATIM
