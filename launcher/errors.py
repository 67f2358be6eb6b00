#===============================================================================
#  Launcher | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Error kinds reported by the configuration parser and the dispatcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional


class LauncherError(Exception):
    """Base class for every error the launcher reports to the console."""


class ShortcutNotFoundError(LauncherError):
    def __init__(self, name: str):
        super().__init__(f"Shortcut {name} is not defined.")
        self.name = name


class MalformedLineError(LauncherError):
    def __init__(self, line: str, line_number: Optional[int] = None):
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Malformed configuration line{where}, expected <Name>: <Path>: {line!r}")
        self.line = line
        self.line_number = line_number


class LaunchError(LauncherError):
    def __init__(self, path: str):
        super().__init__(f"Invalid path: {path}")
        self.path = path
