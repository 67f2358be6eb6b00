#===============================================================================
#  Launcher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for file/folder naming conventions, shortcut prefixes and
#  environment variable names.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_NAME = "Launcher"
APP_VERSION = "1.0.0"
CLI_NAME = "lc"

CONFIG_FILE_NAME = "Configurations.yaml"
LOGS_FOLDER_NAME = "logs"
LOG_FILE_NAME = "launcher.log"

# Written once when the configuration file does not exist yet.
CONFIG_HEADER = (
    "# Format: <Name>: <Path>\n"
    "# Notes:\n"
    "#   Use ! to start verbatim\n"
    "#   Use !? to monitor process outputs\n"
    "\n"
    "# Configurations"
)

# --- Shortcut markers ---
VERBATIM_PREFIX = "!"
MONITOR_PREFIX = "?"
URL_PREFIX = "http"
EXECUTABLE_SUFFIX = ".exe"
COMMENT_PREFIX = "#"
NAME_DELIMITER = ":"

# --- Environment overrides ---
ENV_CONFIG_DIR = "LAUNCHER_CONFIG_DIR"
ENV_LOG_LEVEL = "LAUNCHER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
