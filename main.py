#===============================================================================
#  Launcher  |  Command-line Shortcut Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Opens named shortcuts defined in a flat text configuration file.
#  Supports:
#    - Windows executables (.exe), launched with extra arguments
#    - Files and folders (revealed in the file manager, or opened with the
#      default program via --open)
#    - URLs (opened in the default browser)
#    - Verbatim command lines ("!cmd args"), optionally monitored ("!?cmd")
#      with their output streamed to the console
#
#  Configuration
#  -------------
#    <AppData>/Launcher/Configurations.yaml
#      # comment
#      <Name>: <Path>
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (e.g., PySide6) which are licensed
#  separately by their respective authors. Ensure compliance with their
#  license terms when distributing this software.
#===============================================================================

import sys

from launcher.cli import main


if __name__ == "__main__":
    sys.exit(main())
