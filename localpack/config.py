#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# config.py - Configuration file for localpack
#
# Copyright (c) 2025, BigCommunity Team
# All rights reserved.
#

import os

# Import translation function
from .translation_utils import _

# Files marked executable after a build (relative to the project root)
DEFAULT_EXECUTABLE_FILES = [
    os.path.join("bin", "task-master.js"),
    os.path.join("mcp-server", "server.js"),
]

# Packaging command; prints the archive file name on stdout
DEFAULT_PACK_COMMAND = "npm pack"

# Global install command; the archive path is appended
DEFAULT_INSTALL_COMMAND = "npm install -g"

# Execute bits for owner, group and other
EXECUTE_BITS = 0o111

# User settings file
CONFIG_FILE = "~/.config/localpack/config.json"

# Log directory
LOG_DIR_BASE = "/tmp/localpack"

# Script version
VERSION = "1.0.0"
APP_NAME = _("LOCALPACK")
APP_DESC = _("Marks build entry scripts executable and installs a local package build globally.")
