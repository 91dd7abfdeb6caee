#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# settings.py - User settings management
#
# Copyright (c) 2025, BigCommunity Team
# All rights reserved.
#

import json
import os
import shlex

from .config import (
    CONFIG_FILE, DEFAULT_EXECUTABLE_FILES, DEFAULT_PACK_COMMAND,
    DEFAULT_INSTALL_COMMAND, LOG_DIR_BASE
)


class Settings:
    """Manages user settings stored in ~/.config/localpack/config.json"""

    def __init__(self, config_file: str = CONFIG_FILE):
        self.config_file = os.path.expanduser(config_file)
        self.settings = self.load()

    def load(self):
        """Load settings from file or return defaults"""
        defaults = self.get_defaults()
        if not os.path.exists(self.config_file):
            return defaults

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                saved = json.load(f)
        except (json.JSONDecodeError, OSError):
            # Corrupted or unreadable file, fall back to defaults
            return defaults

        if not isinstance(saved, dict):
            return defaults

        # Merge with defaults; unknown keys and mistyped values are ignored
        for key in defaults:
            if key in saved and self._is_valid(key, saved[key], defaults[key]):
                defaults[key] = saved[key]
        return defaults

    @staticmethod
    def _is_valid(key, value, default) -> bool:
        """A saved value must have the default's type; lists hold only strings"""
        if key in ("pack_command", "install_command") and isinstance(value, list):
            return all(isinstance(part, str) for part in value)
        if isinstance(default, bool):
            return isinstance(value, bool)
        if not isinstance(value, type(default)):
            return False
        if isinstance(value, list):
            return all(isinstance(item, str) for item in value)
        return True

    def get_defaults(self):
        """Return default settings"""
        return {
            # Entry scripts to mark executable
            "executable_files": list(DEFAULT_EXECUTABLE_FILES),

            # Packaging command, prints the archive name
            "pack_command": DEFAULT_PACK_COMMAND,

            # Global install command, archive path is appended
            "install_command": DEFAULT_INSTALL_COMMAND,

            # Write a log file under log_dir/<project>/
            "log_to_file": True,
            "log_dir": LOG_DIR_BASE,

            # Print each external command before running it
            "show_commands": False,
        }

    def get(self, key, default=None):
        """Get a setting value"""
        return self.settings.get(key, default)

    def get_command(self, key) -> list:
        """Get a command setting split into an argument list"""
        value = self.settings.get(key) or ""
        if isinstance(value, list):
            return [str(part) for part in value]
        return shlex.split(value)
