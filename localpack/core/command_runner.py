#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# core/command_runner.py - External command execution
#
# Copyright (c) 2025, BigCommunity Team
# All rights reserved.
#

import shlex
import subprocess
from dataclasses import dataclass

from ..translation_utils import _


@dataclass
class CommandResult:
    """Outcome of one external command"""
    args: list
    returncode: int
    stdout: str = ""


class CommandError(Exception):
    """Raised when an external command cannot be started or exits non-zero"""

    def __init__(self, args, returncode=None, message=None):
        self.command = list(args)
        self.returncode = returncode
        if message is None:
            message = _("Command failed with exit code {0}: {1}").format(
                returncode, shlex.join(self.command)
            )
        super().__init__(message)


class CommandRunner:
    """Runs external commands; the single place where processes are spawned"""

    def __init__(self, logger=None, show_commands: bool = False):
        self.logger = logger
        self.show_commands = show_commands

    def _prepare(self, args) -> list:
        args = [str(arg) for arg in args]
        if not args:
            raise CommandError(args, message=_("Empty command"))
        if self.show_commands and self.logger:
            self.logger.log("purple", f"$ {shlex.join(args)}")
        return args

    def capture(self, args, cwd=None) -> CommandResult:
        """Runs a command capturing stdout; stderr goes to the terminal"""
        args = self._prepare(args)
        try:
            result = subprocess.run(
                args,
                cwd=cwd,
                stdout=subprocess.PIPE,
                text=True,
                check=False
            )
        except FileNotFoundError as e:
            raise CommandError(args, message=_("Command not found: {0}").format(args[0])) from e
        except OSError as e:
            raise CommandError(args, message=_("Could not start {0}: {1}").format(args[0], e)) from e

        if result.returncode != 0:
            raise CommandError(args, result.returncode)
        return CommandResult(args, result.returncode, result.stdout)

    def run_interactive(self, args, cwd=None) -> CommandResult:
        """Runs a command inheriting stdin, stdout and stderr"""
        args = self._prepare(args)
        try:
            result = subprocess.run(args, cwd=cwd, check=False)
        except FileNotFoundError as e:
            raise CommandError(args, message=_("Command not found: {0}").format(args[0])) from e
        except OSError as e:
            raise CommandError(args, message=_("Could not start {0}: {1}").format(args[0], e)) from e

        if result.returncode != 0:
            raise CommandError(args, result.returncode)
        return CommandResult(args, result.returncode)
