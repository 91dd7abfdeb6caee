#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# core/package_installer.py - Pack the project and install it globally
#
# Copyright (c) 2025, BigCommunity Team
# All rights reserved.
#

import os
import shlex

from .command_runner import CommandError
from ..translation_utils import _


class PackageInstallError(Exception):
    """Base class for any failure of the pack-and-install sequence"""


class PackCommandError(PackageInstallError):
    """The packaging command could not run or exited non-zero"""


class ArchiveNotFoundError(PackageInstallError):
    """The packaging command named an archive that is not on disk"""


class InstallCommandError(PackageInstallError):
    """The global install command failed; the archive is left in place"""

    def __init__(self, message, archive_path):
        super().__init__(message)
        self.archive_path = archive_path


class CleanupError(PackageInstallError):
    """The archive was installed but could not be removed"""


class PackageInstaller:
    """Runs pack, verify, install and cleanup in order, stopping at the first failure"""

    def __init__(self, runner, logger, pack_command, install_command, work_dir=None, dry_run=False):
        self.runner = runner
        self.logger = logger
        self.pack_command = list(pack_command)
        self.install_command = list(install_command)
        self.work_dir = work_dir or os.getcwd()
        self.dry_run = dry_run

    def run(self) -> str:
        """
        Executes the whole sequence.

        Returns:
            str: Absolute path of the installed archive ("" in dry-run mode)

        Raises:
            PackageInstallError: on the first failing step
        """
        if self.dry_run:
            self._show_plan()
            return ""

        archive_name = self.pack()
        archive_path = self.verify_archive(archive_name)
        self.install(archive_path)
        self.cleanup(archive_path)
        return archive_path

    def pack(self) -> str:
        """Step 1: run the packaging command and return the archive name it prints"""
        self.logger.log("cyan", _("Packing the project..."))
        try:
            result = self.runner.capture(self.pack_command, cwd=self.work_dir)
        except CommandError as e:
            raise PackCommandError(str(e)) from e
        return result.stdout.strip()

    def verify_archive(self, archive_name: str) -> str:
        """Step 2: make sure the archive exists and return its absolute path"""
        archive_path = os.path.abspath(os.path.join(self.work_dir, archive_name))
        if not archive_name or not os.path.isfile(archive_path):
            raise ArchiveNotFoundError(_("Failed to create archive file: {0}").format(archive_name))

        self.logger.log("green", _("Package created: {0}").format(archive_name))
        return archive_path

    def install(self, archive_path: str):
        """Step 3: install the archive globally with inherited standard streams"""
        self.logger.log("cyan", _("Installing the package globally..."))
        try:
            self.runner.run_interactive(self.install_command + [archive_path], cwd=self.work_dir)
        except CommandError as e:
            raise InstallCommandError(
                _("{0} (archive kept at {1})").format(e, archive_path), archive_path
            ) from e

        self.logger.log("green", _("Package installed globally successfully!"))

    def cleanup(self, archive_path: str):
        """Step 4: remove the archive"""
        self.logger.log("cyan", _("Cleaning up..."))
        try:
            os.remove(archive_path)
        except OSError as e:
            raise CleanupError(_("Could not remove {0}: {1}").format(archive_path, e)) from e

        self.logger.log("green", _("Temporary package file removed."))

    def _show_plan(self):
        self.logger.log("yellow", _("DRY-RUN MODE - Package install simulation:"))
        self.logger.log("cyan", _("Would perform:"))
        self.logger.log("cyan", _("  1. Pack the project: {0}").format(shlex.join(self.pack_command)))
        self.logger.log("cyan", _("  2. Verify the archive exists in {0}").format(self.work_dir))
        self.logger.log("cyan", _("  3. Install globally: {0} <archive>").format(shlex.join(self.install_command)))
        self.logger.log("cyan", _("  4. Remove the archive"))
        self.logger.log("green", _("Dry-run completed (no commands executed)"))
