#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# main.py - Entry points for localpack
#

import argparse
import os
import shlex
from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from rich.box import ROUNDED

from .config import APP_NAME, APP_DESC, VERSION, CONFIG_FILE
from .logger import RichLogger
from .settings import Settings
from .core.command_runner import CommandRunner
from .core.package_installer import PackageInstaller, PackageInstallError
from .core.permissions import set_executable
from .translation_utils import _


def add_common_arguments(parser: argparse.ArgumentParser):
    """Options shared by every command"""
    parser.add_argument("-n", "--nocolor", action="store_true",
                        help=_("Suppress color printing"))

    parser.add_argument("-V", "--version", action="store_true",
                        help=_("Print application version"))

    parser.add_argument("--config", default=CONFIG_FILE,
                        help=_("Settings file (default: {0})").format(CONFIG_FILE))


def add_set_executable_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("paths", nargs="*",
                        help=_("Files to mark executable (default: configured entry scripts)"))
    add_common_arguments(parser)


def add_install_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--pack-command",
                        help=_("Packaging command that prints the archive name (default: npm pack)"))

    parser.add_argument("--install-command",
                        help=_("Global install command, the archive path is appended (default: npm install -g)"))

    parser.add_argument("--dry-run", action="store_true",
                        help=_("Show the steps without running any command"))

    add_common_arguments(parser)


def build_parser() -> argparse.ArgumentParser:
    """Parser for the combined `localpack` command"""
    parser = argparse.ArgumentParser(
        prog="localpack",
        description=f"{APP_NAME} v{VERSION} - {APP_DESC}",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_set_executable_arguments(
        subparsers.add_parser("set-executable", help=_("Mark entry scripts executable"))
    )
    add_install_arguments(
        subparsers.add_parser("install", help=_("Pack the project and install it globally"))
    )
    return parser


def print_version(console: Console = None):
    """Prints application version"""
    console = console or Console()

    version_text = Text()
    version_text.append(f"{APP_NAME} v{VERSION}\n", style="bold cyan")
    version_text.append(f"{APP_DESC}\n\n", style="white")
    version_text.append(_("Copyright (C) 2025 BigCommunity Team\n"), style="blue")
    version_text.append(_("This program comes with absolutely NO warranty."), style="red")

    console.print(Panel(version_text, box=ROUNDED, border_style="blue", width=70))


def setup_logger(logger: RichLogger, settings: Settings):
    """Attaches the log file from settings and draws the header"""
    if settings.get("log_to_file"):
        logger.setup_log_file(os.path.basename(os.getcwd()), settings.get("log_dir"))
    logger.draw_app_header()


def run_set_executable(args, settings: Settings, logger: RichLogger) -> int:
    """Marks the entry scripts executable; per-file failures do not fail the run"""
    paths = args.paths or settings.get("executable_files")
    results = set_executable(paths, logger)

    failed = [result for result in results if not result.ok]
    logger.display_summary(_("Executable Permissions"), [
        (_("Files"), str(len(results))),
        (_("Updated"), str(len(results) - len(failed))),
        (_("Failed"), ", ".join(result.path for result in failed) or "-"),
    ])
    return 0


def run_install(args, settings: Settings, logger: RichLogger) -> int:
    """Packs the project and installs the archive globally"""
    pack_command = shlex.split(args.pack_command) if args.pack_command else settings.get_command("pack_command")
    install_command = shlex.split(args.install_command) if args.install_command else settings.get_command("install_command")

    runner = CommandRunner(logger, show_commands=settings.get("show_commands"))
    installer = PackageInstaller(
        runner, logger, pack_command, install_command, dry_run=args.dry_run
    )

    try:
        installer.run()
    except PackageInstallError as e:
        logger.log("red", _("An error occurred: {0}").format(e))
        return 1
    return 0


def _dispatch(func, args) -> int:
    logger = RichLogger(not args.nocolor)

    if args.version:
        print_version(logger.console)
        return 0

    try:
        settings = Settings(args.config)
        setup_logger(logger, settings)
        return func(args, settings, logger)
    except KeyboardInterrupt:
        logger.log("yellow", "\n" + _("Operation cancelled by user."))
        return 1
    except Exception as e:
        logger.log("red", _("Unhandled error: {0}").format(e))
        return 1


def main(argv=None) -> int:
    """Entry point of the `localpack` command"""
    args = build_parser().parse_args(argv)
    if args.command == "set-executable":
        return _dispatch(run_set_executable, args)
    return _dispatch(run_install, args)


def set_executable_main(argv=None) -> int:
    """Entry point of the `localpack-set-executable` command"""
    parser = argparse.ArgumentParser(
        prog="localpack-set-executable",
        description=_("Mark the project entry scripts executable")
    )
    add_set_executable_arguments(parser)
    return _dispatch(run_set_executable, parser.parse_args(argv))


def install_main(argv=None) -> int:
    """Entry point of the `localpack-install` command"""
    parser = argparse.ArgumentParser(
        prog="localpack-install",
        description=_("Pack the project and install it globally")
    )
    add_install_arguments(parser)
    return _dispatch(run_install, parser.parse_args(argv))

