"""Shared fixtures: a recording logger console and a fake command runner."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from localpack.core.command_runner import CommandError, CommandResult
from localpack.logger import RichLogger


class FakeRunner:
    """Stands in for CommandRunner, returning canned output and exit codes."""

    def __init__(self, pack_output="", pack_returncode=0, install_returncode=0, on_pack=None):
        self.pack_output = pack_output
        self.pack_returncode = pack_returncode
        self.install_returncode = install_returncode
        self.on_pack = on_pack
        self.calls = []

    def capture(self, args, cwd=None):
        self.calls.append(("capture", list(args), cwd))
        if self.on_pack:
            self.on_pack()
        if self.pack_returncode != 0:
            raise CommandError(args, self.pack_returncode)
        return CommandResult(list(args), 0, self.pack_output)

    def run_interactive(self, args, cwd=None):
        self.calls.append(("run_interactive", list(args), cwd))
        if self.install_returncode != 0:
            raise CommandError(args, self.install_returncode)
        return CommandResult(list(args), 0)


@pytest.fixture
def console_output():
    return io.StringIO()


@pytest.fixture
def logger(console_output):
    console = Console(file=console_output, width=200, no_color=True)
    return RichLogger(use_colors=False, console=console)


@pytest.fixture
def fake_runner_factory():
    return FakeRunner


@pytest.fixture
def settings_file(tmp_path):
    """Settings file that keeps CLI runs from writing log files outside tmp_path."""
    path = tmp_path / "config.json"
    path.write_text('{"log_to_file": false}', encoding="utf-8")
    return path
