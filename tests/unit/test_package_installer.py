"""Tests for the pack, verify, install and cleanup sequence."""

from __future__ import annotations

import pytest

from localpack.core.command_runner import CommandRunner
from localpack.core.package_installer import (
    ArchiveNotFoundError,
    CleanupError,
    InstallCommandError,
    PackageInstallError,
    PackageInstaller,
    PackCommandError,
)

PACK = ["npm", "pack"]
INSTALL = ["npm", "install", "-g"]


def _installer(runner, logger, tmp_path, **kwargs):
    return PackageInstaller(runner, logger, PACK, INSTALL, work_dir=str(tmp_path), **kwargs)


def test_installs_absolute_archive_path_then_removes_archive(tmp_path, logger, fake_runner_factory):
    archive = tmp_path / "pkg-1.0.0.tgz"
    archive.write_bytes(b"tarball")
    runner = fake_runner_factory(pack_output="pkg-1.0.0.tgz\n")

    installed = _installer(runner, logger, tmp_path).run()

    assert installed == str(archive)
    assert runner.calls == [
        ("capture", PACK, str(tmp_path)),
        ("run_interactive", INSTALL + [str(archive)], str(tmp_path)),
    ]
    assert not archive.exists()


def test_progress_messages_are_logged_in_order(tmp_path, logger, console_output, fake_runner_factory):
    (tmp_path / "pkg-1.0.0.tgz").write_bytes(b"")
    runner = fake_runner_factory(pack_output="  pkg-1.0.0.tgz  ")

    _installer(runner, logger, tmp_path).run()

    lines = [line for line in console_output.getvalue().splitlines() if line.strip()]
    assert lines == [
        "Packing the project...",
        "Package created: pkg-1.0.0.tgz",
        "Installing the package globally...",
        "Package installed globally successfully!",
        "Cleaning up...",
        "Temporary package file removed.",
    ]


def test_archive_created_by_pack_command_is_found(tmp_path, logger, fake_runner_factory):
    archive = tmp_path / "tool-2.3.4.tgz"
    runner = fake_runner_factory(pack_output="tool-2.3.4.tgz", on_pack=lambda: archive.write_bytes(b""))

    _installer(runner, logger, tmp_path).run()

    assert runner.calls[1][1][-1] == str(archive)
    assert not archive.exists()


def test_missing_archive_stops_before_install(tmp_path, logger, fake_runner_factory):
    runner = fake_runner_factory(pack_output="pkg-1.0.0.tgz")

    with pytest.raises(ArchiveNotFoundError, match="pkg-1.0.0.tgz"):
        _installer(runner, logger, tmp_path).run()

    assert [call[0] for call in runner.calls] == ["capture"]


def test_empty_pack_output_is_a_missing_archive(tmp_path, logger, fake_runner_factory):
    runner = fake_runner_factory(pack_output="\n")

    with pytest.raises(ArchiveNotFoundError):
        _installer(runner, logger, tmp_path).run()

    assert len(runner.calls) == 1


def test_directory_named_by_pack_output_is_not_an_archive(tmp_path, logger, fake_runner_factory):
    (tmp_path / "dist").mkdir()
    runner = fake_runner_factory(pack_output="dist")

    with pytest.raises(ArchiveNotFoundError):
        _installer(runner, logger, tmp_path).run()


def test_pack_command_failure_is_typed(tmp_path, logger, fake_runner_factory):
    runner = fake_runner_factory(pack_returncode=2)

    with pytest.raises(PackCommandError, match="exit code 2"):
        _installer(runner, logger, tmp_path).run()

    assert len(runner.calls) == 1


def test_install_failure_keeps_archive(tmp_path, logger, fake_runner_factory):
    archive = tmp_path / "pkg-1.0.0.tgz"
    archive.write_bytes(b"tarball")
    runner = fake_runner_factory(pack_output="pkg-1.0.0.tgz", install_returncode=1)

    with pytest.raises(InstallCommandError) as excinfo:
        _installer(runner, logger, tmp_path).run()

    assert archive.exists()
    assert excinfo.value.archive_path == str(archive)
    assert str(archive) in str(excinfo.value)


def test_cleanup_failure_is_reported(tmp_path, logger, fake_runner_factory, monkeypatch):
    (tmp_path / "pkg-1.0.0.tgz").write_bytes(b"")
    runner = fake_runner_factory(pack_output="pkg-1.0.0.tgz")

    def deny(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr("localpack.core.package_installer.os.remove", deny)

    with pytest.raises(CleanupError, match="Permission denied"):
        _installer(runner, logger, tmp_path).run()


def test_all_failures_share_one_base_class():
    for error in (PackCommandError, ArchiveNotFoundError, InstallCommandError, CleanupError):
        assert issubclass(error, PackageInstallError)


def test_dry_run_executes_nothing(tmp_path, logger, console_output, fake_runner_factory):
    runner = fake_runner_factory(pack_output="pkg-1.0.0.tgz")

    result = _installer(runner, logger, tmp_path, dry_run=True).run()

    assert result == ""
    assert runner.calls == []
    output = console_output.getvalue()
    assert "npm pack" in output
    assert "npm install -g <archive>" in output


def test_missing_pack_executable_is_a_pack_command_error(tmp_path, logger):
    installer = PackageInstaller(
        CommandRunner(), logger, ["localpack-no-such-command-xyz"], INSTALL, work_dir=str(tmp_path)
    )

    with pytest.raises(PackCommandError, match="Command not found"):
        installer.run()


def test_non_executable_pack_script_is_a_pack_command_error(tmp_path, logger):
    script = tmp_path / "pack.sh"
    script.write_text("#!/bin/sh\necho pkg-1.0.0.tgz\n")
    script.chmod(0o644)
    installer = PackageInstaller(CommandRunner(), logger, [str(script)], INSTALL, work_dir=str(tmp_path))

    with pytest.raises(PackCommandError, match="Could not start"):
        installer.run()
