"""Tests for stampback.cli."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

import stampback.models
from stampback.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def frozen_clock(monkeypatch: pytest.MonkeyPatch, fixed_now: datetime) -> datetime:
    monkeypatch.setattr(stampback.models, "local_now", lambda: fixed_now)
    return fixed_now


class TestUsage:
    @pytest.mark.parametrize("args", [["h"], ["help"], ["--help"]])
    def test_help_goes_to_stdout(self, runner: CliRunner, args: list[str]) -> None:
        result = runner.invoke(main, args)
        assert result.exit_code == 0
        assert "Usage: backup" in result.stdout
        assert "b, backup" in result.stdout

    def test_no_mode(self, runner: CliRunner) -> None:
        result = runner.invoke(main, [])
        assert result.exit_code == 1
        assert "Usage: backup" in result.stderr
        assert result.stdout == ""

    def test_unknown_mode(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["x", "somefile"])
        assert result.exit_code == 1
        assert "Unknown mode" in result.stderr
        assert "Usage: backup" in result.stderr

    def test_unknown_option(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--bogus"])
        assert result.exit_code == 1
        assert "--bogus" in result.stderr
        assert "Usage: backup" in result.stderr
        assert "Usage: main" not in result.output

    def test_extra_backup_argument(
        self, runner: CliRunner, source_file: Path, target_dir: Path
    ) -> None:
        result = runner.invoke(main, ["b", str(source_file), str(target_dir), "extra"])
        assert result.exit_code == 1
        assert "Usage: backup" in result.stderr
        assert not any(target_dir.iterdir())

    def test_extra_help_argument(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["h", "foo"])
        assert result.exit_code == 1
        assert "Usage: backup" in result.stderr

    def test_backup_without_path(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["b"])
        assert result.exit_code == 1
        assert "No action received" in result.stderr


class TestBackupMode:
    @pytest.mark.parametrize("mode", ["b", "backup"])
    def test_backup_file(
        self,
        runner: CliRunner,
        mode: str,
        source_file: Path,
        target_dir: Path,
        frozen_clock: datetime,
    ) -> None:
        result = runner.invoke(main, [mode, str(source_file), str(target_dir)])

        assert result.exit_code == 0
        assert "Backup created" in result.stdout
        artifact = target_dir / "hosts.2024-01-01_00-00-00.backup"
        assert artifact.read_bytes() == source_file.read_bytes()

    def test_backup_directory(
        self,
        runner: CliRunner,
        source_tree: Path,
        target_dir: Path,
        frozen_clock: datetime,
    ) -> None:
        result = runner.invoke(main, ["b", str(source_tree), str(target_dir)])

        assert result.exit_code == 0
        artifact = target_dir / "project.2024-01-01_00-00-00.backup"
        assert (artifact / "sub" / "deep" / "c.bin").read_bytes() == b"\x00\x01\x02"

    def test_backup_defaults_to_cwd(
        self,
        runner: CliRunner,
        source_file: Path,
        target_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        frozen_clock: datetime,
    ) -> None:
        monkeypatch.chdir(target_dir)

        result = runner.invoke(main, ["backup", str(source_file)])

        assert result.exit_code == 0
        assert (target_dir / "hosts.2024-01-01_00-00-00.backup").exists()

    def test_same_second_twice_leaves_one_artifact(
        self,
        runner: CliRunner,
        source_file: Path,
        target_dir: Path,
        frozen_clock: datetime,
    ) -> None:
        first = runner.invoke(main, ["b", str(source_file), str(target_dir)])
        second = runner.invoke(main, ["b", str(source_file), str(target_dir)])

        assert first.exit_code == 0
        assert second.exit_code == 0
        assert len(list(target_dir.iterdir())) == 1

    def test_symlink_rejected_without_mutation(
        self, runner: CliRunner, source_file: Path, tmp_path: Path
    ) -> None:
        link = tmp_path / "link"
        link.symlink_to(source_file)
        before = sorted(tmp_path.rglob("*"))

        result = runner.invoke(main, ["b", str(link), str(tmp_path)])

        assert result.exit_code == 1
        assert "Symlinks are not supported" in result.stderr
        assert "Usage: backup" in result.stderr
        assert sorted(tmp_path.rglob("*")) == before

    def test_missing_target(
        self, runner: CliRunner, source_file: Path, tmp_path: Path
    ) -> None:
        result = runner.invoke(main, ["b", str(source_file), str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "does not exist" in result.stderr
        assert not (tmp_path / "nope").exists()


class TestRestoreMode:
    @pytest.mark.parametrize("mode", ["r", "restore"])
    def test_restore_file(
        self, runner: CliRunner, mode: str, target_dir: Path, tmp_path: Path
    ) -> None:
        artifact = target_dir / "hosts.2024-01-01_00-00-00.backup"
        artifact.write_text("127.0.0.1 localhost\n")
        restore_dir = tmp_path / "restore"
        restore_dir.mkdir()

        result = runner.invoke(main, [mode, str(artifact), str(restore_dir)])

        assert result.exit_code == 0
        assert "File restored" in result.stdout
        assert (restore_dir / "hosts").read_text() == "127.0.0.1 localhost\n"

    def test_restore_malformed_name(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        bad = tmp_path / "hosts.txt"
        bad.write_text("x")
        before = sorted(tmp_path.rglob("*"))

        result = runner.invoke(main, ["r", str(bad), str(tmp_path)])

        assert result.exit_code == 1
        assert "Not a backup artifact" in result.stderr
        assert sorted(tmp_path.rglob("*")) == before

    def test_restore_without_path(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["r"])
        assert result.exit_code == 1
        assert "Usage: backup" in result.stderr
