"""Tests for the flutter-quickstart check-flutter CLI command."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from flutter_quickstart.cli.main import app

from conftest import FakeExecutor

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


def _invoke(executor: FakeExecutor, user_input: str = ""):
    with patch("flutter_quickstart.cli.check_cmd.build_executor", return_value=executor):
        return runner.invoke(app, ["check-flutter"], input=user_input)


class TestCheckFlutterCommand:
    def test_present(self) -> None:
        executor = FakeExecutor(available={"flutter"})
        result = _invoke(executor)

        assert result.exit_code == 0
        assert "already installed" in result.output
        assert executor.calls == []

    def test_decline_warns_and_exits_0(self) -> None:
        executor = FakeExecutor(available={"brew"})
        result = _invoke(executor, "n\n")

        assert result.exit_code == 0
        assert "required to proceed" in result.output
        assert executor.calls == []

    def test_decline_fatal_when_configured(self, tmp_path: Path) -> None:
        (tmp_path / "flutter_quickstart.yaml").write_text(
            "check_decline_is_fatal: true\n", encoding="utf-8"
        )
        executor = FakeExecutor(available={"brew"})
        result = _invoke(executor, "n\n")

        assert result.exit_code == 1

    def test_no_package_manager_exits_1(self) -> None:
        executor = FakeExecutor()
        result = _invoke(executor, "y\n")

        assert result.exit_code == 1
        assert executor.calls == []

    def test_installs_and_amends_profile(self, tmp_path: Path, monkeypatch) -> None:
        """brew succeeds but flutter stays unresolvable, so ~/.zshrc gets the export."""
        monkeypatch.setenv("PATH", "/usr/bin")
        executor = FakeExecutor(available={"brew"})
        result = _invoke(executor, "y\n")

        assert result.exit_code == 0, result.output
        profile = tmp_path / "home" / ".zshrc"
        assert profile.read_text(encoding="utf-8") == (
            'export PATH="$PATH:/usr/local/bin/flutter/bin"\n'
        )
        assert executor.argvs[0] == ["brew", "install", "--cask", "flutter"]
        assert executor.argvs[1][0] == "zsh"
