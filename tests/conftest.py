"""Shared fakes for executor and prompter boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from flutter_quickstart.models.answers import UserAnswers
from flutter_quickstart.models.catalog import DependencyChoice
from flutter_quickstart.prompts.base import BasePrompter
from flutter_quickstart.shell.base import BaseExecutor, CommandResult


@dataclass
class Call:
    """A single recorded FakeExecutor.run() invocation."""

    command: str
    args: list[str]
    cwd: Path | None

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]


@dataclass
class FakeExecutor(BaseExecutor):
    """Recording executor that simulates flutter and brew.

    available: program names which() resolves.
    exit_codes: maps "<command> <first arg>" (e.g. "flutter create")
        to the exit code that invocation returns.
    install_adds: program made available when the package manager
        install command succeeds.
    """

    available: set[str] = field(default_factory=set)
    exit_codes: dict[str, int] = field(default_factory=dict)
    install_adds: str | None = None
    calls: list[Call] = field(default_factory=list)
    lookups: list[str] = field(default_factory=list)

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        cwd: Path | None = None,
        capture: bool = False,
    ) -> CommandResult:
        args = list(args)
        self.calls.append(Call(command, args, cwd))
        key = " ".join([command, *args[:1]])
        code = self.exit_codes.get(key, 0)
        if code == 0:
            if command == "flutter" and args[:1] == ["create"] and cwd is not None:
                (Path(cwd) / args[1]).mkdir(parents=True, exist_ok=True)
            if args[:1] == ["install"] and self.install_adds:
                self.available.add(self.install_adds)
        return CommandResult(command=command, args=args, exit_code=code)

    def which(self, name: str) -> str | None:
        self.lookups.append(name)
        return f"/usr/local/bin/{name}" if name in self.available else None

    @property
    def argvs(self) -> list[list[str]]:
        return [call.argv for call in self.calls]


class CannedPrompter(BasePrompter):
    """Prompter returning preset answers and recording what was asked."""

    def __init__(self, install: bool = True, answers: UserAnswers | None = None) -> None:
        self.install = install
        self.answers = answers or UserAnswers(project_name="demo_app")
        self.asked: list[str] = []

    def confirm_install(self) -> bool:
        self.asked.append("confirm_install")
        return self.install

    def collect_answers(self, catalog: tuple[DependencyChoice, ...]) -> UserAnswers:
        self.asked.append("collect_answers")
        return self.answers


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def prompter() -> CannedPrompter:
    return CannedPrompter()
