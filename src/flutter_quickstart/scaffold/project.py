"""Project scaffolding for `flutter-quickstart run`.

ProjectScaffolder drives one scaffolding session: it collects answers,
runs `flutter create`, lays down the clean architecture directories,
and adds the selected packages with `flutter pub add`. Each step after
project creation runs relative to the new project root.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from flutter_quickstart.errors import ProjectCreationError
from flutter_quickstart.models.answers import UserAnswers, validate_project_name
from flutter_quickstart.models.catalog import DEPENDENCY_CATALOG, DependencyChoice, pub_args
from flutter_quickstart.models.config import ToolConfig
from flutter_quickstart.prompts.base import BasePrompter
from flutter_quickstart.scaffold.layout import CLEAN_ARCHITECTURE_LAYOUT, materialize_tree
from flutter_quickstart.shell.base import BaseExecutor, CommandResult, check_result


class ProjectScaffolder:
    """Creates a Flutter project and applies the selected options.

    Args:
        executor: Runs flutter commands.
        prompter: Source of the user's answers.
        config: Toolchain binary, architecture root, and exit code policy.
        base_dir: Directory the project is created in. Defaults to cwd.
        console: Rich console for status messages.
        catalog: Dependencies offered to the user.
        layout: Directory layout applied when the user opts in.
    """

    def __init__(
        self,
        executor: BaseExecutor,
        prompter: BasePrompter,
        config: ToolConfig | None = None,
        base_dir: Path | None = None,
        console: Console | None = None,
        catalog: tuple[DependencyChoice, ...] = DEPENDENCY_CATALOG,
        layout: tuple[str, ...] = CLEAN_ARCHITECTURE_LAYOUT,
    ) -> None:
        self.executor = executor
        self.prompter = prompter
        self.config = config or ToolConfig()
        self.base_dir = (base_dir or Path.cwd()).resolve()
        self.console = console or Console()
        self.catalog = catalog
        self.layout = layout
        self.project_root: Path | None = None

    def collect_answers(self) -> UserAnswers:
        """Ask the user for the project name, architecture opt-in, and packages."""
        return self.prompter.collect_answers(self.catalog)

    def scaffold(self, answers: UserAnswers) -> Path:
        """Run every scaffolding step for answers, in order.

        Returns:
            The new project root.

        Raises:
            ProjectCreationError: If `flutter create` did not produce the
                project directory.
            CommandFailedError: If a flutter command fails and exit codes
                are checked. Later steps are skipped.
        """
        project_root = self.create_project(answers.project_name)

        if answers.clean_architecture:
            self.apply_architecture(True)

        if answers.dependencies:
            self.install_dependencies(answers.dependencies)

        self.console.print("[green]Flutter project setup complete![/green]")
        return project_root

    def create_project(self, name: str) -> Path:
        """Run `flutter create name` in base_dir and switch to the new project.

        Raises:
            InvalidProjectNameError: If name is empty or contains a path separator.
            ProjectCreationError: If the project directory does not exist afterwards.
            CommandFailedError: If the command fails and exit codes are checked.
        """
        name = validate_project_name(name)
        self.console.print(f"[green]Creating Flutter project: {name}...[/green]")

        result = self.executor.run(self.config.toolchain.binary, ["create", name], cwd=self.base_dir)
        check_result(result, self.config.check_exit_codes, self.console)

        project_root = self.base_dir / name
        if not project_root.is_dir():
            raise ProjectCreationError(str(project_root))
        self.project_root = project_root
        return project_root

    def apply_architecture(self, enabled: bool = True) -> list[Path]:
        """Create the clean architecture directories under the project's lib/.

        Returns:
            Directories in the layout, or an empty list when disabled.
        """
        if not enabled:
            return []
        project_root = self._require_project_root()
        self.console.print("[green]Setting up Clean Architecture structure...[/green]")
        created = materialize_tree(project_root / self.config.architecture_root, self.layout)
        self.console.print("[green]Clean Architecture structure created successfully![/green]")
        return created

    def install_dependencies(self, selected: Sequence[str]) -> CommandResult | None:
        """Add selected packages with a single `flutter pub add` call.

        Values such as "build_runner --dev" are split into separate
        arguments. Order follows selected.

        Returns:
            The command result, or None if nothing was selected.
        """
        if not selected:
            return None
        project_root = self._require_project_root()

        args = ["pub", "add"]
        for value in selected:
            args.extend(pub_args(value))

        self.console.print("[green]Adding selected dependencies...[/green]")
        result = self.executor.run(self.config.toolchain.binary, args, cwd=project_root)
        check_result(result, self.config.check_exit_codes, self.console)
        if result.ok:
            self.console.print("[green]Dependencies added successfully![/green]")
        return result

    def _require_project_root(self) -> Path:
        if self.project_root is None:
            raise RuntimeError("create_project() must run before this step")
        return self.project_root
