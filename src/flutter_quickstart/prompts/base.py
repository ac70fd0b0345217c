"""BasePrompter ABC for the interactive questions asked during a run."""

from __future__ import annotations

from abc import ABC, abstractmethod

from flutter_quickstart.models.answers import UserAnswers
from flutter_quickstart.models.catalog import DependencyChoice


class BasePrompter(ABC):
    """Abstract source of user decisions.

    Each call blocks until the user has answered. Tests subclass this
    to supply canned answers without a terminal.
    """

    @abstractmethod
    def confirm_install(self) -> bool:
        """Ask whether the missing toolchain should be installed now."""
        ...

    @abstractmethod
    def collect_answers(self, catalog: tuple[DependencyChoice, ...]) -> UserAnswers:
        """Ask for project name, architecture opt-in, and dependencies, in that order.

        Args:
            catalog: Dependencies the user may choose from.

        Returns:
            Validated UserAnswers.
        """
        ...
