"""Dependency catalog offered in the package multi-select prompt."""

from __future__ import annotations

from pydantic import BaseModel


class DependencyChoice(BaseModel):
    """A package offered to the user.

    label is what the prompt shows; value is what gets passed to
    `flutter pub add`. They differ for dev-only packages.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    label: str
    value: str
    default_selected: bool = True


def pub_args(value: str) -> list[str]:
    """Split a catalog value into the arguments passed to `flutter pub add`."""
    return value.split()


def _choice(label: str, value: str | None = None, default_selected: bool = True) -> DependencyChoice:
    return DependencyChoice(label=label, value=value or label, default_selected=default_selected)


DEPENDENCY_CATALOG: tuple[DependencyChoice, ...] = (
    _choice("http"),
    _choice("riverpod"),
    _choice("equatable"),
    _choice("get_it"),
    _choice("injectable"),
    _choice("json_annotation"),
    _choice("retrofit"),
    _choice("build_runner", "build_runner --dev"),
)


def catalog_values(catalog: tuple[DependencyChoice, ...] = DEPENDENCY_CATALOG) -> list[str]:
    """Return the selectable values of a catalog, in catalog order."""
    return [choice.value for choice in catalog]


def default_selection(catalog: tuple[DependencyChoice, ...] = DEPENDENCY_CATALOG) -> list[str]:
    """Return the values that are pre-selected, in catalog order."""
    return [choice.value for choice in catalog if choice.default_selected]
