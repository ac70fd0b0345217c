"""Answers collected from the interactive scaffolding session."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from flutter_quickstart.errors import InvalidProjectNameError
from flutter_quickstart.models.catalog import DependencyChoice, catalog_values


def validate_project_name(name: str) -> str:
    """Return the stripped project name, or raise if it cannot be a directory name.

    Raises:
        InvalidProjectNameError: If the name is empty or contains a path separator.
    """
    stripped = name.strip()
    if not stripped:
        raise InvalidProjectNameError(name, "must not be empty")
    separators = {os.sep, "/", "\\"}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in stripped for sep in separators):
        raise InvalidProjectNameError(name, "must not contain a path separator")
    if stripped in (".", ".."):
        raise InvalidProjectNameError(name, "must not be a relative directory reference")
    return stripped


class UserAnswers(BaseModel):
    """Project name, architecture opt-in, and selected dependency values.

    dependencies keeps the order the user selected them in; every entry
    must be a value from the catalog and appear at most once. The catalog
    is DEPENDENCY_CATALOG unless one is passed as validation context, see
    for_catalog().
    """

    model_config = {"extra": "forbid"}

    project_name: str
    clean_architecture: bool = True
    dependencies: list[str] = Field(default_factory=list)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    @field_validator("dependencies")
    @classmethod
    def _check_dependencies(cls, value: list[str], info: ValidationInfo) -> list[str]:
        context = info.context or {}
        catalog = context.get("catalog")
        allowed = set(catalog_values(catalog) if catalog is not None else catalog_values())
        unknown = [dep for dep in value if dep not in allowed]
        if unknown:
            raise ValueError(f"Unknown dependencies: {', '.join(unknown)}")
        if len(set(value)) != len(value):
            raise ValueError("Dependencies must not contain duplicates")
        return value

    @classmethod
    def for_catalog(
        cls,
        catalog: tuple[DependencyChoice, ...],
        *,
        project_name: str,
        clean_architecture: bool = True,
        dependencies: list[str] | None = None,
    ) -> UserAnswers:
        """Build answers whose dependencies are checked against catalog."""
        return cls.model_validate(
            {
                "project_name": project_name,
                "clean_architecture": clean_architecture,
                "dependencies": dependencies or [],
            },
            context={"catalog": catalog},
        )
