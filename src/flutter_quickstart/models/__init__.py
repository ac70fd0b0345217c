"""flutter-quickstart data models - re-exports all public model classes."""

from flutter_quickstart.models.answers import UserAnswers, validate_project_name
from flutter_quickstart.models.catalog import DEPENDENCY_CATALOG, DependencyChoice
from flutter_quickstart.models.config import (
    PackageManagerConfig,
    ToolchainConfig,
    ToolConfig,
    load_tool_config,
)

__all__ = [
    "DEPENDENCY_CATALOG",
    "DependencyChoice",
    "PackageManagerConfig",
    "ToolConfig",
    "ToolchainConfig",
    "UserAnswers",
    "load_tool_config",
    "validate_project_name",
]
