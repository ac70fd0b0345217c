"""Directory layouts and the routine that materializes them.

A layout is an ordered tuple of relative directory paths. Layouts are
plain data; materialize_tree() knows nothing about any particular one.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

# Rooted under the project's lib/ directory. "feature_name" is a
# placeholder the developer renames by hand.
CLEAN_ARCHITECTURE_LAYOUT: tuple[str, ...] = (
    "core",
    "features/feature_name/data/datasources",
    "features/feature_name/data/models",
    "features/feature_name/data/repositories",
    "features/feature_name/domain/entities",
    "features/feature_name/domain/repositories",
    "features/feature_name/domain/usecases",
    "features/feature_name/presentation/bloc_or_providers_or_controllers",
    "features/feature_name/presentation/pages",
    "features/feature_name/presentation/widgets",
)


def materialize_tree(root: Path, layout: Iterable[str]) -> list[Path]:
    """Create every directory in layout under root.

    Intermediate directories are created as needed and existing
    directories are left alone, so running this twice is harmless.

    Args:
        root: Directory the layout paths are relative to.
        layout: Relative directory paths, created in order.

    Returns:
        Absolute paths of the layout directories, in layout order.

    Raises:
        ValueError: If a layout path is absolute or escapes root.
    """
    root = root.resolve()
    created: list[Path] = []
    for rel in layout:
        rel_path = Path(rel)
        if rel_path.is_absolute() or ".." in rel_path.parts:
            raise ValueError(f"Layout path must be relative to the root: {rel}")
        target = root / rel_path
        target.mkdir(parents=True, exist_ok=True)
        created.append(target)
    return created
