"""Tests for the clean architecture layout and materialize_tree()."""

from __future__ import annotations

from pathlib import Path

import pytest

from flutter_quickstart.scaffold.layout import CLEAN_ARCHITECTURE_LAYOUT, materialize_tree


def _all_dirs(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_dir()}


class TestCleanArchitectureLayout:
    def test_has_ten_entries(self) -> None:
        assert len(CLEAN_ARCHITECTURE_LAYOUT) == 10
        assert len(set(CLEAN_ARCHITECTURE_LAYOUT)) == 10

    def test_feature_name_is_literal(self) -> None:
        features = [p for p in CLEAN_ARCHITECTURE_LAYOUT if p.startswith("features/")]
        assert all(p.startswith("features/feature_name/") for p in features)

    def test_separates_layers(self) -> None:
        layers = {p.split("/")[2] for p in CLEAN_ARCHITECTURE_LAYOUT if p.startswith("features/")}
        assert layers == {"data", "domain", "presentation"}


class TestMaterializeTree:
    def test_creates_exact_tree(self, tmp_path: Path) -> None:
        root = tmp_path / "lib"
        created = materialize_tree(root, CLEAN_ARCHITECTURE_LAYOUT)

        assert [p.relative_to(root.resolve()).as_posix() for p in created] == list(
            CLEAN_ARCHITECTURE_LAYOUT
        )
        expected = set(CLEAN_ARCHITECTURE_LAYOUT) | {
            "features",
            "features/feature_name",
            "features/feature_name/data",
            "features/feature_name/domain",
            "features/feature_name/presentation",
        }
        assert _all_dirs(root) == expected

    def test_idempotent(self, tmp_path: Path) -> None:
        root = tmp_path / "lib"
        materialize_tree(root, CLEAN_ARCHITECTURE_LAYOUT)
        before = _all_dirs(root)
        materialize_tree(root, CLEAN_ARCHITECTURE_LAYOUT)
        assert _all_dirs(root) == before

    def test_keeps_existing_files(self, tmp_path: Path) -> None:
        root = tmp_path / "lib"
        root.mkdir()
        (root / "main.dart").write_text("void main() {}\n", encoding="utf-8")
        materialize_tree(root, CLEAN_ARCHITECTURE_LAYOUT)
        assert (root / "main.dart").read_text(encoding="utf-8") == "void main() {}\n"

    def test_custom_layout(self, tmp_path: Path) -> None:
        materialize_tree(tmp_path, ("a/b", "c"))
        assert _all_dirs(tmp_path) == {"a", "a/b", "c"}

    @pytest.mark.parametrize("bad", ["/etc/evil", "../outside", "a/../../b"])
    def test_rejects_escaping_paths(self, tmp_path: Path, bad: str) -> None:
        with pytest.raises(ValueError):
            materialize_tree(tmp_path, (bad,))
