"""Tests for cargo_hooks.helpers."""

from pathlib import Path

from conftest import make_crate


class TestFindCargoTomls:
    def test_empty_tree(self, tmp_path: Path) -> None:
        from cargo_hooks.helpers import find_cargo_tomls

        assert find_cargo_tomls(tmp_path) == []

    def test_finds_nested_manifests_sorted(self, tmp_path: Path) -> None:
        from cargo_hooks.helpers import find_cargo_tomls

        make_crate(tmp_path, "zz")
        make_crate(tmp_path, "")
        make_crate(tmp_path, "crates/aa")
        found = find_cargo_tomls(tmp_path)
        assert found == sorted(
            [
                tmp_path / "Cargo.toml",
                tmp_path / "crates" / "aa" / "Cargo.toml",
                tmp_path / "zz" / "Cargo.toml",
            ]
        )

    def test_exact_name_and_regular_files_only(self, tmp_path: Path) -> None:
        from cargo_hooks.helpers import find_cargo_tomls

        (tmp_path / "cargo.toml").write_text("")
        (tmp_path / "Cargo.toml.bak").write_text("")
        (tmp_path / "weird" / "Cargo.toml").mkdir(parents=True)
        assert find_cargo_tomls(tmp_path) == []

    def test_no_default_exclusions(self, tmp_path: Path) -> None:
        from cargo_hooks.helpers import find_cargo_tomls

        make_crate(tmp_path, "target/pkg")
        assert find_cargo_tomls(tmp_path) == [tmp_path / "target" / "pkg" / "Cargo.toml"]

    def test_exclude_skips_segments(self, tmp_path: Path) -> None:
        from cargo_hooks.helpers import find_cargo_tomls

        make_crate(tmp_path, "app")
        make_crate(tmp_path, "target/pkg")
        make_crate(tmp_path, "vendor/dep/nested")
        found = find_cargo_tomls(tmp_path, exclude=["target", "vendor"])
        assert found == [tmp_path / "app" / "Cargo.toml"]
