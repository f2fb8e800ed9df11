"""Tests for wren.resources.paths — safe file resolution under a root."""

import os

import pytest

from wren.config import ResourceOptions
from wren.errors import ConfigurationError
from wren.resources.paths import (
    directory_traversal,
    find_file,
    find_index_file,
    safe_path,
)


@pytest.fixture
def site(tmp_path):
    """A root directory with a sibling secret outside it."""
    root = tmp_path / "srv"
    root.mkdir()
    (root / "index.html").write_text("<h1>Home</h1>")
    (root / "style.css").write_text("body {}")

    docs = root / "docs"
    docs.mkdir()
    (docs / "INDEX.txt").write_text("docs")
    (docs / "guide.md").write_text("# Guide")

    (root / "empty").mkdir()

    (tmp_path / "secret.txt").write_text("top secret")
    outside = tmp_path / "shared"
    outside.mkdir()
    (outside / "logo.svg").write_text("<svg/>")
    return root


def _options(root, **kwargs) -> ResourceOptions:
    return ResourceOptions(root=root, **kwargs)


class TestFindFile:
    def test_file_under_root(self, site) -> None:
        assert find_file("style.css", _options(site)) == site / "style.css"

    def test_matches_direct_lookup(self, site) -> None:
        found = find_file("docs/guide.md", _options(site))
        assert found.samefile(site / "docs" / "guide.md")

    def test_leading_slash_stays_under_root(self, site) -> None:
        assert find_file("/style.css", _options(site)) == site / "style.css"

    @pytest.mark.parametrize("path", ["", "/"])
    def test_root_serves_index(self, site, path: str) -> None:
        assert find_file(path, _options(site)) == site / "index.html"

    def test_index_match_is_case_insensitive(self, site) -> None:
        assert find_file("docs", _options(site)) == site / "docs" / "INDEX.txt"

    def test_directory_without_index(self, site) -> None:
        assert find_file("empty", _options(site)) is None

    def test_index_files_disabled(self, site) -> None:
        assert find_file("", _options(site, index_files=False)) is None

    def test_missing_file(self, site) -> None:
        assert find_file("nope.txt", _options(site)) is None

    def test_traversal_refused(self, site) -> None:
        assert (site.parent / "secret.txt").exists()
        assert find_file("../secret.txt", _options(site)) is None

    def test_nested_traversal_refused(self, site) -> None:
        assert find_file("docs/../../secret.txt", _options(site)) is None

    def test_inner_dotdot_that_stays_inside(self, site) -> None:
        assert find_file("docs/../style.css", _options(site)) is not None

    def test_traversal_refused_even_with_symlinks_allowed(self, site) -> None:
        assert find_file("../secret.txt", _options(site, allow_symlinks=True)) is None

    def test_backslash_traversal_refused_with_symlinks_allowed(self, site) -> None:
        assert find_file("..\\secret.txt", _options(site, allow_symlinks=True)) is None

    def test_no_root_trusts_path(self, site) -> None:
        assert find_file(str(site / "style.css")) == site / "style.css"

    def test_no_root_missing(self, site) -> None:
        assert find_file(str(site / "missing.css")) is None

    @pytest.mark.parametrize("path", ["", "/"])
    def test_no_root_empty_path_is_missing(self, site, monkeypatch, path: str) -> None:
        monkeypatch.chdir(site)
        assert find_file(path, ResourceOptions()) is None


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
class TestSymlinks:
    @pytest.fixture
    def linked(self, site):
        (site / "shared").symlink_to(site.parent / "shared", target_is_directory=True)
        return site

    def test_symlink_out_of_root_refused_by_default(self, linked) -> None:
        assert find_file("shared/logo.svg", _options(linked)) is None

    def test_symlink_out_of_root_allowed(self, linked) -> None:
        found = find_file("shared/logo.svg", _options(linked, allow_symlinks=True))
        assert found == linked / "shared" / "logo.svg"

    def test_symlink_inside_root_always_allowed(self, site) -> None:
        (site / "alias.css").symlink_to(site / "style.css")
        assert find_file("alias.css", _options(site)) == site / "alias.css"


class TestHelpers:
    def test_safe_path(self, site) -> None:
        assert safe_path(site, "style.css")
        assert safe_path(site, "")
        assert not safe_path(site, "../secret.txt")

    def test_sibling_with_root_prefix_is_not_inside(self, tmp_path) -> None:
        (tmp_path / "www").mkdir()
        (tmp_path / "www-private").mkdir()
        assert not safe_path(tmp_path / "www", "../www-private")

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a/b/c", False),
            ("a/../b", True),
            ("..", True),
            ("a\\..\\b", True),
            ("..a/b..", False),
        ],
    )
    def test_directory_traversal(self, path: str, expected: bool) -> None:
        assert directory_traversal(path) is expected

    def test_find_index_file_sorted(self, tmp_path) -> None:
        (tmp_path / "index.txt").write_text("b")
        (tmp_path / "index.html").write_text("a")
        assert find_index_file(tmp_path) == tmp_path / "index.html"

    def test_find_index_file_skips_directories(self, tmp_path) -> None:
        (tmp_path / "index.d").mkdir()
        assert find_index_file(tmp_path) is None

    def test_find_index_file_unlistable_directory(self, tmp_path) -> None:
        assert find_index_file(tmp_path / "missing") is None

    @pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="needs non-root")
    def test_unreadable_directory_has_no_index(self, site) -> None:
        locked = site / "locked"
        locked.mkdir()
        (locked / "index.html").write_text("hidden")
        locked.chmod(0o300)
        try:
            assert find_file("locked", _options(site)) is None
        finally:
            locked.chmod(0o700)


class TestResourceOptions:
    def test_defaults(self) -> None:
        options = ResourceOptions()
        assert (options.root, options.index_files, options.allow_symlinks) == (None, True, False)

    def test_non_bool_flag_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ResourceOptions(allow_symlinks="yes")  # type: ignore[arg-type]
