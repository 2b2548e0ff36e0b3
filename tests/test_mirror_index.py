"""
Tests for BoilerplateIndex — name resolution and listing.

Uses the fake mirror from conftest; no git involved.
"""

from pathlib import Path

import pytest

from gibo.errors import BoilerplateNotFoundError, MirrorPathError
from gibo.mirror.index import BoilerplateIndex, walk_files
from gibo.mirror.store import MirrorStore

from tests.conftest import write_tree


@pytest.fixture
def index(mirror, settings) -> BoilerplateIndex:
    return BoilerplateIndex(MirrorStore(settings))


class TestWalkFiles:

    def test_depth_first_sorted(self, tmp_path):
        write_tree(tmp_path, {
            "b.txt": "",
            "A/z.txt": "",
            "A/B/y.txt": "",
            "a.txt": "",
        })
        rel = [p.relative_to(tmp_path).as_posix() for p in walk_files(tmp_path)]
        assert rel == ["A/B/y.txt", "A/z.txt", "a.txt", "b.txt"]

    def test_skips_git_metadata(self, mirror):
        assert not any(".git" in p.parts for p in walk_files(mirror))

    def test_is_lazy(self, mirror):
        it = walk_files(mirror)
        first = next(it)
        assert isinstance(first, Path)


class TestResolve:

    @pytest.mark.parametrize("name", ["python", "Python", "PYTHON", "pYtHoN"])
    def test_case_insensitive(self, index, mirror, name):
        assert index.resolve(name) == mirror / "Python.gitignore"

    def test_special_characters(self, index, mirror):
        assert index.resolve("c++") == mirror / "C++.gitignore"

    def test_nested(self, index, mirror):
        assert index.resolve("hugo") == mirror / "community" / "Golang" / "Hugo.gitignore"

    def test_first_match_in_traversal_order(self, index, mirror):
        """Global/ sorts before community/, so its Vim wins."""
        assert index.resolve("vim") == mirror / "Global" / "Vim.gitignore"

    def test_not_found_keeps_original_spelling(self, index):
        with pytest.raises(BoilerplateNotFoundError) as exc:
            index.resolve("NoSuchThing")
        assert exc.value.name == "NoSuchThing"
        assert str(exc.value) == "NoSuchThing: boilerplate not found"

    def test_ignores_git_metadata(self, index):
        with pytest.raises(BoilerplateNotFoundError):
            index.resolve("secret")

    def test_empty_name_does_not_match_repo_ignore_file(self, index):
        with pytest.raises(BoilerplateNotFoundError):
            index.resolve("")

    def test_directories_are_not_boilerplates(self, index, mirror):
        (mirror / "Weird.gitignore").mkdir()
        with pytest.raises(BoilerplateNotFoundError):
            index.resolve("weird")

    def test_missing_mirror(self, settings):
        index = BoilerplateIndex(MirrorStore(settings))
        with pytest.raises(MirrorPathError):
            index.resolve("python")


class TestListAll:

    def test_sorted(self, index):
        assert index.list_all() == [
            "C++", "Go", "Hugo", "Python", "Vim", "Vim", "macOS",
        ]

    def test_sorted_example(self, settings):
        write_tree(settings.root, {
            "python.gitignore": "",
            "Go.gitignore": "",
            "C++.gitignore": "",
        })
        index = BoilerplateIndex(MirrorStore(settings))
        assert index.list_all() == ["C++", "Go", "python"]

    def test_case_variants_are_kept(self, settings):
        write_tree(settings.root, {
            "Go.gitignore": "",
            "community/go.gitignore": "",
        })
        index = BoilerplateIndex(MirrorStore(settings))
        assert index.list_all() == ["Go", "go"]

    def test_skips_non_boilerplates(self, index):
        names = index.list_all()
        assert "README" not in names
        assert "" not in names
        assert "Secret" not in names

    def test_missing_mirror(self, settings):
        index = BoilerplateIndex(MirrorStore(settings))
        with pytest.raises(MirrorPathError):
            index.list_all()

    def test_entries_carry_paths(self, index, mirror):
        entries = {e.name: e for e in index.entries() if e.name == "macOS"}
        assert entries["macOS"].path == mirror / "Global" / "macOS.gitignore"
        assert entries["macOS"].lookup_key == "macos.gitignore"
