"""Tests for the file system composite."""

import pytest

from lld_app.composite.filesystem import File, Folder, resolve
from lld_app.errors import InvalidRequestError, PathNotFoundError


def leaf_sizes(item):
    if not item.is_folder():
        return [item.get_size()]
    sizes = []
    for child in item.children:
        sizes.extend(leaf_sizes(child))
    return sizes


class TestFile:
    """Leaf behaviour."""

    def test_file_basics(self):
        file = File("notes.txt", 12)
        assert file.get_size() == 12
        assert file.is_folder() is False
        assert file.ls() == ["notes.txt"]
        assert file.open_all(indent=4) == ["    notes.txt"]
        assert file.cd("anything") is None

    def test_negative_size(self):
        with pytest.raises(InvalidRequestError):
            File("bad.txt", -1)

    @pytest.mark.parametrize("name", ["", "a/b"])
    def test_invalid_names(self, name):
        with pytest.raises(InvalidRequestError):
            File(name, 1)


class TestFolder:
    """Composite behaviour."""

    def test_ls_lists_direct_children(self, sample_tree):
        assert sample_tree.ls() == ["file1.txt", "+ docs", "+ images"]

    def test_open_all_renders_subtree(self, sample_tree):
        assert sample_tree.open_all() == [
            "+ root",
            "    file1.txt",
            "    + docs",
            "        resume.pdf",
            "        + drafts",
            "            draft1.txt",
            "    + images",
            "        photo.jpg",
        ]

    def test_get_size_sums_leaves(self, sample_tree):
        assert sample_tree.get_size() == 75
        assert sample_tree.get_size() == sum(leaf_sizes(sample_tree))
        assert sample_tree.cd("docs").get_size() == 25

    def test_empty_folder_size(self):
        assert Folder("empty").get_size() == 0

    def test_cd(self, sample_tree):
        docs = sample_tree.cd("docs")
        assert docs is not None
        assert docs.name == "docs"
        # Files cannot be entered
        assert sample_tree.cd("file1.txt") is None
        assert sample_tree.cd("missing") is None

    def test_duplicate_names_rejected(self, sample_tree):
        with pytest.raises(InvalidRequestError):
            sample_tree.add(File("file1.txt", 1))

    def test_cycles_rejected(self, sample_tree):
        drafts = sample_tree.cd("docs").cd("drafts")

        with pytest.raises(InvalidRequestError):
            drafts.add(sample_tree)
        with pytest.raises(InvalidRequestError):
            sample_tree.add(sample_tree)

        assert sample_tree.get_size() == 75
        assert drafts.children[0].name == "draft1.txt"

    def test_contains(self, sample_tree):
        docs = sample_tree.cd("docs")
        draft = docs.cd("drafts").children[0]
        assert sample_tree.contains(draft) is True
        assert docs.contains(sample_tree) is False

    def test_remove(self, sample_tree):
        assert sample_tree.remove("images") is True
        assert sample_tree.remove("images") is False
        assert sample_tree.get_size() == 35


class TestResolve:
    """Path walking over folders."""

    def test_nested_path(self, sample_tree):
        assert resolve(sample_tree, "docs/drafts").name == "drafts"

    def test_tolerant_separators(self, sample_tree):
        assert resolve(sample_tree, "./docs//drafts/").name == "drafts"

    def test_empty_path_is_root(self, sample_tree):
        assert resolve(sample_tree, "") is sample_tree

    def test_missing_segment(self, sample_tree):
        with pytest.raises(PathNotFoundError) as exc_info:
            resolve(sample_tree, "docs/archive/old")
        assert exc_info.value.missing_segment == "archive"
        assert exc_info.value.path == "docs/archive/old"

    def test_file_segment(self, sample_tree):
        with pytest.raises(PathNotFoundError):
            resolve(sample_tree, "docs/resume.pdf")
