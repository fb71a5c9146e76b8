"""Unit tests for folder-key derivation and grouping."""

import pytest

from gitcompare.schemas import FileStatus
from gitcompare.services.grouping import (
    ROOT_FOLDER,
    base_name,
    changed_folders,
    classify_path,
    group_by_folder,
    group_by_status,
    parent_folder,
)


class TestParentFolder:
    """Test cases for parent_folder."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("file.txt", ROOT_FOLDER),
            ("/file.txt", ROOT_FOLDER),
            ("./file.txt", ROOT_FOLDER),
            ("a/b/file.txt", "a/b"),
            ("src/a.go", "src"),
            ("a\\b\\file.txt", "a/b"),
            ("a//b/file.txt", "a/b"),
        ],
    )
    def test_parent_folder(self, path, expected):
        """Test folder keys for top-level, nested and backslash paths."""
        assert parent_folder(path) == expected

    def test_base_name_normalizes_separators(self):
        """Test base names are taken after separator normalization."""
        assert base_name("a\\b\\file.txt") == "file.txt"
        assert base_name("README.md") == "README.md"


class TestGrouping:
    """Test cases for grouping classified paths."""

    def setup_method(self):
        """Set up a mixed set of classifications."""
        self.entries = [
            classify_path("src/b.go", FileStatus.CREATED),
            classify_path("src/a.go", FileStatus.DELETED),
            classify_path("README.md", FileStatus.MODIFIED),
            classify_path("docs/guide.md", FileStatus.UNMODIFIED),
            classify_path("src/c.go", FileStatus.CREATED),
        ]

    def test_classify_path_sets_folder(self):
        """Test that classify_path derives the folder key."""
        entry = classify_path("pkg/mod/file.py", FileStatus.MODIFIED)

        assert entry.path == "pkg/mod/file.py"
        assert entry.folder == "pkg/mod"
        assert entry.status == FileStatus.MODIFIED

    def test_group_by_folder_keeps_insertion_order(self):
        """Test filenames are appended in the order they were seen."""
        created = [e for e in self.entries if e.status is FileStatus.CREATED]

        assert group_by_folder(created) == {"src": ["b.go", "c.go"]}

    def test_group_by_status_covers_every_status(self):
        """Test that every status gets a mapping, even when empty."""
        grouped = group_by_status(self.entries)

        assert set(grouped) == set(FileStatus)
        assert grouped[FileStatus.CREATED] == {"src": ["b.go", "c.go"]}
        assert grouped[FileStatus.DELETED] == {"src": ["a.go"]}
        assert grouped[FileStatus.MODIFIED] == {"root": ["README.md"]}
        assert grouped[FileStatus.UNMODIFIED] == {"docs": ["guide.md"]}

    def test_group_by_status_accepts_generators(self):
        """Test grouping does not exhaust a one-shot iterable early."""
        grouped = group_by_status(entry for entry in self.entries)

        assert grouped[FileStatus.CREATED] == {"src": ["b.go", "c.go"]}
        assert grouped[FileStatus.UNMODIFIED] == {"docs": ["guide.md"]}

    def test_changed_folders_first_seen_order(self):
        """Test changed folders are distinct, ordered and skip unmodified."""
        assert changed_folders(self.entries) == ["src", "root"]

    def test_changed_folders_empty(self):
        """Test no changed folders when everything is unmodified."""
        entries = [classify_path("a.txt", FileStatus.UNMODIFIED)]

        assert changed_folders(entries) == []
