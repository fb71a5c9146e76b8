"""Folder-key derivation and grouping of classified paths."""

import posixpath
from typing import Dict, Iterable, List

from ..schemas import FileClassification, FileStatus

ROOT_FOLDER = "root"


def _to_posix(file_path: str) -> str:
    return file_path.replace("\\", "/")


def parent_folder(file_path: str) -> str:
    """Return the parent folder of a path, or "root" for top-level files."""
    directory = posixpath.dirname(_to_posix(file_path))
    if directory:
        directory = posixpath.normpath(directory)
    if directory in ("", ".", "/"):
        return ROOT_FOLDER
    return directory


def base_name(file_path: str) -> str:
    return posixpath.basename(_to_posix(file_path))


def classify_path(file_path: str, status: FileStatus) -> FileClassification:
    return FileClassification(
        path=file_path, folder=parent_folder(file_path), status=status
    )


def group_by_folder(entries: Iterable[FileClassification]) -> Dict[str, List[str]]:
    """Group base filenames under their folder key, keeping insertion order."""
    grouped: Dict[str, List[str]] = {}
    for entry in entries:
        grouped.setdefault(entry.folder, []).append(base_name(entry.path))
    return grouped


def group_by_status(
    entries: Iterable[FileClassification],
) -> Dict[FileStatus, Dict[str, List[str]]]:
    entries = list(entries)
    return {
        status: group_by_folder(entry for entry in entries if entry.status is status)
        for status in FileStatus
    }


def changed_folders(entries: Iterable[FileClassification]) -> List[str]:
    """Distinct folders holding a changed path, in order of first appearance."""
    seen: Dict[str, None] = {}
    for entry in entries:
        if entry.status is not FileStatus.UNMODIFIED:
            seen.setdefault(entry.folder, None)
    return list(seen)
