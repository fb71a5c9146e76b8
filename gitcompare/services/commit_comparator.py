"""Resolves commits and classifies the files that differ between them."""

import logging
from typing import Iterable, List, Optional, Set, Tuple

from git import Repo
from git.exc import BadName, BadObject, GitError, ODBError
from git.objects import Commit, Tree

from ..exceptions import ComparisonError, ReferenceNotFound
from ..schemas import CommitDetails, ComparisonResult, FileClassification, FileStatus
from .grouping import changed_folders, classify_path, group_by_status

HEAD_ALIASES = ("", "head", "latest")


def resolve_commit(repo: Repo, sha: Optional[str] = None) -> Commit:
    """
    Resolve a SHA-1 to a commit, or the current HEAD when none is given.

    Raises:
        ReferenceNotFound: If the reference does not resolve to a commit
    """
    if sha is None or sha.strip().lower() in HEAD_ALIASES:
        try:
            return repo.head.commit
        except ValueError as e:
            raise ReferenceNotFound("HEAD", str(e)) from e

    try:
        return repo.commit(sha.strip())
    except (BadName, BadObject, ValueError) as e:
        raise ReferenceNotFound(sha, str(e)) from e


def order_commits(first: Commit, second: Commit) -> Tuple[Commit, Commit]:
    """Return the commits as (older, newer); equal timestamps keep their order."""
    if first.committed_date > second.committed_date:
        return second, first
    return first, second


def commit_details(commit: Commit) -> CommitDetails:
    return CommitDetails(hash=commit.hexsha, timestamp=commit.committed_datetime)


def list_files(tree: Tree) -> Set[str]:
    """All blob paths reachable from a tree."""
    return {item.path for item in tree.traverse() if item.type == "blob"}


def undecodable_paths(paths: Iterable[str]) -> List[str]:
    """
    Paths git stored as bytes that are not valid UTF-8.

    GitPython decodes these with surrogateescape when walking trees, and drops
    them from diff output entirely.
    """
    bad = []
    for path in paths:
        try:
            path.encode("utf-8")
        except UnicodeEncodeError:
            bad.append(path)
    return sorted(bad)


class CommitComparator:
    """Labels every path of two commits as created, modified, deleted or unmodified."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def classify(self, first: Commit, second: Commit) -> List[FileClassification]:
        """
        Classify the paths of two commits, changed paths first in diff order.

        Args:
            first: The older commit
            second: The newer commit

        Returns:
            One entry per path in the union of both trees

        Raises:
            ComparisonError: If a tree or the diff between them cannot be read,
                or a path is not valid UTF-8
        """
        all_paths: Set[str] = set()
        for label, commit in (("first", first), ("second", second)):
            try:
                all_paths |= list_files(commit.tree)
            except (GitError, ODBError, ValueError) as e:
                self.logger.error(
                    f"Failed to iterate over files in {label} commit tree", exc_info=e
                )
                raise ComparisonError(
                    f"Failed to list files of commit {commit.hexsha}: {e}"
                ) from e

        # The diff would silently omit these paths and mislabel them unmodified
        bad_paths = undecodable_paths(all_paths)
        if bad_paths:
            listed = ", ".join(ascii(path) for path in bad_paths)
            self.logger.error("Commit trees contain paths that are not valid UTF-8")
            raise ComparisonError(
                f"Cannot compare paths that are not valid UTF-8: {listed}"
            )

        try:
            diff_index = first.diff(second)
        except (GitError, ODBError, ValueError) as e:
            self.logger.error("Failed to create diff between commits", exc_info=e)
            raise ComparisonError(
                f"Failed to diff {first.hexsha} against {second.hexsha}: {e}"
            ) from e

        entries: List[FileClassification] = []
        changed: Set[str] = set()

        def record(path: str, status: FileStatus) -> None:
            if path in changed:
                return
            changed.add(path)
            entries.append(classify_path(path, status))

        for diff in diff_index:
            if diff.change_type == "A":
                record(diff.b_path, FileStatus.CREATED)
            elif diff.change_type == "D":
                record(diff.a_path, FileStatus.DELETED)
            elif diff.change_type == "R":
                # A rename is a deletion of the old path plus a new path
                record(diff.a_path, FileStatus.DELETED)
                record(diff.b_path, FileStatus.CREATED)
            elif diff.change_type == "C":
                record(diff.b_path, FileStatus.CREATED)
            else:
                record(diff.a_path, FileStatus.MODIFIED)

        for path in sorted(all_paths - changed):
            entries.append(classify_path(path, FileStatus.UNMODIFIED))

        self.logger.debug(
            "Classified commit paths",
            extra={"changed": len(changed), "total": len(entries)},
        )
        return entries

    def compare(self, first: Commit, second: Commit) -> ComparisonResult:
        """Compare two ordered commits and group the results by parent folder."""
        entries = self.classify(first, second)
        grouped = group_by_status(entries)
        return ComparisonResult(
            commit_details=(commit_details(first), commit_details(second)),
            modified_files=grouped[FileStatus.MODIFIED],
            created_files=grouped[FileStatus.CREATED],
            deleted_files=grouped[FileStatus.DELETED],
            unmodified_files=grouped[FileStatus.UNMODIFIED],
            changed_folders=changed_folders(entries),
        )
