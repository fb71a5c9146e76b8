"""Runs a commit comparison against a local path or a temporary clone."""

import logging
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from ..exceptions import RepositoryOpenError
from ..models import is_remote_uri
from ..protocols import GitManagerProtocol
from ..schemas import ComparisonResult
from .auth import redact_url
from .commit_comparator import CommitComparator, order_commits, resolve_commit


@contextmanager
def open_local_repository(path: Union[str, Path]) -> Iterator[Repo]:
    """Open a repository and release its git processes on exit."""
    try:
        repo = Repo(path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryOpenError(str(path)) from e
    try:
        yield repo
    finally:
        repo.close()


class DiffRunner:
    """Opens or clones a repository and compares two of its commits."""

    def __init__(
        self,
        git_manager: GitManagerProtocol,
        comparator: Optional[CommitComparator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.git_manager = git_manager
        self.logger = logger or logging.getLogger(__name__)
        self.comparator = comparator or CommitComparator(logger=self.logger)

    @contextmanager
    def open_repository(self, path_or_uri: str) -> Iterator[Repo]:
        """
        Yield a repository for a local path or a remote URI.

        Remote URIs are cloned into a temporary directory that is removed
        when the context exits, whether or not the body raised.
        """
        if not is_remote_uri(path_or_uri):
            with open_local_repository(path_or_uri) as repo:
                yield repo
            return

        with tempfile.TemporaryDirectory(prefix="git-repo-") as temp_dir:
            self.logger.info(
                f"Cloning repository from {redact_url(path_or_uri)} to {temp_dir}"
            )
            clone_path = self.git_manager.clone_repository(path_or_uri, temp_dir)
            with open_local_repository(clone_path) as repo:
                yield repo

    def run(
        self, path_or_uri: str, first_sha: str, second_sha: Optional[str] = None
    ) -> ComparisonResult:
        """
        Compare two commits; the second defaults to the current HEAD.

        The commits are reordered so the older one comes first.
        """
        with self.open_repository(path_or_uri) as repo:
            first = resolve_commit(repo, first_sha)
            second = resolve_commit(repo, second_sha)
            first, second = order_commits(first, second)
            self.logger.debug(
                "Comparing commits",
                extra={"first_commit": first.hexsha, "second_commit": second.hexsha},
            )
            return self.comparator.compare(first, second)
