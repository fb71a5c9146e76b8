"""Git Manager protocol interface."""

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from git import Repo

from ..models import CloneTarget


@runtime_checkable
class GitManagerProtocol(Protocol):
    """Protocol for repository clone and checkout operations."""

    def clone_repository(self, uri: str, target_dir: Optional[str] = None) -> Path:
        """Clone a repository URI, checking out any ref it names. Returns the clone path."""
        ...

    def clone_target(self, target: CloneTarget, target_dir: Path) -> Repo:
        """Clone an already resolved target into target_dir."""
        ...

    def checkout_branch(self, repo: Repo, branch_name: str) -> None:
        """Check out a branch in a cloned repository."""
        ...

    def checkout_tag(self, repo: Repo, tag_name: str) -> None:
        """Check out a tag (detached) in a cloned repository."""
        ...
