"""Services for the application."""

from .commit_comparator import CommitComparator, order_commits, resolve_commit
from .diff_runner import DiffRunner
from .git_manager import GitManager
from .git_manager_factory import create_git_manager_from_settings

__all__ = [
    "CommitComparator",
    "DiffRunner",
    "GitManager",
    "create_git_manager_from_settings",
    "order_commits",
    "resolve_commit",
]
