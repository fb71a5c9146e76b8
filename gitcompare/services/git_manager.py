import logging
from pathlib import Path
from typing import Optional, Sequence

from git import Repo
from git.exc import GitCommandError

from ..exceptions import CheckoutError, CloneError, GitCompareError
from ..models import CloneTarget, RefKind
from ..protocols import HostDialectProtocol
from .auth import CloneAuthenticator, redact_url
from .dialects import DEFAULT_DIALECTS, default_target_dir, resolve_clone_target


def _command_stderr(error: GitCommandError) -> str:
    return str(error.stderr or "").strip()


class GitManager:
    """Manages clone and checkout operations for remote repositories."""

    def __init__(
        self,
        authenticator: Optional[CloneAuthenticator] = None,
        dialects: Sequence[HostDialectProtocol] = DEFAULT_DIALECTS,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.authenticator = authenticator or CloneAuthenticator(logger=self.logger)
        self.dialects = dialects

    def clone_repository(self, uri: str, target_dir: Optional[str] = None) -> Path:
        """
        Clone a repository URI and check out the branch or tag it names.

        Args:
            uri: Repository URI, possibly a GitHub/GitLab/Azure DevOps ref link
            target_dir: Clone destination; derived from the repo name if omitted

        Returns:
            Path of the cloned working copy
        """
        try:
            target = resolve_clone_target(uri, self.dialects)
        except GitCompareError as e:
            self.logger.error("Invalid repository URI", exc_info=e, extra={"uri": uri})
            raise

        if target_dir:
            path = Path(target_dir)
        else:
            path = Path(default_target_dir(target.clone_url))
            self.logger.info(f"Target directory not provided. Defaulting to: {path}")

        repo = self.clone_target(target, path)
        repo.close()
        self.logger.info(f"Successfully cloned repository {redact_url(uri)} to {path}")
        return path

    def clone_target(self, target: CloneTarget, target_dir: Path) -> Repo:
        """Clone a resolved target and check out its ref, if any."""
        url, env = self.authenticator.prepare(target)
        self.logger.debug(
            "Cloning repository",
            extra={"url": redact_url(url), "target_dir": str(target_dir)},
        )
        try:
            repo = Repo.clone_from(url, target_dir, env=env or None)
        except GitCommandError as e:
            self.logger.error("Failed to clone repository", exc_info=e)
            raise CloneError(redact_url(target.clone_url), _command_stderr(e)) from e

        # git records the clone URL as origin; keep credentials out of .git/config
        if url != target.clone_url:
            try:
                repo.remotes.origin.set_url(target.clone_url)
            except GitCommandError as e:
                repo.close()
                self.logger.error("Failed to reset origin URL", exc_info=e)
                raise CloneError(
                    redact_url(target.clone_url), _command_stderr(e)
                ) from e

        try:
            self._checkout_ref(repo, target)
        except CheckoutError:
            repo.close()
            raise
        return repo

    def _checkout_ref(self, repo: Repo, target: CloneTarget) -> None:
        if not target.has_ref:
            self.logger.info("No specific branch or tag specified. Using default branch.")
            return

        ref_name = target.ref_name or ""
        if target.ref_kind is RefKind.BRANCH:
            self.checkout_branch(repo, ref_name)
        elif target.ref_kind is RefKind.TAG:
            self.checkout_tag(repo, ref_name)
        else:
            try:
                self.checkout_branch(repo, ref_name)
            except CheckoutError:
                self.logger.warning(
                    f"Failed to checkout branch '{ref_name}', attempting to checkout as a tag."
                )
                self.checkout_tag(repo, ref_name)

    def checkout_branch(self, repo: Repo, branch_name: str) -> None:
        """Check out a local branch, creating it from origin if needed."""
        try:
            if branch_name in repo.heads:
                repo.git.checkout(branch_name)
            else:
                repo.git.checkout("-b", branch_name, "--track", f"origin/{branch_name}")
        except GitCommandError as e:
            self.logger.error(f"Failed to checkout branch {branch_name}", exc_info=e)
            raise CheckoutError("branch", branch_name, _command_stderr(e)) from e
        self.logger.info(f"Checked out branch: {branch_name}")

    def checkout_tag(self, repo: Repo, tag_name: str) -> None:
        """Check out a tag as a detached HEAD."""
        if tag_name not in repo.tags:
            self.logger.error(f"Failed to find tag {tag_name}")
            raise CheckoutError("tag", tag_name, "unknown tag")

        tag_ref = repo.tags[tag_name]
        try:
            repo.git.checkout(tag_ref.commit.hexsha)
        except GitCommandError as e:
            self.logger.error(f"Failed to checkout tag {tag_name}", exc_info=e)
            raise CheckoutError("tag", tag_name, _command_stderr(e)) from e
        self.logger.info(f"Checked out tag: {tag_name}")
