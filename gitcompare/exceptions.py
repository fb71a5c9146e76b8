"""Error types raised by gitcompare services."""

from typing import Optional


class GitCompareError(Exception):
    """Base class for all gitcompare errors."""


class ReferenceNotFound(GitCompareError):
    """Raised when a commit reference does not resolve in a repository."""

    def __init__(self, reference: str, reason: str = ""):
        self.reference = reference
        message = f"Reference not found: {reference}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RepositoryOpenError(GitCompareError):
    """Raised when a local path is not a usable git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Failed to open repository at {path}")


class InvalidURL(GitCompareError):
    """Raised when a repository URI cannot be parsed."""


class UnsupportedURLStructure(GitCompareError):
    """Raised when a known host's URL path does not have the expected shape."""


class UnsupportedURI(GitCompareError):
    """Raised when a URI uses a scheme that cannot be cloned."""


class CloneError(GitCompareError):
    """Raised when cloning a repository fails."""

    def __init__(self, url: str, stderr: str = ""):
        self.url = url
        self.stderr = stderr
        message = f"Failed to clone repository {url}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


class CheckoutError(GitCompareError):
    """Raised when a branch or tag cannot be checked out."""

    def __init__(self, ref_type: str, ref_name: str, reason: Optional[str] = None):
        self.ref_type = ref_type
        self.ref_name = ref_name
        message = f"Failed to checkout {ref_type} {ref_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SSHAuthError(GitCompareError):
    """Raised when SSH key material is missing; there is no fallback auth."""


class ComparisonError(GitCompareError):
    """Raised when trees or the diff between two commits cannot be computed."""
