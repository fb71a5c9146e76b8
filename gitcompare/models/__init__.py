"""Models for the application."""

from .clone_target import CloneTarget, RefKind
from .repository_uri import RepositoryURI, is_remote_uri

__all__ = ["CloneTarget", "RefKind", "RepositoryURI", "is_remote_uri"]
