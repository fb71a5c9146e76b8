from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class FileStatus(str, Enum):
    """Enum for file comparison statuses."""

    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"
    UNMODIFIED = "unmodified"


class FileClassification(BaseModel):
    """A path labelled with exactly one comparison status."""

    path: str
    folder: str
    status: FileStatus


class CommitDetails(BaseModel):
    """Commit metadata carried in the comparison output."""

    hash: str
    timestamp: datetime
