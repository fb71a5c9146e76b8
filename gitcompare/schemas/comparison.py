from typing import Dict, List, Tuple

from pydantic import BaseModel, Field

from .git import CommitDetails

FolderFiles = Dict[str, List[str]]


class ComparisonResult(BaseModel):
    """Files of two commits grouped under their parent folders."""

    commit_details: Tuple[CommitDetails, CommitDetails]
    modified_files: FolderFiles = Field(default_factory=dict)
    created_files: FolderFiles = Field(default_factory=dict)
    deleted_files: FolderFiles = Field(default_factory=dict)
    unmodified_files: FolderFiles = Field(default_factory=dict)
    changed_folders: List[str] = Field(default_factory=list)

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)
