"""Clone target model produced by the host URL dialects."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class RefKind(str, Enum):
    """What kind of ref to check out after cloning."""

    BRANCH = "branch"
    TAG = "tag"
    BRANCH_OR_TAG = "branch_or_tag"  # GitLab `ref` does not say which


class CloneTarget(BaseModel):
    """A plain clone URL plus an optional ref to check out afterwards."""

    clone_url: str
    ref_kind: Optional[RefKind] = None
    ref_name: Optional[str] = None
    use_ssh: bool = False

    @property
    def has_ref(self) -> bool:
        return self.ref_kind is not None and bool(self.ref_name)
