from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr


class FileStatus(str, Enum):
    """Enum for file change statuses, as reported by git diff --raw."""

    ADDED = "A"
    COPIED = "C"
    DELETED = "D"
    MODIFIED = "M"
    RENAMED = "R"
    TYPE_CHANGED = "T"
    UNMERGED = "U"
    UNKNOWN = "X"


class TreeDelta(BaseModel):
    """One file-level change between two tree snapshots."""

    model_config = ConfigDict(frozen=True)

    status: FileStatus
    path: str  # new side of the delta; mirrors the old path for deletions


class CommitTime(BaseModel):
    """Committer timestamp of a commit."""

    model_config = ConfigDict(frozen=True)

    seconds: int
    offset_minutes: int = 0  # east of UTC


class CommitChanges(BaseModel):
    """Surviving added/removed video ids of one commit, in delta order."""

    sha: str
    time: CommitTime
    added: List[str] = []
    removed: List[str] = []

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


class SummaryItem(BaseModel):
    """An element of the ``items`` array of the summary document."""

    id: Optional[StrictStr] = None
