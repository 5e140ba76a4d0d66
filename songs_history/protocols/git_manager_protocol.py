"""History backend protocol interface."""

from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

from ..schemas import CommitTime, TreeDelta


@runtime_checkable
class HistoryBackendProtocol(Protocol):
    """Read-only access to the commit graph of a songs-backup repository."""

    @property
    def repo_path(self) -> Path:
        """Local repository path."""
        ...

    def open_repository(self) -> None:
        """Open the repository. Raises RepositoryOpenError on failure."""
        ...

    def head_sha(self) -> str:
        """Sha of the commit HEAD points at. Raises HeadResolutionError."""
        ...

    def read_head_file(self, file_path: str) -> str:
        """Text of a file in the HEAD snapshot. Raises SummaryNotFoundError."""
        ...

    def list_commits(self) -> List[str]:
        """Shas of all commits reachable from HEAD, newest first."""
        ...

    def first_parent(self, sha: str) -> Optional[str]:
        """Sha of the first parent, or None for a root commit."""
        ...

    def commit_time(self, sha: str) -> CommitTime:
        """Committer timestamp of a commit."""
        ...

    def diff_trees(self, parent_sha: str, sha: str, prefix: str) -> List[TreeDelta]:
        """File-level changes from parent to commit under ``prefix``."""
        ...
