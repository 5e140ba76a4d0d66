"""Mock implementation of HistoryBackendProtocol for development and testing."""

from pathlib import Path
from typing import Dict, List, Optional

from songs_history.exceptions import HeadResolutionError, SummaryNotFoundError
from songs_history.schemas import CommitTime, FileStatus, TreeDelta
from songs_history.services.diff_classifier import is_tracked


class MockGitManager:
    """In-memory commit graph where every commit is a full file snapshot."""

    def __init__(self, repo_path: str = "mock-repo"):
        self._repo_path = Path(repo_path)
        self._snapshots: Dict[str, Dict[str, str]] = {}
        self._parents: Dict[str, List[str]] = {}
        self._times: Dict[str, CommitTime] = {}
        self._created: List[str] = []
        self._head: Optional[str] = None

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def commit(
        self,
        files: Dict[str, str],
        parents: Optional[List[str]] = None,
        seconds: Optional[int] = None,
        offset_minutes: int = 0,
    ) -> str:
        """Record a commit whose tree is ``files`` and move HEAD to it.

        Parents default to the current HEAD, so consecutive calls build a
        linear history.
        """
        sha = f"{len(self._created) + 1:040x}"
        if parents is None:
            parents = [self._head] if self._head else []
        if seconds is None:
            seconds = 1_700_000_000 + 60 * len(self._created)
        self._snapshots[sha] = dict(files)
        self._parents[sha] = list(parents)
        self._times[sha] = CommitTime(seconds=seconds, offset_minutes=offset_minutes)
        self._created.append(sha)
        self._head = sha
        return sha

    def open_repository(self) -> None:
        print(f"Mock: Opening repository at {self._repo_path}")

    def head_sha(self) -> str:
        if self._head is None:
            raise HeadResolutionError("failed to resolve HEAD: no commits")
        return self._head

    def read_head_file(self, file_path: str) -> str:
        snapshot = self._snapshots[self.head_sha()]
        if file_path not in snapshot:
            raise SummaryNotFoundError(f"{file_path} does not exist at HEAD")
        return snapshot[file_path]

    def list_commits(self) -> List[str]:
        reachable = set()
        pending = [self.head_sha()]
        while pending:
            sha = pending.pop()
            if sha in reachable:
                continue
            reachable.add(sha)
            pending.extend(self._parents[sha])
        return [sha for sha in reversed(self._created) if sha in reachable]

    def first_parent(self, sha: str) -> Optional[str]:
        parents = self._parents[sha]
        return parents[0] if parents else None

    def commit_time(self, sha: str) -> CommitTime:
        return self._times[sha]

    def diff_trees(self, parent_sha: str, sha: str, prefix: str) -> List[TreeDelta]:
        old = self._snapshots[parent_sha]
        new = self._snapshots[sha]

        deltas = []
        for file_path in sorted(set(old) | set(new)):
            if not is_tracked(file_path, prefix):
                continue
            if file_path not in old:
                deltas.append(TreeDelta(status=FileStatus.ADDED, path=file_path))
            elif file_path not in new:
                deltas.append(TreeDelta(status=FileStatus.DELETED, path=file_path))
            elif old[file_path] != new[file_path]:
                deltas.append(TreeDelta(status=FileStatus.MODIFIED, path=file_path))
        return deltas
