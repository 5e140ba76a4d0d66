from pathlib import Path
from typing import Dict, List, Optional

from git import Repo
from git.exc import BadName, InvalidGitRepositoryError, NoSuchPathError
from git.objects import Commit

from ..exceptions import (
    HeadResolutionError,
    RepositoryOpenError,
    SummaryNotFoundError,
)
from ..schemas import CommitTime, FileStatus, TreeDelta


class GitManager:
    """Read-only access to a songs-backup repository through GitPython."""

    def __init__(self, repo_path: str):
        self.repo_path = Path(repo_path)
        self.repo: Optional[Repo] = None
        self._commits: Dict[str, Commit] = {}

    def open_repository(self) -> None:
        """Open the repository at ``repo_path``."""
        try:
            self.repo = Repo(self.repo_path)
        except NoSuchPathError as e:
            raise RepositoryOpenError(f"failed to open: no such path {e}") from e
        except InvalidGitRepositoryError as e:
            raise RepositoryOpenError(
                f"failed to open: {self.repo_path} is not a git repository"
            ) from e
        print(f"Opened repository at {self.repo_path}")

    def _require_repo(self) -> Repo:
        if not self.repo:
            raise RuntimeError("Repository not initialized")
        return self.repo

    def _head_commit(self) -> Commit:
        repo = self._require_repo()
        try:
            return repo.head.commit
        except (ValueError, BadName) as e:
            raise HeadResolutionError(f"failed to resolve HEAD: {e}") from e

    def _commit(self, sha: str) -> Commit:
        commit = self._commits.get(sha)
        if commit is None:
            commit = self._require_repo().commit(sha)
            self._commits[sha] = commit
        return commit

    def head_sha(self) -> str:
        """Get the sha HEAD resolves to."""
        return self._head_commit().hexsha

    def read_head_file(self, file_path: str) -> str:
        """Get the text of a file in the HEAD snapshot."""
        tree = self._head_commit().tree
        try:
            obj = tree / file_path
        except KeyError as e:
            raise SummaryNotFoundError(
                f"{file_path} does not exist at HEAD"
            ) from e
        if obj.type != "blob":
            raise SummaryNotFoundError(f"{file_path} at HEAD is not a file")
        try:
            return obj.data_stream.read().decode("utf-8")
        except UnicodeDecodeError as e:
            raise SummaryNotFoundError(f"{file_path} at HEAD is not UTF-8: {e}") from e

    def list_commits(self) -> List[str]:
        """Get shas of every commit reachable from HEAD, newest first."""
        head = self._head_commit()
        shas = []
        for commit in self._require_repo().iter_commits(head.hexsha):
            self._commits[commit.hexsha] = commit
            shas.append(commit.hexsha)
        return shas

    def first_parent(self, sha: str) -> Optional[str]:
        parents = self._commit(sha).parents
        if not parents:
            return None
        return parents[0].hexsha

    def commit_time(self, sha: str) -> CommitTime:
        commit = self._commit(sha)
        # GitPython stores the offset in seconds west of UTC
        return CommitTime(
            seconds=commit.committed_date,
            offset_minutes=-commit.committer_tz_offset // 60,
        )

    def diff_trees(self, parent_sha: str, sha: str, prefix: str) -> List[TreeDelta]:
        """Get file changes from ``parent_sha`` to ``sha`` under ``prefix``.

        Rename detection is off, so a moved file shows up as a deletion of
        the old path and an addition of the new one, in path order.
        """
        parent = self._commit(parent_sha)
        commit = self._commit(sha)

        deltas = []
        for item in parent.diff(commit, paths=prefix, no_renames=True):
            file_path = item.b_path or item.a_path
            deltas.append(TreeDelta(status=FileStatus(item.change_type), path=file_path))
        return deltas
