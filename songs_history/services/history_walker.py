"""Orders the commit history oldest-first as (parent, commit) pairs."""

from typing import Iterator, Tuple

from ..protocols.git_manager_protocol import HistoryBackendProtocol


def walk_history(git_manager: HistoryBackendProtocol) -> Iterator[Tuple[str, str]]:
    """Yield ``(first_parent_sha, sha)`` for every non-root commit, oldest first.

    Only the first parent of a merge commit is used. Root commits have
    nothing to compare against and are skipped.
    """
    for sha in reversed(git_manager.list_commits()):
        parent = git_manager.first_parent(sha)
        if parent is None:
            continue
        yield parent, sha
