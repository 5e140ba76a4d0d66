"""Reduces tree deltas to added and deleted video ids."""

from pathlib import PurePosixPath
from typing import Iterable, List, Tuple

from ..schemas import FileStatus, TreeDelta


def is_tracked(path: str, prefix: str) -> bool:
    """Whether ``path`` lies under ``prefix``, compared component-wise."""
    prefix_parts = PurePosixPath(prefix).parts
    return PurePosixPath(path).parts[: len(prefix_parts)] == prefix_parts


def video_id(path: str) -> str:
    return PurePosixPath(path).stem


def classify_deltas(
    deltas: Iterable[TreeDelta], prefix: str
) -> Tuple[List[str], List[str]]:
    """Split deltas into (added ids, deleted ids), keeping delta order.

    Statuses other than added/deleted and paths outside ``prefix`` are
    dropped.
    """
    added: List[str] = []
    deleted: List[str] = []
    for delta in deltas:
        if delta.status not in (FileStatus.ADDED, FileStatus.DELETED):
            continue
        if not is_tracked(delta.path, prefix):
            continue
        if delta.status == FileStatus.ADDED:
            added.append(video_id(delta.path))
        else:
            deleted.append(video_id(delta.path))
    return added, deleted
