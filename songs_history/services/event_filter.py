"""Drops repeated additions and removals of songs that still exist."""

from typing import Iterable, List, Set, Tuple


class ChangelogState:
    """State threaded through one walk of the history.

    ``current_ids`` is the snapshot of ids present at HEAD and is never
    changed. ``already_added`` only grows.
    """

    def __init__(self, current_ids: Set[str]):
        self.current_ids = frozenset(current_ids)
        self.already_added: Set[str] = set()

    def filter_added(self, added: Iterable[str]) -> List[str]:
        kept = []
        for video in added:
            if video in self.already_added:
                continue
            self.already_added.add(video)
            kept.append(video)
        return kept

    def filter_deleted(self, deleted: Iterable[str]) -> List[str]:
        return [video for video in deleted if video not in self.current_ids]

    def filter_events(
        self, added: Iterable[str], deleted: Iterable[str]
    ) -> Tuple[List[str], List[str]]:
        """Filter one commit's events: additions first, then deletions."""
        kept_added = self.filter_added(added)
        kept_deleted = self.filter_deleted(deleted)
        return kept_added, kept_deleted
