"""Coordinates one changelog run over a songs-backup repository."""

from typing import List

from ..config.settings import Settings
from ..protocols.git_manager_protocol import HistoryBackendProtocol
from ..schemas import CommitChanges
from .current_state import load_current_ids
from .diff_classifier import classify_deltas
from .event_filter import ChangelogState
from .history_walker import walk_history
from .report_renderer import render_report


class ChangelogCoordinator:
    """Runs loader, walker, classifier, filter and renderer in order."""

    def __init__(self, git_manager: HistoryBackendProtocol, settings: Settings):
        self.git_manager = git_manager
        self.settings = settings

    def build_changes(self) -> List[CommitChanges]:
        """Get the surviving events of every commit that has any, oldest first."""
        state = ChangelogState(
            load_current_ids(self.git_manager, self.settings.SUMMARY_PATH)
        )
        prefix = self.settings.TRACKED_DIR

        changes = []
        for parent, sha in walk_history(self.git_manager):
            deltas = self.git_manager.diff_trees(parent, sha, prefix)
            added, deleted = classify_deltas(deltas, prefix)
            added, deleted = state.filter_events(added, deleted)
            if not added and not deleted:
                continue
            changes.append(
                CommitChanges(
                    sha=sha,
                    time=self.git_manager.commit_time(sha),
                    added=added,
                    removed=deleted,
                )
            )
        return changes

    def render(self, changes: List[CommitChanges]) -> str:
        return render_report(
            changes,
            title=self.settings.REPORT_TITLE,
            url_template=self.settings.VIDEO_URL_TEMPLATE,
        )

    def build_report(self) -> str:
        return self.render(self.build_changes())
