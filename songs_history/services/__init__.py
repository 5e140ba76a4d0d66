"""Services for the application."""

from .changelog_coordinator import ChangelogCoordinator
from .event_filter import ChangelogState

__all__ = ["ChangelogCoordinator", "ChangelogState"]
