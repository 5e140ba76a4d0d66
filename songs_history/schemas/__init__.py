"""Schemas for the application."""

from .history import (
    CommitChanges,
    CommitTime,
    FileStatus,
    SummaryItem,
    TreeDelta,
)

__all__ = ["CommitChanges", "CommitTime", "FileStatus", "SummaryItem", "TreeDelta"]
