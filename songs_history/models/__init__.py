"""Models for the application."""

from .git_manager import GitManager

__all__ = ["GitManager"]
