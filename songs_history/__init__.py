"""Rebuilds a song added/removed changelog from a songs-backup git history."""

__version__ = "0.1.0"
