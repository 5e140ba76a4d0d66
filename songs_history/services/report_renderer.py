"""Renders filtered commit changes as a markdown changelog."""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List

from ..schemas import CommitChanges, CommitTime

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_time(time: CommitTime) -> str:
    """Format a commit time in the committer's wall-clock, git log style.

    e.g. ``Tue Nov 14 23:13:20 2023 +0100``
    """
    offset = time.offset_minutes
    sign = "-" if offset < 0 else "+"
    hours, minutes = divmod(abs(offset), 60)
    local = _EPOCH + timedelta(seconds=time.seconds + offset * 60)
    return (
        f"{local:%a %b} {local.day:>2} {local:%H:%M:%S} {local.year} "
        f"{sign}{hours:02}{minutes:02}"
    )


def format_video(video: str, url_template: str) -> str:
    return f"[{video}]({url_template.format(video_id=video)})"


def render_section(changes: CommitChanges, url_template: str) -> List[str]:
    lines = [f"## {format_time(changes.time)}"]
    for video in changes.added:
        lines.append(f"Added {format_video(video, url_template)}  ")
    for video in changes.removed:
        lines.append(f"Removed {format_video(video, url_template)}  ")
    return lines


def render_report(
    changes: Iterable[CommitChanges], title: str, url_template: str
) -> str:
    """Render the title line and one section per commit with events."""
    lines = [title]
    for commit_changes in changes:
        if commit_changes.is_empty:
            continue
        lines.extend(render_section(commit_changes, url_template))
    return "\n".join(lines) + "\n"
