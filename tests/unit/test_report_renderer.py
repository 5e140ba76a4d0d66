"""Unit tests for the report renderer."""

from songs_history.schemas import CommitChanges, CommitTime
from songs_history.services.report_renderer import (
    format_time,
    format_video,
    render_report,
)

TITLE = "# songs-history"
URL = "https://youtu.be/{video_id}"


class TestFormatTime:
    """Test cases for format_time."""

    def test_utc(self):
        assert (
            format_time(CommitTime(seconds=1700000000, offset_minutes=0))
            == "Tue Nov 14 22:13:20 2023 +0000"
        )

    def test_positive_offset_shifts_wall_clock(self):
        assert (
            format_time(CommitTime(seconds=1700000000, offset_minutes=60))
            == "Tue Nov 14 23:13:20 2023 +0100"
        )

    def test_negative_offset_with_minutes(self):
        assert (
            format_time(CommitTime(seconds=1700000000, offset_minutes=-330))
            == "Tue Nov 14 16:43:20 2023 -0530"
        )

    def test_single_digit_day_is_space_padded(self):
        assert (
            format_time(CommitTime(seconds=1704067200, offset_minutes=0))
            == "Mon Jan  1 00:00:00 2024 +0000"
        )

    def test_offset_can_change_the_date(self):
        assert (
            format_time(CommitTime(seconds=1704067200, offset_minutes=-60))
            == "Sun Dec 31 23:00:00 2023 -0100"
        )


class TestRenderReport:
    """Test cases for render_report."""

    def test_format_video(self):
        assert format_video("abc123", URL) == "[abc123](https://youtu.be/abc123)"

    def test_title_only(self):
        assert render_report([], TITLE, URL) == "# songs-history\n"

    def test_sections_list_added_then_removed(self):
        changes = [
            CommitChanges(
                sha="a" * 40,
                time=CommitTime(seconds=1700000000),
                added=["abc"],
            ),
            CommitChanges(
                sha="b" * 40,
                time=CommitTime(seconds=1700000060, offset_minutes=60),
                added=["new"],
                removed=["old1", "old2"],
            ),
        ]

        report = render_report(changes, TITLE, URL)

        assert report == (
            "# songs-history\n"
            "## Tue Nov 14 22:13:20 2023 +0000\n"
            "Added [abc](https://youtu.be/abc)  \n"
            "## Tue Nov 14 23:14:20 2023 +0100\n"
            "Added [new](https://youtu.be/new)  \n"
            "Removed [old1](https://youtu.be/old1)  \n"
            "Removed [old2](https://youtu.be/old2)  \n"
        )

    def test_empty_commits_are_skipped(self):
        changes = [
            CommitChanges(sha="a" * 40, time=CommitTime(seconds=1700000000)),
        ]

        assert render_report(changes, TITLE, URL) == "# songs-history\n"

    def test_custom_url_template(self):
        changes = [
            CommitChanges(
                sha="a" * 40,
                time=CommitTime(seconds=1700000000),
                removed=["abc"],
            ),
        ]

        report = render_report(
            changes, TITLE, "https://www.youtube.com/watch?v={video_id}"
        )

        assert "Removed [abc](https://www.youtube.com/watch?v=abc)  \n" in report
