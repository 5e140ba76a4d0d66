"""Command-line entry point for songs-history."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config.settings import Settings, get_settings
from .exceptions import OutputExistsError, OutputWriteError, SongsHistoryError
from .models import GitManager
from .services import ChangelogCoordinator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="songs-history",
        description=(
            "Write a changelog of songs added to and removed from "
            "a songs-backup repository."
        ),
    )
    parser.add_argument(
        "directory", type=Path, help="Path to the songs-backup git repository"
    )
    parser.add_argument(
        "-f", "--force", action="store_true", help="Overwrite the output file"
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (default: output.txt)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _exists_message(output: Path) -> str:
    return (
        f"Output file {output} already exists. "
        "Use -f, --force to force overwriting the destination"
    )


def check_output_target(output: Path, force: bool) -> None:
    """Fail early when the report would clobber an existing file."""
    if not force and output.exists():
        raise OutputExistsError(_exists_message(output))


def write_report(output: Path, report: str, force: bool) -> None:
    mode = "w" if force else "x"
    try:
        with open(output, mode, encoding="utf-8", newline="\n") as f:
            f.write(report)
    except FileExistsError as e:
        raise OutputExistsError(_exists_message(output)) from e
    except OSError as e:
        raise OutputWriteError(f"failed to open file: {e}") from e


def run(directory: Path, output: Path, force: bool, settings: Settings) -> None:
    git_manager = GitManager(str(directory))
    git_manager.open_repository()
    check_output_target(output, force)

    coordinator = ChangelogCoordinator(git_manager, settings)
    changes = coordinator.build_changes()
    print(f"Found {len(changes)} commits with song changes")

    report = coordinator.render(changes)
    write_report(output, report, force)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    output = args.output or Path(settings.OUTPUT_PATH)

    try:
        run(args.directory, output, args.force, settings)
    except SongsHistoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote to {output}")
    return 0
