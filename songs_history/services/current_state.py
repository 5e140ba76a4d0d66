"""Loads the ids of songs present in the latest summary document."""

import json
import re
from typing import Any, Iterator, Set

from pydantic import ValidationError

from ..protocols.git_manager_protocol import HistoryBackendProtocol
from ..schemas import SummaryItem

_decoder = json.JSONDecoder()
_WHITESPACE = re.compile(r"[ \t\n\r]*")


def iter_json_values(text: str) -> Iterator[Any]:
    """Yield each JSON value of a document made of concatenated values.

    A value that cannot be decoded is skipped up to the end of its line,
    since broken JSON has no reliable value boundary.
    """
    pos = _WHITESPACE.match(text, 0).end()
    while pos < len(text):
        try:
            value, pos = _decoder.raw_decode(text, pos)
        except json.JSONDecodeError:
            newline = text.find("\n", pos)
            if newline == -1:
                return
            pos = newline + 1
        else:
            yield value
        pos = _WHITESPACE.match(text, pos).end()


def parse_current_ids(text: str) -> Set[str]:
    """Collect ``items[].id`` strings from every value of a summary document."""
    ids: Set[str] = set()
    for value in iter_json_values(text):
        if not isinstance(value, dict):
            continue
        items = value.get("items")
        if not isinstance(items, list):
            continue
        for raw_item in items:
            if not isinstance(raw_item, dict):
                continue
            try:
                item = SummaryItem.model_validate(raw_item)
            except ValidationError:
                continue
            if item.id is not None:
                ids.add(item.id)
    return ids


def load_current_ids(
    git_manager: HistoryBackendProtocol, summary_path: str
) -> Set[str]:
    """Read the summary document at HEAD and return the ids it lists."""
    return parse_current_ids(git_manager.read_head_file(summary_path))
