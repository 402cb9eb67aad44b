"""Story events and the tree nodes that hold them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Story:
    """One event of the story and the numbers of the events that follow it."""

    description: str = ""
    event_number: int = 0
    left_event_number: int = -1
    right_event_number: int = -1


@dataclass
class Node(Generic[T]):
    """A binary tree node."""

    data: T
    left: Optional["Node[T]"] = None
    right: Optional["Node[T]"] = None


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer field: {text!r}")
    return int(match.group(1))


def parse_story_line(line: str, delimiter: str = "|") -> Story:
    """Parse ``number|description|left|right`` into a Story.

    Fields beyond the fourth are ignored; a missing or non-numeric
    number field raises ValueError.
    """
    fields = line.split(delimiter)
    fields += [""] * (4 - len(fields))
    event_number, description, left, right = fields[:4]
    return Story(
        description=description,
        event_number=_to_int(event_number),
        left_event_number=_to_int(left),
        right_event_number=_to_int(right),
    )