#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/events/utils.py
"""Helpers for inspecting flat event streams."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from md2markup.events.nodes import EndElement, Event, InlineCode, StartElement, Text


def nesting_depths(events: Iterable[Event]) -> Iterator[int]:
    """Yield the container depth after each event.

    Parameters
    ----------
    events : iterable of Event
        Event stream to walk

    Yields
    ------
    int
        Depth after applying the event; negative when an EndElement has no
        open container to close

    """
    depth = 0
    for event in events:
        if isinstance(event, StartElement):
            depth += 1
        elif isinstance(event, EndElement):
            depth -= 1
        yield depth


def is_well_nested(events: Sequence[Event]) -> bool:
    """Return True when every StartElement is closed by exactly one EndElement."""
    depth = 0
    for depth in nesting_depths(events):
        if depth < 0:
            return False
    return depth == 0


def extract_text(events: Iterable[Event]) -> str:
    """Concatenate the Text and InlineCode leaves of an event stream, in order.

    Parameters
    ----------
    events : iterable of Event
        Events to collect text from (nested containers included)

    Returns
    -------
    str
        The joined text with no separators added

    """
    parts: list[str] = []
    for event in events:
        if isinstance(event, Text):
            parts.append(event.text)
        elif isinstance(event, InlineCode):
            parts.append(event.code)
    return "".join(parts)
