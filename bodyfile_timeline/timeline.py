"""
Timeline construction for Bodyfile Timeline.

Turns bodyfile entries into MACB timeline events and orders them.
"""

from datetime import datetime
from typing import Iterable, Optional

from .models import MACB, BodyFileEntry, DateFilter, TimelineEvent


def group_timestamps(entry: BodyFileEntry) -> dict[datetime, MACB]:
    """
    Group an entry's four timestamps by instant.

    Timestamps that are equal share one slot and their categories are
    merged, so an entry yields between 1 and 4 groups. Groups keep the
    order in which their instant was first seen (m, a, c, b).

    Args:
        entry: The bodyfile entry to group.

    Returns:
        Mapping of instant to the categories carrying it.
    """
    groups: dict[datetime, MACB] = {}
    for timestamp, flag in entry.timestamps():
        groups[timestamp] = groups.get(timestamp, MACB(0)) | flag
    return groups


def entry_events(
    entry: BodyFileEntry,
    date_filter: Optional[DateFilter] = None,
) -> list[TimelineEvent]:
    """Build the timeline events of a single entry."""
    events = []
    for timestamp, macb in group_timestamps(entry).items():
        if date_filter is not None and not date_filter.contains(timestamp):
            continue

        events.append(TimelineEvent(
            timestamp=timestamp,
            macb=macb,
            meta=entry.meta,
            size=entry.size,
            filename=entry.name,
        ))
    return events


def build_timeline(
    entries: Iterable[BodyFileEntry],
    date_filter: Optional[DateFilter] = None,
) -> list[TimelineEvent]:
    """
    Build the timeline of a list of entries.

    Events of different entries are never merged, even when they share
    an instant. Filtering only drops events; it never splits or merges them.

    Args:
        entries: Parsed bodyfile entries.
        date_filter: Optional inclusive date range. None keeps every event.

    Returns:
        Events in entry order, then first-seen order within an entry.
    """
    timeline = []
    for entry in entries:
        timeline.extend(entry_events(entry, date_filter))
    return timeline


def sort_timeline(events: list[TimelineEvent]) -> None:
    """
    Sort events in place by timestamp, then by filename.

    MACB, meta and size do not take part in the ordering; events equal on
    both keys keep their relative order.
    """
    events.sort(key=lambda e: e.sort_key)
