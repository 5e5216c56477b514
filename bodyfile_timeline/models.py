"""
Data models for Bodyfile Timeline.

This module contains the data classes that represent parsed bodyfile
records, the MACB category set and the timeline events derived from them.
"""

import enum
from dataclasses import dataclass
from datetime import date, datetime

from .constants import DATE_RANGE_SEPARATOR


class MACB(enum.Flag):
    """
    Set of timestamp categories sharing one instant.

    Flags combine with ``|``. ``str()`` gives the canonical 4-character
    form where each slot is the category letter or ``.``, always in
    m-a-c-b order (e.g. ``"m.cb"``).
    """
    MODIFIED = 0x1
    ACCESSED = 0x2
    CHANGED = 0x4
    BIRTH = 0x8

    def __str__(self) -> str:
        return "".join(
            letter if flag in self else "."
            for flag, letter in _MACB_LETTERS
        )


_MACB_LETTERS = (
    (MACB.MODIFIED, "m"),
    (MACB.ACCESSED, "a"),
    (MACB.CHANGED, "c"),
    (MACB.BIRTH, "b"),
)

MACB_ALL = MACB.MODIFIED | MACB.ACCESSED | MACB.CHANGED | MACB.BIRTH

# Visitation order used when grouping an entry's timestamps
TIMESTAMP_FIELDS = (
    ("mtime", MACB.MODIFIED),
    ("atime", MACB.ACCESSED),
    ("ctime", MACB.CHANGED),
    ("crtime", MACB.BIRTH),
)


@dataclass(frozen=True)
class BodyFileEntry:
    """
    A single record of a bodyfile.

    Attributes:
        name: Object path or label (e.g. ``c:/$MFT``).
        meta: Filesystem metadata identifier, the bodyfile ``inode``
              column (e.g. ``0-128-6``).
        size: Size of the object in bytes.
        atime: Last access time (UTC).
        mtime: Last modification time (UTC).
        ctime: Last metadata change time (UTC).
        crtime: Creation (birth) time (UTC).
    """
    name: str
    meta: str
    size: int
    atime: datetime
    mtime: datetime
    ctime: datetime
    crtime: datetime

    def timestamps(self) -> list[tuple[datetime, MACB]]:
        """Return ``(timestamp, category)`` pairs in m, a, c, b order."""
        return [(getattr(self, attr), flag) for attr, flag in TIMESTAMP_FIELDS]


@dataclass(frozen=True)
class TimelineEvent:
    """
    One row of the timeline.

    Attributes:
        timestamp: The instant (UTC) shared by every category in ``macb``.
        macb: Categories of the source entry carrying this timestamp.
        meta: Metadata identifier copied from the source entry.
        size: Size copied from the source entry.
        filename: Name copied from the source entry.
    """
    timestamp: datetime
    macb: MACB
    meta: str
    size: int
    filename: str

    @property
    def sort_key(self) -> tuple[datetime, str]:
        """Ordering key: timestamp first, filename on ties."""
        return (self.timestamp, self.filename)

    def to_row(self) -> list[str]:
        """Convert to a CSV row (Datetime, MACB, Meta, Size, FileName)."""
        return [
            self.timestamp.replace(tzinfo=None).isoformat(" ", "seconds"),
            str(self.macb),
            self.meta,
            str(self.size),
            self.filename,
        ]


@dataclass(frozen=True)
class DateFilter:
    """
    Inclusive range of calendar dates (UTC).

    An event is kept when the date part of its timestamp lies within
    ``[start, end]``, both ends included.
    """
    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(
                f"Start date {self.start.isoformat()} is after "
                f"end date {self.end.isoformat()}"
            )

    def contains(self, timestamp: datetime) -> bool:
        return self.start <= timestamp.date() <= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()}{DATE_RANGE_SEPARATOR}{self.end.isoformat()}"
