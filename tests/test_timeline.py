"""Tests for timeline building, filtering and sorting."""

from __future__ import annotations

from datetime import date

from bodyfile_timeline.models import MACB, MACB_ALL, DateFilter, TimelineEvent
from bodyfile_timeline.timeline import (
    build_timeline,
    entry_events,
    group_timestamps,
    sort_timeline,
)

from .conftest import make_entry, utc


def _distinct_entry(name="c:/file.txt"):
    return make_entry(
        name=name,
        mtime=utc(2020, 1, 1),
        atime=utc(2020, 1, 2),
        ctime=utc(2020, 1, 3),
        crtime=utc(2020, 1, 4),
    )


class TestGroupTimestamps:
    def test_all_identical(self):
        t = utc(2020, 7, 21, 0, 38, 18)
        groups = group_timestamps(make_entry(atime=t, mtime=t, ctime=t, crtime=t))
        assert groups == {t: MACB_ALL}

    def test_all_distinct(self):
        groups = group_timestamps(_distinct_entry())
        assert list(groups.values()) == [
            MACB.MODIFIED, MACB.ACCESSED, MACB.CHANGED, MACB.BIRTH,
        ]

    def test_partial_merge(self):
        t1, t2 = utc(2020, 1, 1), utc(2021, 1, 1)
        groups = group_timestamps(make_entry(mtime=t1, atime=t2, ctime=t1, crtime=t1))
        assert {t: str(m) for t, m in groups.items()} == {t1: "m.cb", t2: ".a.."}

    def test_first_seen_order(self):
        t1, t2 = utc(2020, 1, 1), utc(2021, 1, 1)
        groups = group_timestamps(make_entry(mtime=t2, atime=t1, ctime=t2, crtime=t1))
        assert list(groups) == [t2, t1]

    def test_union_is_always_complete(self):
        t1, t2, t3 = utc(2020, 1, 1), utc(2020, 1, 2), utc(2020, 1, 3)
        for entry in [
            make_entry(mtime=t1, atime=t1, ctime=t2, crtime=t3),
            make_entry(mtime=t3, atime=t2, ctime=t2, crtime=t2),
            _distinct_entry(),
        ]:
            union = MACB(0)
            for macb in group_timestamps(entry).values():
                union |= macb
            assert union == MACB_ALL


class TestBuildTimeline:
    def test_one_event_when_identical(self):
        t = utc(2020, 7, 21, 0, 38, 18)
        entry = make_entry(name="c:/$MFT", size=1835008, atime=t, mtime=t, ctime=t, crtime=t)
        events = build_timeline([entry])
        assert events == [TimelineEvent(t, MACB_ALL, "0-128-6", 1835008, "c:/$MFT")]
        assert str(events[0].macb) == "macb"

    def test_four_events_when_distinct(self):
        events = build_timeline([_distinct_entry()])
        assert len(events) == 4
        for event in events:
            assert str(event.macb).count(".") == 3

    def test_entries_never_merged(self):
        t = utc(2020, 1, 1)
        a = make_entry(name="a", atime=t, mtime=t, ctime=t, crtime=t)
        b = make_entry(name="b", atime=t, mtime=t, ctime=t, crtime=t)
        events = build_timeline([a, b])
        assert [e.filename for e in events] == ["a", "b"]

    def test_copies_entry_fields(self):
        entry = make_entry(name="/etc/passwd", meta="42", size=9)
        event = build_timeline([entry])[0]
        assert (event.meta, event.size, event.filename) == ("42", 9, "/etc/passwd")

    def test_filter_inclusive_end(self):
        date_filter = DateFilter(date(2020, 1, 1), date(2020, 1, 31))
        entry = make_entry(
            mtime=utc(2020, 1, 31, 23, 59, 59),
            atime=utc(2020, 2, 1, 0, 0, 0),
            ctime=utc(2020, 1, 31, 23, 59, 59),
            crtime=utc(2019, 12, 31, 23, 59, 59),
        )
        events = entry_events(entry, date_filter)
        assert len(events) == 1
        assert events[0].timestamp == utc(2020, 1, 31, 23, 59, 59)
        assert str(events[0].macb) == "m.c."

    def test_filter_keeps_other_entries(self):
        date_filter = DateFilter(date(2020, 1, 2), date(2020, 1, 3))
        events = build_timeline([_distinct_entry("x"), _distinct_entry("y")], date_filter)
        assert [(e.filename, str(e.macb)) for e in events] == [
            ("x", ".a.."), ("x", "..c."), ("y", ".a.."), ("y", "..c."),
        ]

    def test_no_filter_keeps_all(self):
        assert len(build_timeline([_distinct_entry()], None)) == 4

    def test_empty(self):
        assert build_timeline([]) == []


class TestSortTimeline:
    def test_orders_by_timestamp_then_filename(self):
        events = build_timeline([_distinct_entry("b"), _distinct_entry("a")])
        sort_timeline(events)
        keys = [(e.timestamp, e.filename) for e in events]
        assert keys == sorted(keys)
        for e1, e2 in zip(events, events[1:]):
            assert e1.timestamp < e2.timestamp or (
                e1.timestamp == e2.timestamp and e1.filename <= e2.filename
            )

    def test_macb_meta_size_not_in_key(self):
        t = utc(2020, 1, 1)
        events = [
            TimelineEvent(t, MACB_ALL, "9", 9, "same"),
            TimelineEvent(t, MACB.MODIFIED, "1", 1, "same"),
        ]
        sort_timeline(events)
        assert [e.meta for e in events] == ["9", "1"]

    def test_codepoint_order(self):
        t = utc(2020, 1, 1)
        events = [
            TimelineEvent(t, MACB_ALL, "m", 0, "a"),
            TimelineEvent(t, MACB_ALL, "m", 0, "Z"),
        ]
        sort_timeline(events)
        assert [e.filename for e in events] == ["Z", "a"]

    def test_negative_timestamps_first(self):
        early = make_entry(name="z", atime=utc(1969, 12, 31), mtime=utc(1969, 12, 31),
                           ctime=utc(1969, 12, 31), crtime=utc(1969, 12, 31))
        late = make_entry(name="a", atime=utc(2000, 1, 1), mtime=utc(2000, 1, 1),
                          ctime=utc(2000, 1, 1), crtime=utc(2000, 1, 1))
        events = build_timeline([late, early])
        sort_timeline(events)
        assert [e.filename for e in events] == ["z", "a"]
