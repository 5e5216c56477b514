"""Shared fixtures for bodyfile timeline tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from bodyfile_timeline.models import BodyFileEntry

MFT_LINE = "0|c:/$MFT|0-128-6|r/rrwxrwxrwx|0|0|1835008|1595291898|1595291898|1595291898|1595291898"


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def body_line(
    name="c:/file.txt",
    meta="0-128-6",
    size=1024,
    atime=0,
    mtime=0,
    ctime=0,
    crtime=0,
) -> str:
    return f"0|{name}|{meta}|r/rrwxrwxrwx|0|0|{size}|{atime}|{mtime}|{ctime}|{crtime}"


def make_entry(name="c:/file.txt", meta="0-128-6", size=1024, **times) -> BodyFileEntry:
    epoch = utc(1970, 1, 1)
    return BodyFileEntry(
        name=name,
        meta=meta,
        size=size,
        atime=times.get("atime", epoch),
        mtime=times.get("mtime", epoch),
        ctime=times.get("ctime", epoch),
        crtime=times.get("crtime", epoch),
    )


@pytest.fixture
def write_bodyfile(tmp_path):
    """Write lines to a bodyfile in tmp_path and return its path."""
    def _write(lines, name="body.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
