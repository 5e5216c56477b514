"""
Bodyfile Timeline

A CLI tool that turns a bodyfile (mactime input format) into a
MACB timeline written as CSV.

License: MIT
"""

from .models import MACB, BodyFileEntry, DateFilter, TimelineEvent
from .parser import BodyFileParser, RecordParseError
from .timeline import build_timeline, sort_timeline
from .writer import write_csv
from .bodyfile import BodyFile
from .utils import parse_date_filter, parse_epoch

__version__ = "1.0.0"
__all__ = [
    "MACB",
    "BodyFileEntry",
    "DateFilter",
    "TimelineEvent",
    "BodyFileParser",
    "RecordParseError",
    "build_timeline",
    "sort_timeline",
    "write_csv",
    "BodyFile",
    "parse_date_filter",
    "parse_epoch",
]
