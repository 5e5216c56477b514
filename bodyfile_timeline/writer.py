"""
CSV output for Bodyfile Timeline.
"""

import csv
import sys
from typing import Iterable, TextIO

from .constants import CSV_HEADERS, CSV_LINE_TERMINATOR
from .models import TimelineEvent


def write_csv(events: Iterable[TimelineEvent], destination: TextIO) -> int:
    """
    Write timeline events as CSV to an open text stream.

    A header row comes first. A row that fails to be written is reported
    on stderr and skipped; the following rows are still written. The
    destination is flushed before returning.

    Args:
        events: Events to write, in output order.
        destination: Writable text stream (file opened with newline="",
                     or sys.stdout).

    Returns:
        Number of event rows written (header excluded).

    Raises:
        OSError: If the header cannot be written or the flush fails.
    """
    writer = csv.writer(destination, lineterminator=CSV_LINE_TERMINATOR)
    writer.writerow(CSV_HEADERS)

    count = 0
    for event in events:
        try:
            writer.writerow(event.to_row())
        except (csv.Error, OSError, UnicodeEncodeError) as e:
            print(f"[ERROR] Error writing CSV result: {e}", file=sys.stderr)
            continue
        count += 1

    destination.flush()
    return count
