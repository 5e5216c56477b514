"""
Bodyfile record parser.

This module contains the BodyFileParser class that reads pipe-delimited
bodyfile lines into BodyFileEntry objects, skipping and reporting the
records it cannot decode.
"""

import csv
import sys
from typing import Iterable

from .constants import BODYFILE_DELIMITER, BODYFILE_HEADERS
from .models import BodyFileEntry
from .utils import parse_epoch, parse_size


class RecordParseError(ValueError):
    """Raised when a single bodyfile record cannot be decoded."""


class BodyFileParser:
    """
    Parser for bodyfile records.

    The input is never expected to carry a header row: every line is a
    record and the fixed 11-column bodyfile header is always used.

    Example:
        >>> parser = BodyFileParser()
        >>> with open("body.txt", newline="") as f:
        ...     entries = parser.parse(f)
        >>> parser.errors
        0
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the parser.

        Args:
            verbose: Enable verbose output for debugging.
        """
        self.verbose = verbose
        self.errors = 0

    def _log(self, message: str) -> None:
        """Log a message if verbose mode is enabled."""
        if self.verbose:
            print(f"[INFO] {message}", file=sys.stderr)

    def _error(self, message: str) -> None:
        print(f"[ERROR] {message}", file=sys.stderr)

    def parse(self, lines: Iterable[str]) -> list[BodyFileEntry]:
        """
        Parse bodyfile lines into entries, in input order.

        Records that fail to decode are reported on stderr and skipped;
        they never interrupt the batch. The number of skipped records
        is kept in ``errors``.

        Args:
            lines: An open text stream or any iterable of lines.

        Returns:
            List of successfully parsed entries.
        """
        reader = csv.reader(lines, delimiter=BODYFILE_DELIMITER)
        entries = []

        while True:
            try:
                row = next(reader)
            except StopIteration:
                break
            except csv.Error as e:
                self._report(reader.line_num, e)
                continue

            if not row:
                continue

            try:
                entries.append(self.parse_record(row))
            except RecordParseError as e:
                self._report(reader.line_num, e)

        self._log(f"Parsed {len(entries)} records ({self.errors} skipped)")
        return entries

    def _report(self, line_num: int, error: Exception) -> None:
        self.errors += 1
        self._error(f"Error deserializing record on line {line_num} => {error}")

    def parse_record(self, row: list[str]) -> BodyFileEntry:
        """
        Decode one split bodyfile record.

        Only ``name``, ``inode``, ``size`` and the four time columns are
        used; ``md5``, ``mode_as_string``, ``uid`` and ``gid`` are ignored.

        Args:
            row: The record's fields, already split on the delimiter.

        Returns:
            The decoded BodyFileEntry.

        Raises:
            RecordParseError: On a wrong field count, an invalid number or
                              undecodable text.
        """
        if len(row) != len(BODYFILE_HEADERS):
            raise RecordParseError(
                f"found record with {len(row)} fields, "
                f"but the header has {len(BODYFILE_HEADERS)} fields"
            )

        record = dict(zip(BODYFILE_HEADERS, row))

        try:
            return BodyFileEntry(
                name=_text_field(record, "name"),
                meta=_text_field(record, "inode"),
                size=parse_size(record["size"]),
                atime=parse_epoch(record["atime"]),
                mtime=parse_epoch(record["mtime"]),
                ctime=parse_epoch(record["ctime"]),
                crtime=parse_epoch(record["crtime"]),
            )
        except ValueError as e:
            raise RecordParseError(str(e)) from e


def _text_field(record: dict[str, str], field: str) -> str:
    """Return a text column, rejecting bytes that were not valid UTF-8."""
    value = record[field]
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError(f"field {field!r} is not valid UTF-8") from None
    return value
