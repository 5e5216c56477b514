"""
Core bodyfile functionality for Bodyfile Timeline.

This module contains the BodyFile class that runs one batch:
parsing a bodyfile, building (and optionally sorting) its MACB
timeline and writing the timeline as CSV.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from .models import BodyFileEntry, DateFilter, TimelineEvent
from .parser import BodyFileParser
from .timeline import build_timeline, sort_timeline
from .writer import write_csv

PathLike = Union[str, Path]


class BodyFile:
    """
    A parsed bodyfile together with its timeline.

    Entries are kept alongside the timeline once it is built, so both
    counts stay available.

    Example:
        >>> bodyfile = BodyFile.build("body.txt", sort=True)
        >>> bodyfile.file_len(), bodyfile.datetime_len()
        (1278, 3604)
        >>> bodyfile.generate_csv("timeline.csv")
        3604
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.entries: list[BodyFileEntry] = []
        self.timeline: list[TimelineEvent] = []
        self.parse_errors = 0

    def _log(self, message: str) -> None:
        """Log a message if verbose mode is enabled."""
        if self.verbose:
            print(f"[INFO] {message}", file=sys.stderr)

    @classmethod
    def build(
        cls,
        path: PathLike,
        date_filter: Optional[DateFilter] = None,
        sort: bool = False,
        verbose: bool = False,
    ) -> "BodyFile":
        """
        Parse a bodyfile and build its timeline.

        Args:
            path: Path to the bodyfile. It must not carry a header row.
            date_filter: Optional inclusive date range for the timeline.
            sort: Sort the timeline by timestamp, then filename.
            verbose: Enable verbose output for debugging.

        Returns:
            The populated BodyFile.

        Raises:
            OSError: If the bodyfile cannot be opened or read.
        """
        bodyfile = cls(verbose=verbose)
        bodyfile.load(path)
        bodyfile.build_timeline(date_filter)
        if sort:
            bodyfile.sort_timeline()
        return bodyfile

    def load(self, path: PathLike) -> int:
        """
        Read and parse the entries of a bodyfile.

        Undecodable bytes are kept as surrogates so the parser can reject
        the affected record alone.

        Returns:
            Number of entries parsed.
        """
        resolved = Path(path).expanduser()
        self._log(f"Reading bodyfile: {resolved}")

        parser = BodyFileParser(verbose=self.verbose)
        with open(resolved, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            self.entries.extend(parser.parse(f))

        self.parse_errors += parser.errors
        return len(self.entries)

    def build_timeline(self, date_filter: Optional[DateFilter] = None) -> int:
        """
        Build timeline events from the loaded entries.

        Returns:
            Number of timeline events.
        """
        if date_filter is not None:
            self._log(f"Filtering timeline on {date_filter}")

        self.timeline = build_timeline(self.entries, date_filter)
        self._log(
            f"Built {len(self.timeline)} timeline events "
            f"from {len(self.entries)} entries"
        )
        return len(self.timeline)

    def sort_timeline(self) -> None:
        """Sort the timeline by timestamp, then filename."""
        sort_timeline(self.timeline)

    def file_len(self) -> int:
        """Number of bodyfile entries read."""
        return len(self.entries)

    def datetime_len(self) -> int:
        """Number of timeline events."""
        return len(self.timeline)

    def generate_csv(self, output: Optional[PathLike] = None) -> int:
        """
        Write the timeline as CSV.

        Args:
            output: File to create (truncated if it exists). If None,
                    the CSV goes to standard output.

        Returns:
            Number of rows written, header excluded.

        Raises:
            OSError: If the output file cannot be created or written.
        """
        if output is None:
            return write_csv(self.timeline, sys.stdout)

        output_path = Path(output).expanduser()
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            return write_csv(self.timeline, f)
