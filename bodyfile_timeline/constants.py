"""
Constants for Bodyfile Timeline.

Bodyfile layout, CSV output layout and user-facing messages.
See https://wiki.sleuthkit.org/index.php?title=Body_file for the input format.
"""

# MD5|name|inode|mode_as_string|UID|GID|size|atime|mtime|ctime|crtime
BODYFILE_HEADERS = (
    "md5",
    "name",
    "inode",
    "mode_as_string",
    "uid",
    "gid",
    "size",
    "atime",
    "mtime",
    "ctime",
    "crtime",
)
BODYFILE_DELIMITER = "|"

CSV_HEADERS = ("Datetime", "MACB", "Meta", "Size", "FileName")
CSV_LINE_TERMINATOR = "\n"

DATE_FORMAT = "%Y-%m-%d"
DATE_RANGE_SEPARATOR = ".."

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

FILTER_FORMAT_MESSAGE = (
    "Date filter format: YYYY-MM-DD..YYYY-MM-DD (time not handled yet)"
)
DATE_FORMAT_MESSAGE = "Dates must be in the YYYY-MM-DD format"
