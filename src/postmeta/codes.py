"""Stage codes attached to MetadataIOError.

These constants prevent stringly-typed stage checks in caller code.
"""

from enum import Enum


class IOStage(str, Enum):
    """Filesystem stage at which a metadata operation failed."""

    DIR_CREATE = "DIR_CREATE"
    READ = "READ"
    WRITE = "WRITE"
