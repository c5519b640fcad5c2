"""Document text serialization for the metadata file.

Single place that turns a JSON-ready dict into the bytes written to disk.
"""

import json
from typing import Any


def document_dumps(obj: Any) -> str:
    """
    Serialize a metadata document.

    Rules:
    - UTF-8 (no ASCII escaping)
    - Keys kept in declared order, not sorted
    - Compact separators (",", ":")
    - No trailing newline

    Args:
        obj: JSON-ready object

    Returns:
        Document text
    """
    return json.dumps(
        obj,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
