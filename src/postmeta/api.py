"""Public API for postmeta.

Callers (the PoST init pipeline, tooling) should import from here or from the
package root instead of reaching into kernel or _internal modules.
"""

from typing import Any, Dict

from postmeta.codes import IOStage
from postmeta.kernel.hexbytes import MalformedHexError, decode_hex, encode_hex
from postmeta.kernel.metadata import PostMetadata, ScryptParams, ScryptParamsError
from postmeta.store import (
    METADATA_FILE_NAME,
    MetadataIOError,
    MetadataMissingError,
    MetadataSerializationError,
    PostMetadataError,
    load_metadata,
    save_metadata,
)


def metadata_json_schema() -> Dict[str, Any]:
    """JSON Schema of the metadata document, keyed by document field names."""
    return PostMetadata.model_json_schema(by_alias=True, mode="validation")


__all__ = [
    "METADATA_FILE_NAME",
    "IOStage",
    "MalformedHexError",
    "MetadataIOError",
    "MetadataMissingError",
    "MetadataSerializationError",
    "PostMetadata",
    "PostMetadataError",
    "ScryptParams",
    "ScryptParamsError",
    "decode_hex",
    "encode_hex",
    "load_metadata",
    "metadata_json_schema",
    "save_metadata",
]
