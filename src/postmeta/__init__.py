"""postmeta: PoST data directory metadata, saved and loaded as a JSON document."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("postmeta")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from postmeta.api import (
    METADATA_FILE_NAME,
    IOStage,
    MalformedHexError,
    MetadataIOError,
    MetadataMissingError,
    MetadataSerializationError,
    PostMetadata,
    PostMetadataError,
    ScryptParams,
    ScryptParamsError,
    load_metadata,
    metadata_json_schema,
    save_metadata,
)

__all__ = [
    "__version__",
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
    "load_metadata",
    "metadata_json_schema",
    "save_metadata",
]
