"""Save and load the metadata document of a PoST data directory.

The document lives at a fixed name inside the data directory and is written
and read whole. Writes are not atomic: a crash mid-write can leave a partial
file, which later loads report as a serialization failure.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from postmeta.codes import IOStage
from postmeta.kernel.metadata import PostMetadata, ScryptParams
from postmeta._internal.json_document import document_dumps

logger = logging.getLogger(__name__)

METADATA_FILE_NAME = "postdata_metadata.json"

OWNER_READ_WRITE_EXEC = 0o700
OWNER_READ_WRITE = 0o600


class PostMetadataError(Exception):
    """Base class for errors raised by the metadata file codec."""


class MetadataMissingError(PostMetadataError):
    """Raised by load_metadata when the directory holds no metadata file."""

    def __init__(self, path: Path):
        super().__init__(f"metadata file is missing: {path}")
        self.path = path


class MetadataIOError(PostMetadataError):
    """Filesystem failure other than a missing metadata file."""

    def __init__(self, stage: IOStage, path: Path, message: str):
        super().__init__(message)
        self.stage = stage
        self.path = path


class MetadataSerializationError(PostMetadataError, ValueError):
    """Raised when a record cannot be rendered or a document cannot be parsed."""


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def _make_dirs(path: Path) -> None:
    """Create path and any missing parents, each with owner-only permissions."""
    missing = []
    current = path
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent

    for directory in reversed(missing):
        try:
            directory.mkdir(mode=OWNER_READ_WRITE_EXEC)
        except FileExistsError:
            # Raced with another creator; fine as long as it is a directory
            pass

    if not path.is_dir():
        raise NotADirectoryError(f"not a directory: {path}")


def save_metadata(directory: Union[str, os.PathLike, Path], metadata: PostMetadata) -> None:
    """
    Write metadata to <directory>/postdata_metadata.json.

    The directory (and missing parents) is created with mode 0700; the file is
    created with mode 0600 and any prior content is replaced.

    Args:
        directory: PoST data directory
        metadata: Record to persist

    Raises:
        MetadataIOError: Directory creation (stage DIR_CREATE) or write (stage WRITE) failed
        MetadataSerializationError: The record cannot be rendered as a document
    """
    dir_path = _normalize_path(directory)
    try:
        _make_dirs(dir_path)
    except OSError as e:
        raise MetadataIOError(IOStage.DIR_CREATE, dir_path, f"dir creation failure: {e}") from e

    try:
        data = document_dumps(metadata.to_document()).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise MetadataSerializationError(f"serialization failure: {e}") from e

    file_path = dir_path / METADATA_FILE_NAME
    try:
        fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OWNER_READ_WRITE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise MetadataIOError(IOStage.WRITE, file_path, f"write to disk failure: {e}") from e

    logger.debug("Saved PoST metadata to %s (%d bytes)", file_path, len(data))


def load_metadata(
    directory: Union[str, os.PathLike, Path],
    unknown_fields: str = "ignore",
) -> PostMetadata:
    """
    Read <directory>/postdata_metadata.json back into a record.

    Args:
        directory: PoST data directory
        unknown_fields: "ignore" to skip keys this version does not know, or
            "reject" to fail on them (top level and inside Scrypt)

    Returns:
        The decoded PostMetadata

    Raises:
        MetadataMissingError: The metadata file does not exist
        MetadataIOError: The file exists but cannot be read (stage READ)
        MetadataSerializationError: The document is not a valid metadata record
        ValueError: If unknown_fields is not "ignore" or "reject"
    """
    if unknown_fields not in ("ignore", "reject"):
        raise ValueError(f"unknown_fields must be 'ignore' or 'reject', got {unknown_fields!r}")

    file_path = _normalize_path(directory) / METADATA_FILE_NAME
    try:
        data = file_path.read_bytes()
    except FileNotFoundError as e:
        raise MetadataMissingError(file_path) from e
    except OSError as e:
        raise MetadataIOError(IOStage.READ, file_path, f"read file failure: {e}") from e

    logger.debug("Read PoST metadata from %s (%d bytes)", file_path, len(data))

    try:
        obj = json.loads(data)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise MetadataSerializationError(f"invalid metadata document: {e}") from e

    if unknown_fields == "reject" and isinstance(obj, dict):
        unknown = _unknown_keys(obj)
        if unknown:
            raise MetadataSerializationError(f"unknown fields in metadata document: {unknown}")

    try:
        return PostMetadata.from_document(obj)
    except ValidationError as e:
        raise MetadataSerializationError(f"invalid metadata document: {e}") from e


def _unknown_keys(obj: dict) -> List[str]:
    known = {field.alias for field in PostMetadata.model_fields.values()}
    unknown = [k for k in obj if k not in known]

    scrypt = obj.get("Scrypt")
    if isinstance(scrypt, dict):
        known_scrypt = {field.alias for field in ScryptParams.model_fields.values()}
        unknown.extend(f"Scrypt.{k}" for k in scrypt if k not in known_scrypt)
    return sorted(unknown)
