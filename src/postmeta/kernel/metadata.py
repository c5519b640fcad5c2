"""Pydantic models for the PoST initialization metadata record."""

from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from .hexbytes import HexBytes

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
INT64_MAX = 2**63 - 1

NonNegInt64 = Annotated[int, Field(strict=True, ge=0, le=INT64_MAX)]
Uint32 = Annotated[int, Field(strict=True, ge=0, le=UINT32_MAX)]
Uint64 = Annotated[int, Field(strict=True, ge=0, le=UINT64_MAX)]


class ScryptParamsError(ValueError):
    """Raised when a scrypt tuning parameter is out of range."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class ScryptParams(BaseModel):
    """Cost (N), block size (R) and parallelization (P) of scrypt labeling."""
    n: Uint64 = Field(alias="N")
    r: Uint64 = Field(alias="R")
    p: Uint64 = Field(alias="P")

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Instance method; replaces the deprecated BaseModel.validate classmethod
    def validate(self) -> None:
        """Check N, R and P in that order; raise ScryptParamsError for the first zero."""
        for field, value in (("N", self.n), ("R", self.r), ("P", self.p)):
            if value == 0:
                raise ScryptParamsError(field, f"scrypt parameter {field} cannot be 0")


# (attribute, document key) of fields left out of the document when absent
_OPTIONAL_KEYS = (
    ("nonce", "Nonce"),
    ("nonce_value", "NonceValue"),
    ("last_position", "LastPosition"),
)


class PostMetadata(BaseModel):
    """Data associated with a PoST init run, persisted in the data directory.

    Nonce, NonceValue and LastPosition use None for "absent"; a zero Nonce is
    a real value and is written. Version is the exception: 0 means absent and
    is never written.
    """
    version: NonNegInt64 = Field(0, alias="Version")

    node_id: HexBytes = Field(alias="NodeId")
    commitment_atx_id: HexBytes = Field(alias="CommitmentAtxId")

    labels_per_unit: Uint64 = Field(alias="LabelsPerUnit")
    num_units: Uint32 = Field(alias="NumUnits")
    max_file_size: Uint64 = Field(alias="MaxFileSize")
    scrypt: ScryptParams = Field(alias="Scrypt")

    nonce: Optional[Uint64] = Field(None, alias="Nonce")
    nonce_value: Optional[HexBytes] = Field(None, alias="NonceValue")
    last_position: Optional[Uint64] = Field(None, alias="LastPosition")

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",  # documents from newer writers may carry more keys
    )

    @field_validator("nonce_value")
    @classmethod
    def empty_nonce_value_is_absent(cls, v: Optional[bytes]) -> Optional[bytes]:
        """Empty NonceValue is never written, so it is held as absent."""
        return v if v else None

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler) -> Dict[str, Any]:
        data = handler(self)
        if self.version == 0:
            data.pop("Version", None)
            data.pop("version", None)
        for attr, key in _OPTIONAL_KEYS:
            if getattr(self, attr) is None:
                data.pop(key, None)
                data.pop(attr, None)
        return data

    def to_document(self) -> Dict[str, Any]:
        """Return the JSON-ready dict written to disk (document keys, hex bytes)."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_document(cls, obj: Dict[str, Any]) -> "PostMetadata":
        """Build a record from a parsed document dict (raises pydantic.ValidationError)."""
        return cls.model_validate(obj)
