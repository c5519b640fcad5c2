"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed postmeta package.
"""

import pytest

from postmeta.kernel.metadata import PostMetadata, ScryptParams


@pytest.fixture
def s1_metadata():
    """Record with every optional field absent (Version 1)."""
    return PostMetadata(
        version=1,
        node_id=bytes([0xAB, 0xCD]),
        commitment_atx_id=bytes([0x01]),
        labels_per_unit=4096,
        num_units=2,
        max_file_size=2147483648,
        scrypt=ScryptParams(n=8192, r=1, p=1),
    )


@pytest.fixture
def full_metadata(s1_metadata):
    """S1 record with nonce, nonce value and resume position filled in."""
    return s1_metadata.model_copy(
        update={
            "nonce": 7,
            "nonce_value": bytes([0xDE, 0xAD, 0xBE, 0xEF]),
            "last_position": 8191,
        }
    )


@pytest.fixture
def write_document(tmp_path):
    """Write raw document text into a fresh data directory and return the directory."""
    def _write(text: str):
        data_dir = tmp_path / "postdata"
        data_dir.mkdir(exist_ok=True)
        (data_dir / "postdata_metadata.json").write_text(text, encoding="utf-8")
        return data_dir
    return _write
