"""Shared helpers: content hashing and UTC timestamps."""

from kruskalmst.utils.hashing import (
    calculate_file_digest,
    calculate_file_sha256,
    format_sha256,
)
from kruskalmst.utils.timestamps import get_iso_timestamp

__all__ = [
    "get_iso_timestamp",
    "calculate_file_sha256",
    "calculate_file_digest",
    "format_sha256",
]
