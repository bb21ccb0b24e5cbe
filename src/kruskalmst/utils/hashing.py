"""SHA-256 digests for input files and written artifacts."""

import hashlib
from pathlib import Path

__all__ = [
    "format_sha256",
    "calculate_file_sha256",
    "calculate_file_digest",
]


def format_sha256(hex_digest: str) -> str:
    """Prefix a hex digest with ``sha256:``."""
    return f"sha256:{hex_digest}"


def calculate_file_sha256(path: Path) -> str:
    """Hash a file on disk in 8 KiB chunks.

    Parameters
    ----------
    path : Path
        Path to file.

    Returns
    -------
    str
        Digest in the form ``sha256:<hex>``.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    sha256_hash = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha256_hash.update(chunk)

    return format_sha256(sha256_hash.hexdigest())


def calculate_file_digest(file_bytes: bytes) -> str:
    """Hash file content that is already in memory.

    Parameters
    ----------
    file_bytes : bytes
        Raw file content.

    Returns
    -------
    str
        Digest in the form ``sha256:<hex>``.
    """
    return format_sha256(hashlib.sha256(file_bytes).hexdigest())
