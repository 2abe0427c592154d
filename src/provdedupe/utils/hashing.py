"""Hashing utilities for provdedupe."""

import hashlib
from pathlib import Path

__all__ = [
    "format_sha256",
    "calculate_file_sha256",
    "calculate_bytes_sha256",
    "short_sha1",
]


def format_sha256(hex_digest: str) -> str:
    """Format SHA256 hash with standard prefix."""
    return f"sha256:{hex_digest}"


def calculate_file_sha256(path: Path) -> str:
    """Calculate SHA256 hash of file contents from file path.

    Parameters
    ----------
    path : Path
        Path to file.

    Returns
    -------
    str
        SHA256 hash with "sha256:" prefix.

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


def calculate_bytes_sha256(data: bytes) -> str:
    """Calculate SHA256 hash of in-memory bytes, with "sha256:" prefix."""
    return format_sha256(hashlib.sha256(data).hexdigest())


def short_sha1(text: str, length: int = 12) -> str:
    """Return the first ``length`` lowercase hex chars of SHA-1 over UTF-8 text.

    Parameters
    ----------
    text : str
        Input text.
    length : int, optional
        Number of hex characters to keep, by default 12.

    Returns
    -------
    str
        Truncated hexadecimal digest.
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    return hashlib.sha1(text.encode("utf-8")).hexdigest()[:length]
