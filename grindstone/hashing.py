"""SHA-1 helpers for checking downloaded files."""

from __future__ import annotations

import hashlib
import os
import re

from .errors import InvalidChecksumError

_HEX = re.compile(r"[0-9a-fA-F]*")


def sha1_of_file(path: str | os.PathLike[str]) -> bytes:
    """Return the raw SHA-1 digest of a file's contents."""
    hasher = hashlib.sha1()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(1 << 16), b""):
            hasher.update(chunk)
    return hasher.digest()


def decode_sha1(text: str) -> bytes:
    """Decode a hexadecimal checksum, raising InvalidChecksumError if malformed."""
    if _HEX.fullmatch(text) is None:
        raise InvalidChecksumError("invalid character")
    if len(text) % 2:
        raise InvalidChecksumError("odd number of digits")
    return bytes.fromhex(text)