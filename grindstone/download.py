"""Downloading files, optionally checked against a SHA-1 checksum."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import httpx

from .errors import ChecksumMismatchError, DownloadError
from .hashing import sha1_of_file

log = logging.getLogger(__name__)


@dataclass
class Download:
    """A file to fetch and where to put it."""

    url: str
    file: Path
    sha1: bytes | None = None


@dataclass
class DownloadProgress:
    """Progress of an ongoing download."""

    url: str
    file: Path
    current_file: int
    total_files: int
    downloaded_bytes: int
    total_bytes: int


def _write_synced(dest: Path, content: bytes) -> None:
    with open(dest, "wb") as handle:
        handle.write(content)
        handle.flush()
        os.fsync(handle.fileno())


async def download_file(
    client: httpx.AsyncClient, url: str, dest: str | os.PathLike[str]
) -> None:
    """Fetch ``url`` into ``dest``, creating parent folders."""
    dest = Path(dest)
    log.debug("Creating parent folder")
    dest.parent.mkdir(parents=True, exist_ok=True)

    url = str(url)
    log.debug("Downloading file: %s", url)
    try:
        response = await client.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise DownloadError(str(exc)) from exc

    await asyncio.to_thread(_write_synced, dest, response.content)


async def download_file_check(
    client: httpx.AsyncClient,
    url: str,
    dest: str | os.PathLike[str],
    remote_sha: bytes | None = None,
) -> str:
    """Download ``url`` unless ``dest`` already holds the expected content.

    An existing file is kept when no checksum is given or when it matches.
    Returns the URL; raises ChecksumMismatchError if the fetched file is wrong.
    """
    url = str(url)
    dest = Path(dest)
    expected = bytes(remote_sha) if remote_sha is not None else None
    log.debug("Checked download of file: %s", url)

    if dest.exists():
        log.debug("File already exists")
        if expected is None:
            return url
        if sha1_of_file(dest) == expected:
            log.debug("Existing file is correct")
            return url
        log.debug("Existing file does not match checksum")

    await download_file(client, url, dest)

    if expected is not None and sha1_of_file(dest) != expected:
        raise ChecksumMismatchError()
    return url