"""Installation of the client jar, the libraries and the logging configuration."""

from __future__ import annotations

import logging
from contextlib import aclosing

import httpx

from .config import Config
from .download import download_file_check
from .errors import DataFormatError
from .event import EventType, LibraryInstallationUpdate, Progress
from .hashing import decode_sha1
from .models.assets import _download_all
from .models.version_data import VersionData

log = logging.getLogger(__name__)


async def install_client(config: Config, version_data: VersionData) -> None:
    """Download the client jar, unless the version data lists no downloads."""
    downloads = version_data.downloads
    if downloads is None:
        log.debug("The version data does not contain download information. Skipping download.")
        return

    log.debug("Building download for client")
    sha1 = decode_sha1(downloads.client.sha1)
    config.emit(EventType.DOWNLOAD_CLIENT, "Downloading client jar")
    async with httpx.AsyncClient() as client:
        await download_file_check(
            client, downloads.client.url, config.version_jar_path(), sha1
        )


async def install_libraries(config: Config, version_data: VersionData) -> None:
    """Download every library the current machine needs."""
    libraries_path = config.libraries_path()
    downloads = [
        library.build_download(libraries_path) for library in version_data.needed_libraries()
    ]
    total = len(downloads)
    count = 0

    async with aclosing(_download_all(downloads)) as finished:
        async for url in finished:
            count += 1
            config.emit(
                EventType.LIBRARIES,
                "Downloading libraries",
                Progress(count, total, f"Downloaded library {url}"),
                LibraryInstallationUpdate.DOWNLOADING,
            )


async def install_log_config(config: Config, version_data: VersionData) -> None:
    """Download the logging configuration file, if the version has one."""
    logging_info = version_data.logging
    if logging_info is None:
        log.debug("The version data doesn't contain logging information. Skipping download.")
        return

    log.debug("Building download for log config")
    file = logging_info.client.file
    if file.id is None:
        raise DataFormatError("Logging Info has no ID")
    sha1 = decode_sha1(file.sha1)
    config.emit(EventType.DOWNLOAD_LOG_CONFIG, "Downloading log config")
    async with httpx.AsyncClient() as client:
        await download_file_check(client, file.url, config.log_configs_path() / file.id, sha1)