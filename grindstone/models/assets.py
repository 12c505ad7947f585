"""The asset index of a version and the installation of its assets."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import AsyncIterator, Iterable, Mapping
from contextlib import aclosing
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx

from ..constants import MAX_PARALLEL_DOWNLOAD, MC_ASSETS_BASE_URL
from ..download import Download, download_file_check
from ..errors import DataFormatError, DownloadError
from ..event import AssetInstallationUpdate, EventType, Progress
from ..hashing import decode_sha1
from .files import AssetIndexInfo, _bool, _field, _int, _mapping, _str

if TYPE_CHECKING:
    from ..config import Config

log = logging.getLogger(__name__)


async def _download_all(downloads: Iterable[Download]) -> AsyncIterator[str]:
    """Run checked downloads concurrently, yielding each URL as it completes.

    At most ``MAX_PARALLEL_DOWNLOAD`` files are fetched at once. The first
    failure propagates and the downloads still running are cancelled.
    """
    semaphore = asyncio.Semaphore(MAX_PARALLEL_DOWNLOAD)
    async with httpx.AsyncClient() as client:

        async def fetch(download: Download) -> str:
            async with semaphore:
                return await download_file_check(
                    client, download.url, download.file, download.sha1
                )

        tasks = [asyncio.create_task(fetch(download)) for download in downloads]
        try:
            for finished in asyncio.as_completed(tasks):
                yield await finished
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)


@dataclass
class AssetInfo:
    """A single asset, identified by the SHA-1 of its content."""

    hash: str
    size: int

    def asset_path(self, assets_path: str | os.PathLike[str]) -> Path:
        """Where the asset is stored below ``assets_path``."""
        return Path(assets_path) / "objects" / self.hash[:2] / self.hash

    @staticmethod
    def resource_path(key: str, minecraft_path: str | os.PathLike[str]) -> Path:
        """Where the asset named ``key`` goes when mapped as a resource."""
        return Path(minecraft_path) / "resources" / key

    def download_url(self) -> str:
        return "/".join([MC_ASSETS_BASE_URL, self.hash[:2], self.hash])

    def build_download(self, assets_path: str | os.PathLike[str]) -> Download:
        """Describe the checked download of this asset into ``assets_path``."""
        return Download(
            url=self.download_url(),
            file=self.asset_path(assets_path),
            sha1=decode_sha1(self.hash),
        )


def _asset_from_dict(data: Any) -> AssetInfo:
    data = _mapping(data, "asset")
    return AssetInfo(
        hash=_str(_field(data, "hash"), "hash"),
        size=_int(_field(data, "size"), "size"),
    )


def _create_symlink(key: str, asset: AssetInfo, config: Config) -> str:
    asset_path = asset.asset_path(config.assets_path())
    resource_path = AssetInfo.resource_path(key, config.dot_minecraft_path())

    log.debug("Creating parent directory for symlink")
    resource_path.parent.mkdir(parents=True, exist_ok=True)

    log.debug("Creating symlink: %s => %s", resource_path, asset_path)
    os.symlink(asset_path, resource_path)
    return asset_path.name


@dataclass
class AssetIndex:
    """All assets of a version, keyed by file name."""

    objects: dict[str, AssetInfo] = field(default_factory=dict)
    map_to_resources: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AssetIndex:
        data = _mapping(data, "asset index")
        objects = _mapping(_field(data, "objects"), "objects")
        return cls(
            objects={
                _str(key, "objects"): _asset_from_dict(value) for key, value in objects.items()
            },
            map_to_resources=_bool(
                _field(data, "map_to_resources", default=False), "map_to_resources"
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "map_to_resources": self.map_to_resources,
            "objects": {
                key: {"hash": asset.hash, "size": asset.size}
                for key, asset in self.objects.items()
            },
        }

    async def install(self, config: Config) -> None:
        """Download every asset and, for old versions, map them as resources."""
        assets_path = config.assets_path()
        downloads = [asset.build_download(assets_path) for asset in self.objects.values()]
        total = len(downloads)
        count = 0

        def report(message: str) -> None:
            config.emit(
                EventType.ASSETS,
                "Downloading assets",
                Progress(count, total, message),
                AssetInstallationUpdate.DOWNLOADING,
            )

        async with aclosing(_download_all(downloads)) as finished:
            async for url in finished:
                count += 1
                report(f"Downloaded asset {url}")

        if self.map_to_resources:
            for key, asset in self.objects.items():
                name = await asyncio.to_thread(_create_symlink, key, asset, config)
                count += 1
                report(f"Symlinked asset {name}")


async def fetch_asset_index(info: AssetIndexInfo) -> AssetIndex:
    """Download and parse the asset index described by ``info``."""
    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(info.url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DownloadError(str(exc)) from exc
    try:
        data = response.json()
    except ValueError as exc:
        raise DataFormatError(f"asset index is not valid JSON: {exc}") from exc
    return AssetIndex.from_dict(data)