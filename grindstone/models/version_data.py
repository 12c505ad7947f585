"""Everything needed to install and launch one game version."""

from __future__ import annotations

import asyncio
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx

from ..errors import DataFormatError, DownloadError
from .arguments import Arguments
from .files import (
    AssetIndexInfo,
    Downloads,
    JavaVersion,
    LoggingInfo,
    ReleaseType,
    _field,
    _int,
    _list,
    _mapping,
    _opt_str,
    _str,
)
from .library import Library

if TYPE_CHECKING:
    from ..config import Config


def _parse_time(value: Any, key: str) -> datetime:
    text = _str(value, key)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise DataFormatError(f"field {key!r} is not an RFC 3339 time: {text!r}") from exc
    if parsed.tzinfo is None:
        raise DataFormatError(f"field {key!r} has no UTC offset: {text!r}")
    return parsed


def _format_time(value: datetime) -> str:
    text = value.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _write_synced(path: Path, payload: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as handle:
        handle.write(payload)
        handle.flush()
        os.fsync(handle.fileno())


@dataclass(kw_only=True)
class VersionData:
    """Install and launch information of a game version."""

    arguments: Arguments | None = None
    asset_index: AssetIndexInfo
    assets: str
    compliance_level: int
    downloads: Downloads | None = None
    id: str
    java_version: JavaVersion
    libraries: list[Library]
    logging: LoggingInfo | None = None
    main_class: str
    minecraft_arguments: str | None = None
    minimum_launcher_version: int
    release_time: datetime
    time: datetime
    release_type: ReleaseType

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VersionData:
        data = _mapping(data, "version data")
        arguments = data.get("arguments")
        downloads = data.get("downloads")
        logging_info = data.get("logging")
        return cls(
            arguments=None if arguments is None else Arguments.from_dict(arguments),
            asset_index=AssetIndexInfo.from_dict(_field(data, "asset_index", "assetIndex")),
            assets=_str(_field(data, "assets"), "assets"),
            compliance_level=_int(
                _field(data, "compliance_level", "complianceLevel"), "complianceLevel"
            ),
            downloads=None if downloads is None else Downloads.from_dict(downloads),
            id=_str(_field(data, "id"), "id"),
            java_version=JavaVersion.from_dict(_field(data, "java_version", "javaVersion")),
            libraries=[
                Library.from_dict(lib) for lib in _list(_field(data, "libraries"), "libraries")
            ],
            logging=None if logging_info is None else LoggingInfo.from_dict(logging_info),
            main_class=_str(_field(data, "main_class", "mainClass"), "mainClass"),
            minecraft_arguments=_opt_str(
                _field(data, "minecraft_arguments", "minecraftArguments", default=None),
                "minecraftArguments",
            ),
            minimum_launcher_version=_int(
                _field(data, "minimum_launcher_version", "minimumLauncherVersion"),
                "minimumLauncherVersion",
            ),
            release_time=_parse_time(
                _field(data, "release_time", "releaseTime"), "releaseTime"
            ),
            time=_parse_time(_field(data, "time"), "time"),
            release_type=ReleaseType.parse(_field(data, "type")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "arguments": None if self.arguments is None else self.arguments.to_dict(),
            "asset_index": self.asset_index.to_dict(),
            "assets": self.assets,
            "compliance_level": self.compliance_level,
            "downloads": None if self.downloads is None else self.downloads.to_dict(),
            "id": self.id,
            "java_version": self.java_version.to_dict(),
            "libraries": [lib.to_dict() for lib in self.libraries],
            "logging": None if self.logging is None else self.logging.to_dict(),
            "main_class": self.main_class,
            "minecraft_arguments": self.minecraft_arguments,
            "minimum_launcher_version": self.minimum_launcher_version,
            "release_time": _format_time(self.release_time),
            "time": _format_time(self.time),
            "type": self.release_type.value,
        }

    def needed_libraries(self) -> list[Library]:
        """Libraries whose rules allow them on this machine."""
        return [library for library in self.libraries if library.check_use()]

    @classmethod
    async def fetch(cls, url: str) -> VersionData:
        """Download and parse the version data JSON at ``url``."""
        async with httpx.AsyncClient() as client:
            try:
                response = await client.get(str(url), follow_redirects=True)
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise DownloadError(str(exc)) from exc
        try:
            data = response.json()
        except ValueError as exc:
            raise DataFormatError(f"version data is not valid JSON: {exc}") from exc
        return cls.from_dict(data)

    async def save(self, config: Config) -> None:
        """Write the version data JSON where the configuration expects it."""
        payload = json.dumps(self.to_dict(), indent=2).encode("utf-8")
        await asyncio.to_thread(_write_synced, config.version_data_path(), payload)

    @classmethod
    def read(cls, config: Config) -> VersionData:
        """Read the saved version data JSON; it is not downloaded if missing."""
        with open(config.version_data_path(), "rb") as handle:
            try:
                data = json.load(handle)
            except ValueError as exc:
                raise DataFormatError(f"version data is not valid JSON: {exc}") from exc
        return cls.from_dict(data)