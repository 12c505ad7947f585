"""Manifests describing the Java runtimes the game can use."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

import httpx

from ..constants import JAVA_JRE_MANIFEST_URL
from ..errors import DataFormatError, DownloadError
from ..platforms import Platform
from ..models.files import _bool, _field, _int, _list, _mapping, _opt_str, _str
from ..models.version_data import _parse_time


async def _fetch_json(url: str, what: str) -> Any:
    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DownloadError(str(exc)) from exc
    try:
        return response.json()
    except ValueError as exc:
        raise DataFormatError(f"{what} is not valid JSON: {exc}") from exc


@dataclass
class DownloadFile:
    """A file of a runtime, with its checksum, size and URL."""

    sha1: str
    size: int
    url: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DownloadFile:
        data = _mapping(data, "download")
        return cls(
            sha1=_str(_field(data, "sha1"), "sha1"),
            size=_int(_field(data, "size"), "size"),
            url=_str(_field(data, "url"), "url"),
        )


@dataclass
class RuntimeVersion:
    """Name and release time of a runtime."""

    name: str
    released: datetime

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RuntimeVersion:
        data = _mapping(data, "runtime version")
        return cls(
            name=_str(_field(data, "name"), "name"),
            released=_parse_time(_field(data, "released"), "released"),
        )


@dataclass
class RuntimeData:
    """Where to find the file list of one runtime."""

    manifest: DownloadFile
    version: RuntimeVersion

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RuntimeData:
        data = _mapping(data, "runtime")
        return cls(
            manifest=DownloadFile.from_dict(_field(data, "manifest")),
            version=RuntimeVersion.from_dict(_field(data, "version")),
        )


def _runtimes(data: Mapping[str, Any], key: str) -> dict[str, list[RuntimeData]]:
    runtimes = _mapping(_field(data, key), key)
    return {
        _str(name, key): [RuntimeData.from_dict(item) for item in _list(entries, name)]
        for name, entries in runtimes.items()
    }


@dataclass
class JreManifest:
    """Every runtime component available on each platform."""

    linux: dict[str, list[RuntimeData]] = field(default_factory=dict)
    mac_os: dict[str, list[RuntimeData]] = field(default_factory=dict)
    mac_os_arm64: dict[str, list[RuntimeData]] = field(default_factory=dict)
    windows: dict[str, list[RuntimeData]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JreManifest:
        data = _mapping(data, "runtime manifest")
        return cls(
            linux=_runtimes(data, "linux"),
            mac_os=_runtimes(data, "mac-os"),
            mac_os_arm64=_runtimes(data, "mac-os-arm64"),
            windows=_runtimes(data, "windows-x64"),
        )

    @classmethod
    async def fetch(cls) -> JreManifest:
        """Download the runtime manifest from the game servers."""
        return cls.from_dict(await _fetch_json(JAVA_JRE_MANIFEST_URL, "runtime manifest"))

    def runtimes_for_current_platform(self) -> dict[str, list[RuntimeData]]:
        """The runtimes offered for this platform; empty on unknown platforms."""
        return {
            Platform.LINUX: self.linux,
            Platform.WINDOWS: self.windows,
            Platform.MACOS: self.mac_os,
        }.get(Platform.current(), {})


class FileType(Enum):
    """Kind of an entry in a runtime's file list."""

    DIRECTORY = "directory"
    FILE = "file"
    LINK = "link"


def _file_type(value: Any) -> FileType:
    try:
        return FileType(value)
    except ValueError:
        raise DataFormatError(f"unknown runtime file type {value!r}") from None


@dataclass
class JreFile:
    """An entry of a runtime: a directory, a file to download or a link."""

    file_type: FileType
    executable: bool | None = None
    raw: DownloadFile | None = None
    target: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JreFile:
        data = _mapping(data, "runtime file")
        executable = data.get("executable")
        downloads = data.get("downloads")
        raw = None
        if downloads is not None:
            raw = DownloadFile.from_dict(_field(_mapping(downloads, "downloads"), "raw"))
        return cls(
            file_type=_file_type(_field(data, "type")),
            executable=None if executable is None else _bool(executable, "executable"),
            raw=raw,
            target=_opt_str(data.get("target"), "target"),
        )


@dataclass
class JreRuntimeManifest:
    """The file list of one runtime, keyed by relative path."""

    files: dict[str, JreFile] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JreRuntimeManifest:
        data = _mapping(data, "runtime file list")
        files = _mapping(_field(data, "files"), "files")
        return cls(
            files={_str(path, "files"): JreFile.from_dict(entry) for path, entry in files.items()}
        )

    @classmethod
    async def fetch(cls, url: str) -> JreRuntimeManifest:
        """Download the file list of a runtime."""
        return cls.from_dict(await _fetch_json(str(url), "runtime file list"))