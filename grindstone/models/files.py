"""Downloadable file descriptions and small records found in version data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import DataFormatError

_MISSING = object()


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DataFormatError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _field(data: Mapping[str, Any], *keys: str, default: Any = _MISSING) -> Any:
    """Return the first of ``keys`` present in ``data``."""
    for key in keys:
        if key in data:
            return data[key]
    if default is _MISSING:
        raise DataFormatError(f"missing field {keys[0]!r}")
    return default


def _str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise DataFormatError(f"field {key!r} must be a string")
    return value


def _opt_str(value: Any, key: str) -> str | None:
    return None if value is None else _str(value, key)


def _int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataFormatError(f"field {key!r} must be an integer")
    return value


def _bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise DataFormatError(f"field {key!r} must be a boolean")
    return value


def _list(value: Any, key: str) -> list[Any]:
    if not isinstance(value, list):
        raise DataFormatError(f"field {key!r} must be a list")
    return value


def _str_list(value: Any, key: str) -> list[str]:
    return [_str(item, key) for item in _list(value, key)]


@dataclass
class RemoteFile:
    """Information about a downloadable file."""

    sha1: str
    size: int
    url: str
    id: str | None = None
    path: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RemoteFile:
        data = _mapping(data, "file")
        return cls(
            sha1=_str(_field(data, "sha1"), "sha1"),
            size=_int(_field(data, "size"), "size"),
            url=_str(_field(data, "url"), "url"),
            id=_opt_str(data.get("id"), "id"),
            path=_opt_str(data.get("path"), "path"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "path": self.path,
            "sha1": self.sha1,
            "size": self.size,
            "url": self.url,
        }


def _opt_file(data: Mapping[str, Any], key: str) -> RemoteFile | None:
    value = data.get(key)
    return None if value is None else RemoteFile.from_dict(value)


def _opt_file_dict(file: RemoteFile | None) -> dict[str, Any] | None:
    return None if file is None else file.to_dict()


@dataclass
class Downloads:
    """Downloads of the main client and server files."""

    client: RemoteFile
    client_mappings: RemoteFile | None = None
    server: RemoteFile | None = None
    server_mappings: RemoteFile | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Downloads:
        data = _mapping(data, "downloads")
        return cls(
            client=RemoteFile.from_dict(_field(data, "client")),
            client_mappings=_opt_file(data, "client_mappings"),
            server=_opt_file(data, "server"),
            server_mappings=_opt_file(data, "server_mappings"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "client": self.client.to_dict(),
            "client_mappings": _opt_file_dict(self.client_mappings),
            "server": _opt_file_dict(self.server),
            "server_mappings": _opt_file_dict(self.server_mappings),
        }


@dataclass
class Extract:
    """Options for extracting a native library."""

    exclude: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Extract:
        data = _mapping(data, "extract")
        return cls(exclude=_str_list(_field(data, "exclude", default=[]), "exclude"))

    def to_dict(self) -> dict[str, Any]:
        return {"exclude": list(self.exclude)}


@dataclass
class JavaVersion:
    """The Java runtime a version needs."""

    component: str
    major_version: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JavaVersion:
        data = _mapping(data, "javaVersion")
        return cls(
            component=_str(_field(data, "component"), "component"),
            major_version=_int(_field(data, "majorVersion"), "majorVersion"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"component": self.component, "majorVersion": self.major_version}


@dataclass
class LoggingClient:
    """Client logging configuration."""

    argument: str
    file: RemoteFile
    kind: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LoggingClient:
        data = _mapping(data, "logging client")
        return cls(
            argument=_str(_field(data, "argument"), "argument"),
            file=RemoteFile.from_dict(_field(data, "file")),
            kind=_str(_field(data, "type"), "type"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"argument": self.argument, "file": self.file.to_dict(), "type": self.kind}


@dataclass
class LoggingInfo:
    """Logging configuration of a version."""

    client: LoggingClient

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LoggingInfo:
        data = _mapping(data, "logging")
        return cls(client=LoggingClient.from_dict(_field(data, "client")))

    def to_dict(self) -> dict[str, Any]:
        return {"client": self.client.to_dict()}


class ReleaseType(Enum):
    """The kind of a game release."""

    RELEASE = "Release"
    SNAPSHOT = "Snapshot"
    OLD_ALPHA = "OldAlpha"
    OLD_BETA = "OldBeta"

    @classmethod
    def parse(cls, value: Any) -> ReleaseType:
        """Read a release type as it appears in manifests."""
        try:
            return _RELEASE_NAMES[value]
        except (KeyError, TypeError):
            raise DataFormatError(f"unknown version type {value!r}") from None

    def __str__(self) -> str:
        return _RELEASE_LABELS[self]


_RELEASE_NAMES = {
    **{r.value: r for r in ReleaseType},
    "release": ReleaseType.RELEASE,
    "snapshot": ReleaseType.SNAPSHOT,
    "old_alpha": ReleaseType.OLD_ALPHA,
    "old_beta": ReleaseType.OLD_BETA,
}

_RELEASE_LABELS = {
    ReleaseType.RELEASE: "Release",
    ReleaseType.SNAPSHOT: "Snapshot",
    ReleaseType.OLD_ALPHA: "Alpha",
    ReleaseType.OLD_BETA: "Beta",
}


@dataclass
class AssetIndexInfo:
    """Where to find the asset index a version uses."""

    id: str
    sha1: str
    size: int
    total_size: int
    url: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AssetIndexInfo:
        data = _mapping(data, "assetIndex")
        return cls(
            id=_str(_field(data, "id"), "id"),
            sha1=_str(_field(data, "sha1"), "sha1"),
            size=_int(_field(data, "size"), "size"),
            total_size=_int(_field(data, "total_size", "totalSize"), "total_size"),
            url=_str(_field(data, "url"), "url"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "sha1": self.sha1,
            "size": self.size,
            "total_size": self.total_size,
            "url": self.url,
        }