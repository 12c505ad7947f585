"""The manifest listing every game version."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import httpx

from ..constants import MC_VERSION_MANIFEST_URL
from ..errors import DataFormatError, DownloadError, InvalidVersionError
from ..version import MinecraftVersion
from .files import ReleaseType, _field, _list, _mapping, _str
from .version_data import _format_time, _parse_time


@dataclass(kw_only=True)
class VersionSummary:
    """A version as listed in the manifest."""

    id: str
    release_type: ReleaseType
    url: str
    time: datetime
    release_time: datetime
    sha1: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VersionSummary:
        data = _mapping(data, "version summary")
        return cls(
            id=_str(_field(data, "id"), "id"),
            release_type=ReleaseType.parse(_field(data, "type")),
            url=_str(_field(data, "url"), "url"),
            time=_parse_time(_field(data, "time"), "time"),
            release_time=_parse_time(
                _field(data, "release_time", "releaseTime"), "releaseTime"
            ),
            sha1=_str(_field(data, "sha1"), "sha1"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.release_type.value,
            "url": self.url,
            "time": _format_time(self.time),
            "release_time": _format_time(self.release_time),
            "sha1": self.sha1,
        }


@dataclass
class LatestVersion:
    """Ids of the latest release and snapshot."""

    release: str
    snapshot: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LatestVersion:
        data = _mapping(data, "latest")
        return cls(
            release=_str(_field(data, "release"), "release"),
            snapshot=_str(_field(data, "snapshot"), "snapshot"),
        )


@dataclass
class VersionsManifest:
    """Every known version, keyed by id, with the latest ones."""

    latest: LatestVersion
    versions: dict[str, VersionSummary] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VersionsManifest:
        """Build the manifest from the server's form, where versions are a list."""
        data = _mapping(data, "version manifest")
        summaries = (
            VersionSummary.from_dict(entry)
            for entry in _list(_field(data, "versions"), "versions")
        )
        return cls(
            latest=LatestVersion.from_dict(_field(data, "latest")),
            versions={summary.id: summary for summary in summaries},
        )

    @classmethod
    async def fetch(cls) -> VersionsManifest:
        """Download the manifest from the game servers."""
        async with httpx.AsyncClient() as client:
            try:
                response = await client.get(MC_VERSION_MANIFEST_URL, follow_redirects=True)
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise DownloadError(str(exc)) from exc
        try:
            data = response.json()
        except ValueError as exc:
            raise DataFormatError(f"version manifest is not valid JSON: {exc}") from exc
        return cls.from_dict(data)

    def get_version(self, version: MinecraftVersion | str) -> VersionSummary:
        """The summary of ``version``; InvalidVersionError if it is not listed."""
        version_id = str(version)
        try:
            return self.versions[version_id]
        except KeyError:
            raise InvalidVersionError(version_id) from None