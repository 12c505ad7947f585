"""Libraries the game needs and where to fetch and store them."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..constants import MC_LIBRARIES_BASE_URL
from ..download import Download
from ..errors import DataFormatError
from ..hashing import decode_sha1
from ..platforms import Architecture
from .files import Extract, RemoteFile, _field, _list, _mapping, _str
from .rules import Natives, Rule


@dataclass
class LibraryDownloads:
    """Download information of a library."""

    artifact: RemoteFile | None = None
    classifiers: dict[str, RemoteFile] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LibraryDownloads:
        data = _mapping(data, "library downloads")
        artifact = data.get("artifact")
        classifiers = _mapping(_field(data, "classifiers", default={}), "classifiers")
        return cls(
            artifact=None if artifact is None else RemoteFile.from_dict(artifact),
            classifiers={
                _str(name, "classifiers"): RemoteFile.from_dict(file)
                for name, file in classifiers.items()
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "artifact": None if self.artifact is None else self.artifact.to_dict(),
            "classifiers": {name: file.to_dict() for name, file in self.classifiers.items()},
        }


@dataclass
class Library:
    """A library needed to run the game, named ``<package>:<name>:<version>``."""

    downloads: LibraryDownloads
    name: str
    natives: Natives | None = None
    rules: list[Rule] = field(default_factory=list)
    extract: Extract | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Library:
        data = _mapping(data, "library")
        natives = data.get("natives")
        extract = data.get("extract")
        try:
            rules = [Rule.from_dict(r) for r in _list(_field(data, "rules", default=[]), "rules")]
        except DataFormatError:
            raise
        return cls(
            downloads=LibraryDownloads.from_dict(_field(data, "downloads")),
            name=_str(_field(data, "name"), "name"),
            natives=None if natives is None else Natives.from_dict(natives),
            rules=rules,
            extract=None if extract is None else Extract.from_dict(extract),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "downloads": self.downloads.to_dict(),
            "name": self.name,
            "natives": None if self.natives is None else self.natives.to_dict(),
            "rules": [rule.to_dict() for rule in self.rules],
            "extract": None if self.extract is None else self.extract.to_dict(),
        }

    def check_use(self) -> bool:
        """Whether the library is needed on this machine."""
        return all(rule.allows() for rule in self.rules)

    def _name_parts(self) -> list[str]:
        return self.name.split(":")

    def jar_name(self) -> str:
        """File name of the library jar: name, version, native and suffixes."""
        parts = self._name_parts()
        pieces = parts[1:3]
        native = self.native()
        if native is not None:
            pieces.append(native)
        pieces.extend(parts[3:])
        return "-".join(pieces) + ".jar"

    def library_path(self, libraries_path: str | os.PathLike[str]) -> Path:
        """Folder holding the library jar, below ``libraries_path``."""
        path = Path(libraries_path)
        for index, part in enumerate(self._name_parts()[:3]):
            path = path.joinpath(*part.split(".")) if index == 0 else path / part
        return path

    def jar_path(self, libraries_path: str | os.PathLike[str]) -> Path:
        """Complete path of the library jar."""
        return self.library_path(libraries_path) / self.jar_name()

    def download_url(self) -> tuple[str, str | None, int | None]:
        """Return ``(url, sha1, size)``; checksum and size are unknown for built URLs."""
        native = self.native()
        if native is not None:
            file = self.downloads.classifiers.get(native)
        else:
            file = self.downloads.artifact
        if file is None:
            return self._url_from_name(), None, None
        return file.url, file.sha1, file.size

    def needs_extract(self) -> bool:
        return self.native() is not None and self.extract is not None

    def native(self) -> str | None:
        """The native classifier for this platform, with ``${arch}`` filled in."""
        if self.natives is None:
            return None
        native = self.natives.for_current_platform()
        if native is None:
            return None
        return native.replace("${arch}", str(Architecture.current().bits))

    def build_download(self, libraries_path: str | os.PathLike[str]) -> Download:
        """Describe the download of this library into ``libraries_path``."""
        url, sha1, _size = self.download_url()
        return Download(
            url=url,
            file=self.jar_path(libraries_path),
            sha1=None if sha1 is None else decode_sha1(sha1),
        )

    def _url_from_name(self) -> str:
        url = [MC_LIBRARIES_BASE_URL]
        for index, part in enumerate(self._name_parts()[:3]):
            url.append(part.replace(".", "/") if index == 0 else part)
        url.append(self.jar_name())
        return "/".join(url)