"""Finding and installing the Java runtime a game version needs."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from contextlib import aclosing
from pathlib import Path
from typing import TYPE_CHECKING

from ..constants import MC_MS_STORE_IDENTIFIER
from ..download import Download
from ..errors import DataFormatError
from ..event import EventType, Progress
from ..hashing import decode_sha1
from ..models.assets import _download_all
from .manifests import FileType, JreFile, JreManifest, JreRuntimeManifest

if TYPE_CHECKING:
    from ..config import Config
    from ..models.version_data import VersionData

log = logging.getLogger(__name__)


class Java:
    """Locates the official runtime for a version, downloading it when needed."""

    def __init__(self, config: Config) -> None:
        self.config = config

    async def install(self, version_data: VersionData) -> Path:
        """Make sure the required runtime is present and return its folder."""
        required = version_data.java_version
        log.debug(
            "Version %s requires Java runtime %s", version_data.id, required.major_version
        )
        self.config.emit(
            EventType.SEARCHING_FOR_JRE,
            f"Searching for preinstalled runtime folders {required.component}",
        )
        found = self.search_jre(required.component)
        java_runtime_path = (
            found if found is not None else self.runtime_path() / required.component
        )
        await self._download_jre_data(required.component, java_runtime_path)
        return java_runtime_path

    def runtime_path(self) -> Path:
        """Folder holding the runtimes shared with the official launcher."""
        if sys.platform == "win32":
            local = os.environ.get("LOCALAPPDATA")
            base = Path(local) if local else Path.home() / "AppData" / "Local"
            store = base / "Packages" / MC_MS_STORE_IDENTIFIER
            program_files = Path("C:/Program Files (x86)/Minecraft")
            if store.exists():
                path = store / "LocalCache" / "Local"
            elif program_files.exists():
                path = program_files
            else:
                path = store / "LocalCache" / "Local"
            return path / "runtime"
        return self.config.dot_minecraft_path() / "runtime"

    def search_jre(self, name: str) -> Path | None:
        """The folder of runtime ``name`` if it is already there."""
        path = self.runtime_path() / name
        return path if path.exists() else None

    async def _download_jre_data(self, name: str, java_runtime_path: Path) -> None:
        log.debug("JRE component name: %s", name)
        manifest = await JreManifest.fetch()
        runtimes = manifest.runtimes_for_current_platform().get(name)
        if runtimes is None:
            return
        if not runtimes:
            raise DataFormatError(f"runtime {name!r} lists no downloads")
        files = await JreRuntimeManifest.fetch(runtimes[0].manifest.url)
        self.config.emit(EventType.DOWNLOAD_JRE, "Downloading JRE", Progress(0, 0, ""))
        await self.download_jre_files(java_runtime_path, files.files)

    async def download_jre_files(
        self, dest: str | os.PathLike[str], files: Mapping[str, JreFile]
    ) -> None:
        """Create the folders, files and links of a runtime below ``dest``."""
        dest = Path(dest)
        log.debug("No JRE found, downloading one")
        total = len(files)
        count = 0
        downloads: list[Download] = []
        executables: list[Path] = []
        links: dict[str, JreFile] = {}

        def report(message: str) -> None:
            self.config.emit(
                EventType.DOWNLOAD_JRE, "Downloading JRE", Progress(count, total, message)
            )

        for relative, entry in files.items():
            path = dest / relative
            if entry.file_type is FileType.DIRECTORY:
                path.mkdir(parents=True, exist_ok=True)
                count += 1
                report("Creating folders")
            elif entry.file_type is FileType.FILE:
                if entry.raw is None:
                    raise DataFormatError(f"runtime file {relative!r} has no download")
                path.parent.mkdir(parents=True, exist_ok=True)
                downloads.append(Download(entry.raw.url, path, decode_sha1(entry.raw.sha1)))
                if entry.executable:
                    executables.append(path)
            else:
                links[relative] = entry

        log.debug("Downloading JRE files")
        async with aclosing(_download_all(downloads)) as finished:
            async for url in finished:
                count += 1
                report(f"Downloaded file {url}")

        log.debug("Creating missing symbolic links")
        for relative, entry in links.items():
            if entry.target is None:
                raise DataFormatError(f"runtime link {relative!r} has no target")
            path = dest / relative
            target = Path(entry.target)
            count += 1
            report(f"Creating symbolic links {target}")

            if os.path.lexists(path):
                if path.is_symlink() and Path(os.readlink(path)) == target:
                    continue
                path.unlink()
            path.parent.mkdir(parents=True, exist_ok=True)
            os.symlink(target, path)

        if os.name == "posix":
            log.debug("Apply files permissions")
            for path in executables:
                path.chmod(path.stat().st_mode | 0o700)