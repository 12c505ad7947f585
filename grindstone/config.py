"""Updater configuration and the filesystem layout derived from it."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .errors import InvalidConfigError
from .event import (
    AssetInstallationUpdate,
    CallbackEvent,
    CallbackFn,
    EventType,
    LibraryInstallationUpdate,
    Progress,
    invoke_callback,
)
from .version import MinecraftVersion


def _ignore_event(event: CallbackEvent) -> None:
    pass


@dataclass(kw_only=True)
class Config:
    """Settings for one game instance.

    ``instance_name`` and ``folder_path`` are required; ``event_callback`` is
    called with every progress event.
    """

    instance_name: str | None = None
    folder_path: str | os.PathLike[str] | None = None
    version: MinecraftVersion = field(default_factory=MinecraftVersion)
    event_callback: CallbackFn = _ignore_event

    def __post_init__(self) -> None:
        if self.instance_name is None:
            raise InvalidConfigError("instance_name")
        if self.folder_path is None:
            raise InvalidConfigError("folder_path")
        self.folder_path = Path(self.folder_path)

    def emit(
        self,
        event_type: EventType,
        message: str,
        progress: Progress | None = None,
        stage: LibraryInstallationUpdate | AssetInstallationUpdate | None = None,
    ) -> CallbackEvent:
        """Report an event through the configured callback."""
        return invoke_callback(self.event_callback, event_type, message, progress, stage)

    def updater_folder(self) -> Path:
        """Folder for files that cannot live inside ``.minecraft``."""
        return Path(self.folder_path)

    def current_instance(self) -> Path:
        return self.updater_folder() / "instances" / self.instance_name

    def dot_minecraft_path(self) -> Path:
        """The ``.minecraft`` folder shared with the official launcher."""
        if sys.platform == "win32":
            appdata = os.environ.get("APPDATA")
            base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        else:
            base = Path.home()
        return base / ".minecraft"

    def versions_path(self) -> Path:
        return self.dot_minecraft_path() / "versions"

    def version_jar_path(self) -> Path:
        version_id = self.version.id
        return self.versions_path() / version_id / f"{version_id}.jar"

    def version_data_path(self) -> Path:
        version_id = self.version.id
        return self.versions_path() / version_id / f"{version_id}.json"

    def assets_path(self) -> Path:
        return self.dot_minecraft_path() / "assets"

    def asset_index_path(self) -> Path:
        return self.assets_path() / "indexes"

    def libraries_path(self) -> Path:
        return self.dot_minecraft_path() / "libraries"

    def natives_path(self) -> Path:
        return self.dot_minecraft_path() / "libraries"

    def log_configs_path(self) -> Path:
        return self.assets_path() / "log_configs"