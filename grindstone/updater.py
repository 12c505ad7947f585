"""The updater that installs a complete game instance."""

from __future__ import annotations

from pathlib import Path

from .config import Config
from .event import EventType
from .installers import install_client, install_libraries, install_log_config
from .java.runtime import Java
from .models.assets import fetch_asset_index
from .models.manifest import VersionsManifest
from .models.version_data import VersionData
from .version import LATEST


class GrindstoneUpdater:
    """Installs or updates the game described by a configuration."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.java_runtime_path = Path()

    async def update(self) -> None:
        """Fetch the version, its runtime, libraries, assets, log config and client."""
        config = self.config
        config.emit(EventType.STARTING, "Starting Updater !")

        config.emit(EventType.CREATING_FOLDERS, "Creating required folders")
        config.dot_minecraft_path().mkdir(parents=True, exist_ok=True)
        config.updater_folder().mkdir(parents=True, exist_ok=True)

        config.emit(EventType.DOWNLOAD_MANIFEST, "Downloading version manifest")
        manifest = await VersionsManifest.fetch()

        if config.version.id == LATEST:
            config.version.id = manifest.latest.release

        summary = manifest.get_version(config.version)

        version_data = await VersionData.fetch(summary.url)
        await version_data.save(config)

        self.java_runtime_path = await Java(config).install(version_data)

        await install_libraries(config, version_data)

        config.emit(EventType.DOWNLOAD_ASSET_INDEX, "Downloading assets index")
        asset_index = await fetch_asset_index(version_data.asset_index)
        await asset_index.install(config)

        await install_log_config(config, version_data)
        await install_client(config, version_data)