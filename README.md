# grindstone

grindstone installs, and keeps up to date, the files needed to run a given
Minecraft version:

- the version manifest and the version data JSON, saved under
  `.minecraft/versions/<id>/<id>.json`,
- a matching Java runtime, downloaded into `.minecraft/runtime` when it is
  not already there,
- the game libraries the current platform needs, downloaded in parallel
  (at most 50 at a time) and checked against their SHA-1,
- the asset index and every asset object, also mapped into `resources` with
  symbolic links for old versions that ask for it,
- the logging configuration file,
- the client jar.

A file that already exists with the right checksum is not downloaded again.
Game files go to the shared `.minecraft` folder in your home directory (in
`%APPDATA%` on Windows), so the official launcher can use them too.

## Installation

```
pip install grindstone
```

Python 3.11 or later is required.

## Command line

```
grindstone --folder ./output --name "My example version" --game-version latest
```

Options:

- `--folder` – the updater's own folder (default `./output`),
- `--name` – the instance name (default `My example version`),
- `--game-version` – a version id such as `1.20.4`, or `latest` for the
  latest release (the default).

Every progress event is printed as `EVENT_TYPE - message`. The command exits
with status 1 and prints the error when the update fails.

## Library use

The updater is asynchronous. Build a `Config`, hand it to a
`GrindstoneUpdater` and await `update()`:

```python
import asyncio

from grindstone.config import Config
from grindstone.updater import GrindstoneUpdater
from grindstone.version import MinecraftVersion


def show(event):
    print(event.event_type.name, "-", event.message)


async def run():
    config = Config(
        folder_path="./output",
        instance_name="My example version",
        version=MinecraftVersion(id="1.20.4"),
        event_callback=show,
    )
    updater = GrindstoneUpdater(config)
    await updater.update()
    print("Java runtime in", updater.java_runtime_path)


asyncio.run(run())
```

`instance_name` and `folder_path` are required; leaving either out raises
`InvalidConfigError`. Without `version` the latest release is installed.
`Config` also gives the paths the updater uses: `dot_minecraft_path()`,
`versions_path()`, `version_jar_path()`, `version_data_path()`,
`assets_path()`, `libraries_path()`, `log_configs_path()` and others.

Progress is reported through the callback with `CallbackEvent` objects from
`grindstone.event`. Each carries an `EventType` and a message; the Java
runtime, library and asset steps also carry a `Progress` with the current
and total number of files.

The steps can be run on their own as well: `VersionsManifest.fetch()` in
`grindstone.models.manifest`, `VersionData.fetch()`, `save()` and `read()` in
`grindstone.models.version_data`, `Java(config).install()` in
`grindstone.java.runtime`, `fetch_asset_index()` and `AssetIndex.install()`
in `grindstone.models.assets`, and `install_libraries()`,
`install_log_config()` and `install_client()` in `grindstone.installers`.
For launching, `VersionData.arguments` gives `jvm_arguments()` and
`game_arguments()`, filtered by their rules for the current machine.

## Errors

Every failure raises a subclass of `grindstone.errors.GrindstoneError`:
`InvalidConfigError` for a missing setting, `InvalidVersionError` for a
version id the manifest does not list, `DownloadError` when a request fails,
`ChecksumMismatchError` when a downloaded file does not match its checksum,
`InvalidChecksumError` for a malformed checksum and `DataFormatError` for
JSON that does not have the expected shape.

## What it does not do

- It does not launch the game; it only installs the files and computes the
  launch arguments.
- It installs vanilla versions only. `VersionType.FORGE` and
  `VersionType.MCP` can be named in a `MinecraftVersion`, but nothing is
  installed differently for them.
- Native libraries are downloaded but not extracted; `Library.needs_extract()`
  only tells whether a library would need it.
- On macOS the runtimes for Intel machines are used; the arm64 runtimes are
  read from the manifest but never chosen.

## Running the tests

```
pip install "grindstone[test]"
pytest
```