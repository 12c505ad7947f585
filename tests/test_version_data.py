import json
from datetime import datetime, timezone

import httpx
import pytest
import respx

from grindstone.config import Config
from grindstone.errors import DataFormatError, DownloadError
from grindstone.models.files import ReleaseType
from grindstone.models.version_data import VersionData
from grindstone.version import MinecraftVersion

SHA = "0123456789abcdef0123456789abcdef01234567"
URL = "https://example.com/versions/1.20.1.json"


def library(name, **extra):
    return {
        "downloads": {"artifact": {"sha1": SHA, "size": 3, "url": f"https://example.com/{name}.jar"}},
        "name": name,
        **extra,
    }


def sample():
    return {
        "arguments": {
            "game": [
                "--username",
                "${auth_player_name}",
                {"rules": [{"action": "allow", "features": {"is_demo_user": True}}], "value": "--demo"},
            ],
            "jvm": ["-cp", "${classpath}"],
        },
        "assetIndex": {"id": "5", "sha1": SHA, "size": 100, "totalSize": 1000, "url": "https://example.com/5.json"},
        "assets": "5",
        "complianceLevel": 1,
        "downloads": {"client": {"sha1": SHA, "size": 10, "url": "https://example.com/client.jar"}},
        "id": "1.20.1",
        "javaVersion": {"component": "java-runtime-gamma", "majorVersion": 17},
        "libraries": [
            library("com.mojang:brigadier:1.0.18"),
            library("com.example:never:1.0", rules=[{"action": "disallow"}]),
        ],
        "logging": {
            "client": {
                "argument": "-Dlog4j.configurationFile=${path}",
                "file": {"id": "client-1.12.xml", "sha1": SHA, "size": 5, "url": "https://example.com/client-1.12.xml"},
                "type": "log4j2-xml",
            }
        },
        "mainClass": "net.minecraft.client.main.Main",
        "minimumLauncherVersion": 21,
        "releaseTime": "2023-06-12T13:25:51+00:00",
        "time": "2023-06-12T13:25:51+00:00",
        "type": "release",
    }


@pytest.fixture
def config(tmp_path, monkeypatch):
    for name in ("HOME", "USERPROFILE", "APPDATA"):
        monkeypatch.setenv(name, str(tmp_path))
    return Config(
        instance_name="test",
        folder_path=tmp_path / "updater",
        version=MinecraftVersion(id="1.20.1"),
    )


def test_reads_camel_case_fields():
    data = VersionData.from_dict(sample())
    assert data.id == "1.20.1"
    assert data.main_class == "net.minecraft.client.main.Main"
    assert data.java_version.major_version == 17
    assert data.asset_index.total_size == 1000
    assert data.release_type is ReleaseType.RELEASE
    assert data.release_time == datetime(2023, 6, 12, 13, 25, 51, tzinfo=timezone.utc)
    assert data.minecraft_arguments is None


def test_needed_libraries_applies_rules():
    data = VersionData.from_dict(sample())
    assert [lib.name for lib in data.needed_libraries()] == ["com.mojang:brigadier:1.0.18"]


def test_game_arguments_from_version_data():
    data = VersionData.from_dict(sample())
    assert data.arguments.game_arguments() == ["--username", "${auth_player_name}"]


def test_round_trip():
    data = VersionData.from_dict(sample())
    assert VersionData.from_dict(data.to_dict()) == data


def test_serialised_time_and_type():
    out = VersionData.from_dict(sample()).to_dict()
    assert out["release_time"] == "2023-06-12T13:25:51Z"
    assert out["type"] == "Release"


def test_missing_compliance_level_raises():
    data = sample()
    del data["complianceLevel"]
    with pytest.raises(DataFormatError):
        VersionData.from_dict(data)


@pytest.mark.parametrize("value", ["yesterday", "2023-06-12T13:25:51"])
def test_invalid_time_raises(value):
    data = sample()
    data["time"] = value
    with pytest.raises(DataFormatError):
        VersionData.from_dict(data)


@pytest.mark.asyncio
async def test_save_and_read(config):
    data = VersionData.from_dict(sample())
    await data.save(config)
    path = config.version_data_path()
    assert json.loads(path.read_text()) == data.to_dict()
    assert VersionData.read(config) == data


def test_read_missing_file_raises(config):
    with pytest.raises(FileNotFoundError):
        VersionData.read(config)


def test_read_invalid_json_raises(config):
    path = config.version_data_path()
    path.parent.mkdir(parents=True)
    path.write_text("{not json")
    with pytest.raises(DataFormatError):
        VersionData.read(config)


@pytest.mark.asyncio
async def test_fetch():
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(200, json=sample()))
        data = await VersionData.fetch(URL)
    assert data == VersionData.from_dict(sample())


@pytest.mark.asyncio
async def test_fetch_http_error():
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(404))
        with pytest.raises(DownloadError):
            await VersionData.fetch(URL)


@pytest.mark.asyncio
async def test_fetch_bad_json():
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(200, text="not json"))
        with pytest.raises(DataFormatError):
            await VersionData.fetch(URL)