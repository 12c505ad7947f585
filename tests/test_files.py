import pytest

from grindstone.errors import DataFormatError
from grindstone.models.files import (
    AssetIndexInfo,
    Downloads,
    Extract,
    JavaVersion,
    LoggingClient,
    LoggingInfo,
    ReleaseType,
    RemoteFile,
)

SHA = "0123456789abcdef0123456789abcdef01234567"


def file_dict(**extra):
    return {"sha1": SHA, "size": 42, "url": "https://example.com/f.jar", **extra}


def test_remote_file_reads_fields():
    file = RemoteFile.from_dict(file_dict(path="a/b.jar"))
    assert file.sha1 == SHA
    assert file.size == 42
    assert file.path == "a/b.jar"
    assert file.id is None


def test_remote_file_round_trip():
    file = RemoteFile.from_dict(file_dict(id="x"))
    assert RemoteFile.from_dict(file.to_dict()) == file


def test_remote_file_missing_sha_raises():
    data = file_dict()
    del data["sha1"]
    with pytest.raises(DataFormatError):
        RemoteFile.from_dict(data)


def test_remote_file_wrong_type_raises():
    with pytest.raises(DataFormatError):
        RemoteFile.from_dict(file_dict(size="big"))


def test_remote_file_not_an_object_raises():
    with pytest.raises(DataFormatError):
        RemoteFile.from_dict(["sha1"])


def test_downloads_optional_entries():
    downloads = Downloads.from_dict({"client": file_dict()})
    assert downloads.client.url == "https://example.com/f.jar"
    assert downloads.server is None
    assert downloads.client_mappings is None
    assert Downloads.from_dict(downloads.to_dict()) == downloads


def test_downloads_with_server_round_trip():
    downloads = Downloads.from_dict({"client": file_dict(), "server": file_dict(id="s")})
    assert downloads.server.id == "s"
    assert Downloads.from_dict(downloads.to_dict()) == downloads


def test_extract_defaults_to_empty():
    assert Extract.from_dict({}).exclude == []
    assert Extract.from_dict({"exclude": ["META-INF/"]}).exclude == ["META-INF/"]


def test_java_version_uses_camel_case_key():
    java = JavaVersion.from_dict({"component": "java-runtime-gamma", "majorVersion": 17})
    assert java.major_version == 17
    assert java.to_dict() == {"component": "java-runtime-gamma", "majorVersion": 17}


def test_logging_info_round_trip():
    data = {"client": {"argument": "-Dx=${path}", "file": file_dict(id="c.xml"), "type": "log4j2-xml"}}
    info = LoggingInfo.from_dict(data)
    assert info.client.kind == "log4j2-xml"
    assert info.client.file.id == "c.xml"
    assert LoggingInfo.from_dict(info.to_dict()) == info
    assert LoggingClient.from_dict(info.client.to_dict()) == info.client


@pytest.mark.parametrize(
    "text,expected",
    [
        ("release", ReleaseType.RELEASE),
        ("Release", ReleaseType.RELEASE),
        ("snapshot", ReleaseType.SNAPSHOT),
        ("old_alpha", ReleaseType.OLD_ALPHA),
        ("OldBeta", ReleaseType.OLD_BETA),
    ],
)
def test_release_type_parse(text, expected):
    assert ReleaseType.parse(text) is expected


def test_release_type_unknown_raises():
    with pytest.raises(DataFormatError):
        ReleaseType.parse("nightly")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("old_alpha", "Alpha"),
        ("old_beta", "Beta"),
        ("release", "Release"),
        ("snapshot", "Snapshot"),
    ],
)
def test_release_type_display(text, expected):
    assert str(ReleaseType.parse(text)) == expected


def test_asset_index_info_accepts_both_size_keys():
    base = {"id": "5", "sha1": SHA, "size": 10, "url": "https://example.com/5.json"}
    camel = AssetIndexInfo.from_dict({**base, "totalSize": 1000})
    snake = AssetIndexInfo.from_dict({**base, "total_size": 1000})
    assert camel == snake
    assert camel.total_size == 1000
    assert AssetIndexInfo.from_dict(camel.to_dict()) == camel
    assert camel.to_dict()["total_size"] == 1000