import pytest

from grindstone.constants import MC_LIBRARIES_BASE_URL
from grindstone.errors import DataFormatError, InvalidChecksumError
from grindstone.models.library import Library, LibraryDownloads
from grindstone.platforms import Architecture, Platform

SHA = "0123456789abcdef0123456789abcdef01234567"
ARTIFACT_URL = "https://example.com/lib/brigadier.jar"


def brigadier(**extra):
    return {
        "downloads": {"artifact": {"sha1": SHA, "size": 77, "url": ARTIFACT_URL}},
        "name": "com.mojang:brigadier:1.0.18",
        **extra,
    }


def native_library(**extra):
    return {
        "downloads": {
            "classifiers": {
                f"natives-os-{Architecture.current().bits}": {
                    "sha1": SHA,
                    "size": 9,
                    "url": "https://example.com/native.jar",
                }
            }
        },
        "name": "org.lwjgl:lwjgl:3.3.1",
        "natives": {"linux": "natives-os-${arch}", "windows": "natives-os-${arch}", "osx": "natives-os-${arch}"},
        **extra,
    }


def test_jar_name_plain():
    assert Library.from_dict(brigadier()).jar_name() == "brigadier-1.0.18.jar"


def test_jar_name_keeps_suffixes():
    library = Library.from_dict(brigadier(name="com.example:tool:2.0:extra"))
    assert library.jar_name() == "tool-2.0-extra.jar"


def test_library_path(tmp_path):
    library = Library.from_dict(brigadier())
    expected = tmp_path / "com" / "mojang" / "brigadier" / "1.0.18"
    assert library.library_path(tmp_path) == expected
    assert library.jar_path(tmp_path) == expected / library.jar_name()


def test_download_url_from_artifact():
    assert Library.from_dict(brigadier()).download_url() == (ARTIFACT_URL, SHA, 77)


def test_download_url_built_from_name():
    library = Library(downloads=LibraryDownloads(), name="com.mojang:brigadier:1.0.18")
    url, sha1, size = library.download_url()
    assert url == MC_LIBRARIES_BASE_URL + "/com/mojang/brigadier/1.0.18/brigadier-1.0.18.jar"
    assert sha1 is None
    assert size is None


def test_native_fills_architecture():
    library = Library.from_dict(native_library())
    assert library.native() == f"natives-os-{Architecture.current().bits}"
    assert library.jar_name() == f"lwjgl-3.3.1-{library.native()}.jar"


def test_native_download_uses_classifier():
    library = Library.from_dict(native_library())
    assert library.download_url() == ("https://example.com/native.jar", SHA, 9)


def test_needs_extract():
    assert Library.from_dict(native_library(extract={"exclude": ["META-INF/"]})).needs_extract() is True
    assert Library.from_dict(native_library()).needs_extract() is False
    assert Library.from_dict(brigadier(extract={})).needs_extract() is False


def test_check_use_with_rules():
    current = Platform.current().value
    denied = Library.from_dict(brigadier(rules=[{"action": "disallow", "os": {"name": current}}]))
    allowed = Library.from_dict(brigadier(rules=[{"action": "allow", "os": {"name": current}}]))
    assert denied.check_use() is False
    assert allowed.check_use() is True
    assert Library.from_dict(brigadier()).check_use() is True


def test_build_download(tmp_path):
    library = Library.from_dict(brigadier())
    download = library.build_download(tmp_path)
    assert download.url == ARTIFACT_URL
    assert download.file == library.jar_path(tmp_path)
    assert download.sha1 == bytes.fromhex(SHA)


def test_build_download_without_checksum(tmp_path):
    library = Library(downloads=LibraryDownloads(), name="a.b:c:1")
    assert library.build_download(tmp_path).sha1 is None


def test_build_download_invalid_checksum(tmp_path):
    data = brigadier()
    data["downloads"]["artifact"]["sha1"] = "zz"
    with pytest.raises(InvalidChecksumError):
        Library.from_dict(data).build_download(tmp_path)


def test_round_trip():
    library = Library.from_dict(native_library(extract={"exclude": ["META-INF/"]}, rules=[{"action": "allow"}]))
    assert Library.from_dict(library.to_dict()) == library


def test_missing_name_raises():
    data = brigadier()
    del data["name"]
    with pytest.raises(DataFormatError):
        Library.from_dict(data)