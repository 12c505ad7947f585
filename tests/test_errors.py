import pytest

from grindstone.errors import (
    ChecksumMismatchError,
    DataFormatError,
    DownloadError,
    GrindstoneError,
    InvalidChecksumError,
    InvalidConfigError,
    InvalidVersionError,
    LibraryNameFormatError,
)


def test_invalid_config_message_and_field():
    err = InvalidConfigError("instance_name")
    assert str(err) == "Invalid configuration `instance_name`"
    assert err.field == "instance_name"


def test_invalid_version_message():
    err = InvalidVersionError("1.0.0-nope")
    assert str(err) == "Minecraft version '1.0.0-nope' is invalid"
    assert err.version == "1.0.0-nope"


def test_checksum_mismatch_default_message():
    assert str(ChecksumMismatchError()) == "Checksums do not match"


def test_invalid_checksum_message():
    err = InvalidChecksumError("odd length")
    assert str(err) == "Checksum does not have a valid format: odd length"
    assert err.reason == "odd length"


def test_library_name_format_message():
    assert (
        str(LibraryNameFormatError())
        == "Format of a library name is invalid and not supported"
    )


@pytest.mark.parametrize(
    "error",
    [
        InvalidConfigError("folder_path"),
        DownloadError("boom"),
        DataFormatError("bad"),
        ChecksumMismatchError(),
        InvalidChecksumError("x"),
        InvalidVersionError("x"),
        LibraryNameFormatError(),
    ],
)
def test_all_errors_caught_by_base(error):
    with pytest.raises(GrindstoneError) as info:
        raise error
    assert info.value is error


def test_format_errors_are_value_errors():
    error = DataFormatError("bad data")
    with pytest.raises(ValueError) as info:
        raise error
    assert info.value is error
    assert "bad data" in str(info.value)