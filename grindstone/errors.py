"""Exceptions raised by the updater."""


class GrindstoneError(Exception):
    """Base class for every error raised by the updater."""


class InvalidConfigError(GrindstoneError):
    """A required configuration value is missing."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid configuration `{field}`")


class DownloadError(GrindstoneError):
    """A web request for game information or resources failed."""


class DataFormatError(GrindstoneError, ValueError):
    """Serialising or deserialising some data failed."""


class ChecksumMismatchError(GrindstoneError):
    """A file's checksum does not match the expected one."""

    def __init__(self, message: str = "Checksums do not match") -> None:
        super().__init__(message)


class InvalidChecksumError(GrindstoneError, ValueError):
    """A checksum taken from an index is not valid hexadecimal."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Checksum does not have a valid format: {reason}")


class InvalidVersionError(GrindstoneError):
    """A version could not be found in the version manifest."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Minecraft version '{version}' is invalid")


class LibraryNameFormatError(GrindstoneError, ValueError):
    """A library name is not of the form ``<package>:<name>:<version>``."""

    def __init__(
        self, message: str = "Format of a library name is invalid and not supported"
    ) -> None:
        super().__init__(message)