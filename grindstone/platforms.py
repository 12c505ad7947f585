"""Operating system and architecture detection."""

from __future__ import annotations

import struct
import sys
from enum import Enum

from .errors import DataFormatError


class Platform(Enum):
    """An operating system family."""

    LINUX = "Linux"
    MACOS = "MacOs"
    WINDOWS = "Windows"
    OTHER = "Other"

    @classmethod
    def current(cls) -> Platform:
        """The platform the interpreter runs on."""
        if sys.platform.startswith("linux"):
            return cls.LINUX
        if sys.platform == "darwin":
            return cls.MACOS
        if sys.platform == "win32":
            return cls.WINDOWS
        return cls.OTHER

    @classmethod
    def parse(cls, value: str) -> Platform:
        """Read a platform name as it appears in version data."""
        try:
            return _PLATFORM_NAMES[value]
        except KeyError:
            raise DataFormatError(f"unknown platform {value!r}") from None

    def matches_current(self) -> bool:
        return self is Platform.current()

    @property
    def classpath_separator(self) -> str:
        return ";" if self is Platform.WINDOWS else ":"


_PLATFORM_NAMES = {
    **{p.value: p for p in Platform},
    "linux": Platform.LINUX,
    "osx": Platform.MACOS,
    "windows": Platform.WINDOWS,
}


class Architecture(Enum):
    """A processor architecture."""

    I386 = "I386"
    AMD64 = "AMD64"

    @classmethod
    def current(cls) -> Architecture:
        """The architecture matching the interpreter's pointer width."""
        return cls.I386 if struct.calcsize("P") * 8 == 32 else cls.AMD64

    @classmethod
    def parse(cls, value: str) -> Architecture:
        """Read an architecture name as it appears in version data."""
        try:
            return _ARCH_NAMES[value]
        except KeyError:
            raise DataFormatError(f"unknown architecture {value!r}") from None

    @property
    def bits(self) -> int:
        return 32 if self is Architecture.I386 else 64


_ARCH_NAMES = {
    **{a.value: a for a in Architecture},
    "x86": Architecture.I386,
    "x86_64": Architecture.AMD64,
}