"""Rules restricting arguments and libraries to some platforms, and native names."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import DataFormatError
from ..platforms import Architecture, Platform
from .files import _bool, _field, _mapping, _opt_str, _str


class Action(Enum):
    """Whether a rule allows or disallows something."""

    ALLOW = "Allow"
    DISALLOW = "Disallow"

    @classmethod
    def parse(cls, value: Any) -> Action:
        try:
            return _ACTION_NAMES[value]
        except (KeyError, TypeError):
            raise DataFormatError(f"unknown rule action {value!r}") from None


_ACTION_NAMES = {
    **{a.value: a for a in Action},
    "allow": Action.ALLOW,
    "disallow": Action.DISALLOW,
}


def _opt_bool(value: Any, key: str) -> bool | None:
    return None if value is None else _bool(value, key)


@dataclass
class Os:
    """The operating system a rule applies to."""

    platform: Platform | None = None
    version: str | None = None
    arch: Architecture | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Os:
        data = _mapping(data, "os")
        platform = _field(data, "platform", "name", default=None)
        arch = data.get("arch")
        return cls(
            platform=None if platform is None else Platform.parse(_str(platform, "name")),
            version=_opt_str(data.get("version"), "version"),
            arch=None if arch is None else Architecture.parse(_str(arch, "arch")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": None if self.platform is None else self.platform.value,
            "version": self.version,
            "arch": None if self.arch is None else self.arch.value,
        }


@dataclass
class Features:
    """Launcher features a rule depends on."""

    is_demo_user: bool | None = None
    has_custom_resolution: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Features:
        data = _mapping(data, "features")
        return cls(
            is_demo_user=_opt_bool(data.get("is_demo_user"), "is_demo_user"),
            has_custom_resolution=_opt_bool(
                data.get("has_custom_resolution"), "has_custom_resolution"
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_demo_user": self.is_demo_user,
            "has_custom_resolution": self.has_custom_resolution,
        }


@dataclass
class Rule:
    """A rule enabling or disabling something on some platforms."""

    action: Action
    os: Os | None = None
    features: Features | None = None

    def allows(self) -> bool:
        """Whether the rule allows use on the current machine."""
        allowed = self.action is Action.ALLOW
        if (
            self.os is not None
            and self.os.platform is not None
            and self.os.platform is not Platform.current()
        ):
            return not allowed
        if self.features is not None and (
            self.features.is_demo_user is not None
            or self.features.has_custom_resolution is not None
        ):
            return False
        return allowed

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rule:
        data = _mapping(data, "rule")
        os_data = data.get("os")
        features = data.get("features")
        return cls(
            action=Action.parse(_field(data, "action")),
            os=None if os_data is None else Os.from_dict(os_data),
            features=None if features is None else Features.from_dict(features),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action.value,
            "os": None if self.os is None else self.os.to_dict(),
            "features": None if self.features is None else self.features.to_dict(),
        }


@dataclass
class Natives:
    """Names of the native classifier on each platform."""

    linux: str | None = None
    windows: str | None = None
    osx: str | None = None

    def for_current_platform(self) -> str | None:
        """The native name for this platform, or None if there is none."""
        return {
            Platform.LINUX: self.linux,
            Platform.WINDOWS: self.windows,
            Platform.MACOS: self.osx,
        }.get(Platform.current())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Natives:
        data = _mapping(data, "natives")
        return cls(
            linux=_opt_str(data.get("linux"), "linux"),
            windows=_opt_str(data.get("windows"), "windows"),
            osx=_opt_str(data.get("osx"), "osx"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"linux": self.linux, "windows": self.windows, "osx": self.osx}