"""Description of the game version to install."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

LATEST = "latest"


class VersionType(Enum):
    VANILLA = "vanilla"
    FORGE = "forge"
    MCP = "mcp"


@dataclass
class MinecraftVersion:
    """A version id, ``"latest"`` by default, and the kind of game to install.

    A Forge version carries its loader version.
    """

    id: str = LATEST
    version_type: VersionType = VersionType.VANILLA
    loader_version: str | None = None

    def __post_init__(self) -> None:
        is_forge = self.version_type is VersionType.FORGE
        if is_forge and self.loader_version is None:
            raise ValueError("a Forge version needs a loader version")
        if not is_forge and self.loader_version is not None:
            raise ValueError("only a Forge version takes a loader version")

    def __str__(self) -> str:
        return self.id