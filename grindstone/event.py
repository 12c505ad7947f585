"""Progress events reported to the caller during an update."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

log = logging.getLogger(__name__)


@dataclass
class Progress:
    current: int
    max: int
    message: str


class LibraryInstallationUpdate(Enum):
    """Stage of a library installation."""

    DOWNLOADING = auto()
    EXTRACTING = auto()


class AssetInstallationUpdate(Enum):
    """Stage of an asset installation."""

    DOWNLOADING = auto()
    SYMLINK = auto()


class EventType(Enum):
    STARTING = auto()
    CREATING_FOLDERS = auto()
    DOWNLOAD_MANIFEST = auto()
    SEARCHING_FOR_JRE = auto()
    DOWNLOAD_JRE = auto()
    DOWNLOAD_ASSET_INDEX = auto()
    LIBRARIES = auto()
    ASSETS = auto()
    DOWNLOAD_LOG_CONFIG = auto()
    DOWNLOAD_CLIENT = auto()


@dataclass
class CallbackEvent:
    """An event handed to the user's callback."""

    event_type: EventType
    message: str
    progress: Progress | None = None
    stage: LibraryInstallationUpdate | AssetInstallationUpdate | None = None


CallbackFn = Callable[[CallbackEvent], None]


def invoke_callback(
    callback: CallbackFn,
    event_type: EventType,
    message: str,
    progress: Progress | None = None,
    stage: LibraryInstallationUpdate | AssetInstallationUpdate | None = None,
) -> CallbackEvent:
    """Log the message, pass a new event to the callback and return the event."""
    log.info("%s", message)
    event = CallbackEvent(event_type, str(message), progress, stage)
    callback(event)
    return event