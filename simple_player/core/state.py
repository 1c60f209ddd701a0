"""Playback status of a controller."""

from enum import Enum

__all__ = [
    "STATUS",
]


class STATUS(Enum):
    """Playback status enumeration.

    IDLE -> LOADING (play) -> PLAYING (engine ready) -> PAUSED / LOADING.
    """

    ERROR = -1
    IDLE = 0
    LOADING = 1
    PLAYING = 2
    PAUSED = 3
