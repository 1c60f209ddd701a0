"""Exceptions raised by the simple-player library.

Reaching the end or the start of the playlist is not an error:
next() and prev() report it by returning False.
"""

__all__ = [
    "PlayerError",
    "ResourceResolutionError",
    "EngineError",
    "SessionStateError",
]


class PlayerError(Exception):
    """Base class for all simple-player errors."""


class ResourceResolutionError(PlayerError):
    """A track identifier could not be turned into a playable resource."""

    def __init__(self, track, reason=""):
        self.track = track
        self.reason = reason
        message = f"Cannot resolve track {track!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EngineError(PlayerError):
    """The media engine failed while loading, decoding or outputting audio.

    Attributes:
        what: Engine specific error category
        extra: Engine specific detail code
    """

    def __init__(self, message, what=None, extra=None):
        super().__init__(message)
        self.what = what
        self.extra = extra


class SessionStateError(PlayerError):
    """A session lifecycle call was made out of order."""
