"""Desktop platform implementation for the simple-player library.

Playback goes through libvlc; tracks are files resolved by FileTrackResolver.
"""

from .engine import VLCMediaEngine

__all__ = [
    "VLCMediaEngine",
]
