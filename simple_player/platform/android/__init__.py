"""Android platform implementation for the simple-player library.

Playback goes through android.media.MediaPlayer, tracks are MediaStore ids
and the OS media session is android.media.session.MediaSession.
"""

from .engine import AndroidMediaEngine
from .media_store import MediaStoreResolver
from .session import AndroidMediaSession

__all__ = [
    "AndroidMediaEngine",
    "AndroidMediaSession",
    "MediaStoreResolver",
]
