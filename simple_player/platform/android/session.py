"""Android media session: lock screen and notification controls."""

import logging

from simple_player.core import BaseMediaSession, SessionStateError, get_global_player_config

from ._android_api import (
    STATE_PAUSED,
    STATE_PLAYING,
    MediaMetadata,
    MediaMetadataBuilder,
    MediaSession,
    PlaybackStateBuilder,
    get_context,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AndroidMediaSession",
]


class AndroidMediaSession(BaseMediaSession):
    """Wraps android.media.session.MediaSession."""

    def __init__(self, config=None, context=None):
        config = config or get_global_player_config()
        self._tag = config.session_tag
        self._context = context
        self._session = None

    def attach(self, service):
        logger.debug("AndroidMediaSession.attach()")
        if self._session is not None:
            raise SessionStateError("MediaSession already created")
        self._session = MediaSession(self._context or get_context(), self._tag)
        self._session.setActive(True)

    def detach(self):
        logger.debug("AndroidMediaSession.detach()")
        if self._session is None:
            raise SessionStateError("MediaSession not created")
        self._session.setActive(False)
        self._session.release()
        self._session = None

    def update(self, track, playing, position_ms=0):
        if self._session is None:
            return
        state = STATE_PLAYING if playing else STATE_PAUSED
        self._session.setPlaybackState(PlaybackStateBuilder().setState(state, position_ms, 1.0).build())
        if track is None:
            return
        metadata = (
            MediaMetadataBuilder()
            .putString(MediaMetadata.METADATA_KEY_TITLE, track.title or str(track.track_id))
            .putString(MediaMetadata.METADATA_KEY_ARTIST, track.artist)
        )
        if track.duration_ms is not None:
            metadata = metadata.putLong(MediaMetadata.METADATA_KEY_DURATION, track.duration_ms)
        self._session.setMetadata(metadata.build())
