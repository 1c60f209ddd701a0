"""Android API classes and constants for the simple-player library.

Loads all required Android API classes via jnius and exposes the constants
needed for playback, media store lookups and the media session.

If loading fails, a critical error is logged and the exception is re-raised.
There is no valid fallback: this module must only be imported on Android.
"""

import logging

logger = logging.getLogger(__name__)

try:
    from android import api_version
    from jnius import JavaException, PythonJavaClass, autoclass, java_method

    # Playback
    MediaPlayer = autoclass("android.media.MediaPlayer")
    AudioManager = autoclass("android.media.AudioManager")
    AudioAttributesBuilder = autoclass("android.media.AudioAttributes$Builder")
    PowerManager = autoclass("android.os.PowerManager")

    # Media store
    ContentUris = autoclass("android.content.ContentUris")
    MediaStoreAudioMedia = autoclass("android.provider.MediaStore$Audio$Media")

    # Media session
    MediaSession = autoclass("android.media.session.MediaSession")
    PlaybackState = autoclass("android.media.session.PlaybackState")
    PlaybackStateBuilder = autoclass("android.media.session.PlaybackState$Builder")
    MediaMetadata = autoclass("android.media.MediaMetadata")
    MediaMetadataBuilder = autoclass("android.media.MediaMetadata$Builder")

    # python-for-android entry points, used to find a Context
    PythonService = autoclass("org.kivy.android.PythonService")
    PythonActivity = autoclass("org.kivy.android.PythonActivity")

    # Constant sources (not part of public API, only used to read constants below)
    _AudioAttributes = autoclass("android.media.AudioAttributes")

    # AudioAttributes constants
    USAGE_MEDIA = _AudioAttributes.USAGE_MEDIA
    CONTENT_TYPE_MUSIC = _AudioAttributes.CONTENT_TYPE_MUSIC

    # AudioManager / PowerManager constants
    STREAM_MUSIC = AudioManager.STREAM_MUSIC
    PARTIAL_WAKE_LOCK = PowerManager.PARTIAL_WAKE_LOCK

    # PlaybackState constants
    STATE_PAUSED = PlaybackState.STATE_PAUSED
    STATE_PLAYING = PlaybackState.STATE_PLAYING

    EXTERNAL_CONTENT_URI = MediaStoreAudioMedia.EXTERNAL_CONTENT_URI

except Exception:
    logger.critical("Failed to load Android APIs - cannot continue", exc_info=True)
    raise


def get_context():
    """Return the running p4a service, or the activity when not in a service."""
    context = PythonService.mService
    if context is None:
        context = PythonActivity.mActivity
    if context is None:
        raise RuntimeError("No Android context available")
    return context


__all__ = [
    "api_version",
    # jnius helpers needed by the listeners
    "JavaException",
    "PythonJavaClass",
    "java_method",
    # Playback
    "MediaPlayer",
    "AudioAttributesBuilder",
    # Media store
    "ContentUris",
    "EXTERNAL_CONTENT_URI",
    # Media session
    "MediaSession",
    "PlaybackStateBuilder",
    "MediaMetadata",
    "MediaMetadataBuilder",
    # Constants
    "USAGE_MEDIA",
    "CONTENT_TYPE_MUSIC",
    "STREAM_MUSIC",
    "PARTIAL_WAKE_LOCK",
    "STATE_PAUSED",
    "STATE_PLAYING",
    "get_context",
]
