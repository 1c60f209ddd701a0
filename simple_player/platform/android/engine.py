"""Android media engine using android.media.MediaPlayer.

This module provides the AndroidMediaEngine class which implements the
BaseMediaEngine capability on top of MediaPlayer's prepareAsync() and its
prepared/completion/error listeners.
"""

import logging

from simple_player.core import NO_POSITION, BaseMediaEngine, EngineError, get_global_player_config

from ._android_api import (
    CONTENT_TYPE_MUSIC,
    PARTIAL_WAKE_LOCK,
    STREAM_MUSIC,
    USAGE_MEDIA,
    AudioAttributesBuilder,
    JavaException,
    MediaPlayer,
    PythonJavaClass,
    api_version,
    get_context,
    java_method,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AndroidMediaEngine",
]

# Tag value while nothing is loaded
_NO_LOAD = object()


class _OnPreparedListener(PythonJavaClass):
    __javainterfaces__ = ["android/media/MediaPlayer$OnPreparedListener"]
    __javacontext__ = "app"

    def __init__(self, callback, **kwargs):
        super().__init__(**kwargs)
        self.callback = callback

    @java_method("(Landroid/media/MediaPlayer;)V")
    def onPrepared(self, mp):
        logger.debug("OnPreparedListener.onPrepared()")
        self.callback()


class _OnCompletionListener(PythonJavaClass):
    __javainterfaces__ = ["android/media/MediaPlayer$OnCompletionListener"]
    __javacontext__ = "app"

    def __init__(self, callback, **kwargs):
        super().__init__(**kwargs)
        self.callback = callback

    @java_method("(Landroid/media/MediaPlayer;)V")
    def onCompletion(self, mp):
        logger.debug("OnCompletionListener.onCompletion()")
        self.callback()


class _OnErrorListener(PythonJavaClass):
    __javainterfaces__ = ["android/media/MediaPlayer$OnErrorListener"]
    __javacontext__ = "app"

    def __init__(self, callback, **kwargs):
        super().__init__(**kwargs)
        self.callback = callback

    @java_method("(Landroid/media/MediaPlayer;II)Z")
    def onError(self, mp, what, extra):
        logger.debug("OnErrorListener.onError(%s, %s)", what, extra)
        self.callback(what, extra)
        # Handled: returning False would make MediaPlayer call onCompletion,
        # which would auto-advance past the failed track.
        return True


class AndroidMediaEngine(BaseMediaEngine):
    """Media engine backed by one android.media.MediaPlayer.

    MediaPlayer.reset() abandons a pending prepareAsync(), so the tag of the
    last load is enough to label the listener callbacks.
    """

    def __init__(self, config=None, context=None):
        """Initialize the AndroidMediaEngine.

        Args:
            config: PlayerConfig (wake lock setting)
            context: Android Context, defaults to the running p4a service
        """
        super().__init__()
        config = config or get_global_player_config()
        self._context = context or get_context()
        self._tag = _NO_LOAD
        self._mediaplayer = MediaPlayer()
        self._prepared_listener = None
        self._completion_listener = None
        self._error_listener = None
        self._setup(config)

    def _setup(self, config):
        logger.debug("AndroidMediaEngine._setup()")
        if config.wake_lock:
            self._mediaplayer.setWakeMode(self._context.getApplicationContext(), PARTIAL_WAKE_LOCK)

        if api_version >= 21:
            logger.debug("API version >= 21")
            self._mediaplayer.setAudioAttributes(
                AudioAttributesBuilder().setUsage(USAGE_MEDIA).setContentType(CONTENT_TYPE_MUSIC).build()
            )
        else:
            logger.debug("API version < 21")
            self._mediaplayer.setAudioStreamType(STREAM_MUSIC)

        # jnius only keeps weak references: hold the listeners ourselves
        self._prepared_listener = _OnPreparedListener(self._on_prepared)
        self._completion_listener = _OnCompletionListener(self._on_completion)
        self._error_listener = _OnErrorListener(self._on_error)
        self._mediaplayer.setOnPreparedListener(self._prepared_listener)
        self._mediaplayer.setOnCompletionListener(self._completion_listener)
        self._mediaplayer.setOnErrorListener(self._error_listener)

    # MediaPlayer listener thread

    def _on_prepared(self):
        if self._tag is _NO_LOAD:
            logger.debug("Dropping onPrepared: nothing loaded")
            return
        self._notify_ready(self._tag)

    def _on_completion(self):
        if self._tag is _NO_LOAD:
            logger.debug("Dropping onCompletion: nothing loaded")
            return
        self._notify_finished(self._tag)

    def _on_error(self, what, extra):
        if self._tag is _NO_LOAD:
            logger.warning("MediaPlayer error %s/%s with nothing loaded", what, extra)
            return
        self._notify_error(self._tag, what, extra)

    # BaseMediaEngine

    def _do_load(self, resource_id, tag):
        self._tag = tag
        try:
            if isinstance(resource_id, str):
                self._mediaplayer.setDataSource(resource_id)
            else:
                self._mediaplayer.setDataSource(self._context.getApplicationContext(), resource_id)
            self._mediaplayer.prepareAsync()
        except JavaException as e:
            raise EngineError(f"MediaPlayer cannot load {resource_id}: {e}") from e

    def reset(self):
        logger.debug("AndroidMediaEngine.reset()")
        self._tag = _NO_LOAD
        if self._mediaplayer is not None:
            self._mediaplayer.reset()

    def release(self):
        logger.debug("AndroidMediaEngine.release()")
        if self._mediaplayer is None:
            return
        self._mediaplayer.reset()
        self._mediaplayer.release()
        self._mediaplayer = None
        self._tag = _NO_LOAD
        self._prepared_listener = None
        self._completion_listener = None
        self._error_listener = None
        self._released = True

    def start(self):
        logger.debug("AndroidMediaEngine.start()")
        try:
            self._mediaplayer.start()
        except JavaException as e:
            raise EngineError(f"MediaPlayer.start() failed: {e}") from e

    def pause(self):
        logger.debug("AndroidMediaEngine.pause()")
        # pause() outside Started/Paused puts MediaPlayer in its Error state
        if self.is_playing():
            self._mediaplayer.pause()

    def seek_to(self, position_ms: int):
        logger.debug("AndroidMediaEngine.seek_to(%s)", position_ms)
        try:
            self._mediaplayer.seekTo(int(position_ms))
        except JavaException as e:
            logger.warning("MediaPlayer.seekTo(%s) ignored: %s", position_ms, e)

    def is_playing(self) -> bool:
        if self._mediaplayer is None:
            return False
        return bool(self._mediaplayer.isPlaying())

    def current_position_ms(self) -> int:
        if self._mediaplayer is None:
            return NO_POSITION
        return self._mediaplayer.getCurrentPosition()

    def duration_ms(self) -> int:
        if self._mediaplayer is None:
            return NO_POSITION
        return self._mediaplayer.getDuration()
