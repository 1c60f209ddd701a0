"""Desktop media engine using libvlc.

This module provides the VLCMediaEngine class which implements the
BaseMediaEngine capability with python-vlc on Linux and Windows.
"""

import logging

from simple_player.core import (
    NO_POSITION,
    BaseMediaEngine,
    CallbackDispatcher,
    EngineError,
    get_global_player_config,
)

try:
    import vlc
except ImportError as e:
    raise ImportError(
        "python-vlc is required for playback on desktop. Install it with: pip install simple-player[desktop]"
    ) from e

logger = logging.getLogger(__name__)

__all__ = [
    "VLCMediaEngine",
]

# Tag value while nothing is loaded
_NO_LOAD = object()


class VLCMediaEngine(BaseMediaEngine):
    """Media engine backed by a libvlc media player.

    This implementation:
    - Parses media asynchronously and reports ready/error once parsing ends
    - Forwards libvlc events to a CallbackDispatcher thread, because libvlc
      must not be called back from inside its own event handlers
    """

    def __init__(self, config=None):
        """Initialize the VLCMediaEngine.

        Args:
            config: PlayerConfig providing the libvlc arguments
        """
        super().__init__()
        config = config or get_global_player_config()
        self._instance = vlc.Instance(*config.vlc_args)
        if self._instance is None:
            raise EngineError(f"Cannot create libvlc instance with {config.vlc_args}")
        self._player = self._instance.media_player_new()
        self._media = None
        self._tag = _NO_LOAD
        self._dispatcher = CallbackDispatcher(name="VLCEvents")
        self._setup_callbacks()

    def _setup_callbacks(self):
        logger.debug("VLCMediaEngine._setup_callbacks()")
        self._event_manager = self._player.event_manager()
        self._event_manager.event_attach(vlc.EventType.MediaPlayerEndReached, self._on_end_reached)
        self._event_manager.event_attach(vlc.EventType.MediaPlayerEncounteredError, self._on_player_error)

    # libvlc event thread

    def _on_parsed(self, event, media, tag):
        logger.debug("VLCMediaEngine._on_parsed(%s)", tag)
        self._dispatcher.submit(self._finish_load, media, tag)

    def _on_end_reached(self, event):
        logger.debug("VLCMediaEngine._on_end_reached()")
        if self._tag is _NO_LOAD:
            return
        self._dispatcher.submit(self._notify_finished, self._tag)

    def _on_player_error(self, event):
        logger.debug("VLCMediaEngine._on_player_error()")
        if self._tag is _NO_LOAD:
            logger.warning("libvlc error with nothing loaded")
            return
        self._dispatcher.submit(self._notify_error, self._tag, "MediaPlayerEncounteredError", None)

    # dispatcher thread

    def _finish_load(self, media, tag):
        if media is not self._media:
            logger.debug("Dropping parse result of abandoned media (load %s)", tag)
            return
        status = media.get_parsed_status()
        if status == vlc.MediaParsedStatus.done:
            self._notify_ready(tag)
        else:
            self._notify_error(tag, "parse", status)

    # BaseMediaEngine

    def _do_load(self, resource_id, tag):
        media = self._instance.media_new(str(resource_id))
        if media is None:
            raise EngineError(f"libvlc cannot open {resource_id}")

        self._tag = tag
        self._media = media
        self._player.set_media(media)
        media.event_manager().event_attach(vlc.EventType.MediaParsedChanged, self._on_parsed, media, tag)
        if media.parse_with_options(vlc.MediaParseFlag.local, 0) == -1:
            self._media = None
            raise EngineError(f"libvlc refused to parse {resource_id}")

    def reset(self):
        logger.debug("VLCMediaEngine.reset()")
        self._tag = _NO_LOAD
        self._player.stop()
        if self._media is not None:
            self._media.release()
            self._media = None

    def release(self):
        logger.debug("VLCMediaEngine.release()")
        if self._released:
            return
        self.reset()
        self._dispatcher.stop()
        self._player.release()
        self._instance.release()
        self._released = True

    def start(self):
        logger.debug("VLCMediaEngine.start()")
        if self._player.play() == -1:
            raise EngineError("libvlc failed to start playback")

    def pause(self):
        logger.debug("VLCMediaEngine.pause()")
        self._player.set_pause(1)

    def seek_to(self, position_ms: int):
        logger.debug("VLCMediaEngine.seek_to(%s)", position_ms)
        self._player.set_time(int(position_ms))

    def is_playing(self) -> bool:
        return bool(self._player.is_playing())

    def current_position_ms(self) -> int:
        position = self._player.get_time()
        return position if position >= 0 else NO_POSITION

    def duration_ms(self) -> int:
        return self._player.get_length()
