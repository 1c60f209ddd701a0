"""PlaybackController: the playlist/cursor state machine driving a media engine.

The controller decides *what* should be playing and translates play, pause,
seek, next and previous requests into engine calls. It never decodes audio
itself; the engine reports progress through its ready/finished/error
callbacks.
"""

import logging
from abc import ABC, abstractmethod

from .core import (
    STATUS,
    UNSET_DURATION,
    EngineError,
    LockMixin,
    ResourceResolutionError,
    get_global_player_config,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CompletionRouter",
    "DirectCompletionRouter",
    "PlaybackController",
]


class CompletionRouter(ABC):
    """Decides how a finished track advances the playlist.

    A richer UI can install its own router to refresh the displayed track
    before calling controller.next() itself.
    """

    @abstractmethod
    def route_next(self, controller):
        raise NotImplementedError()


class DirectCompletionRouter(CompletionRouter):
    """Default router: advance straight away."""

    def route_next(self, controller):
        logger.debug("DirectCompletionRouter.route_next()")
        controller.next()


class PlaybackController(LockMixin):
    """Sequential playlist player on top of a BaseMediaEngine.

    State:
    - playlist: ordered list of Track
    - cursor: index of the selected track, None while the playlist is empty
    - started: True once the engine began playing the track at cursor
    - auto_advance: whether a finished track starts the next one

    Each play() bumps a generation counter used as the load tag. Engine
    callbacks carrying another tag belong to an abandoned load and are
    ignored.
    """

    def __init__(self, engine, resolver=None, router=None, auto_advance=None):
        """Initialize the PlaybackController.

        Args:
            engine: BaseMediaEngine to drive, owned by the controller
            resolver: callable(track) -> resource id, defaults to the track id
            router: CompletionRouter used on auto-advance
            auto_advance: initial auto-advance flag, defaults to the global config
        """
        super().__init__()
        if auto_advance is None:
            auto_advance = get_global_player_config().auto_advance

        self._engine = engine
        self._resolver = resolver or (lambda track: track.track_id)
        self._default_router = router or DirectCompletionRouter()
        self._router = self._default_router
        self._playlist = []
        self._cursor = None
        self._started = False
        self._auto_advance = auto_advance
        self._generation = 0
        self._status = STATUS.IDLE

        engine.on_ready(self.on_engine_ready)
        engine.on_finished(self.on_track_finished)
        engine.on_error(self.on_engine_error)

    # Playlist and cursor

    @property
    def engine(self):
        return self._engine

    @property
    def playlist(self):
        """A copy of the current playlist."""
        return list(self._playlist)

    def set_playlist(self, tracks):
        """Replace the playlist, select its first track and forget the started state.

        The engine is not touched until play() is called.
        """
        with self._lock:
            self._playlist = list(tracks)
            logger.debug("PlaybackController.set_playlist(%d tracks)", len(self._playlist))
            self._cursor = 0 if self._playlist else None
            self._started = False
            self._generation += 1
            self._status = STATUS.IDLE

    def set_cursor(self, index: int):
        """Select the track at index without loading it.

        Raises:
            IndexError: If index is outside the playlist
        """
        logger.debug("PlaybackController.set_cursor(%s)", index)
        with self._lock:
            if not 0 <= index < len(self._playlist):
                raise IndexError(f"track index {index} out of range for {len(self._playlist)} tracks")
            if index != self._cursor:
                self._cursor = index
                self._started = False
                self._generation += 1
                self._status = STATUS.IDLE

    def get_cursor(self) -> int | None:
        return self._cursor

    def current_track(self):
        """The selected Track, None while the playlist is empty."""
        with self._lock:
            if self._cursor is None:
                return None
            return self._playlist[self._cursor]

    # Transport

    def play(self):
        """Load the track at cursor; playback starts once the engine is ready.

        Resolution and load failures are logged and leave playback stopped.
        """
        logger.debug("PlaybackController.play()")
        with self._lock:
            if not self._playlist:
                logger.warning("play() ignored: the playlist is empty")
                return

            self._engine.reset()
            self._started = False
            self._generation += 1
            tag = self._generation
            track = self._playlist[self._cursor]
            self._status = STATUS.LOADING

            try:
                resource_id = self._resolver(track)
                self._engine.load_async(resource_id, tag)
            except ResourceResolutionError as e:
                logger.error("Cannot play track %s: %s", track, e)
                self._status = STATUS.ERROR
            except EngineError as e:
                logger.error("Engine rejected track %s: %s", track, e)
                self._status = STATUS.ERROR

    def pause(self):
        logger.debug("PlaybackController.pause()")
        with self._lock:
            if not self._playlist:
                logger.warning("pause() ignored: the playlist is empty")
                return
            self._engine.pause()
            if self._started:
                self._status = STATUS.PAUSED

    def resume(self):
        """Resume a paused track, or cold start the track at cursor."""
        logger.debug("PlaybackController.resume()")
        with self._lock:
            if not self._started:
                self.play()
                return
            # re-sync the engine on its own position before restarting
            try:
                self._engine.seek_to(self._engine.current_position_ms())
                self._engine.start()
            except EngineError as e:
                logger.error("Engine failed to resume track %s: %s", self.current_track(), e)
                self._started = False
                self._status = STATUS.ERROR
                return
            self._status = STATUS.PLAYING

    def seek(self, position_ms: int):
        logger.debug("PlaybackController.seek(%s)", position_ms)
        with self._lock:
            if not self._playlist:
                logger.warning("seek() ignored: the playlist is empty")
                return
            self._engine.seek_to(position_ms)

    def next(self) -> bool:
        """Play the next track.

        Returns:
            False when the cursor is already on the last track: the engine is
            moved to the end of the current track and nothing else changes.
        """
        logger.debug("PlaybackController.next()")
        with self._lock:
            if not self._playlist:
                logger.warning("next() ignored: the playlist is empty")
                return False

            if self._cursor + 1 >= len(self._playlist):
                duration = self.current_duration()
                if duration != UNSET_DURATION:
                    self._engine.seek_to(duration)
                return False

            self._cursor += 1
            self._started = False
            self.play()
            return True

    def prev(self) -> bool:
        """Play the previous track.

        Returns:
            False when the cursor is already on the first track, which is
            reloaded from its start.
        """
        logger.debug("PlaybackController.prev()")
        with self._lock:
            if not self._playlist:
                logger.warning("prev() ignored: the playlist is empty")
                return False

            moved = self._cursor > 0
            if moved:
                self._cursor -= 1
            self._started = False
            self.play()
            return moved

    # Flags and queries

    def set_auto_advance(self, flag: bool):
        logger.debug("PlaybackController.set_auto_advance(%s)", flag)
        with self._lock:
            self._auto_advance = bool(flag)

    def is_auto_advance(self) -> bool:
        return self._auto_advance

    def is_started(self) -> bool:
        return self._started

    def status(self) -> STATUS:
        return self._status

    def is_playing(self) -> bool:
        return self._engine.is_playing()

    def current_position(self) -> int:
        return self._engine.current_position_ms()

    def current_duration(self) -> int:
        """Duration of the playing track, UNSET_DURATION when nothing plays."""
        if not self._engine.is_playing():
            return UNSET_DURATION
        return self._engine.duration_ms()

    # Completion routing

    def set_completion_router(self, router: CompletionRouter):
        logger.debug("PlaybackController.set_completion_router(%s)", router)
        with self._lock:
            self._router = router

    def reset_completion_router(self):
        logger.debug("PlaybackController.reset_completion_router()")
        with self._lock:
            self._router = self._default_router

    @property
    def completion_router(self) -> CompletionRouter:
        return self._router

    # Engine callbacks

    def _is_stale(self, tag, event):
        if tag is not None and tag != self._generation:
            logger.debug("Ignoring %s for load %s, active load is %s", event, tag, self._generation)
            return True
        return False

    def on_engine_ready(self, tag=None):
        """Start the prepared track. The only place started becomes True."""
        logger.debug("PlaybackController.on_engine_ready(%s)", tag)
        with self._lock:
            if self._is_stale(tag, "ready"):
                return
            try:
                self._engine.start()
            except EngineError as e:
                logger.error("Engine failed to start track %s: %s", self.current_track(), e)
                self._started = False
                self._status = STATUS.ERROR
                return
            self._started = True
            self._status = STATUS.PLAYING

    def on_track_finished(self, tag=None):
        """Advance on completion, unless auto-advance was disabled for this one track."""
        logger.debug("PlaybackController.on_track_finished(%s)", tag)
        with self._lock:
            if self._is_stale(tag, "completion"):
                return
            if not self._auto_advance:
                self._auto_advance = True
                return
            router = self._router
        router.route_next(self)

    def on_engine_error(self, tag=None, what=None, extra=None):
        """Report an engine failure. Never fatal and never advances."""
        with self._lock:
            if self._is_stale(tag, "error"):
                return
            track = self._playlist[self._cursor] if self._playlist else None
            logger.error("Engine error on track %s (what=%s, extra=%s)", track, what, extra)
            self._started = False
            self._status = STATUS.ERROR
