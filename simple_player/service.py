"""PlaybackService: the hosting session around a PlaybackController.

The service owns the media engine, the controller and the OS media session,
and maps transport commands coming from a notification or a bound UI onto
the controller.
"""

import logging
from enum import Enum

from .controller import PlaybackController
from .core import LockMixin, SessionStateError, get_global_player_config
from .platform import create_engine, create_resolver, create_session

logger = logging.getLogger(__name__)

__all__ = [
    "MediaCommand",
    "PlaybackService",
]


class MediaCommand(Enum):
    """Transport commands accepted by PlaybackService.handle_command()."""

    PLAY = "play"
    PAUSE = "pause"
    RESUME = "resume"
    TOGGLE = "toggle"
    NEXT = "next"
    PREVIOUS = "previous"


class PlaybackService(LockMixin):
    """One playback session.

    Lifecycle:
    - construction creates the engine and the controller
    - attach_session() / detach_session() acquire and release the OS media
      session, exactly once each
    - destroy() releases the engine
    """

    def __init__(self, engine=None, session=None, resolver=None, config=None):
        """Initialize the PlaybackService.

        Args:
            engine: BaseMediaEngine, defaults to the platform engine
            session: BaseMediaSession, defaults to the platform session
            resolver: track resolver, defaults to the platform resolver
            config: PlayerConfig, defaults to the global config
        """
        super().__init__()
        config = config or get_global_player_config()
        self._engine = engine or create_engine(config)
        self._session = session or create_session(config)
        self._controller = PlaybackController(
            self._engine,
            resolver=resolver or create_resolver(config),
            auto_advance=config.auto_advance,
        )
        self._attached = False
        self._detached = False
        self._destroyed = False

    @property
    def controller(self) -> PlaybackController:
        return self._controller

    @property
    def session(self):
        return self._session

    def is_attached(self) -> bool:
        return self._attached

    # Session lifecycle

    def attach_session(self):
        logger.debug("PlaybackService.attach_session()")
        with self._lock:
            if self._destroyed:
                raise SessionStateError("service is destroyed")
            if self._attached or self._detached:
                raise SessionStateError("session already attached once")
            self._session.attach(self)
            self._attached = True

    def detach_session(self):
        logger.debug("PlaybackService.detach_session()")
        with self._lock:
            if not self._attached:
                raise SessionStateError("session is not attached")
            self._session.detach()
            self._attached = False
            self._detached = True

    def destroy(self):
        """Detach the session if needed and release the engine."""
        logger.debug("PlaybackService.destroy()")
        with self._lock:
            if self._destroyed:
                return
            if self._attached:
                self.detach_session()
            self._engine.reset()
            self._engine.release()
            self._destroyed = True

    # Completion callbacks

    def set_callbacks(self, router):
        """Route auto-advance through router instead of advancing directly."""
        self._controller.set_completion_router(router)

    def remove_callbacks(self):
        self._controller.reset_completion_router()

    # Commands

    def play_track(self, index: int):
        """Select the track at index and play it.

        Raises:
            IndexError: If index is outside the playlist
        """
        logger.debug("PlaybackService.play_track(%s)", index)
        with self._lock:
            if self._destroyed:
                logger.warning("play_track(%s) ignored: service is destroyed", index)
                return
            self._controller.set_cursor(index)
            self._controller.play()

    def handle_command(self, command):
        """Apply a MediaCommand (or its string value) to the controller.

        Returns:
            The controller's result for NEXT/PREVIOUS, None otherwise.
        """
        logger.debug("PlaybackService.handle_command(%s)", command)
        try:
            command = MediaCommand(command)
        except ValueError:
            logger.error("Unknown media command %r", command)
            return None

        controller = self._controller
        with self._lock:
            if self._destroyed:
                logger.warning("Command %s ignored: service is destroyed", command.value)
                return None

            result = None
            if command == MediaCommand.PLAY:
                controller.play()
            elif command == MediaCommand.PAUSE:
                controller.pause()
            elif command == MediaCommand.RESUME:
                controller.resume()
            elif command == MediaCommand.TOGGLE:
                if controller.is_playing():
                    controller.pause()
                else:
                    controller.resume()
            elif command == MediaCommand.NEXT:
                result = controller.next()
            elif command == MediaCommand.PREVIOUS:
                result = controller.prev()

            if self._attached:
                self._session.update(
                    controller.current_track(), controller.is_playing(), controller.current_position()
                )
            return result
