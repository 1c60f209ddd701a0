"""BaseMediaEngine class for platform media players.

This module provides the BaseMediaEngine abstract base class which defines
the narrow capability a PlaybackController drives: load a resource
asynchronously, start/pause/seek it, query it, and report back through
ready/finished/error callbacks.
"""

import logging
from abc import ABC, abstractmethod

from .exceptions import EngineError

logger = logging.getLogger(__name__)

__all__ = [
    "BaseMediaEngine",
]


class BaseMediaEngine(ABC):
    """Base class for platform media engines.

    Every load request carries a tag chosen by the caller. The engine hands
    that tag back to the ready/finished/error callbacks of that load so the
    caller can drop notifications belonging to a superseded request.

    Platform-specific implementations must implement:
    - reset(), release()
    - _do_load(resource_id, tag): start loading, report through _notify_*()
    - start(), pause(), seek_to()
    - is_playing(), current_position_ms(), duration_ms()
    """

    def __init__(self):
        self._ready_callbacks = []
        self._finished_callbacks = []
        self._error_callbacks = []
        self._released = False

    # Callback registration

    def on_ready(self, callback):
        """Register callback(tag) called once a load is ready to start."""
        self._ready_callbacks.append(callback)

    def on_finished(self, callback):
        """Register callback(tag) called when the loaded track ends."""
        self._finished_callbacks.append(callback)

    def on_error(self, callback):
        """Register callback(tag, what, extra) called on load or playback errors."""
        self._error_callbacks.append(callback)

    def _notify_ready(self, tag):
        logger.debug("%s._notify_ready(%s)", self.__class__.__name__, tag)
        self._dispatch(self._ready_callbacks, tag)

    def _notify_finished(self, tag):
        logger.debug("%s._notify_finished(%s)", self.__class__.__name__, tag)
        self._dispatch(self._finished_callbacks, tag)

    def _notify_error(self, tag, what=None, extra=None):
        logger.debug("%s._notify_error(%s, %s, %s)", self.__class__.__name__, tag, what, extra)
        self._dispatch(self._error_callbacks, tag, what, extra)

    def _dispatch(self, callbacks, *args):
        # Callbacks run on the engine's notification thread: never let an
        # exception escape into native code.
        for callback in list(callbacks):
            try:
                callback(*args)
            except Exception:
                logger.exception("Engine callback %r failed", callback)

    # Loading

    @property
    def released(self) -> bool:
        return self._released

    def load_async(self, resource_id, tag=None):
        """Start loading resource_id; returns immediately.

        Exactly one of the ready or error callbacks is called later with tag.

        Raises:
            EngineError: If the engine is released or the load request is rejected
        """
        logger.debug("%s.load_async(%s, %s)", self.__class__.__name__, resource_id, tag)
        if self._released:
            raise EngineError(f"{self.__class__.__name__} is released")
        self._do_load(resource_id, tag)

    @abstractmethod
    def _do_load(self, resource_id, tag):
        """Hook for subclasses to set the data source and prepare it asynchronously."""
        raise NotImplementedError()

    @abstractmethod
    def reset(self):
        """Stop and drop the loaded resource, abandoning any pending load."""
        raise NotImplementedError()

    @abstractmethod
    def release(self):
        """Free the native player. The engine cannot be used afterwards."""
        raise NotImplementedError()

    # Transport

    @abstractmethod
    def start(self):
        raise NotImplementedError()

    @abstractmethod
    def pause(self):
        raise NotImplementedError()

    @abstractmethod
    def seek_to(self, position_ms: int):
        raise NotImplementedError()

    # Queries

    @abstractmethod
    def is_playing(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def current_position_ms(self) -> int:
        raise NotImplementedError()

    @abstractmethod
    def duration_ms(self) -> int:
        """Duration of the loaded track, only meaningful while playing."""
        raise NotImplementedError()
