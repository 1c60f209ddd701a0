"""Media session collaborators: OS level notification/session objects."""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

__all__ = [
    "BaseMediaSession",
    "NullMediaSession",
]


class BaseMediaSession(ABC):
    """OS media session owned by a PlaybackService.

    attach() acquires the OS resources, detach() releases them. The service
    guarantees each is called once per session.
    """

    @abstractmethod
    def attach(self, service):
        raise NotImplementedError()

    @abstractmethod
    def detach(self):
        raise NotImplementedError()

    def update(self, track, playing, position_ms=0):
        """Refresh the displayed track and play state."""


class NullMediaSession(BaseMediaSession):
    """Session for platforms without an OS media session."""

    def attach(self, service):
        logger.debug("NullMediaSession.attach()")

    def detach(self):
        logger.debug("NullMediaSession.detach()")
