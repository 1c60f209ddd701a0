"""Track resolvers turning a Track into a playable resource id."""

import logging
import os
from abc import ABC, abstractmethod

from .exceptions import ResourceResolutionError

logger = logging.getLogger(__name__)

__all__ = [
    "BaseTrackResolver",
    "FileTrackResolver",
]


class BaseTrackResolver(ABC):
    """Resolve a Track into something the engine's load_async() accepts.

    Implementations raise ResourceResolutionError when the track cannot be
    played; any other exception is a bug.
    """

    def __call__(self, track):
        logger.debug("%s.resolve(%s)", self.__class__.__name__, track.track_id)
        return self.resolve(track)

    @abstractmethod
    def resolve(self, track):
        raise NotImplementedError()


class FileTrackResolver(BaseTrackResolver):
    """Resolve track ids as file paths, optionally below a library root."""

    def __init__(self, root=None):
        self._root = root

    def resolve(self, track):
        path = os.fspath(track.track_id) if isinstance(track.track_id, (str, os.PathLike)) else None
        if not path:
            raise ResourceResolutionError(track, "track id is not a path")

        if not os.path.isabs(path):
            if self._root is None:
                raise ResourceResolutionError(track, "relative path without library root")
            path = os.path.join(self._root, path)

        if not os.path.isfile(path):
            raise ResourceResolutionError(track, f"no such file {path}")
        return path
