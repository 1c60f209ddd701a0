"""Core classes for the simple-player library.

This module contains the base classes, models and enums used throughout the library.
"""

from .base_engine import BaseMediaEngine
from .base_session import BaseMediaSession, NullMediaSession
from .config import PlayerConfig, get_global_player_config, set_global_player_config
from .constants import ENGINE_ENV_VAR, NO_POSITION, UNSET_DURATION
from .dispatcher import CallbackDispatcher
from .exceptions import EngineError, PlayerError, ResourceResolutionError, SessionStateError
from .mixins import LockMixin
from .resolver import BaseTrackResolver, FileTrackResolver
from .state import STATUS
from .track import Track

__all__ = [
    "BaseMediaEngine",
    "BaseMediaSession",
    "NullMediaSession",
    "BaseTrackResolver",
    "FileTrackResolver",
    "CallbackDispatcher",
    "LockMixin",
    "PlayerConfig",
    "get_global_player_config",
    "set_global_player_config",
    "STATUS",
    "Track",
    "PlayerError",
    "ResourceResolutionError",
    "EngineError",
    "SessionStateError",
    "UNSET_DURATION",
    "NO_POSITION",
    "ENGINE_ENV_VAR",
]
