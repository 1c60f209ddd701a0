"""Platform-specific implementations for the simple-player library.

This module picks the media engine, track resolver and media session for the
running platform. Backends are imported on first use so that importing
simple_player never requires libvlc or jnius.
"""

import logging
import os

from currentplatform import platform

from simple_player.core import ENGINE_ENV_VAR, FileTrackResolver, NullMediaSession, get_global_player_config

logger = logging.getLogger(__name__)

__all__ = [
    "create_engine",
    "create_resolver",
    "create_session",
    "engine_name",
]

ENGINES = ("vlc", "android")


def engine_name():
    """Name of the backend to use.

    The SIMPLE_PLAYER_ENGINE environment variable overrides the platform default:
        SIMPLE_PLAYER_ENGINE=vlc      : libvlc through python-vlc
        SIMPLE_PLAYER_ENGINE=android  : android.media.MediaPlayer through jnius
    """
    name = os.environ.get(ENGINE_ENV_VAR, "").lower()
    if name:
        if name not in ENGINES:
            raise ValueError(f"{ENGINE_ENV_VAR} must be one of {ENGINES}, got {name!r}")
        return name

    if platform in ("linux", "windows"):
        return "vlc"
    elif platform == "android":
        return "android"
    logger.critical("No implementation found for platform %s", platform)
    raise NotImplementedError(f"No implementation available for platform: {platform}")


def create_engine(config=None):
    """Create the media engine for the running platform."""
    config = config or get_global_player_config()
    name = engine_name()
    logger.debug("create_engine(): %s", name)
    if name == "android":
        from .android import AndroidMediaEngine

        return AndroidMediaEngine(config)

    from .linux import VLCMediaEngine

    return VLCMediaEngine(config)


def create_resolver(config=None):
    """Create the track resolver matching create_engine()."""
    config = config or get_global_player_config()
    if engine_name() == "android":
        from .android import MediaStoreResolver

        return MediaStoreResolver()
    return FileTrackResolver(config.library_root)


def create_session(config=None):
    """Create the OS media session, a NullMediaSession where there is none."""
    config = config or get_global_player_config()
    if engine_name() == "android":
        from .android import AndroidMediaSession

        return AndroidMediaSession(config)
    return NullMediaSession()
