"""Playback constants for the simple-player library."""

# Returned by current_duration() whenever the engine is not playing
UNSET_DURATION = -1

# Position reported before anything has been loaded
NO_POSITION = 0

# Environment variable overriding the platform engine selection
ENGINE_ENV_VAR = "SIMPLE_PLAYER_ENGINE"

__all__ = [
    "UNSET_DURATION",
    "NO_POSITION",
    "ENGINE_ENV_VAR",
]
