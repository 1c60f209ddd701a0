"""Player configuration for the simple-player library.

This module provides the PlayerConfig dataclass and the process wide default
used by the platform factories when no explicit config is given.
"""

from dataclasses import dataclass

__all__ = [
    "PlayerConfig",
    "get_global_player_config",
    "set_global_player_config",
]


@dataclass
class PlayerConfig:
    """Configuration for a playback session.

    Attributes:
        auto_advance: Whether a finished track starts the next one
        wake_lock: Keep the CPU awake while playing (Android only)
        vlc_args: Arguments given to the libvlc instance (desktop only)
        session_tag: Tag of the OS media session (Android only)
        library_root: Directory relative track paths are resolved against
            (desktop only), None to accept absolute paths only
    """

    auto_advance: bool = True
    wake_lock: bool = True
    vlc_args: tuple = ("--no-video", "--quiet")
    session_tag: str = "SimplePlayer"
    library_root: str | None = None

    def __post_init__(self):
        """Validate and normalize configuration parameters."""
        if isinstance(self.vlc_args, str):
            self.vlc_args = tuple(self.vlc_args.split())
        else:
            self.vlc_args = tuple(self.vlc_args)

        if not self.session_tag:
            raise ValueError("session_tag must not be empty")

        if not isinstance(self.auto_advance, bool):
            raise TypeError(f"auto_advance must be a bool, got {type(self.auto_advance).__name__}")


_global_player_config: PlayerConfig = PlayerConfig()


def get_global_player_config() -> PlayerConfig:
    """Get the global default player configuration.

    Returns:
        The current global PlayerConfig instance.
    """
    return _global_player_config


def set_global_player_config(config: PlayerConfig) -> None:
    """Set the global default player configuration.

    Only objects created after this call pick the new config up.

    Args:
        config: The new global PlayerConfig instance.
    """
    global _global_player_config
    if not isinstance(config, PlayerConfig):
        raise TypeError(f"Expected PlayerConfig, got {type(config).__name__}")
    _global_player_config = config
