"""simple-player: sequential playback of a local audio library."""

from .controller import CompletionRouter, DirectCompletionRouter, PlaybackController  # noqa: F401
from .core import STATUS, UNSET_DURATION, PlayerConfig, Track  # noqa: F401
from .service import MediaCommand, PlaybackService  # noqa: F401

__version__ = "1.0.0"
