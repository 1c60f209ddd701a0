"""Track model."""

from dataclasses import dataclass

__all__ = [
    "Track",
]


@dataclass(frozen=True)
class Track:
    """One playable audio item.

    Attributes:
        track_id: Opaque identifier resolved into a playable resource
            (a MediaStore id on Android, a file path on desktop)
        title: Display title
        artist: Display artist
        duration_ms: Display duration, None until known
    """

    track_id: object
    title: str = ""
    artist: str = ""
    duration_ms: int | None = None

    def __post_init__(self):
        if self.track_id is None:
            raise ValueError("track_id is required")
        if self.duration_ms is not None and self.duration_ms < 0:
            raise ValueError(f"duration_ms must be positive, got {self.duration_ms}")

    def __str__(self):
        if self.title and self.artist:
            return f"{self.artist} - {self.title}"
        return self.title or str(self.track_id)
