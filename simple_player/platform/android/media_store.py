"""Resolve tracks to MediaStore content URIs."""

import logging

from simple_player.core import BaseTrackResolver, ResourceResolutionError

from ._android_api import EXTERNAL_CONTENT_URI, ContentUris

logger = logging.getLogger(__name__)

__all__ = [
    "MediaStoreResolver",
]


class MediaStoreResolver(BaseTrackResolver):
    """Track ids are MediaStore audio ids; absolute paths are passed through."""

    def resolve(self, track):
        track_id = track.track_id
        if isinstance(track_id, str) and track_id.startswith("/"):
            return track_id
        try:
            media_id = int(track_id)
        except (TypeError, ValueError) as e:
            raise ResourceResolutionError(track, "not a MediaStore id") from e
        if media_id < 0:
            raise ResourceResolutionError(track, f"invalid MediaStore id {media_id}")
        return ContentUris.withAppendedId(EXTERNAL_CONTENT_URI, media_id)
