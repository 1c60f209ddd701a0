"""Tests for the Track model."""

import dataclasses

import pytest

from simple_player.core import Track


class TestTrack:
    """Tests for Track."""

    def test_defaults(self):
        track = Track(42)
        assert track.track_id == 42
        assert track.title == ""
        assert track.artist == ""
        assert track.duration_ms is None

    def test_is_immutable(self):
        track = Track(1, title="A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            track.title = "B"

    def test_requires_id(self):
        with pytest.raises(ValueError):
            Track(None)

    def test_rejects_negative_duration(self):
        with pytest.raises(ValueError):
            Track(1, duration_ms=-5)

    def test_equality_and_hash(self):
        assert Track(1, title="A") == Track(1, title="A")
        assert len({Track(1), Track(1), Track(2)}) == 2

    @pytest.mark.parametrize(
        "track, expected",
        [
            (Track(7), "7"),
            (Track(7, title="Song"), "Song"),
            (Track(7, title="Song", artist="Band"), "Band - Song"),
        ],
    )
    def test_str(self, track, expected):
        assert str(track) == expected
