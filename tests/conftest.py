"""Test configuration and fixtures for simple-player tests."""

import importlib
import sys
import types
from collections import defaultdict
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from simple_player.controller import PlaybackController
from simple_player.core import PlayerConfig, get_global_player_config, set_global_player_config

from .mock_class import FakeMediaEngine, create_tracks


@pytest.fixture
def engine():
    """A FakeMediaEngine with manual load completion."""
    return FakeMediaEngine()


@pytest.fixture
def controller(engine):
    """A PlaybackController over the fake engine, playlist not set."""
    return PlaybackController(engine)


@pytest.fixture
def loaded_controller(controller):
    """A PlaybackController holding a three track playlist."""

    def _create(count=3):
        controller.set_playlist(create_tracks(count))
        return controller

    return _create


@pytest.fixture(autouse=True)
def restore_global_config():
    """Put the global PlayerConfig back after each test."""
    saved = get_global_player_config()
    set_global_player_config(PlayerConfig())
    yield
    set_global_player_config(saved)


class FakePythonJavaClass:
    """Stand-in base class for jnius.PythonJavaClass in tests."""

    def __init__(self, *args, **kwargs):
        pass


class FakeJavaException(Exception):
    """Stand-in for jnius.JavaException in tests."""


def _fake_java_method(signature):
    return lambda fn: fn


def _reimport(module_name, prefix):
    for name in [name for name in sys.modules if name.startswith(prefix)]:
        sys.modules.pop(name)
    return importlib.import_module(module_name)


@pytest.fixture
def vlc_module():
    """Import the desktop backend with the vlc module replaced by a mock."""
    vlc = MagicMock(name="vlc")
    vlc.MediaParsedStatus.done = "done"
    vlc.MediaParsedStatus.failed = "failed"
    with patch.dict(sys.modules, {"vlc": vlc}):
        module = _reimport("simple_player.platform.linux.engine", "simple_player.platform.linux")
        yield SimpleNamespace(vlc=vlc, module=module)


@pytest.fixture
def android_api():
    """Import the Android backend with jnius and android replaced by fakes.

    classes maps a Java class name to the MagicMock autoclass() returned for it.
    """
    classes = defaultdict(MagicMock)

    jnius = types.ModuleType("jnius")
    jnius.autoclass = classes.__getitem__
    jnius.PythonJavaClass = FakePythonJavaClass
    jnius.java_method = _fake_java_method
    jnius.JavaException = FakeJavaException

    android = types.ModuleType("android")
    android.api_version = 29

    with patch.dict(sys.modules, {"jnius": jnius, "android": android}):
        module = _reimport("simple_player.platform.android", "simple_player.platform.android")
        yield SimpleNamespace(
            classes=classes,
            module=module,
            engine_module=sys.modules["simple_player.platform.android.engine"],
            JavaException=FakeJavaException,
            media_player=classes["android.media.MediaPlayer"].return_value,
        )
