"""Tests for the Android backend: MediaPlayer engine, MediaStore resolver and media session."""

from unittest.mock import MagicMock, patch

import pytest

from simple_player.core import EngineError, PlayerConfig, ResourceResolutionError, SessionStateError, Track


@pytest.fixture
def context():
    return MagicMock(name="context")


@pytest.fixture
def android_engine(android_api, context):
    return android_api.module.AndroidMediaEngine(PlayerConfig(), context=context)


def _listener(media_player, setter):
    return getattr(media_player, setter).call_args.args[0]


class TestAndroidMediaEngineSetup:
    """Tests for MediaPlayer configuration."""

    def test_wake_lock(self, android_api, android_engine, context):
        power_manager = android_api.classes["android.os.PowerManager"]
        android_api.media_player.setWakeMode.assert_called_once_with(
            context.getApplicationContext.return_value, power_manager.PARTIAL_WAKE_LOCK
        )

    def test_no_wake_lock(self, android_api, context):
        android_api.module.AndroidMediaEngine(PlayerConfig(wake_lock=False), context=context)
        android_api.media_player.setWakeMode.assert_not_called()

    def test_audio_attributes(self, android_api, android_engine):
        android_api.media_player.setAudioAttributes.assert_called_once()
        android_api.media_player.setAudioStreamType.assert_not_called()

    def test_legacy_stream_type(self, android_api, context):
        with patch.object(android_api.engine_module, "api_version", 19):
            android_api.module.AndroidMediaEngine(PlayerConfig(), context=context)
        android_api.media_player.setAudioStreamType.assert_called_once()

    def test_listeners_registered(self, android_api, android_engine):
        media_player = android_api.media_player
        media_player.setOnPreparedListener.assert_called_once_with(android_engine._prepared_listener)
        media_player.setOnCompletionListener.assert_called_once_with(android_engine._completion_listener)
        media_player.setOnErrorListener.assert_called_once_with(android_engine._error_listener)

    def test_default_context_from_service(self, android_api):
        engine = android_api.module.AndroidMediaEngine(PlayerConfig())
        assert engine._context is android_api.classes["org.kivy.android.PythonService"].mService


class TestAndroidMediaEngineLoad:
    """Tests for prepareAsync based loading."""

    def test_load_path(self, android_api, android_engine):
        android_engine.load_async("/sdcard/Music/a.mp3", 3)
        android_api.media_player.setDataSource.assert_called_once_with("/sdcard/Music/a.mp3")
        android_api.media_player.prepareAsync.assert_called_once_with()

    def test_load_uri(self, android_api, android_engine, context):
        uri = MagicMock(name="uri")
        android_engine.load_async(uri, 3)
        android_api.media_player.setDataSource.assert_called_once_with(
            context.getApplicationContext.return_value, uri
        )

    def test_load_failure(self, android_api, android_engine):
        android_api.media_player.setDataSource.side_effect = android_api.JavaException("ENOENT")
        with pytest.raises(EngineError):
            android_engine.load_async("/sdcard/Music/missing.mp3", 3)
        android_api.media_player.prepareAsync.assert_not_called()


class TestAndroidMediaEngineListeners:
    """Tests for the MediaPlayer listeners."""

    def test_prepared_reports_ready(self, android_api, android_engine):
        ready = []
        android_engine.on_ready(ready.append)
        android_engine.load_async("/a.mp3", 6)

        _listener(android_api.media_player, "setOnPreparedListener").onPrepared(android_api.media_player)

        assert ready == [6]

    def test_completion_reports_finished(self, android_api, android_engine):
        finished = []
        android_engine.on_finished(finished.append)
        android_engine.load_async("/a.mp3", 6)

        _listener(android_api.media_player, "setOnCompletionListener").onCompletion(android_api.media_player)

        assert finished == [6]

    def test_error_reports_and_is_handled(self, android_api, android_engine):
        """onError returns True so MediaPlayer does not also call onCompletion."""
        errors = []
        android_engine.on_error(lambda tag, what, extra: errors.append((tag, what, extra)))
        android_engine.load_async("/a.mp3", 6)

        handled = _listener(android_api.media_player, "setOnErrorListener").onError(
            android_api.media_player, 1, -1004
        )

        assert handled is True
        assert errors == [(6, 1, -1004)]

    def test_callbacks_dropped_after_reset(self, android_api, android_engine):
        ready, finished = [], []
        android_engine.on_ready(ready.append)
        android_engine.on_finished(finished.append)
        android_engine.load_async("/a.mp3", 6)
        android_engine.reset()

        _listener(android_api.media_player, "setOnPreparedListener").onPrepared(android_api.media_player)
        _listener(android_api.media_player, "setOnCompletionListener").onCompletion(android_api.media_player)

        assert ready == []
        assert finished == []


class TestAndroidMediaEngineTransport:
    """Tests for transport, queries and lifecycle."""

    def test_start(self, android_api, android_engine):
        android_engine.start()
        android_api.media_player.start.assert_called_once_with()

    def test_start_failure(self, android_api, android_engine):
        android_api.media_player.start.side_effect = android_api.JavaException("IllegalStateException")
        with pytest.raises(EngineError):
            android_engine.start()

    def test_pause_while_playing(self, android_api, android_engine):
        android_api.media_player.isPlaying.return_value = True
        android_engine.pause()
        android_api.media_player.pause.assert_called_once_with()

    def test_pause_while_not_playing(self, android_api, android_engine):
        android_api.media_player.isPlaying.return_value = False
        android_engine.pause()
        android_api.media_player.pause.assert_not_called()

    def test_seek_failure_is_logged(self, android_api, android_engine, caplog):
        android_api.media_player.seekTo.side_effect = android_api.JavaException("IllegalStateException")
        android_engine.seek_to(100)
        assert "seekTo" in caplog.text

    def test_queries(self, android_api, android_engine):
        media_player = android_api.media_player
        media_player.isPlaying.return_value = True
        media_player.getCurrentPosition.return_value = 1200
        media_player.getDuration.return_value = 240000
        assert android_engine.is_playing() is True
        assert android_engine.current_position_ms() == 1200
        assert android_engine.duration_ms() == 240000

    def test_reset(self, android_api, android_engine):
        android_engine.reset()
        android_api.media_player.reset.assert_called_once_with()

    def test_release(self, android_api, android_engine):
        android_engine.release()
        android_engine.release()

        android_api.media_player.release.assert_called_once_with()
        assert android_engine.released is True
        assert android_engine.is_playing() is False
        assert android_engine.current_position_ms() == 0


class TestMediaStoreResolver:
    """Tests for MediaStoreResolver."""

    def test_media_id_to_content_uri(self, android_api):
        content_uris = android_api.classes["android.content.ContentUris"]
        media = android_api.classes["android.provider.MediaStore$Audio$Media"]

        uri = android_api.module.MediaStoreResolver()(Track(42))

        content_uris.withAppendedId.assert_called_once_with(media.EXTERNAL_CONTENT_URI, 42)
        assert uri is content_uris.withAppendedId.return_value

    def test_numeric_string_id(self, android_api):
        content_uris = android_api.classes["android.content.ContentUris"]
        android_api.module.MediaStoreResolver()(Track("17"))
        assert content_uris.withAppendedId.call_args.args[1] == 17

    def test_absolute_path_passes_through(self, android_api):
        assert android_api.module.MediaStoreResolver()(Track("/sdcard/a.mp3")) == "/sdcard/a.mp3"

    @pytest.mark.parametrize("track_id", ["abc", -3, 1.5j])
    def test_invalid_ids(self, android_api, track_id):
        with pytest.raises(ResourceResolutionError):
            android_api.module.MediaStoreResolver()(Track(track_id))


class TestAndroidMediaSession:
    """Tests for AndroidMediaSession."""

    def test_attach_and_detach(self, android_api, context):
        media_session = android_api.classes["android.media.session.MediaSession"]
        session = android_api.module.AndroidMediaSession(PlayerConfig(session_tag="Tag"), context=context)

        session.attach(MagicMock())
        media_session.assert_called_once_with(context, "Tag")
        media_session.return_value.setActive.assert_called_once_with(True)

        session.detach()
        media_session.return_value.setActive.assert_called_with(False)
        media_session.return_value.release.assert_called_once_with()

    def test_double_attach(self, android_api, context):
        session = android_api.module.AndroidMediaSession(PlayerConfig(), context=context)
        session.attach(MagicMock())
        with pytest.raises(SessionStateError):
            session.attach(MagicMock())

    def test_detach_without_attach(self, android_api, context):
        session = android_api.module.AndroidMediaSession(PlayerConfig(), context=context)
        with pytest.raises(SessionStateError):
            session.detach()

    def test_update_sets_state_and_metadata(self, android_api, context):
        media_session = android_api.classes["android.media.session.MediaSession"].return_value
        session = android_api.module.AndroidMediaSession(PlayerConfig(), context=context)
        session.attach(MagicMock())

        session.update(Track(1, title="Song", artist="Band", duration_ms=1000), True, 250)

        media_session.setPlaybackState.assert_called_once()
        media_session.setMetadata.assert_called_once()

    def test_update_before_attach_is_ignored(self, android_api, context):
        media_session = android_api.classes["android.media.session.MediaSession"].return_value
        session = android_api.module.AndroidMediaSession(PlayerConfig(), context=context)
        session.update(Track(1), True)
        media_session.setPlaybackState.assert_not_called()
