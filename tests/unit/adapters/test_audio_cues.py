from __future__ import annotations

import sys
import types

import pytest

from typedrill.adapters.audio import cues as cues_module
from typedrill.adapters.audio.cues import (
    SilentCuePlayer,
    SoundCuePlayer,
    build_cue_player,
    find_cue_file,
    play_cue_safely,
)
from typedrill.core.config import TrainerConfig
from typedrill.core.errors import AudioPlaybackError
from typedrill.core.models.enums import Outcome


class FakePygameError(Exception):
    pass


def _fake_pygame(played: list[str], fail_play: bool = False) -> types.ModuleType:
    module = types.ModuleType("pygame")
    module.error = FakePygameError

    class Sound:
        def __init__(self, path: str) -> None:
            self.path = path

        def play(self) -> None:
            if fail_play:
                raise FakePygameError("device lost")
            played.append(self.path)

    module.mixer = types.SimpleNamespace(init=lambda: None, quit=lambda: None, Sound=Sound)
    return module


@pytest.fixture
def audio_dir(tmp_path):
    directory = tmp_path / "audio"
    directory.mkdir()
    (directory / "press.mp3").write_bytes(b"")
    (directory / "wrong.wav").write_bytes(b"")
    return directory


def test_find_cue_file_checks_known_suffixes(audio_dir):
    assert find_cue_file(audio_dir, "press") == audio_dir / "press.mp3"
    assert find_cue_file(audio_dir, "wrong") == audio_dir / "wrong.wav"
    assert find_cue_file(audio_dir, "missing") is None


def test_sound_player_requires_cue_files(tmp_path):
    player = SoundCuePlayer(tmp_path)
    with pytest.raises(AudioPlaybackError, match="No 'press' sound"):
        player.open()


def test_sound_player_plays_matching_cue(monkeypatch, audio_dir):
    played: list[str] = []
    monkeypatch.setitem(sys.modules, "pygame", _fake_pygame(played))
    player = SoundCuePlayer(audio_dir)
    player.play(Outcome.CORRECT)
    player.play(Outcome.INCORRECT)
    assert played == [str(audio_dir / "press.mp3"), str(audio_dir / "wrong.wav")]
    player.close()


def test_sound_player_wraps_mixer_errors(monkeypatch, audio_dir):
    monkeypatch.setitem(sys.modules, "pygame", _fake_pygame([], fail_play=True))
    player = SoundCuePlayer(audio_dir)
    with pytest.raises(AudioPlaybackError, match="device lost"):
        player.play(Outcome.INCORRECT)


def test_play_cue_safely_swallows_playback_errors():
    class BrokenPlayer:
        def play(self, outcome: Outcome) -> None:
            raise AudioPlaybackError("no device")

        def close(self) -> None:
            return None

    assert play_cue_safely(BrokenPlayer(), Outcome.CORRECT) is False
    assert play_cue_safely(SilentCuePlayer(), Outcome.CORRECT) is True


def test_build_cue_player_muted():
    assert isinstance(build_cue_player(TrainerConfig(sound=False)), SilentCuePlayer)


def test_build_cue_player_falls_back_to_silence(tmp_path):
    config = TrainerConfig(audio_dir=tmp_path / "nowhere")
    assert isinstance(build_cue_player(config), SilentCuePlayer)


def test_build_cue_player_uses_sound_files(monkeypatch, audio_dir):
    monkeypatch.setitem(sys.modules, "pygame", _fake_pygame([]))
    player = build_cue_player(TrainerConfig(audio_dir=audio_dir))
    assert isinstance(player, SoundCuePlayer)


def test_play_cue_safely_quiet_logs_at_debug(recording_log):
    log = recording_log(cues_module)

    class BrokenPlayer:
        def play(self, outcome: Outcome) -> None:
            raise AudioPlaybackError("no device")

        def close(self) -> None:
            return None

    play_cue_safely(BrokenPlayer(), Outcome.CORRECT)
    play_cue_safely(BrokenPlayer(), Outcome.INCORRECT, quiet=True)
    assert [level for level, _ in log.named("audio_cue_failed")] == ["warning", "debug"]
