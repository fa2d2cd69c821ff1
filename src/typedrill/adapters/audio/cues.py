from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import structlog

from typedrill.core.config import TrainerConfig
from typedrill.core.errors import AudioPlaybackError
from typedrill.core.models.enums import Outcome
from typedrill.core.protocols import CuePlayer

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

CUE_NAMES: dict[Outcome, str] = {
    Outcome.CORRECT: "press",
    Outcome.INCORRECT: "wrong",
}
SOUND_SUFFIXES = (".wav", ".ogg", ".mp3")


def find_cue_file(audio_dir: Path, name: str) -> Path | None:
    for suffix in SOUND_SUFFIXES:
        candidate = audio_dir / f"{name}{suffix}"
        if candidate.is_file():
            return candidate
    return None


class SilentCuePlayer:
    def play(self, outcome: Outcome) -> None:
        return None

    def close(self) -> None:
        return None


class SoundCuePlayer:
    """Plays ``press`` and ``wrong`` sound files through pygame's mixer."""

    def __init__(self, audio_dir: Path) -> None:
        self._audio_dir = audio_dir
        self._sounds: dict[Outcome, Any] | None = None

    def open(self) -> None:
        if self._sounds is not None:
            return
        paths: dict[Outcome, Path] = {}
        for outcome, name in CUE_NAMES.items():
            path = find_cue_file(self._audio_dir, name)
            if path is None:
                raise AudioPlaybackError(f"No '{name}' sound in {self._audio_dir}.")
            paths[outcome] = path
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        try:
            pygame.mixer.init()
            self._sounds = {
                outcome: pygame.mixer.Sound(str(path)) for outcome, path in paths.items()
            }
        except pygame.error as exc:
            raise AudioPlaybackError(f"Audio mixer unavailable: {exc}") from exc
        log.debug("audio_cues_loaded", audio_dir=str(self._audio_dir))

    def play(self, outcome: Outcome) -> None:
        if self._sounds is None:
            self.open()
        assert self._sounds is not None
        import pygame

        try:
            self._sounds[outcome].play()
        except pygame.error as exc:
            raise AudioPlaybackError(f"Failed to play '{CUE_NAMES[outcome]}' cue: {exc}") from exc

    def close(self) -> None:
        if self._sounds is None:
            return
        import pygame

        pygame.mixer.quit()
        self._sounds = None


def play_cue_safely(player: CuePlayer, outcome: Outcome, quiet: bool = False) -> bool:
    """Play a cue, logging and dropping any playback failure.

    With ``quiet`` the failure is logged at DEBUG, for callers that own the screen.
    """
    try:
        player.play(outcome)
    except AudioPlaybackError as exc:
        emit = log.debug if quiet else log.warning
        emit("audio_cue_failed", outcome=outcome.value, error=str(exc))
        return False
    return True


def build_cue_player(config: TrainerConfig) -> SoundCuePlayer | SilentCuePlayer:
    if not config.sound:
        return SilentCuePlayer()
    player = SoundCuePlayer(config.audio_dir)
    try:
        player.open()
    except AudioPlaybackError as exc:
        log.warning("audio_unavailable", error=str(exc))
        return SilentCuePlayer()
    return player
