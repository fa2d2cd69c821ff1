"""Error taxonomy for typing sessions."""

from __future__ import annotations


class TypedrillError(Exception):
    """Base class for all typedrill errors."""


class EmptyTextError(TypedrillError, ValueError):
    """The practice text contained no characters."""

    def __init__(self, message: str = "Practice text is empty.") -> None:
        super().__init__(message)


class SessionAlreadyComplete(TypedrillError, RuntimeError):
    """A keystroke was submitted after the final character was typed."""

    def __init__(self, message: str = "Session is already complete.") -> None:
        super().__init__(message)


class TextLoadError(TypedrillError, OSError):
    """The practice text source could not be read."""


class AudioPlaybackError(TypedrillError, RuntimeError):
    """A sound cue could not be played."""


class InvalidDuration(TypedrillError, ValueError):
    """Elapsed session time was zero or negative."""


class ConfigError(TypedrillError, ValueError):
    """The configuration file could not be parsed or validated."""
