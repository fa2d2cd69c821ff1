from __future__ import annotations

from pathlib import Path

import structlog

from typedrill.core.errors import EmptyTextError, TextLoadError
from typedrill.core.models.text import PracticeText

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def normalize_text(raw: str) -> str:
    """Unify line endings and drop trailing whitespace nobody can see to type."""
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = text.removeprefix("\ufeff")
    return text.rstrip()


class FileTextSource:
    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        self._path = path
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def _read_text(self) -> str:
        try:
            return self._path.read_text(encoding=self._encoding)
        except UnicodeDecodeError as exc:
            raise TextLoadError(f"{self._path} is not valid {self._encoding} text.") from exc
        except OSError as exc:
            reason = exc.strerror or exc.__class__.__name__
            raise TextLoadError(f"Cannot read {self._path}: {reason}.") from exc

    def load(self) -> PracticeText:
        content = normalize_text(self._read_text())
        if not content:
            raise EmptyTextError(f"Practice text {self._path} is empty.")
        text = PracticeText(content, source=str(self._path))
        log.debug("text_loaded", path=str(self._path), length=len(text))
        return text
