from __future__ import annotations

from collections.abc import Iterable, Iterator

import pytest

from typedrill.core.models.enums import Outcome
from typedrill.core.models.keys import KeyEvent
from typedrill.core.models.score import Summary
from typedrill.core.models.text import PracticeText


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Automatically add markers based on test location.

    - tests/unit/ -> @pytest.mark.unit
    - tests/integration/ -> @pytest.mark.integration
    - tests/e2e/ -> @pytest.mark.e2e
    """
    for item in items:
        path = str(item.fspath)
        existing_markers = {m.name for m in item.iter_markers()}

        if "/unit/" in path and "unit" not in existing_markers:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path and "integration" not in existing_markers:
            item.add_marker(pytest.mark.integration)
        elif "/e2e/" in path and "e2e" not in existing_markers:
            item.add_marker(pytest.mark.e2e)


class ScriptedKeys:
    """Key source replaying a fixed list of events."""

    def __init__(self, events: Iterable[KeyEvent]) -> None:
        self.events = list(events)
        self.entered = False
        self.exited = False

    def __enter__(self) -> ScriptedKeys:
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.exited = True

    def __iter__(self) -> Iterator[KeyEvent]:
        return iter(self.events)


class RecordingRenderer:
    def __init__(self) -> None:
        self.started_with: PracticeText | None = None
        self.cursors: list[int] = []
        self.stopped = False
        self.summary: Summary | None = None

    def start(self, text: PracticeText) -> None:
        self.started_with = text

    def update(self, text: PracticeText, cursor: int) -> None:
        self.cursors.append(cursor)

    def stop(self) -> None:
        self.stopped = True

    def show_summary(self, summary: Summary) -> None:
        self.summary = summary


class RecordingCues:
    def __init__(self) -> None:
        self.played: list[Outcome] = []
        self.closed = False

    def play(self, outcome: Outcome) -> None:
        self.played.append(outcome)

    def close(self) -> None:
        self.closed = True


def typed(chars: str) -> list[KeyEvent]:
    return [KeyEvent.typed(char) for char in chars]


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def recording_cues() -> RecordingCues:
    return RecordingCues()


@pytest.fixture
def practice_text() -> PracticeText:
    return PracticeText("The cat sat.", source="memory")


@pytest.fixture
def fixed_start() -> float:
    """A perf_counter reading to measure sessions from."""
    return 1000.0


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch):
    """Keep tests away from the user's real config file."""
    config_home = tmp_path / "config-home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def text_file(tmp_path):
    def _create(content: str, name: str = "text.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _create


@pytest.fixture
def scripted_keys():
    """Factory for key sources: pass typed characters or explicit events."""

    def _create(chars: str = "", events: Iterable[KeyEvent] | None = None) -> ScriptedKeys:
        return ScriptedKeys(events if events is not None else typed(chars))

    return _create


class RecordingLog:
    """Stand-in for a module's structlog logger that keeps every call."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict]] = []

    def _record(self, level: str):
        def emit(event: str, **kw) -> None:
            self.events.append((level, event, kw))

        return emit

    def __getattr__(self, level: str):
        return self._record(level)

    def named(self, event: str) -> list[tuple[str, dict]]:
        return [(level, kw) for level, name, kw in self.events if name == event]


@pytest.fixture
def recording_log(monkeypatch):
    """Replace ``module.log`` with a RecordingLog and return it."""

    def _patch(module) -> RecordingLog:
        fake = RecordingLog()
        monkeypatch.setattr(module, "log", fake)
        return fake

    return _patch
