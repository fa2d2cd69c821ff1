from __future__ import annotations

from collections.abc import Iterator

import attrs

from typedrill.core.errors import EmptyTextError


def _require_content(instance: PracticeText, attribute: attrs.Attribute, value: str) -> None:
    if not value:
        raise EmptyTextError()


@attrs.frozen(slots=True)
class PracticeText:
    """Immutable passage the player has to type, loaded once per session."""

    content: str = attrs.field(validator=[attrs.validators.instance_of(str), _require_content])
    source: str | None = None

    def __len__(self) -> int:
        return len(self.content)

    def __getitem__(self, index: int) -> str:
        return self.content[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.content)

    @property
    def line_count(self) -> int:
        return self.content.count("\n") + 1
