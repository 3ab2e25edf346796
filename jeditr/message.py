"""Messages emitted by UI elements in response to input."""

from __future__ import annotations

from dataclasses import dataclass

from jeditr.state import ElementId

_U32_MAX = 2**32 - 1


class UiMessage:
    """Base class of every UI message."""

    __slots__ = ()


@dataclass(frozen=True)
class Click(UiMessage):
    """An element was clicked."""

    id: ElementId


@dataclass(frozen=True)
class Hover(UiMessage):
    """The pointer entered or left an element."""

    id: ElementId
    hovered: bool


@dataclass(frozen=True)
class KeyPress(UiMessage):
    """A physical key was pressed while an element had focus."""

    id: ElementId
    key: str


@dataclass(frozen=True)
class TextInput(UiMessage):
    """Text was entered into an element."""

    id: ElementId
    text: str


@dataclass(frozen=True)
class Resize(UiMessage):
    """An element changed size, in physical pixels."""

    id: ElementId
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not 0 <= value <= _U32_MAX:
                raise ValueError(f"{name} must be between 0 and {_U32_MAX}, got {value}")