"""Visual style primitives: colours, padding, borders and the combined style."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels."""

    r: float
    g: float
    b: float
    a: float

    TRANSPARENT: ClassVar[Color]
    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        """Build an opaque colour."""
        return cls(r, g, b, 1.0)

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        """Build a colour with an explicit alpha channel."""
        return cls(r, g, b, a)


Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Padding:
    """Space between an element's border and its content."""

    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def uniform(cls, value: float) -> Padding:
        """The same padding on all four sides."""
        return cls(top=value, right=value, bottom=value, left=value)

    @classmethod
    def horizontal_vertical(cls, h: float, v: float) -> Padding:
        """Padding `h` on the left and right, `v` on the top and bottom."""
        return cls(top=v, right=h, bottom=v, left=h)


@dataclass(frozen=True)
class BorderRadius:
    """Corner radii of a border."""

    top_left: float
    top_right: float
    bottom_left: float
    bottom_right: float

    @classmethod
    def uniform(cls, value: float) -> BorderRadius:
        """The same radius on every corner."""
        return cls(
            top_left=value,
            top_right=value,
            bottom_left=value,
            bottom_right=value,
        )


@dataclass(frozen=True)
class Border:
    """A border drawn around an element."""

    color: Color
    width: float
    radius: BorderRadius


def _default_border() -> Border:
    return Border(Color.BLACK, 1.0, BorderRadius.uniform(2.0))


@dataclass(frozen=True)
class Style:
    """The complete visual style of an element."""

    padding: Padding = field(default_factory=lambda: Padding.uniform(0.0))
    background: Optional[Color] = Color.BLACK
    border: Optional[Border] = field(default_factory=_default_border)