"""Widget state types with chainable style builders."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, List, Optional

from jeditr.state import ElementState
from jeditr.style import Border, BorderRadius, Color, Padding


def _restyle(base: ElementState, **changes: Any) -> ElementState:
    """Return a copy of ``base`` with its style fields updated."""
    style = replace(base.style, **changes)
    return replace(base, children=list(base.children), style=style)


def _reradius(border: Optional[Border], border_radius: BorderRadius) -> Optional[Border]:
    """Return the border with new corner radii, or None when there is no border."""
    if border is None:
        return None
    return replace(border, radius=border_radius)


@dataclass
class ButtonState:
    """A clickable button with a text label."""

    label: str
    base: ElementState = field(default_factory=ElementState)
    is_pressed: bool = False
    is_hovered: bool = False

    def padding(self, padding: Padding) -> ButtonState:
        """Return a copy with the given padding."""
        return replace(self, base=_restyle(self.base, padding=padding))

    def background_color(self, color: Color) -> ButtonState:
        """Return a copy with the given background colour."""
        return replace(self, base=_restyle(self.base, background=color))

    def border(self, border: Border) -> ButtonState:
        """Return a copy with the given border."""
        return replace(self, base=_restyle(self.base, border=border))

    def with_border_radius(self, border_radius: BorderRadius) -> ButtonState:
        """Return a copy whose border, if any, uses the given corner radii."""
        border = _reradius(self.base.style.border, border_radius)
        return replace(self, base=_restyle(self.base, border=border))


@dataclass
class ContainerState:
    """A widget that groups child widgets."""

    children: List[Any] = field(default_factory=list)
    base: ElementState = field(default_factory=ElementState)
    is_hovered: bool = False

    def padding(self, padding: Padding) -> ContainerState:
        """Return a copy with the given padding."""
        return replace(self, base=_restyle(self.base, padding=padding))

    def background_color(self, color: Color) -> ContainerState:
        """Return a copy with the given background colour."""
        return replace(self, base=_restyle(self.base, background=color))

    def border(self, border: Border) -> ContainerState:
        """Return a copy with the given border."""
        return replace(self, base=_restyle(self.base, border=border))

    def with_border_radius(self, border_radius: BorderRadius) -> ContainerState:
        """Return a copy whose border, if any, uses the given corner radii."""
        border = _reradius(self.base.style.border, border_radius)
        return replace(self, base=_restyle(self.base, border=border))