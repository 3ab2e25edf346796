"""Element identity, per-element state and the UI element registry."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from jeditr.style import Padding, Style


@dataclass(frozen=True)
class ElementId:
    """A unique, hashable identifier for a UI element."""

    value: uuid.UUID

    @classmethod
    def new(cls) -> ElementId:
        """Create a fresh random identifier."""
        return cls(uuid.uuid4())


@dataclass
class ElementState:
    """State shared by every element: identity, children, visibility and style."""

    id: ElementId = field(default_factory=ElementId.new)
    children: List[ElementId] = field(default_factory=list)
    visible: bool = True
    style: Style = field(default_factory=Style)

    def padding(self, padding: Padding) -> ElementState:
        """Return a copy with the given padding."""
        return replace(
            self,
            children=list(self.children),
            style=replace(self.style, padding=padding),
        )


@dataclass
class UiState:
    """The element tree: an optional root and the data of every element."""

    root: Optional[ElementId] = None
    elements: Dict[ElementId, Any] = field(default_factory=dict)

    def with_root(self, element_id: ElementId) -> UiState:
        """Set the root element and return this state."""
        self.root = element_id
        return self

    def add_element(self, element_id: ElementId, data: Any) -> UiState:
        """Register (or replace) an element's data and return this state."""
        self.elements[element_id] = data
        return self