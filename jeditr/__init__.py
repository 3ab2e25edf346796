"""UI element model: styles, element state, messages and widgets."""

__version__ = "0.1.0"
__all__ = ["message", "state", "style", "widgets"]