"""UI module containing widgets, styles, and widget ids."""

from ui.widgets import DrawerPanel, KnobButton
from ui import ids

__all__ = [
    # Widgets
    "DrawerPanel",
    "KnobButton",
]
