"""Custom Textual widgets for cabinet.

This package contains the widgets that render drawer and knob elements.
"""

from ui.widgets.knob import KnobButton
from ui.widgets.drawer import DrawerPanel

__all__ = [
    "DrawerPanel",
    "KnobButton",
]
