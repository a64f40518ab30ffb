"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""

import re


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


def identifier(value: str) -> str:
    """Make a string usable as a Textual id or class name."""
    cleaned = re.sub(r"[^\w-]", "-", value)
    if not cleaned or cleaned[0].isdigit() or cleaned[0] == "-":
        cleaned = f"x{cleaned}"
    return cleaned


# Container IDs
HEADER_TITLE = "header-title"
KNOB_BAR = "knob-bar"
DRAWERS = "drawers"
STATUS_BAR = "status-bar"

# Per-element widget IDs
DRAWER_PREFIX = "drawer-"
KNOB_PREFIX = "knob-"
HEADING_SUFFIX = "-heading"


def drawer_panel(element_id: str) -> str:
    return identifier(f"{DRAWER_PREFIX}{element_id}")


def knob_button(element_id: str) -> str:
    return identifier(f"{KNOB_PREFIX}{element_id}")


def heading_element(drawer_id: str) -> str:
    """Element id for the heading knob of a drawer."""
    return f"{drawer_id}{HEADING_SUFFIX}"
