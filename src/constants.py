"""Shared constants for cabinet."""

# Drawer attributes
STATE_ATTR = "data-state"
HIDDEN_ATTR = "hidden"
KNOB_ATTR = "data-knob"
HASH_ATTR = "data-hash"
HASH_STATE_ATTR = "data-hash-state"
MODULE_ATTR = "data-module"

# Knob attributes
CYCLE_ATTR = "data-cycle"
ACCESSIBILITY_ATTR = "data-accessibility"

# Attributes a drawer (and every knob edge) observes
WATCHED_ATTRIBUTES = (STATE_ATTR, HIDDEN_ATTR)

# Knob accessibility attributes
ARIA_EXPANDED = "aria-expanded"
ARIA_CONTROLS = "aria-controls"

# External input event that makes a knob cycle its drawers
CLICK_EVENT = "click"

DEFAULT_STATES = ("open", "closed")
DEFAULT_HIDDEN_STATES = ("closed",)
DEFAULT_DRAWER_SELECTOR = f'[{MODULE_ATTR}="drawer"]'
