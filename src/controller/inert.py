"""Inert APIs returned for input that isn't an element.

They are falsy and every operation does nothing, so chained calls on a
bad handle degrade to no-ops instead of raising.
"""

from __future__ import annotations

from typing import Any

from model import DrawerSettings, KnobSettings


class _Inert:
    active = False
    element = None
    id = ""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"

    def add_action(self, action: Any) -> None:
        return None

    @property
    def actions(self) -> tuple:
        return ()

    def discard(self) -> None:
        return None


class InertHasher:
    """Stand-in for a drawer's hash binding."""

    hash = ""
    location = None

    def set_url(self) -> None:
        return None

    def clear_url(self) -> None:
        return None

    def wipe_url(self) -> None:
        return None

    def owns_fragment(self) -> bool:
        return False

    def reconcile(self) -> bool:
        return False


class InertDrawer(_Inert):
    """Stand-in for a drawer that couldn't be created."""

    state = None
    hidden = False
    hash = ""
    hash_state = ""
    states: tuple = ()
    hidden_states: tuple = ()

    def __init__(self) -> None:
        self.settings = DrawerSettings()
        self.hasher = InertHasher()

    def set_state(self, target: Any) -> bool:
        return False

    def cycle(self, limited_states: Any = None) -> None:
        return None

    def is_hidden_state(self, state: Any) -> bool:
        return False

    @property
    def knobs(self) -> tuple:
        return ()

    def add_knob(self, target: Any, settings: Any = None) -> list:
        return []

    def detach_knob(self, knob: Any) -> bool:
        return False


class InertKnob(_Inert):
    """Stand-in for a knob that couldn't be created."""

    cycle = False
    accessibility = False

    def __init__(self) -> None:
        self.settings = KnobSettings()

    @property
    def drawers(self) -> tuple:
        return ()

    def attach(self, target: Any) -> list:
        return []

    def detach_drawer(self, drawer: Any) -> bool:
        return False

    def handle_click(self) -> None:
        return None
