"""Drawer: the state machine behind one disclosure region.

The `data-state` attribute on the drawer element is the source of truth.
set_state() writes it synchronously; hidden and hash syncing happen when
the document delivers the resulting mutation, through the action list.
Code that edits `data-state` directly gets the same reactions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Iterable, Sequence

from constants import STATE_ATTR
from controller.actions import hash_callback, hidden_callback
from controller.hashing import HashBinding
from controller.watcher import Action, AttributeWatcher
from dom import AttributeObserver, Element, resolve
from model import DrawerSettings

if TYPE_CHECKING:
    from cabinet import Cabinet
    from controller.knob import Knob

log = logging.getLogger(__name__)


def next_state(states: Sequence[str], current: str | None) -> str | None:
    """The state after `current`, wrapping to the first.

    A current value that isn't in `states` counts as position -1, so the
    first state comes next.
    """
    if not states:
        return None
    index = states.index(current) if current in states else -1
    if index + 1 < len(states):
        return states[index + 1]
    return states[0]


class Drawer:
    """API for one activated drawer element."""

    active = True

    def __init__(self, element: Element, settings: DrawerSettings, cabinet: Cabinet) -> None:
        self.element = element
        self.settings = settings
        self.cabinet = cabinet
        self.hasher = HashBinding(self)
        self.watcher = AttributeWatcher(self)
        self.observer: AttributeObserver | None = None

        # Built-in actions always run first, in this order
        self.watcher.add(hidden_callback)
        self.watcher.add(hash_callback)
        for action in settings.actions:
            self.watcher.add(action)

        if not element.id:
            element.id = settings.uuid()
        self.id = element.id

    def __repr__(self) -> str:
        return f"<Drawer '{self.id}' state={self.state!r}>"

    def activate(self) -> None:
        """Start observing, attach knobs, reconcile the hash, set the initial state."""
        self.observer = self.watcher.observe(self.element)
        if self.settings.knobs:
            self.add_knob(self.settings.knobs)
        self.hasher.reconcile()
        self.set_state(self.settings.init_state)
        log.debug(f"Activated {self!r}")

    @property
    def registry(self):
        return self.cabinet.registry

    # State

    @property
    def states(self) -> list[str]:
        return self.settings.states

    @property
    def hidden_states(self) -> list[str]:
        return self.settings.hidden_states

    @property
    def hash(self) -> str:
        return self.settings.hash

    @hash.setter
    def hash(self, value: str) -> None:
        self.settings.hash = value

    @property
    def hash_state(self) -> str:
        return self.settings.hash_state

    @property
    def state(self) -> str | None:
        return self.element.read(STATE_ATTR)

    @state.setter
    def state(self, value: str) -> None:
        self.set_state(value)

    def set_state(self, target: Any) -> bool:
        """Write `target` to data-state if it is a valid state.

        Returns:
            True if the state was written
        """
        if not self.settings.in_states(target):
            log.debug(f"{self!r}: ignoring unknown state {target!r}")
            return False
        self.element.write(STATE_ATTR, target)
        return True

    def cycle(self, limited_states: Sequence[str] | None = None) -> None:
        """Move to the next state, wrapping after the last.

        With `limited_states`, the candidate is the next entry in that list
        (same wrap rule). It is used only if it's a valid state; otherwise
        the unrestricted next state applies.
        """
        current = self.state
        target = next_state(self.states, current)
        if limited_states:
            candidate = next_state(list(limited_states), current)
            if self.settings.in_states(candidate):
                target = candidate
        self.set_state(target)

    def is_hidden_state(self, state: Any) -> bool:
        return self.settings.is_hidden_state(state)

    @property
    def hidden(self) -> bool:
        return self.element.hidden

    @hidden.setter
    def hidden(self, hide: bool) -> None:
        self.element.hidden = bool(hide)

    # Actions

    @property
    def actions(self) -> tuple[Action, ...]:
        return self.watcher.actions

    def add_action(self, action: Action) -> None:
        self.watcher.add(action)

    # Knobs

    @property
    def knobs(self) -> tuple[Knob, ...]:
        return self.registry.knobs_of(self)

    def add_knob(self, target: Any, settings: Mapping[str, Any] | None = None) -> list[Knob]:
        """Attach knobs by selector, element, knob setup, or a list of those.

        A knob setup is a mapping {"elements": [...], "settings": {...}}.
        Settings only apply to knobs created here; existing knobs keep theirs.
        """
        items: Iterable[Any] = target if isinstance(target, (list, tuple)) else [target]
        attached: list[Knob] = []
        for item in items:
            if isinstance(item, Mapping):
                elements = resolve(item.get("elements", []), self.element.document)
                knob_settings = item.get("settings") or {}
            else:
                elements = resolve(item, self.element.document)
                knob_settings = settings if settings is not None else self.settings.knob_defaults()
            if not elements:
                log.debug(f"{self!r}: no knobs matched {item!r}")
            for element in elements:
                if element is self.element:
                    log.debug(f"{self!r}: a drawer can't be its own knob")
                    continue
                knob = self.cabinet.create_knob(element, knob_settings)
                if not knob:
                    continue
                self.registry.attach(self, knob)
                attached.append(knob)
        return attached

    def detach_knob(self, knob: Knob | Element) -> bool:
        """Detach a knob (or the knob on an element) from this drawer."""
        if isinstance(knob, Element):
            knob = self.registry.get_knob(knob)
        if knob is None:
            return False
        return self.registry.detach(self, knob)

    def on_knob_added(self, knob: Knob) -> None:
        log.debug(f"{self!r}: knob '{knob.id}' attached")

    def on_knob_removed(self, knob: Knob) -> None:
        log.debug(f"{self!r}: knob '{knob.id}' detached")

    # Lifecycle

    def discard(self) -> None:
        """Detach every knob and stop observing."""
        self.registry.discard_drawer(self)
        self.watcher.stop()
        self.observer = None
        self.active = False
