"""AttributeWatcher: an ordered action list fed by attribute observers.

A drawer's watcher observes the drawer's own element. A knob's watcher
observes every attached drawer's element, one observer per edge, and all
of those scopes dispatch into the knob's single action list.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from constants import WATCHED_ATTRIBUTES
from dom import AttributeObserver, Element, MutationRecord

log = logging.getLogger(__name__)

Action = Callable[[list[MutationRecord], Any, AttributeObserver], None]


class AttributeWatcher:
    """Runs registered actions, in registration order, for each delivered batch."""

    def __init__(self, owner: Any, attributes: Iterable[str] = WATCHED_ATTRIBUTES) -> None:
        self.owner = owner
        self.attributes = tuple(attributes)
        self._actions: list[Action] = []
        self._observers: list[AttributeObserver] = []

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self._actions)

    def add(self, action: Action) -> None:
        """Append an action. Adding the same callable twice is a no-op."""
        if not callable(action):
            log.debug(f"Ignoring non-callable action {action!r}")
            return
        if action in self._actions:
            return
        self._actions.append(action)

    def observe(self, element: Element) -> AttributeObserver:
        """Open a new observation scope on `element`."""
        self._observers = [o for o in self._observers if o.active]
        observer = element.subscribe(self.attributes, self.dispatch)
        self._observers.append(observer)
        return observer

    @property
    def observers(self) -> tuple[AttributeObserver, ...]:
        return tuple(o for o in self._observers if o.active)

    def dispatch(self, records: list[MutationRecord], observer: AttributeObserver) -> None:
        for action in list(self._actions):
            action(records, self.owner, observer)

    def stop(self) -> None:
        """Disconnect every scope this watcher opened."""
        for observer in self._observers:
            observer.disconnect()
        self._observers.clear()
