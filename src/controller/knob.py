"""Knob: a trigger control bound to one or more drawers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from constants import ARIA_CONTROLS, ARIA_EXPANDED, CLICK_EVENT
from controller.actions import aria_expanded_callback
from controller.watcher import Action, AttributeWatcher
from dom import Element, resolve
from model import KnobSettings, generate_id

if TYPE_CHECKING:
    from cabinet import Cabinet
    from controller.drawer import Drawer

log = logging.getLogger(__name__)


class Knob:
    """API for one knob element.

    Clicking the element cycles every attached drawer (when `cycle` is on).
    With `accessibility` on, the element's aria-expanded and aria-controls
    follow the attached drawers.
    """

    active = True

    def __init__(self, element: Element, settings: KnobSettings, cabinet: Cabinet) -> None:
        self.element = element
        self.settings = settings
        self.cabinet = cabinet
        self.watcher = AttributeWatcher(self)

        self.watcher.add(aria_expanded_callback)
        for action in settings.actions:
            self.watcher.add(action)

        if not element.id:
            element.id = generate_id()
        self.id = element.id
        element.add_listener(CLICK_EVENT, self._on_click)

    def __repr__(self) -> str:
        return f"<Knob '{self.id}' drawers={len(self.drawers)}>"

    @property
    def registry(self):
        return self.cabinet.registry

    @property
    def cycle(self) -> bool:
        return self.settings.cycle

    @cycle.setter
    def cycle(self, value: bool) -> None:
        self.settings.cycle = value

    @property
    def accessibility(self) -> bool:
        return self.settings.accessibility

    @accessibility.setter
    def accessibility(self, value: bool) -> None:
        self.settings.accessibility = value

    @property
    def actions(self) -> tuple[Action, ...]:
        return self.watcher.actions

    def add_action(self, action: Action) -> None:
        self.watcher.add(action)

    # Drawers

    @property
    def drawers(self) -> tuple[Drawer, ...]:
        return self.registry.drawers_of(self)

    def drawer_for(self, element: Element) -> Drawer | None:
        """The attached drawer bound to `element`, if any."""
        drawer = self.registry.get_drawer(element)
        if drawer is not None and self.registry.has_edge(drawer, self):
            return drawer
        return None

    def attach(self, target: Any) -> list[Drawer]:
        """Attach to already-activated drawers by selector or element."""
        attached = []
        for element in resolve(target, self.element.document):
            drawer = self.registry.get_drawer(element)
            if drawer is None:
                log.debug(f"{self!r}: {element!r} has no drawer")
                continue
            self.registry.attach(drawer, self)
            attached.append(drawer)
        return attached

    def detach_drawer(self, drawer: Drawer | Element) -> bool:
        """Detach a drawer (or the drawer on an element) from this knob."""
        if isinstance(drawer, Element):
            drawer = self.registry.get_drawer(drawer)
        if drawer is None:
            return False
        return self.registry.detach(drawer, self)

    def _on_click(self, element: Element) -> None:
        self.handle_click()

    def handle_click(self) -> None:
        """Cycle every attached drawer through all of its states."""
        if not self.cycle:
            return
        for drawer in self.drawers:
            drawer.cycle()

    # Accessibility

    def set_aria_expanded(self, drawer: Drawer) -> None:
        if self.accessibility:
            self.element.write(ARIA_EXPANDED, "false" if drawer.hidden else "true")

    def set_aria_controls(self, drawer: Drawer) -> None:
        if self.accessibility:
            self.element.write(ARIA_CONTROLS, drawer.id)

    def sync_aria(self, drawer: Drawer) -> None:
        """Describe `drawer` in both aria-expanded and aria-controls."""
        self.set_aria_expanded(drawer)
        self.set_aria_controls(drawer)

    def on_drawer_added(self, drawer: Drawer) -> None:
        self.sync_aria(drawer)

    def on_drawer_removed(self, drawer: Drawer) -> None:
        """Point ARIA at the newest remaining drawer, or drop it."""
        if not self.accessibility:
            return
        remaining = self.drawers
        if remaining:
            self.sync_aria(remaining[-1])
        else:
            self.element.remove(ARIA_EXPANDED)
            self.element.remove(ARIA_CONTROLS)

    # Lifecycle

    def discard(self) -> None:
        """Detach from every drawer and stop listening for clicks."""
        self.registry.discard_knob(self)
        self.watcher.stop()
        self.element.remove_listener(CLICK_EVENT, self._on_click)
        self.active = False
