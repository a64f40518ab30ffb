"""Drawer widget: DrawerPanel."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from constants import STATE_ATTR, WATCHED_ATTRIBUTES
from dom import AttributeObserver, Element, MutationRecord
from model import DrawerSpec
from ui.widgets.knob import KnobButton
import ui.ids as ids


class DrawerPanel(Vertical):
    """One drawer: an optional heading knob above the drawer body.

    The body is shown while the element lacks the hidden attribute. The
    panel carries a `state-<name>` class for the element's data-state.
    """

    def __init__(self, element: Element, spec: DrawerSpec, heading: Element | None = None) -> None:
        super().__init__(id=ids.drawer_panel(element.id), classes="drawer")
        self.element = element
        self.spec = spec
        self.heading = heading
        self._observer: AttributeObserver | None = None
        self._state_class: str | None = None

    def compose(self) -> ComposeResult:
        if self.heading is not None:
            yield KnobButton(self.heading, self.spec.title or self.spec.id, classes="drawer-heading")
        yield Static(self.spec.body, classes="drawer-body")

    def on_mount(self) -> None:
        self._observer = self.element.subscribe(WATCHED_ATTRIBUTES, self._on_mutation)
        self.sync_from_element()

    def on_unmount(self) -> None:
        if self._observer is not None:
            self._observer.disconnect()
            self._observer = None

    def _on_mutation(self, records: list[MutationRecord], observer: AttributeObserver) -> None:
        self.sync_from_element()

    def sync_from_element(self) -> None:
        """Mirror hidden and data-state onto the widgets."""
        self.query_one(".drawer-body", Static).display = not self.element.hidden
        self.set_class(self.element.hidden, "closed")

        state = self.element.read(STATE_ATTR)
        state_class = ids.identifier(f"state-{state}") if state else None
        if state_class != self._state_class:
            if self._state_class:
                self.remove_class(self._state_class)
            if state_class:
                self.add_class(state_class)
            self._state_class = state_class
