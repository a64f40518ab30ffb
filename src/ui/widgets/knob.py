"""Knob widget: KnobButton."""

from __future__ import annotations

from textual.widgets import Button

from constants import ARIA_EXPANDED
from dom import AttributeObserver, Element, MutationRecord
import ui.ids as ids

EXPANDED_MARKERS = {"true": "▾ ", "false": "▸ "}


class KnobButton(Button):
    """A button standing in for one knob element.

    The app turns presses into clicks on the element. The label shows a
    marker that follows the element's aria-expanded attribute.
    """

    def __init__(self, element: Element, label: str, **kwargs) -> None:
        classes = kwargs.pop("classes", "")
        super().__init__(
            label,
            id=ids.knob_button(element.id),
            classes=f"knob {classes}".strip(),
            **kwargs,
        )
        self.element = element
        self.base_label = label
        self._observer: AttributeObserver | None = None

    def on_mount(self) -> None:
        self._observer = self.element.subscribe((ARIA_EXPANDED,), self._on_mutation)
        self.sync_from_element()

    def on_unmount(self) -> None:
        if self._observer is not None:
            self._observer.disconnect()
            self._observer = None

    def _on_mutation(self, records: list[MutationRecord], observer: AttributeObserver) -> None:
        self.sync_from_element()

    @property
    def marker(self) -> str:
        return EXPANDED_MARKERS.get(self.element.read(ARIA_EXPANDED), "")

    def sync_from_element(self) -> None:
        self.label = f"{self.marker}{self.base_label}"
