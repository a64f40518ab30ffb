"""Document: element registry, location, and batched mutation delivery."""

from __future__ import annotations

import logging
from typing import Callable

from dom.element import Element
from dom.location import Location
from dom.observer import AttributeObserver
from dom.selectors import matches

log = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], object]], object]


class Document:
    """Owns elements and delivers their attribute mutations.

    Writes queue records on the interested observers. The first record
    queued after a delivery asks the scheduler to call flush() later (the
    Textual host passes App.call_later). Without a scheduler, the host
    calls flush() itself.
    """

    def __init__(self, scheduler: Scheduler | None = None, location: Location | None = None) -> None:
        self.scheduler = scheduler
        self.location = location if location is not None else Location()
        self._elements: list[Element] = []
        self._observers: list[AttributeObserver] = []
        self._delivery_scheduled = False
        self._flushing = False

    # Elements

    def create_element(self, tag: str = "div", attributes: dict[str, str] | None = None) -> Element:
        element = Element(tag, attributes, document=self)
        self._elements.append(element)
        return element

    def adopt(self, element: Element) -> Element:
        """Take ownership of an element created elsewhere."""
        if element.document is not self:
            element.document = self
            for observer in element.observers:
                self.register_observer(observer)
        if element not in self._elements:
            self._elements.append(element)
        return element

    def discard_element(self, element: Element) -> None:
        """Remove an element and stop every observation on it."""
        for observer in element.observers:
            observer.disconnect()
        if element in self._elements:
            self._elements.remove(element)

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    def get_element_by_id(self, element_id: str) -> Element | None:
        for element in self._elements:
            if element.id == element_id:
                return element
        return None

    def select(self, selector: str) -> list[Element]:
        """Return every element matching the selector, in document order."""
        return [el for el in self._elements if matches(el, selector)]

    # Observation

    def register_observer(self, observer: AttributeObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister_observer(self, observer: AttributeObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def schedule_delivery(self) -> None:
        """Arrange for pending records to be delivered."""
        if self._delivery_scheduled or self._flushing:
            return
        self._delivery_scheduled = True
        if self.scheduler is not None:
            self.scheduler(self.flush)

    @property
    def has_pending(self) -> bool:
        return any(o.has_pending for o in self._observers)

    def flush(self) -> int:
        """Deliver pending records until none remain.

        Each observer gets its batch in registration order. Records queued
        while delivering are delivered before returning. A failing callback
        is logged and delivery continues with the next observer.

        Returns:
            Number of batches delivered
        """
        if self._flushing:
            return 0
        self._flushing = True
        self._delivery_scheduled = False
        delivered = 0
        try:
            while True:
                ready = [o for o in self._observers if o.has_pending]
                if not ready:
                    break
                for observer in ready:
                    records = observer.take_records()
                    if not records or not observer.active:
                        continue
                    delivered += 1
                    try:
                        observer.callback(records, observer)
                    except Exception:
                        log.exception(f"Mutation callback failed for {observer!r}")
        finally:
            self._flushing = False
        return delivered
