"""Element: the observable attribute source drawers and knobs bind to."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

from constants import HIDDEN_ATTR
from dom.observer import AttributeObserver, MutationRecord, ObserverCallback

if TYPE_CHECKING:
    from dom.document import Document

log = logging.getLogger(__name__)


class Element:
    """A tagged bag of string attributes that reports its own mutations.

    Attribute values are strings; boolean attributes (like `hidden`) are
    present with an empty value or absent. Writes take effect immediately;
    observers hear about them when the owning document flushes.
    """

    def __init__(
        self,
        tag: str = "div",
        attributes: dict[str, str] | None = None,
        document: Document | None = None,
    ) -> None:
        self.tag = tag.lower()
        self.document = document
        self._attributes: dict[str, str] = dict(attributes or {})
        self._observers: list[AttributeObserver] = []
        self._listeners: dict[str, list[Callable[[Element], None]]] = {}

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        return f"<{self.tag}{ident}>"

    # Attribute access

    def read(self, name: str) -> str | None:
        return self._attributes.get(name)

    def has(self, name: str) -> bool:
        return name in self._attributes

    def write(self, name: str, value: str | None) -> None:
        """Set an attribute; None removes it."""
        if value is None:
            self.remove(name)
            return
        old = self._attributes.get(name)
        self._attributes[name] = str(value)
        self._notify(name, old)

    def remove(self, name: str) -> None:
        if name not in self._attributes:
            return
        old = self._attributes.pop(name)
        self._notify(name, old)

    @property
    def attributes(self) -> dict[str, str]:
        return dict(self._attributes)

    @property
    def id(self) -> str:
        return self._attributes.get("id", "")

    @id.setter
    def id(self, value: str) -> None:
        self.write("id", value)

    @property
    def hidden(self) -> bool:
        return self.has(HIDDEN_ATTR)

    @hidden.setter
    def hidden(self, hide: bool) -> None:
        if hide:
            self.write(HIDDEN_ATTR, "")
        else:
            self.remove(HIDDEN_ATTR)

    @property
    def classes(self) -> set[str]:
        return set(self._attributes.get("class", "").split())

    # Observation

    def subscribe(self, attributes: Iterable[str], callback: ObserverCallback) -> AttributeObserver:
        """Start observing the named attributes on this element."""
        observer = AttributeObserver(self, attributes, callback)
        self._observers.append(observer)
        if self.document is not None:
            self.document.register_observer(observer)
        return observer

    def unsubscribe(self, observer: AttributeObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
        if observer.active:
            observer.disconnect()
            return
        if self.document is not None:
            self.document.unregister_observer(observer)

    @property
    def observers(self) -> tuple[AttributeObserver, ...]:
        return tuple(self._observers)

    def _notify(self, name: str, old_value: str | None) -> None:
        interested = [o for o in self._observers if o.wants(name)]
        if not interested:
            return
        record = MutationRecord(self, name, old_value)
        for observer in interested:
            observer.enqueue(record)
        if self.document is not None:
            self.document.schedule_delivery()
        else:
            log.debug(f"{self!r} has no document; records for '{name}' wait for manual delivery")

    # Events (external input only)

    def add_listener(self, event: str, handler: Callable[[Element], None]) -> None:
        handlers = self._listeners.setdefault(event, [])
        if handler not in handlers:
            handlers.append(handler)

    def remove_listener(self, event: str, handler: Callable[[Element], None]) -> None:
        handlers = self._listeners.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def dispatch(self, event: str) -> None:
        """Run every handler registered for `event` with this element."""
        for handler in list(self._listeners.get(event, [])):
            handler(self)
