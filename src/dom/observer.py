"""Attribute observation: records and observers.

An AttributeObserver is one observation scope on one element. Records are
queued on the owning Document and delivered in batches by Document.flush(),
so the code that wrote an attribute returns before any observer runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from dom.element import Element


@dataclass(frozen=True)
class MutationRecord:
    """One observed attribute change."""

    target: Element
    attribute_name: str
    old_value: str | None


ObserverCallback = Callable[[list[MutationRecord], "AttributeObserver"], None]


class AttributeObserver:
    """Watches a fixed set of attributes on one element.

    Created through Element.subscribe(); stopped with disconnect().
    """

    def __init__(
        self,
        target: Element,
        attributes: Iterable[str],
        callback: ObserverCallback,
    ) -> None:
        self.target = target
        self.attributes = frozenset(attributes)
        self.callback = callback
        self.active = True
        self._pending: list[MutationRecord] = []

    def __repr__(self) -> str:
        state = "active" if self.active else "disconnected"
        return f"<AttributeObserver {sorted(self.attributes)} on {self.target!r} {state}>"

    def wants(self, attribute_name: str) -> bool:
        return self.active and attribute_name in self.attributes

    def enqueue(self, record: MutationRecord) -> None:
        self._pending.append(record)

    def take_records(self) -> list[MutationRecord]:
        """Remove and return the undelivered records."""
        records, self._pending = self._pending, []
        return records

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def disconnect(self) -> None:
        """Stop observing. Undelivered records are dropped."""
        if not self.active:
            return
        self.active = False
        self._pending.clear()
        self.target.unsubscribe(self)
