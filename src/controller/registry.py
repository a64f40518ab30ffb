"""RelationshipRegistry: drawers, knobs, and the edges between them.

Drawers and knobs live in an arena indexed by id, with side tables from
element to entity. Each (drawer, knob) pair has at most one edge, and each
edge owns the observer through which the knob watches that drawer.

Attach and detach both notify both sides, so either side can start a
detach without the other keeping a dangling observer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dom import AttributeObserver, Element

if TYPE_CHECKING:
    from controller.drawer import Drawer
    from controller.knob import Knob

log = logging.getLogger(__name__)


@dataclass(eq=False)
class Edge:
    """The attach relationship between one drawer and one knob."""

    drawer: Drawer
    knob: Knob
    observer: AttributeObserver


class RelationshipRegistry:
    """Arena of drawers and knobs plus the many-to-many edge set."""

    def __init__(self) -> None:
        self._drawers: dict[str, Drawer] = {}
        self._knobs: dict[str, Knob] = {}
        self._drawer_by_element: dict[Element, Drawer] = {}
        self._knob_by_element: dict[Element, Knob] = {}
        self._edges: dict[tuple[Drawer, Knob], Edge] = {}

    # Entities

    def register_drawer(self, drawer: Drawer) -> None:
        if drawer.id in self._drawers and self._drawers[drawer.id] is not drawer:
            log.debug(f"Drawer id '{drawer.id}' is already registered; the newer drawer takes the id")
        self._drawers[drawer.id] = drawer
        self._drawer_by_element[drawer.element] = drawer

    def register_knob(self, knob: Knob) -> None:
        if knob.id in self._knobs and self._knobs[knob.id] is not knob:
            log.debug(f"Knob id '{knob.id}' is already registered; the newer knob takes the id")
        self._knobs[knob.id] = knob
        self._knob_by_element[knob.element] = knob

    def get_drawer(self, element: Element) -> Drawer | None:
        return self._drawer_by_element.get(element)

    def get_knob(self, element: Element) -> Knob | None:
        return self._knob_by_element.get(element)

    def drawer_by_id(self, drawer_id: str) -> Drawer | None:
        return self._drawers.get(drawer_id)

    def knob_by_id(self, knob_id: str) -> Knob | None:
        return self._knobs.get(knob_id)

    @property
    def drawers(self) -> tuple[Drawer, ...]:
        return tuple(self._drawer_by_element.values())

    @property
    def knobs(self) -> tuple[Knob, ...]:
        return tuple(self._knob_by_element.values())

    # Edges

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges.values())

    def has_edge(self, drawer: Drawer, knob: Knob) -> bool:
        return (drawer, knob) in self._edges

    def knobs_of(self, drawer: Drawer) -> tuple[Knob, ...]:
        return tuple(k for (d, k) in self._edges if d is drawer)

    def drawers_of(self, knob: Knob) -> tuple[Drawer, ...]:
        return tuple(d for (d, k) in self._edges if k is knob)

    def attach(self, drawer: Drawer, knob: Knob) -> Edge | None:
        """Create the edge if it doesn't exist yet.

        Returns:
            The edge (existing or new), or None if either side isn't registered
        """
        key = (drawer, knob)
        if key in self._edges:
            log.debug(f"Knob '{knob.id}' is already attached to drawer '{drawer.id}'")
            return self._edges[key]
        if self.get_drawer(drawer.element) is not drawer or self.get_knob(knob.element) is not knob:
            log.debug(f"Cannot attach unregistered pair ('{drawer.id}', '{knob.id}')")
            return None

        edge = Edge(drawer, knob, knob.watcher.observe(drawer.element))
        self._edges[key] = edge
        drawer.on_knob_added(knob)
        knob.on_drawer_added(drawer)
        return edge

    def detach(self, drawer: Drawer, knob: Knob) -> bool:
        """Remove the edge, stop its observer, and tell both sides.

        Returns:
            True if an edge was removed, False if there was none
        """
        edge = self._edges.pop((drawer, knob), None)
        if edge is None:
            log.debug(f"No edge between drawer '{drawer.id}' and knob '{knob.id}'")
            return False
        edge.observer.disconnect()
        drawer.on_knob_removed(knob)
        knob.on_drawer_removed(drawer)
        return True

    # Teardown

    def discard_drawer(self, drawer: Drawer) -> None:
        """Detach every knob from `drawer` and forget it."""
        for knob in self.knobs_of(drawer):
            self.detach(drawer, knob)
        if self._drawer_by_element.get(drawer.element) is drawer:
            del self._drawer_by_element[drawer.element]
        if self._drawers.get(drawer.id) is drawer:
            del self._drawers[drawer.id]

    def discard_knob(self, knob: Knob) -> None:
        """Detach `knob` from every drawer and forget it."""
        for drawer in self.drawers_of(knob):
            self.detach(drawer, knob)
        if self._knob_by_element.get(knob.element) is knob:
            del self._knob_by_element[knob.element]
        if self._knobs.get(knob.id) is knob:
            del self._knobs[knob.id]
