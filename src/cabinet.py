"""Public operations for drawers and knobs.

A Cabinet owns the registry for one Document. The module-level functions
route to the cabinet of the element's document, so callers can work with
elements alone:

    drawer = create_drawer(element, {"states": ["closed", "open"]})
    cycle(element)
    document.flush()
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from constants import CLICK_EVENT, DEFAULT_DRAWER_SELECTOR
from controller import Drawer, InertDrawer, InertKnob, Knob, RelationshipRegistry
from dom import Document, Element
from model import SettingsBase, resolve_drawer_settings, resolve_knob_settings

log = logging.getLogger(__name__)


def _has_settings(settings: Any) -> bool:
    if isinstance(settings, SettingsBase):
        return bool(settings.explicit_values())
    return bool(settings)


class Cabinet:
    """Creates, finds and tears down the drawers and knobs of one document."""

    def __init__(self, document: Document | None = None) -> None:
        self.document = document if document is not None else Document()
        self.registry = RelationshipRegistry()

    def __repr__(self) -> str:
        return f"<Cabinet drawers={len(self.registry.drawers)} knobs={len(self.registry.knobs)}>"

    def _own(self, element: Element) -> None:
        if element.document is None:
            self.document.adopt(element)

    def create_drawer(self, element: Any, settings: Any = None) -> Drawer | InertDrawer:
        """Get or create the drawer for `element`.

        Settings only apply on creation; settings passed for an existing
        drawer are discarded. Non-element input gets an InertDrawer.
        """
        if not isinstance(element, Element):
            log.debug(f"create_drawer: {element!r} is not an element")
            return InertDrawer()
        existing = self.registry.get_drawer(element)
        if existing is not None:
            if _has_settings(settings):
                log.debug(f"{existing!r} already exists; discarding settings {settings!r}")
            return existing

        self._own(element)
        drawer = Drawer(element, resolve_drawer_settings(element, settings), self)
        self.registry.register_drawer(drawer)
        drawer.activate()
        return drawer

    def create_knob(self, element: Any, settings: Any = None) -> Knob | InertKnob:
        """Get or create the knob for `element`.

        Same get-or-create policy as create_drawer().
        """
        if not isinstance(element, Element):
            log.debug(f"create_knob: {element!r} is not an element")
            return InertKnob()
        existing = self.registry.get_knob(element)
        if existing is not None:
            if _has_settings(settings):
                log.debug(f"{existing!r} already exists; discarding settings {settings!r}")
            return existing

        self._own(element)
        knob = Knob(element, resolve_knob_settings(element, settings), self)
        self.registry.register_knob(knob)
        log.debug(f"Created {knob!r}")
        return knob

    def get_drawer(self, element: Any) -> Drawer | None:
        if not isinstance(element, Element):
            return None
        return self.registry.get_drawer(element)

    def get_knob(self, element: Any) -> Knob | None:
        if not isinstance(element, Element):
            return None
        return self.registry.get_knob(element)

    def cycle(self, element: Any, limited_states: Sequence[str] | None = None) -> None:
        """Cycle the drawer on `element`, if there is one."""
        drawer = self.get_drawer(element)
        if drawer is None:
            log.debug(f"cycle: {element!r} has no drawer")
            return
        drawer.cycle(limited_states)

    def click(self, element: Any) -> None:
        """Deliver a click to `element`, as a user pressing it would."""
        if isinstance(element, Element):
            element.dispatch(CLICK_EVENT)

    def initialize_all(self, selector: str | None = None, settings: Any = None) -> list[Drawer]:
        """Activate a drawer on every element matching `selector`.

        Args:
            selector: Defaults to [data-module="drawer"]
            settings: Applied to every drawer created here

        Returns:
            The drawers, in document order (empty if nothing matched)
        """
        elements = self.document.select(selector or DEFAULT_DRAWER_SELECTOR)
        if not elements:
            log.debug(f"initialize_all: nothing matches {selector or DEFAULT_DRAWER_SELECTOR!r}")
        return [self.create_drawer(element, settings) for element in elements]

    def discard(self, element: Any) -> bool:
        """Tear down the drawer and/or knob on `element`.

        Returns:
            True if anything was discarded
        """
        discarded = False
        drawer = self.get_drawer(element)
        if drawer is not None:
            drawer.discard()
            discarded = True
        knob = self.get_knob(element)
        if knob is not None:
            knob.discard()
            discarded = True
        return discarded


# Module-level operations, one Cabinet per Document. The cabinet is kept on
# its document, so both are collected together.

_default_document = Document()


def default_document() -> Document:
    """The document that elements created without one are adopted into."""
    return _default_document


def cabinet_for(document: Document | None = None) -> Cabinet:
    """The cabinet that manages `document` (the default document if None)."""
    document = document if document is not None else _default_document
    cabinet = getattr(document, "_cabinet", None)
    if cabinet is None:
        cabinet = document._cabinet = Cabinet(document)
    return cabinet


def _cabinet_of(element: Any) -> Cabinet:
    return cabinet_for(element.document if isinstance(element, Element) else None)


def create_drawer(element: Any, settings: Any = None) -> Drawer | InertDrawer:
    return _cabinet_of(element).create_drawer(element, settings)


def create_knob(element: Any, settings: Any = None) -> Knob | InertKnob:
    return _cabinet_of(element).create_knob(element, settings)


def get_drawer(element: Any) -> Drawer | None:
    return _cabinet_of(element).get_drawer(element)


def get_knob(element: Any) -> Knob | None:
    return _cabinet_of(element).get_knob(element)


def cycle(element: Any, limited_states: Sequence[str] | None = None) -> None:
    _cabinet_of(element).cycle(element, limited_states)


def click(element: Any) -> None:
    _cabinet_of(element).click(element)


def discard(element: Any) -> bool:
    return _cabinet_of(element).discard(element)


def initialize_all(
    selector: str | None = None,
    settings: Any = None,
    document: Document | None = None,
) -> list[Drawer]:
    """Activate drawers on every matching element of `document`."""
    return cabinet_for(document).initialize_all(selector, settings)
