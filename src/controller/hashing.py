"""URL fragment binding.

The fragment is one page-wide slot. Any drawer may claim it (last writer
wins), but a drawer only ever clears the fragment when it still holds its
own hash. Every write replaces the current history entry; toggling a
drawer never adds one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from dom import Location
from model.validators import is_valid_hash

if TYPE_CHECKING:
    from controller.drawer import Drawer

log = logging.getLogger(__name__)


def extract_hash(location: Location) -> str:
    """Current fragment without the '#'."""
    return location.fragment


def set_hash(location: Location, hash_: str) -> None:
    location.replace(f"#{hash_}")


def wipe_hash(location: Location) -> None:
    """Remove any fragment, keeping the pathname."""
    location.replace(location.pathname)


def clear_hash(location: Location, hash_: str) -> None:
    """Remove the fragment only if it is `hash_`."""
    if hash_ and extract_hash(location) == hash_:
        wipe_hash(location)


def if_valid_hash(value: Any, callback: Callable[[str], None]) -> None:
    if is_valid_hash(value):
        callback(value)


class HashBinding:
    """Fragment operations for one drawer."""

    def __init__(self, drawer: Drawer) -> None:
        self.drawer = drawer

    @property
    def location(self) -> Location | None:
        document = self.drawer.element.document
        return document.location if document is not None else None

    @property
    def hash(self) -> str:
        return self.drawer.settings.hash

    def set_url(self) -> None:
        """Claim the fragment for this drawer's hash."""
        location = self.location
        if location is None:
            return

        def _set(value: str) -> None:
            log.debug(f"Drawer '{self.drawer.id}' sets fragment #{value}")
            set_hash(location, value)

        if_valid_hash(self.hash, _set)

    def clear_url(self) -> None:
        """Release the fragment if this drawer owns it."""
        location = self.location
        if location is None:
            return
        if self.owns_fragment():
            log.debug(f"Drawer '{self.drawer.id}' clears fragment #{self.hash}")
        if_valid_hash(self.hash, lambda value: clear_hash(location, value))

    def wipe_url(self) -> None:
        """Remove whatever fragment is present."""
        location = self.location
        if location is not None:
            wipe_hash(location)

    def owns_fragment(self) -> bool:
        location = self.location
        return (
            location is not None
            and is_valid_hash(self.hash)
            and extract_hash(location) == self.hash
        )

    def reconcile(self) -> bool:
        """Let a matching fragment pick the initial state.

        Called once at activation. When the current fragment equals this
        drawer's hash and a hash state exists, init_state becomes the hash
        state.

        Returns:
            True if init_state was overridden
        """
        location = self.location
        if location is None:
            return False
        fragment = extract_hash(location)
        hash_state = self.drawer.settings.hash_state
        if not (is_valid_hash(fragment) and fragment == self.hash and hash_state):
            return False
        self.drawer.settings.init_state = hash_state
        log.debug(f"Drawer '{self.drawer.id}' starts in '{hash_state}' from fragment #{fragment}")
        return True
