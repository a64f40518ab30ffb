"""Built-in actions.

Drawer actions receive (records, drawer, observer); knob actions receive
(records, knob, observer). Each reads the committed attribute values
rather than the records, since the attribute is the source of truth.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from constants import HIDDEN_ATTR, STATE_ATTR
from dom import AttributeObserver, MutationRecord

if TYPE_CHECKING:
    from controller.drawer import Drawer
    from controller.knob import Knob


def _changed(records: list[MutationRecord], attribute: str) -> bool:
    return any(record.attribute_name == attribute for record in records)


def hidden_callback(records: list[MutationRecord], drawer: Drawer, observer: AttributeObserver) -> None:
    """Couple the hidden attribute to the current state."""
    if _changed(records, STATE_ATTR):
        drawer.hidden = drawer.is_hidden_state(drawer.state)


def hash_callback(records: list[MutationRecord], drawer: Drawer, observer: AttributeObserver) -> None:
    """Claim the URL fragment in hash_state, release it otherwise."""
    if not _changed(records, STATE_ATTR):
        return
    if drawer.state == drawer.hash_state:
        drawer.hasher.set_url()
    else:
        drawer.hasher.clear_url()


def aria_expanded_callback(records: list[MutationRecord], knob: Knob, observer: AttributeObserver) -> None:
    """Point aria-expanded and aria-controls at the attached drawer whose hidden changed."""
    targets = []
    for record in records:
        if record.attribute_name == HIDDEN_ATTR and record.target not in targets:
            targets.append(record.target)
    for target in targets:
        drawer = knob.drawer_for(target)
        if drawer is not None:
            knob.sync_aria(drawer)
