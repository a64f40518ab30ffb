"""Controller layer: drawer state machines, knobs, and the links between them.

This package contains:
- watcher: AttributeWatcher, the ordered action list fed by observers
- actions: built-in hidden/hash/aria-expanded actions
- hashing: HashBinding for the single URL fragment slot
- drawer, knob: the per-element APIs
- registry: RelationshipRegistry of drawers, knobs and edges
- inert: no-op APIs for input that isn't an element
"""

from controller.watcher import Action, AttributeWatcher
from controller.actions import aria_expanded_callback, hash_callback, hidden_callback
from controller.hashing import HashBinding
from controller.drawer import Drawer, next_state
from controller.knob import Knob
from controller.registry import Edge, RelationshipRegistry
from controller.inert import InertDrawer, InertKnob

__all__ = [
    # Watching
    "Action",
    "AttributeWatcher",
    "aria_expanded_callback",
    "hash_callback",
    "hidden_callback",
    # Entities
    "Drawer",
    "HashBinding",
    "Knob",
    "next_state",
    # Relationships
    "Edge",
    "RelationshipRegistry",
    # Inert
    "InertDrawer",
    "InertKnob",
]
