"""Drawer and knob settings declared with Setting descriptors."""

from __future__ import annotations

from typing import Any

from constants import (
    ACCESSIBILITY_ATTR,
    CYCLE_ATTR,
    DEFAULT_HIDDEN_STATES,
    DEFAULT_STATES,
    HASH_ATTR,
    HASH_STATE_ATTR,
    KNOB_ATTR,
    STATE_ATTR,
)
from model.setting import Setting, SettingsBase
from model.validators import (
    generate_id,
    validate_actions,
    validate_bool,
    validate_callable,
    validate_hash,
    validate_hash_state,
    validate_hidden_states,
    validate_knobs,
    validate_member_state,
    validate_states,
)


def _resolve_init_state(settings: DrawerSettings, stored: str | None) -> str:
    if stored in settings.states:
        return stored
    return settings.states[0]


def _resolve_hidden_states(settings: DrawerSettings, stored: list[str]) -> list[str]:
    return [state for state in stored if state in settings.states]


def _resolve_hash_state(settings: DrawerSettings, stored: str) -> str:
    hidden = settings.hidden_states
    if stored in settings.states and stored not in hidden:
        return stored
    visible = [state for state in settings.states if state not in hidden]
    return visible[0] if visible else ""


class DrawerSettings(SettingsBase):
    """Settings for one drawer.

    Options are declared in dependency order: `states` first, since the
    other state options are validated against it.
    """

    states = Setting(
        default_factory=lambda: list(DEFAULT_STATES),
        validate=validate_states,
        explanation="Ordered state names; cycle() follows this order and wraps",
    )
    init_state = Setting(
        default=None,
        validate=validate_member_state,
        resolve=_resolve_init_state,
        attribute=STATE_ATTR,
        aliases=("initState",),
        explanation="State applied at activation (defaults to the first state)",
    )
    hidden_states = Setting(
        default_factory=lambda: list(DEFAULT_HIDDEN_STATES),
        validate=validate_hidden_states,
        resolve=_resolve_hidden_states,
        aliases=("hiddenStates",),
        explanation="States in which the drawer gets the hidden attribute",
    )
    hash = Setting(
        default="",
        validate=validate_hash,
        attribute=HASH_ATTR,
        explanation="URL fragment claimed in hash_state; empty disables hashing",
    )
    hash_state = Setting(
        default="",
        validate=validate_hash_state,
        resolve=_resolve_hash_state,
        attribute=HASH_STATE_ATTR,
        aliases=("hashState",),
        explanation="Non-hidden state that sets the hash (defaults to the first visible state)",
    )
    knobs = Setting(
        default_factory=list,
        validate=validate_knobs,
        attribute=KNOB_ATTR,
        explanation="Selectors, elements, or knob setups to attach",
    )
    knobs_cycle = Setting(
        default=True,
        validate=validate_bool,
        aliases=("knobsCycle", "cycle"),
        explanation="Whether new knobs cycle this drawer when clicked",
    )
    knob_accessibility = Setting(
        default=True,
        validate=validate_bool,
        aliases=("knobAccessibility", "accessibility"),
        explanation="Whether new knobs mirror aria-expanded/aria-controls",
    )
    knob_actions = Setting(
        default_factory=list,
        validate=validate_actions,
        aliases=("knobActions",),
        explanation="Extra actions for new knobs",
    )
    actions = Setting(
        default_factory=list,
        validate=validate_actions,
        explanation="Callbacks run after the built-in actions on every observed mutation",
    )
    uuid = Setting(
        default=generate_id,
        validate=validate_callable,
        explanation="Id generator for drawer elements without an id",
    )

    def in_states(self, state: Any) -> bool:
        return state in self.states

    def is_hidden_state(self, state: Any) -> bool:
        return state in self.hidden_states

    def knob_defaults(self) -> dict[str, Any]:
        """Settings for knobs this drawer creates."""
        return {
            "cycle": self.knobs_cycle,
            "accessibility": self.knob_accessibility,
            "actions": list(self.knob_actions),
        }


class KnobSettings(SettingsBase):
    """Settings for one knob."""

    cycle = Setting(
        default=True,
        validate=validate_bool,
        attribute=CYCLE_ATTR,
        aliases=("knobsCycle", "knobs_cycle"),
        explanation="When true, clicking this knob cycles every attached drawer",
    )
    accessibility = Setting(
        default=True,
        validate=validate_bool,
        attribute=ACCESSIBILITY_ATTR,
        aliases=("knobAccessibility", "knob_accessibility"),
        explanation="When true, aria-expanded/aria-controls are kept in sync",
    )
    actions = Setting(
        default_factory=list,
        validate=validate_actions,
        aliases=("knobActions", "knob_actions"),
        explanation="Callbacks run after the built-in action on every observed drawer mutation",
    )
