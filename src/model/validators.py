"""Validation functions for drawer and knob settings.

Each validator takes the settings object and the proposed value and returns
either the value to store or INVALID. Settings never raise on bad input:
an INVALID result leaves the prior value in place.
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from dom.element import Element

if TYPE_CHECKING:
    from model.setting import SettingsBase


class _Invalid:
    """Sentinel returned by validators for rejected values."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INVALID"

    def __bool__(self) -> bool:
        return False


INVALID: Any = _Invalid()


def generate_id() -> str:
    """Generate a pretty unique id for elements that lack one."""
    return str(uuid.uuid4())


def urlify(value: Any) -> str:
    """Turn a value into a URL-safe slug.

    Lowercases, turns whitespace runs into '-', drops anything that isn't a
    word character or '-', then collapses and trims dashes.
    """
    slug = str(value).lower()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^\w-]+", "", slug)
    slug = re.sub(r"--+", "-", slug)
    return slug.strip("-")


def is_valid_hash(value: Any) -> bool:
    """A hash is usable when it's a non-empty string."""
    return isinstance(value, str) and len(value) > 0


def _state_list(value: Any) -> list[str] | None:
    """Normalize a sequence of state names, dropping duplicates."""
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        return None
    states: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item:
            return None
        if item not in states:
            states.append(item)
    return states


def validate_states(settings: SettingsBase, value: Any) -> list[str]:
    """A single string appends; a non-empty sequence of strings replaces."""
    if isinstance(value, str):
        if not value:
            return INVALID
        current = list(settings.states)
        if value not in current:
            current.append(value)
        return current
    states = _state_list(value)
    if not states:
        return INVALID
    return states


def validate_member_state(settings: SettingsBase, value: Any) -> str:
    """Accept only a state that is a member of `states`."""
    if isinstance(value, str) and value in settings.states:
        return value
    return INVALID


def validate_hidden_states(settings: SettingsBase, value: Any) -> list[str]:
    """Filter to members of `states`; a single member string appends."""
    if isinstance(value, str):
        if value not in settings.states:
            return INVALID
        current = list(settings.hidden_states)
        if value not in current:
            current.append(value)
        return current
    if isinstance(value, (list, tuple, set, frozenset)):
        return [s for s in settings.states if s in value]
    return INVALID


def validate_hash(settings: SettingsBase, value: Any) -> str:
    """A non-empty string is slugified; an empty slug disables hashing."""
    if not is_valid_hash(value):
        return INVALID
    return urlify(value)


def validate_hash_state(settings: SettingsBase, value: Any) -> str:
    """Accept a member of `states` that isn't a hidden state."""
    if (
        isinstance(value, str)
        and value in settings.states
        and value not in settings.hidden_states
    ):
        return value
    return INVALID


def _is_knob_target(item: Any) -> bool:
    if isinstance(item, (str, Element)):
        return bool(item) if isinstance(item, str) else True
    return isinstance(item, Mapping) and "elements" in item


def validate_knobs(settings: SettingsBase, value: Any) -> list[Any]:
    """Accept a selector, element, knob setup mapping, or a list of them."""
    if _is_knob_target(value):
        return [value]
    if isinstance(value, (list, tuple)):
        targets = [item for item in value if _is_knob_target(item)]
        if len(targets) != len(value):
            return INVALID
        return targets
    return INVALID


def validate_bool(settings: SettingsBase, value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no", "off")
    return bool(value)


def validate_actions(settings: SettingsBase, value: Any) -> list[Any]:
    """A callable is one action; a list must contain only callables."""
    if callable(value):
        return [value]
    if isinstance(value, (list, tuple)) and all(callable(a) for a in value):
        return list(value)
    return INVALID


def validate_callable(settings: SettingsBase, value: Any) -> Any:
    return value if callable(value) else INVALID
