"""Settings resolution: defaults, element-declared attributes, constructor settings.

Precedence, lowest to highest:

1. Setting defaults
2. Values declared on the element (data-state, data-knob, data-hash,
   data-hash-state)
3. Settings passed by the caller

Options are resolved one at a time in declaration order. For each option
the element value is assigned first, then the caller value. Assignment
fails open, so a valid caller value always wins, and an invalid caller
value leaves the element value in force.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dom.element import Element
from model.settings import DrawerSettings, KnobSettings
from model.setting import SettingsBase

log = logging.getLogger(__name__)

UserSettings = Mapping[str, Any] | SettingsBase | None


def read_element_settings(element: Element, settings_cls: type[SettingsBase]) -> dict[str, str]:
    """Collect the settings an element declares through its attributes."""
    declared: dict[str, str] = {}
    for name, setting in settings_cls.get_settings().items():
        if setting.attribute and element.has(setting.attribute):
            declared[name] = element.read(setting.attribute)
    return declared


def _resolve(settings: SettingsBase, declared: dict[str, Any], supplied: dict[str, Any]) -> SettingsBase:
    for name in settings.get_settings():
        if name in declared:
            setattr(settings, name, declared[name])
        if name in supplied:
            setattr(settings, name, supplied[name])
    return settings


def resolve_drawer_settings(element: Element, user_settings: UserSettings = None) -> DrawerSettings:
    """Build the validated settings for a drawer on `element`."""
    declared = read_element_settings(element, DrawerSettings)
    supplied = DrawerSettings.normalize(user_settings)
    overridden = sorted(set(declared) & set(supplied))
    if overridden:
        log.debug(f"{element!r}: caller settings override element attributes for {overridden}")
    return _resolve(DrawerSettings(), declared, supplied)


def resolve_knob_settings(element: Element, user_settings: UserSettings = None) -> KnobSettings:
    """Build the validated settings for a knob on `element`."""
    declared = read_element_settings(element, KnobSettings)
    supplied = KnobSettings.normalize(user_settings)
    return _resolve(KnobSettings(), declared, supplied)
