"""Model classes for cabinet: settings and layouts."""

from model.validators import INVALID, generate_id, is_valid_hash, urlify
from model.setting import Setting, SettingsBase
from model.settings import DrawerSettings, KnobSettings
from model.resolver import (
    read_element_settings,
    resolve_drawer_settings,
    resolve_knob_settings,
)
from model.layout import (
    DrawerSpec,
    KnobSpec,
    Layout,
    LayoutValidationError,
    demo_layout,
    load_layout,
    parse_layout,
)

__all__ = [
    "INVALID",
    "generate_id",
    "is_valid_hash",
    "urlify",
    "Setting",
    "SettingsBase",
    "DrawerSettings",
    "KnobSettings",
    "read_element_settings",
    "resolve_drawer_settings",
    "resolve_knob_settings",
    "DrawerSpec",
    "KnobSpec",
    "Layout",
    "LayoutValidationError",
    "demo_layout",
    "load_layout",
    "parse_layout",
]
