"""Layout files: which drawers and knobs a host should build.

A layout is a JSON document:

    {
      "title": "FAQ",
      "fragment": "",
      "drawers": [
        {"id": "shipping", "title": "Shipping", "body": "...",
         "states": ["closed", "open"], "hidden_states": ["closed"],
         "hash": "shipping", "knobs": ["toggle-all"]}
      ],
      "knobs": [
        {"id": "toggle-all", "label": "Toggle all", "cycle": true}
      ]
    }

Drawer entries become drawer elements with data-* attributes, so the
element-declared settings path is exercised end to end. `states` and
`hidden_states` have no element attribute and are passed as caller
settings instead.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from constants import (
    HASH_ATTR,
    HASH_STATE_ATTR,
    KNOB_ATTR,
    MODULE_ATTR,
    STATE_ATTR,
)

log = logging.getLogger(__name__)


class LayoutValidationError(Exception):
    """Raised when a layout file can't be used."""


@dataclass
class DrawerSpec:
    """One drawer in a layout."""

    id: str
    title: str = ""
    body: str = ""
    states: list[str] | None = None
    hidden_states: list[str] | None = None
    init_state: str = ""
    hash: str = ""
    hash_state: str = ""
    knobs: list[str] = field(default_factory=list)
    headless: bool = False

    def to_attributes(self) -> dict[str, str]:
        """Element attributes that declare this drawer."""
        attributes = {"id": self.id, MODULE_ATTR: "drawer"}
        if self.init_state:
            attributes[STATE_ATTR] = self.init_state
        if self.hash:
            attributes[HASH_ATTR] = self.hash
        if self.hash_state:
            attributes[HASH_STATE_ATTR] = self.hash_state
        if self.knobs:
            attributes[KNOB_ATTR] = ", ".join(f"#{knob_id}" for knob_id in self.knobs)
        return attributes

    def to_settings(self) -> dict[str, Any]:
        """Caller settings for options with no element attribute."""
        settings: dict[str, Any] = {}
        if self.states is not None:
            settings["states"] = list(self.states)
        if self.hidden_states is not None:
            settings["hidden_states"] = list(self.hidden_states)
        return settings


@dataclass
class KnobSpec:
    """One standalone knob in a layout."""

    id: str
    label: str = ""
    cycle: bool = True
    accessibility: bool = True

    def to_settings(self) -> dict[str, Any]:
        return {"cycle": self.cycle, "accessibility": self.accessibility}


@dataclass
class Layout:
    """A complete layout."""

    title: str = "cabinet"
    fragment: str = ""
    drawers: list[DrawerSpec] = field(default_factory=list)
    knobs: list[KnobSpec] = field(default_factory=list)

    @property
    def knob_ids(self) -> set[str]:
        return {knob.id for knob in self.knobs}


def _require_str_list(value: Any, where: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise LayoutValidationError(f"{where}: expected a list of strings")
    return list(value)


def _require_list(data: dict, key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise LayoutValidationError(f"'{key}' must be a list")
    return value


def _build(cls: type, data: Any, where: str) -> Any:
    """Build a spec dataclass from a dict, rejecting unknown keys."""
    if not isinstance(data, dict):
        raise LayoutValidationError(f"{where}: expected an object")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise LayoutValidationError(f"{where}: unknown keys {unknown}")
    if not isinstance(data.get("id"), str) or not data["id"]:
        raise LayoutValidationError(f"{where}: 'id' must be a non-empty string")
    return cls(**data)


def parse_layout(data: Any) -> Layout:
    """Validate parsed JSON and build a Layout.

    Raises:
        LayoutValidationError: For structural problems (wrong types,
            duplicate ids, knob references to unknown knobs).
    """
    if not isinstance(data, dict):
        raise LayoutValidationError("Layout must be a JSON object")

    drawers = []
    for i, entry in enumerate(_require_list(data, "drawers")):
        spec = _build(DrawerSpec, entry, f"drawers[{i}]")
        for name in ("states", "hidden_states"):
            value = getattr(spec, name)
            if value is not None:
                setattr(spec, name, _require_str_list(value, f"drawers[{i}].{name}"))
        spec.knobs = _require_str_list(spec.knobs, f"drawers[{i}].knobs")
        drawers.append(spec)

    knobs = [_build(KnobSpec, entry, f"knobs[{i}]") for i, entry in enumerate(_require_list(data, "knobs"))]

    ids = [d.id for d in drawers] + [k.id for k in knobs]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise LayoutValidationError(f"Duplicate ids: {duplicates}")

    knob_ids = {k.id for k in knobs}
    for drawer in drawers:
        missing = [k for k in drawer.knobs if k not in knob_ids]
        if missing:
            raise LayoutValidationError(f"Drawer '{drawer.id}' references unknown knobs {missing}")

    fragment = data.get("fragment", "")
    if not isinstance(fragment, str):
        raise LayoutValidationError("'fragment' must be a string")

    return Layout(
        title=str(data.get("title", "cabinet")),
        fragment=fragment.lstrip("#"),
        drawers=drawers,
        knobs=knobs,
    )


def load_layout(path: Path) -> Layout:
    """Load a layout file.

    Raises:
        LayoutValidationError: If the file can't be read or parsed.
    """
    try:
        data = json.loads(Path(path).read_text())
    except OSError as e:
        raise LayoutValidationError(f"Cannot read layout {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise LayoutValidationError(f"Invalid JSON in {path}: {e}") from e
    log.info(f"Loaded layout from {path}")
    return parse_layout(data)


def demo_layout() -> Layout:
    """The layout shown when no file is given."""
    return parse_layout({
        "title": "cabinet demo",
        "drawers": [
            {
                "id": "about",
                "title": "About",
                "body": "Drawers toggle between named states. Closed drawers are hidden.",
                "hash": "about",
            },
            {
                "id": "shipping",
                "title": "Shipping",
                "body": "Open this drawer to claim the #shipping fragment.",
                "states": ["closed", "open"],
                "hash": "shipping",
                "knobs": ["toggle-all"],
            },
            {
                "id": "stages",
                "title": "Stages",
                "body": "Four states; only 'closed' hides the drawer.",
                "states": ["closed", "peek", "open", "pinned"],
                "hidden_states": ["closed"],
                "knobs": ["toggle-all", "stages-knob"],
            },
        ],
        "knobs": [
            {"id": "toggle-all", "label": "Cycle shipping + stages"},
            {"id": "stages-knob", "label": "Stages (no ARIA)", "accessibility": False},
        ],
    })
