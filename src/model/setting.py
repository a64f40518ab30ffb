"""Setting descriptor for drawer and knob settings.

A Setting is a data descriptor that stores a value on the instance and
carries the metadata needed to resolve it:

- a default (or default_factory for mutable defaults)
- a validator that coerces input or returns INVALID
- an optional resolver that derives the effective value on read
- the element attribute that can declare it (e.g. "data-hash")
- alternate spellings accepted as keyword arguments (e.g. "hashState")

Invalid assignments fail open: the prior value stays in place and the
rejection is logged at debug level. Call sites never check for errors.

Usage:

    class KnobSettings(SettingsBase):
        cycle = Setting(default=True, validate=validate_bool)

    settings = KnobSettings(cycle=False)
    settings.cycle              # False
    KnobSettings.cycle.default  # True (class access returns the Setting)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from model.validators import INVALID

log = logging.getLogger(__name__)


class Setting:
    """Descriptor that holds one setting value plus its metadata."""

    def __init__(
        self,
        default: Any = None,
        *,
        default_factory: Callable[[], Any] | None = None,
        validate: Callable[[Any, Any], Any] | None = None,
        resolve: Callable[[Any, Any], Any] | None = None,
        attribute: str | None = None,
        aliases: tuple[str, ...] = (),
        explanation: str = "",
    ):
        """Create a Setting descriptor.

        Args:
            default: Default value
            default_factory: Factory for mutable defaults (list, dict)
            validate: Callable (settings, value) returning the value to store or INVALID
            resolve: Callable (settings, stored) returning the effective value on read
            attribute: Element attribute that declares this setting
            aliases: Other accepted keyword names
            explanation: Human-readable description
        """
        self.default = default
        self.default_factory = default_factory
        self.validate = validate
        self.resolve = resolve
        self.attribute = attribute
        self.aliases = aliases
        self.explanation = explanation
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        # Each settings class gets its own registry
        if "_settings" not in owner.__dict__:
            owner._settings = dict(getattr(owner, "_settings", {}))
        owner._settings[name] = self

    def stored(self, obj: Any) -> Any:
        """Return the raw stored value, creating the default if needed."""
        if self.name not in obj.__dict__:
            if self.default_factory is not None:
                obj.__dict__[self.name] = self.default_factory()
            else:
                return self.default
        return obj.__dict__[self.name]

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        value = self.stored(obj)
        if self.resolve is not None:
            return self.resolve(obj, value)
        return value

    def __set__(self, obj: Any, value: Any) -> None:
        if self.validate is not None:
            checked = self.validate(obj, value)
            if checked is INVALID:
                log.debug(f"Ignoring invalid value for '{self.name}': {value!r}")
                return
            value = checked
        obj.__dict__[self.name] = value
        obj.__dict__.setdefault("_assigned", set()).add(self.name)


class SettingsBase:
    """Base class for Setting-based settings classes."""

    _settings: dict[str, Setting]

    def __init__(self, **kwargs: Any) -> None:
        self._assigned: set[str] = set()
        self.update(kwargs)

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.get_settings())
        return f"{type(self).__name__}({values})"

    @classmethod
    def get_settings(cls) -> dict[str, Setting]:
        """Get all Setting descriptors in declaration order."""
        return getattr(cls, "_settings", {})

    @classmethod
    def canonical_name(cls, key: str) -> str | None:
        """Map a setting name or alias to the setting name."""
        settings = cls.get_settings()
        if key in settings:
            return key
        for name, setting in settings.items():
            if key in setting.aliases:
                return name
        return None

    @classmethod
    def normalize(cls, values: Mapping[str, Any] | SettingsBase | None) -> dict[str, Any]:
        """Turn user input into {setting name: value}, dropping unknown keys.

        A settings instance contributes only its explicitly assigned values.
        """
        if values is None:
            return {}
        if isinstance(values, SettingsBase):
            return values.explicit_values()
        if not isinstance(values, Mapping):
            log.debug(f"Ignoring non-mapping settings: {values!r}")
            return {}
        normalized: dict[str, Any] = {}
        for key, value in values.items():
            name = cls.canonical_name(key)
            if name is None:
                log.debug(f"Ignoring unknown setting '{key}'")
                continue
            normalized[name] = value
        return normalized

    def update(self, values: Mapping[str, Any] | SettingsBase | None) -> None:
        """Assign values in declaration order (so `states` lands before `init_state`)."""
        normalized = self.normalize(values)
        for name in self.get_settings():
            if name in normalized:
                setattr(self, name, normalized[name])

    def explicit_values(self) -> dict[str, Any]:
        """Values that were assigned rather than defaulted."""
        return {name: self.__dict__[name] for name in self.get_settings() if name in self._assigned}

    def as_dict(self) -> dict[str, Any]:
        """Effective values for every setting."""
        return {name: getattr(self, name) for name in self.get_settings()}
