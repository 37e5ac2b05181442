"""keyshortcuts.shortcut  –  one key plus its modifier requirements."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping
from keyshortcuts.errors import ShortcutConfigError
from keyshortcuts.keys import KeyCode
from keyshortcuts.labels import label_for
from keyshortcuts.modifiers import Modifiers
__all__ = ["Shortcut"]
@dataclass(frozen=True, slots=True)
class Shortcut:
    """A single key combination.

    Most code should go through :class:`keyshortcuts.Shortcuts`, which
    groups alternatives and picks held vs. just-pressed matching.
    """
    key: KeyCode
    modifiers: Modifiers = field(default_factory=Modifiers)
    def key_str(self) -> str:
        return label_for(self.key)
    def is_held(self, keys: Any) -> bool:
        """Key is down and every modifier requirement holds."""
        return keys.pressed(self.key) and self.modifiers.holds(keys)
    def is_just_activated(self, keys: Any) -> bool:
        """Key went down this tick and every modifier requirement holds."""
        return keys.just_pressed(self.key) and self.modifiers.holds(keys)
    def label(self) -> str:
        mods = self.modifiers.label()
        if mods:
            return f"{mods} + {self.key_str()}"
        return self.key_str()
    def __str__(self) -> str:  # noqa: D401
        return self.label()
    # structured form -----------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"key": self.key.value}
        mods = self.modifiers.to_dict()
        if mods:
            data["modifiers"] = mods
        return data
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Shortcut":
        if not isinstance(data, Mapping):
            raise ShortcutConfigError(f"Shortcut must be a mapping, got {type(data).__name__}")
        if "key" not in data:
            raise ShortcutConfigError("Shortcut is missing 'key'")
        try:
            key = KeyCode(data["key"])
        except ValueError:
            raise ShortcutConfigError(f"Unknown key {data['key']!r}") from None
        return cls(key=key, modifiers=Modifiers.from_dict(data.get("modifiers")))
