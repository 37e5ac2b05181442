"""keyshortcuts.shortcuts
Alternative key combinations that trigger the same action.

A group either *repeats* (active on every tick while a combination is
held, e.g. camera movement) or fires once per press (active only on the
tick the key goes down, e.g. quick-save).  Groups are immutable; the
builder methods return new groups::

    save = Shortcuts.single_press([KeyCode.KEY_S]).add_require_control()
    move_left = Shortcuts.repeating([KeyCode.KEY_A, KeyCode.ARROW_LEFT])

    if save.is_active(keyboard):
        ...
    str(save)  # "Ctrl + S"
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
from keyshortcuts.errors import ShortcutConfigError
from keyshortcuts.keys import KeyLike, to_key_code
from keyshortcuts.modifiers import ModifierType
from keyshortcuts.shortcut import Shortcut
__all__ = ["Shortcuts"]
def _plain(keys: Iterable[KeyLike]) -> Tuple[Shortcut, ...]:
    try:
        return tuple(Shortcut(key=to_key_code(k)) for k in keys)
    except ValueError as exc:
        raise ShortcutConfigError(str(exc)) from None
@dataclass(frozen=True, slots=True)
class Shortcuts:
    shortcuts: Tuple[Shortcut, ...] = ()
    repeats: bool = False
    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    @classmethod
    def single_press(cls, keys: Iterable[KeyLike]) -> "Shortcuts":
        """Fire once when any of *keys* goes down (no modifiers)."""
        return cls(shortcuts=_plain(keys), repeats=False)
    @classmethod
    def repeating(cls, keys: Iterable[KeyLike]) -> "Shortcuts":
        """Stay active while any of *keys* is held (no modifiers)."""
        return cls(shortcuts=_plain(keys), repeats=True)
    # ------------------------------------------------------------------ #
    # Modifier builders
    #
    # These constrain the FIRST alternative only; the others keep their
    # own modifiers.  On an empty group they do nothing.
    # ------------------------------------------------------------------ #
    def add_modifier(
        self,
        channel: str,
        requirement: ModifierType,
        strict: Optional[bool] = None,
    ) -> "Shortcuts":
        if not self.shortcuts:
            return self
        first, rest = self.shortcuts[0], self.shortcuts[1:]
        modifiers = first.modifiers.with_requirement(channel, requirement, strict)
        if modifiers is first.modifiers:
            return self
        return replace(self, shortcuts=(replace(first, modifiers=modifiers),) + rest)
    def add_require_control(self, strict: Optional[bool] = None) -> "Shortcuts":
        return self.add_modifier("control", ModifierType.REQUIRE_PRESSED, strict)
    def add_forbid_control(self, strict: Optional[bool] = None) -> "Shortcuts":
        return self.add_modifier("control", ModifierType.REQUIRE_NOT_PRESSED, strict)
    def add_require_alt(self, strict: Optional[bool] = None) -> "Shortcuts":
        return self.add_modifier("alt", ModifierType.REQUIRE_PRESSED, strict)
    def add_forbid_alt(self, strict: Optional[bool] = None) -> "Shortcuts":
        return self.add_modifier("alt", ModifierType.REQUIRE_NOT_PRESSED, strict)
    def add_require_shift(self, strict: Optional[bool] = None) -> "Shortcuts":
        return self.add_modifier("shift", ModifierType.REQUIRE_PRESSED, strict)
    def add_forbid_shift(self, strict: Optional[bool] = None) -> "Shortcuts":
        return self.add_modifier("shift", ModifierType.REQUIRE_NOT_PRESSED, strict)
    def add_require_super(self, strict: Optional[bool] = None) -> "Shortcuts":
        return self.add_modifier("super_key", ModifierType.REQUIRE_PRESSED, strict)
    def add_forbid_super(self, strict: Optional[bool] = None) -> "Shortcuts":
        return self.add_modifier("super_key", ModifierType.REQUIRE_NOT_PRESSED, strict)
    # ------------------------------------------------------------------ #
    # Evaluation
    # ------------------------------------------------------------------ #
    def is_active(self, keys: Any) -> bool:
        """True if any alternative fires this tick.

        *keys* is the host's keyboard snapshot: anything offering
        ``pressed(key)`` and ``just_pressed(key)``, usually a
        :class:`keyshortcuts.KeyboardState`.  Repeating groups test held
        keys, single-press groups test keys that went down this tick.
        """
        if self.repeats:
            return any(s.is_held(keys) for s in self.shortcuts)
        return any(s.is_just_activated(keys) for s in self.shortcuts)
    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #
    def label(self) -> str:
        return ", ".join(s.label() for s in self.shortcuts)
    def __str__(self) -> str:  # noqa: D401
        return self.label()
    # ------------------------------------------------------------------ #
    # Structured form
    # ------------------------------------------------------------------ #
    def to_dict(self) -> Dict[str, Any]:
        return {
            "shortcuts": [s.to_dict() for s in self.shortcuts],
            "repeats": self.repeats,
        }
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Shortcuts":
        if not isinstance(data, Mapping):
            raise ShortcutConfigError(f"Shortcuts must be a mapping, got {type(data).__name__}")
        raw = data.get("shortcuts") or []
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
            raise ShortcutConfigError("'shortcuts' must be a list")
        repeats = data.get("repeats", False)
        if repeats is None:
            repeats = False
        if not isinstance(repeats, bool):
            raise ShortcutConfigError(f"'repeats' must be a boolean, got {repeats!r}")
        return cls(
            shortcuts=tuple(Shortcut.from_dict(item) for item in raw),
            repeats=repeats,
        )
