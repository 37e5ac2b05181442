"""keyshortcuts.modifiers
Per-channel modifier requirements (Ctrl, Alt, Shift, Super) and their
evaluation against a keyboard snapshot.  A channel set to ``None`` is
ignored; left and right physical keys count as the same modifier.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple
from keyshortcuts import config
from keyshortcuts.errors import DuplicateModifierError, ShortcutConfigError
from keyshortcuts.keys import KeyCode
__all__ = ["ModifierType", "Modifiers", "CHANNELS", "matches_modifier"]
logger = logging.getLogger(__name__)
class ModifierType(Enum):
    REQUIRE_PRESSED = "RequirePressed"
    REQUIRE_NOT_PRESSED = "RequireNotPressed"
    def matches(self, pressed: bool) -> bool:
        if self is ModifierType.REQUIRE_PRESSED:
            return pressed
        return not pressed
    @classmethod
    def parse(cls, value: Any) -> "ModifierType":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ShortcutConfigError(
                f"Unknown modifier requirement {value!r}; expected "
                f"'RequirePressed' or 'RequireNotPressed'"
            ) from None
# channel field -> (display name, left key, right key), in rendering order
CHANNELS: Dict[str, Tuple[str, KeyCode, KeyCode]] = {
    "control": ("Ctrl", KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT),
    "alt": ("Alt", KeyCode.ALT_LEFT, KeyCode.ALT_RIGHT),
    "shift": ("Shift", KeyCode.SHIFT_LEFT, KeyCode.SHIFT_RIGHT),
    "super_key": ("Super", KeyCode.SUPER_LEFT, KeyCode.SUPER_RIGHT),
}
# structured-form spelling of each channel
_SERIALIZED_NAMES = {"control": "control", "alt": "alt", "shift": "shift", "super_key": "super"}
_ALIASES = {"super": "super_key", "ctrl": "control"}
def matches_modifier(requirement: Optional[ModifierType], pressed: bool) -> bool:
    """``None`` means the modifier is ignored."""
    if requirement is None:
        return True
    return requirement.matches(pressed)
def channel_pressed(channel: str, keys: Any) -> bool:
    _, left, right = CHANNELS[channel]
    return keys.pressed(left) or keys.pressed(right)
@dataclass(frozen=True, slots=True)
class Modifiers:
    control: Optional[ModifierType] = None
    alt: Optional[ModifierType] = None
    shift: Optional[ModifierType] = None
    super_key: Optional[ModifierType] = None
    # evaluation ----------------------------------------------------------
    def none(self) -> bool:
        """True when every channel is ignored."""
        return all(getattr(self, name) is None for name in CHANNELS)
    def holds(self, keys: Any) -> bool:
        """Check every channel against *keys* (anything with ``pressed(key)``)."""
        return all(
            matches_modifier(getattr(self, name), channel_pressed(name, keys))
            for name in CHANNELS
        )
    pressed = holds
    # construction --------------------------------------------------------
    def with_requirement(
        self,
        channel: str,
        requirement: ModifierType,
        strict: Optional[bool] = None,
    ) -> "Modifiers":
        """Return a copy with *channel* set to *requirement*.

        A channel may only be set once.  In strict mode a second attempt
        raises :class:`DuplicateModifierError`; otherwise the first value
        wins and the attempt is logged.
        """
        channel = _ALIASES.get(channel, channel)
        if channel not in CHANNELS:
            raise ShortcutConfigError(f"Unknown modifier channel {channel!r}")
        current = getattr(self, channel)
        if current is not None:
            if config.STRICT_MODIFIERS if strict is None else strict:
                raise DuplicateModifierError(channel, CHANNELS[channel][0])
            logger.warning(
                "%s modifier already set to %s; ignoring %s",
                CHANNELS[channel][0], current.value, requirement.value,
            )
            return self
        return replace(self, **{channel: requirement})
    # rendering -----------------------------------------------------------
    def required_names(self) -> List[str]:
        return [
            display
            for name, (display, _, _) in CHANNELS.items()
            if getattr(self, name) is ModifierType.REQUIRE_PRESSED
        ]
    def label(self) -> str:
        """Required modifiers joined by " + "; forbidden ones are not shown."""
        return " + ".join(self.required_names())
    def __str__(self) -> str:  # noqa: D401
        return self.label()
    # structured form -----------------------------------------------------
    def to_dict(self) -> Dict[str, str]:
        return {
            _SERIALIZED_NAMES[f.name]: getattr(self, f.name).value
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Modifiers":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ShortcutConfigError(f"Modifiers must be a mapping, got {type(data).__name__}")
        values: Dict[str, ModifierType] = {}
        seen: Set[str] = set()
        for raw_name, raw_value in data.items():
            name = _ALIASES.get(raw_name, raw_name)
            if name not in CHANNELS:
                raise ShortcutConfigError(f"Unknown modifier channel {raw_name!r}")
            # an explicit null still claims the channel
            if name in seen:
                raise DuplicateModifierError(name, CHANNELS[name][0])
            seen.add(name)
            if raw_value is not None:
                values[name] = ModifierType.parse(raw_value)
        return cls(**values)
