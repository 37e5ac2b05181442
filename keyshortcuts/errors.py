"""keyshortcuts.errors  –  exception hierarchy for shortcut configuration."""
from __future__ import annotations
__all__ = ["ShortcutError", "ShortcutConfigError", "DuplicateModifierError"]
class ShortcutError(Exception):
    """Base class for every error raised by keyshortcuts."""
class ShortcutConfigError(ShortcutError, ValueError):
    """A shortcut definition is malformed or names something unknown."""
class DuplicateModifierError(ShortcutConfigError):
    """A modifier channel was constrained twice on the same shortcut."""
    def __init__(self, channel: str, display_name: str) -> None:
        self.channel = channel
        super().__init__(f"{display_name} modifier already set")
