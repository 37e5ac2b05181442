"""Package export surface for keyshortcuts."""
from keyshortcuts.dispatch import ShortcutHandler, action
from keyshortcuts.errors import DuplicateModifierError, ShortcutConfigError, ShortcutError
from keyshortcuts.keys import KeyboardState, KeyCode
from keyshortcuts.labels import KEY_LABELS, label_for
from keyshortcuts.modifiers import Modifiers, ModifierType
from keyshortcuts.settings import ShortcutSettings
from keyshortcuts.shortcut import Shortcut
from keyshortcuts.shortcuts import Shortcuts

__all__ = [
    "KeyCode",
    "KeyboardState",
    "KEY_LABELS",
    "label_for",
    "ModifierType",
    "Modifiers",
    "Shortcut",
    "Shortcuts",
    "ShortcutSettings",
    "ShortcutHandler",
    "action",
    "ShortcutError",
    "ShortcutConfigError",
    "DuplicateModifierError",
]
