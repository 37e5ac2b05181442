"""keyshortcuts.dispatch
Bind handler methods to named shortcut groups and fire them once per tick.

    class EditorCommands(ShortcutHandler):
        @action("save")
        def command_save(self, keys):
            ...

    handler = EditorCommands(settings)
    # in the host loop, after input was collected for the tick:
    handler.process(keyboard)
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List
from keyshortcuts.errors import ShortcutConfigError
from keyshortcuts.settings import ShortcutSettings
__all__ = ["action", "ShortcutHandler"]
logger = logging.getLogger(__name__)
# ──────────────────────────────────────────────────────────────────────────────
# Decorator to bind command_ methods to shortcut groups
# ──────────────────────────────────────────────────────────────────────────────
def action(name: str):
    def decorator(func):
        setattr(func, "_shortcut_action", name)
        return func
    return decorator
# ──────────────────────────────────────────────────────────────────────────────
# Handler base-class
# ──────────────────────────────────────────────────────────────────────────────
class ShortcutHandler:
    def __init__(self, settings: ShortcutSettings) -> None:
        self.settings = settings
        self._bindings: Dict[str, Callable[[Any], None]] = {}
        self._discover_bindings()
    # binding discovery
    def _discover_bindings(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith("command_"):
                continue
            func = getattr(self, attr_name)
            name = getattr(func, "_shortcut_action", None)
            if not name:
                continue
            if name not in self.settings:
                raise ShortcutConfigError(
                    f"{type(self).__name__}.{attr_name} is bound to unknown action {name!r}"
                )
            if name in self._bindings:
                raise ShortcutConfigError(f"Action {name!r} is bound twice")
            self._bindings[name] = func
        logger.debug("%s bound %d actions", type(self).__name__, len(self._bindings))
    @property
    def bindings(self) -> Dict[str, Callable[[Any], None]]:
        return dict(self._bindings)
    # per-tick dispatcher
    def process(self, keys: Any) -> List[str]:
        """Call every bound command whose group is active; return their names."""
        fired: List[str] = []
        unbound: List[str] = []
        for name in self.settings.active(keys):
            func = self._bindings.get(name)
            if func is None:
                unbound.append(name)
                continue
            logger.debug("Shortcut %s (%s) fired", name, self.settings[name])
            func(keys)
            fired.append(name)
        if unbound:
            self.on_unbound(unbound)
        return fired
    # overridables --------------------------------------------------------
    def on_unbound(self, names: List[str]) -> None:  # noqa: D401
        pass
