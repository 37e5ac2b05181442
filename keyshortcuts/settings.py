"""keyshortcuts.settings
Named shortcut groups for a whole application, loaded from the structured
document a host reads from its config file::

    move_left:
      repeats: true
      shortcuts:
        - key: KeyA
        - key: ArrowLeft
    save:
      shortcuts:
        - key: KeyS
          modifiers:
            control: RequirePressed
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional
from keyshortcuts.errors import ShortcutConfigError
from keyshortcuts.shortcuts import Shortcuts
__all__ = ["ShortcutSettings"]
logger = logging.getLogger(__name__)
class ShortcutSettings:
    """Ordered mapping of action name -> :class:`Shortcuts`."""
    def __init__(self, groups: Optional[Mapping[str, Shortcuts]] = None) -> None:
        self._groups: Dict[str, Shortcuts] = dict(groups or {})
    # ------------------------------------------------------------------ #
    # Structured form
    # ------------------------------------------------------------------ #
    @classmethod
    def from_dict(cls, document: Mapping[str, Any]) -> "ShortcutSettings":
        if not isinstance(document, Mapping):
            raise ShortcutConfigError(
                f"Shortcut settings must be a mapping, got {type(document).__name__}"
            )
        groups: Dict[str, Shortcuts] = {}
        for name, entry in document.items():
            try:
                groups[str(name)] = Shortcuts.from_dict(entry)
            except ShortcutConfigError as exc:
                raise ShortcutConfigError(f"{name}: {exc}") from exc
        logger.debug("Loaded %d shortcut groups", len(groups))
        return cls(groups)
    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: group.to_dict() for name, group in self._groups.items()}
    # ------------------------------------------------------------------ #
    # Mapping access
    # ------------------------------------------------------------------ #
    def __getitem__(self, name: str) -> Shortcuts:
        return self._groups[name]
    def __contains__(self, name: object) -> bool:
        return name in self._groups
    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)
    def __len__(self) -> int:
        return len(self._groups)
    def get(self, name: str, default: Optional[Shortcuts] = None) -> Optional[Shortcuts]:
        return self._groups.get(name, default)
    def names(self) -> List[str]:
        return list(self._groups)
    # ------------------------------------------------------------------ #
    # Per-tick helpers
    # ------------------------------------------------------------------ #
    def active(self, keys: Any) -> List[str]:
        """Names of the groups active on this tick, in definition order."""
        return [name for name, group in self._groups.items() if group.is_active(keys)]
    def labels(self) -> Dict[str, str]:
        return {name: group.label() for name, group in self._groups.items()}
    def __repr__(self) -> str:  # noqa: D401
        return f"ShortcutSettings({', '.join(self._groups)})"
