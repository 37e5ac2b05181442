"""keyshortcuts.listener
Optional system-wide keyboard input via pynput, for hosts that have no
input layer of their own.  A background thread records presses and
releases; the host calls :meth:`KeyboardListener.tick` once per frame and
evaluates its shortcuts against the returned snapshot.
"""
from __future__ import annotations
import logging
import sys
import threading
from typing import Any, Dict, Optional
from keyshortcuts import config
from keyshortcuts.keys import KeyboardState, KeyCode
__all__ = ["KeyboardListener", "key_code_from_pynput"]
logger = logging.getLogger(__name__)
# ──────────────────────────────────────────────────────────────────────────────
# pynput -> KeyCode
# ──────────────────────────────────────────────────────────────────────────────
_SPECIAL_KEYS: Dict[str, KeyCode] = {
    "alt": KeyCode.ALT_LEFT,
    "alt_l": KeyCode.ALT_LEFT,
    "alt_r": KeyCode.ALT_RIGHT,
    "alt_gr": KeyCode.ALT_RIGHT,
    "ctrl": KeyCode.CONTROL_LEFT,
    "ctrl_l": KeyCode.CONTROL_LEFT,
    "ctrl_r": KeyCode.CONTROL_RIGHT,
    "shift": KeyCode.SHIFT_LEFT,
    "shift_l": KeyCode.SHIFT_LEFT,
    "shift_r": KeyCode.SHIFT_RIGHT,
    "cmd": KeyCode.SUPER_LEFT,
    "cmd_l": KeyCode.SUPER_LEFT,
    "cmd_r": KeyCode.SUPER_RIGHT,
    "backspace": KeyCode.BACKSPACE,
    "caps_lock": KeyCode.CAPS_LOCK,
    "delete": KeyCode.DELETE,
    "down": KeyCode.ARROW_DOWN,
    "end": KeyCode.END,
    "enter": KeyCode.ENTER,
    "esc": KeyCode.ESCAPE,
    "home": KeyCode.HOME,
    "insert": KeyCode.INSERT,
    "left": KeyCode.ARROW_LEFT,
    "menu": KeyCode.CONTEXT_MENU,
    "num_lock": KeyCode.NUM_LOCK,
    "page_down": KeyCode.PAGE_DOWN,
    "page_up": KeyCode.PAGE_UP,
    "pause": KeyCode.PAUSE,
    "print_screen": KeyCode.PRINT_SCREEN,
    "right": KeyCode.ARROW_RIGHT,
    "scroll_lock": KeyCode.SCROLL_LOCK,
    "space": KeyCode.SPACE,
    "tab": KeyCode.TAB,
    "up": KeyCode.ARROW_UP,
    "media_play_pause": KeyCode.MEDIA_PLAY_PAUSE,
    "media_next": KeyCode.MEDIA_TRACK_NEXT,
    "media_previous": KeyCode.MEDIA_TRACK_PREVIOUS,
    "media_volume_up": KeyCode.AUDIO_VOLUME_UP,
    "media_volume_down": KeyCode.AUDIO_VOLUME_DOWN,
    "media_volume_mute": KeyCode.AUDIO_VOLUME_MUTE,
}
_SPECIAL_KEYS.update({f"f{n}": KeyCode(f"F{n}") for n in range(1, 36)})
# US layout; shifted symbols map back to the physical key
_CHAR_KEYS: Dict[str, KeyCode] = {
    "`": KeyCode.BACKQUOTE, "~": KeyCode.BACKQUOTE,
    "-": KeyCode.MINUS, "_": KeyCode.MINUS,
    "=": KeyCode.EQUAL, "+": KeyCode.EQUAL,
    "[": KeyCode.BRACKET_LEFT, "{": KeyCode.BRACKET_LEFT,
    "]": KeyCode.BRACKET_RIGHT, "}": KeyCode.BRACKET_RIGHT,
    "\\": KeyCode.BACKSLASH, "|": KeyCode.BACKSLASH,
    ";": KeyCode.SEMICOLON, ":": KeyCode.SEMICOLON,
    "'": KeyCode.QUOTE, '"': KeyCode.QUOTE,
    ",": KeyCode.COMMA, "<": KeyCode.COMMA,
    ".": KeyCode.PERIOD, ">": KeyCode.PERIOD,
    "/": KeyCode.SLASH, "?": KeyCode.SLASH,
    " ": KeyCode.SPACE,
}
for _digit, _shifted in zip("0123456789", ")!@#$%^&*("):
    _CHAR_KEYS[_digit] = _CHAR_KEYS[_shifted] = KeyCode(f"Digit{_digit}")
# Backspace, Tab and Enter may arrive as characters; they win over Ctrl+H/I/J/M
_CONTROL_CHAR_KEYS: Dict[str, KeyCode] = {
    "\b": KeyCode.BACKSPACE,
    "\t": KeyCode.TAB,
    "\n": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\x1b": KeyCode.ESCAPE,
    "\x7f": KeyCode.DELETE,
}
for _letter in "abcdefghijklmnopqrstuvwxyz":
    _code = KeyCode(f"Key{_letter.upper()}")
    _CHAR_KEYS[_letter] = _CHAR_KEYS[_letter.upper()] = _code
    # Ctrl+letter arrives as an ASCII control character on some platforms
    _control = chr(ord(_letter) - ord("a") + 1)
    if _control not in _CONTROL_CHAR_KEYS:
        _CHAR_KEYS[_control] = _code
_CHAR_KEYS.update(_CONTROL_CHAR_KEYS)
del _digit, _shifted, _letter, _code, _control
# Numpad virtual-key codes per pynput backend.  The char of a numpad key is
# the same as the main-block key, so these are checked first.
_NUMPAD_DIGITS = [KeyCode(f"Numpad{n}") for n in range(10)]
_NUMPAD_VKS: Dict[str, Dict[int, KeyCode]] = {
    # Windows VK_NUMPAD0.. / VK_MULTIPLY..
    "win32": {
        **{0x60 + n: code for n, code in enumerate(_NUMPAD_DIGITS)},
        0x6A: KeyCode.NUMPAD_MULTIPLY,
        0x6B: KeyCode.NUMPAD_ADD,
        0x6C: KeyCode.NUMPAD_COMMA,
        0x6D: KeyCode.NUMPAD_SUBTRACT,
        0x6E: KeyCode.NUMPAD_DECIMAL,
        0x6F: KeyCode.NUMPAD_DIVIDE,
    },
    # macOS kVK_ANSI_Keypad*
    "darwin": {
        0x52: KeyCode.NUMPAD_0,
        0x53: KeyCode.NUMPAD_1,
        0x54: KeyCode.NUMPAD_2,
        0x55: KeyCode.NUMPAD_3,
        0x56: KeyCode.NUMPAD_4,
        0x57: KeyCode.NUMPAD_5,
        0x58: KeyCode.NUMPAD_6,
        0x59: KeyCode.NUMPAD_7,
        0x5B: KeyCode.NUMPAD_8,
        0x5C: KeyCode.NUMPAD_9,
        0x41: KeyCode.NUMPAD_DECIMAL,
        0x43: KeyCode.NUMPAD_MULTIPLY,
        0x45: KeyCode.NUMPAD_ADD,
        0x47: KeyCode.NUMPAD_CLEAR,
        0x4B: KeyCode.NUMPAD_DIVIDE,
        0x4C: KeyCode.NUMPAD_ENTER,
        0x4E: KeyCode.NUMPAD_SUBTRACT,
        0x51: KeyCode.NUMPAD_EQUAL,
    },
    # X11 XK_KP_* keysyms
    "xorg": {
        **{0xFFB0 + n: code for n, code in enumerate(_NUMPAD_DIGITS)},
        0xFF8D: KeyCode.NUMPAD_ENTER,
        0xFFAA: KeyCode.NUMPAD_MULTIPLY,
        0xFFAB: KeyCode.NUMPAD_ADD,
        0xFFAC: KeyCode.NUMPAD_COMMA,
        0xFFAD: KeyCode.NUMPAD_SUBTRACT,
        0xFFAE: KeyCode.NUMPAD_DECIMAL,
        0xFFAF: KeyCode.NUMPAD_DIVIDE,
        0xFFBD: KeyCode.NUMPAD_EQUAL,
    },
}
def _numpad_table(platform: str) -> Dict[int, KeyCode]:
    if platform.startswith("win"):
        return _NUMPAD_VKS["win32"]
    if platform == "darwin":
        return _NUMPAD_VKS["darwin"]
    return _NUMPAD_VKS["xorg"]
def key_code_from_pynput(key_obj: Any, platform: Optional[str] = None) -> Optional[KeyCode]:
    """Translate a pynput ``Key``/``KeyCode`` into a :class:`KeyCode`.

    *platform* selects the virtual-key table for numpad keys and defaults
    to ``sys.platform``.  Returns ``None`` for keys with no canonical
    equivalent.
    """
    vk = getattr(key_obj, "vk", None)
    if vk is not None:
        numpad = _numpad_table(platform or sys.platform).get(vk)
        if numpad is not None:
            return numpad
    char = getattr(key_obj, "char", None)
    if char:
        return _CHAR_KEYS.get(char)
    name = getattr(key_obj, "name", None)
    if name is None:
        name = str(key_obj).split(".")[-1]
    return _SPECIAL_KEYS.get(name)
# ──────────────────────────────────────────────────────────────────────────────
# Listener
# ──────────────────────────────────────────────────────────────────────────────
class KeyboardListener:
    def __init__(self) -> None:
        self._state = KeyboardState()
        self._lock = threading.Lock()
        self._listener: Optional[Any] = None
    # lifecycle
    def start(self) -> None:
        if self._listener is not None:
            return
        from pynput import keyboard
        self._listener = keyboard.Listener(
            on_press=self.on_press, on_release=self.on_release
        )
        self._listener.daemon = True
        self._listener.start()
        logger.debug("Keyboard listener started")
    def stop(self) -> None:
        if self._listener is None:
            return
        self._listener.stop()
        self._listener.join(timeout=config.LISTENER_JOIN_TIMEOUT)
        self._listener = None
        with self._lock:
            self._state.release_all()
            self._state.clear()
        logger.debug("Keyboard listener stopped")
    def __enter__(self) -> "KeyboardListener":
        self.start()
        return self
    def __exit__(self, *exc_info: Any) -> None:
        self.stop()
    @property
    def running(self) -> bool:
        return self._listener is not None
    # pynput callbacks (listener thread)
    def on_press(self, key_obj: Any) -> None:
        code = key_code_from_pynput(key_obj)
        if code is None:
            logger.debug("Ignoring unmapped key %r", key_obj)
            return
        with self._lock:
            self._state.press(code)
    def on_release(self, key_obj: Any) -> None:
        code = key_code_from_pynput(key_obj)
        if code is None:
            return
        with self._lock:
            self._state.release(code)
    # host side
    def tick(self) -> KeyboardState:
        """Snapshot the keyboard and start a new tick."""
        with self._lock:
            snapshot = self._state.snapshot()
            self._state.clear()
        return snapshot
