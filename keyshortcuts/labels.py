"""keyshortcuts.labels
Display strings for physical keys, used only when rendering shortcuts.
"""
from __future__ import annotations
import threading
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union
from keyshortcuts.keys import KeyCode
__all__ = ["KEY_LABELS", "label_for"]
K = KeyCode
KEY_LABELS: Mapping[KeyCode, str] = MappingProxyType({
    # Punctuation and symbols
    K.BACKQUOTE: "`",
    K.BACKSLASH: "\\",
    K.BRACKET_LEFT: "[",
    K.BRACKET_RIGHT: "]",
    K.COMMA: ",",
    K.EQUAL: "=",
    K.MINUS: "-",
    K.PERIOD: ".",
    K.QUOTE: "'",
    K.SEMICOLON: ";",
    K.SLASH: "/",
    # Special keys
    K.BACKSPACE: "⌫",
    K.DELETE: "⌦",
    K.ENTER: "↵",
    K.ESCAPE: "Esc",
    K.TAB: "⇥",
    K.SPACE: "Space",
    # Navigation
    K.ARROW_UP: "↑",
    K.ARROW_DOWN: "↓",
    K.ARROW_LEFT: "←",
    K.ARROW_RIGHT: "→",
    K.HOME: "Home",
    K.END: "End",
    K.PAGE_UP: "PgUp",
    K.PAGE_DOWN: "PgDn",
    # Locks
    K.CAPS_LOCK: "CapsLock",
    K.NUM_LOCK: "NumLock",
    K.SCROLL_LOCK: "ScrollLock",
    # System
    K.PRINT_SCREEN: "PrtScr",
    K.PAUSE: "Pause",
    K.CONTEXT_MENU: "Menu",
    K.INSERT: "Insert",
    # Letters
    K.KEY_A: "A",
    K.KEY_B: "B",
    K.KEY_C: "C",
    K.KEY_D: "D",
    K.KEY_E: "E",
    K.KEY_F: "F",
    K.KEY_G: "G",
    K.KEY_H: "H",
    K.KEY_I: "I",
    K.KEY_J: "J",
    K.KEY_K: "K",
    K.KEY_L: "L",
    K.KEY_M: "M",
    K.KEY_N: "N",
    K.KEY_O: "O",
    K.KEY_P: "P",
    K.KEY_Q: "Q",
    K.KEY_R: "R",
    K.KEY_S: "S",
    K.KEY_T: "T",
    K.KEY_U: "U",
    K.KEY_V: "V",
    K.KEY_W: "W",
    K.KEY_X: "X",
    K.KEY_Y: "Y",
    K.KEY_Z: "Z",
    # Digits
    K.DIGIT_0: "0",
    K.DIGIT_1: "1",
    K.DIGIT_2: "2",
    K.DIGIT_3: "3",
    K.DIGIT_4: "4",
    K.DIGIT_5: "5",
    K.DIGIT_6: "6",
    K.DIGIT_7: "7",
    K.DIGIT_8: "8",
    K.DIGIT_9: "9",
    # Numpad
    K.NUMPAD_0: "Num 0",
    K.NUMPAD_1: "Num 1",
    K.NUMPAD_2: "Num 2",
    K.NUMPAD_3: "Num 3",
    K.NUMPAD_4: "Num 4",
    K.NUMPAD_5: "Num 5",
    K.NUMPAD_6: "Num 6",
    K.NUMPAD_7: "Num 7",
    K.NUMPAD_8: "Num 8",
    K.NUMPAD_9: "Num 9",
    K.NUMPAD_ADD: "Num +",
    K.NUMPAD_SUBTRACT: "Num -",
    K.NUMPAD_MULTIPLY: "Num *",
    K.NUMPAD_DIVIDE: "Num /",
    K.NUMPAD_DECIMAL: "Num .",
    K.NUMPAD_EQUAL: "Num =",
    K.NUMPAD_ENTER: "Num Enter",
    K.NUMPAD_COMMA: "Num ,",
    K.NUMPAD_BACKSPACE: "Num ⌫",
    K.NUMPAD_CLEAR: "Num Clear",
    K.NUMPAD_CLEAR_ENTRY: "Num CE",
    K.NUMPAD_HASH: "Num #",
    K.NUMPAD_PAREN_LEFT: "Num (",
    K.NUMPAD_PAREN_RIGHT: "Num )",
    K.NUMPAD_STAR: "Num *",
    K.NUMPAD_MEMORY_ADD: "Num M+",
    K.NUMPAD_MEMORY_CLEAR: "Num MC",
    K.NUMPAD_MEMORY_RECALL: "Num MR",
    K.NUMPAD_MEMORY_STORE: "Num MS",
    K.NUMPAD_MEMORY_SUBTRACT: "Num M-",
    # Function keys
    K.F1: "F1",
    K.F2: "F2",
    K.F3: "F3",
    K.F4: "F4",
    K.F5: "F5",
    K.F6: "F6",
    K.F7: "F7",
    K.F8: "F8",
    K.F9: "F9",
    K.F10: "F10",
    K.F11: "F11",
    K.F12: "F12",
    K.F13: "F13",
    K.F14: "F14",
    K.F15: "F15",
    K.F16: "F16",
    K.F17: "F17",
    K.F18: "F18",
    K.F19: "F19",
    K.F20: "F20",
    K.F21: "F21",
    K.F22: "F22",
    K.F23: "F23",
    K.F24: "F24",
    K.F25: "F25",
    K.F26: "F26",
    K.F27: "F27",
    K.F28: "F28",
    K.F29: "F29",
    K.F30: "F30",
    K.F31: "F31",
    K.F32: "F32",
    K.F33: "F33",
    K.F34: "F34",
    K.F35: "F35",
    # Media
    K.MEDIA_PLAY_PAUSE: "Play/Pause",
    K.MEDIA_STOP: "Stop",
    K.MEDIA_TRACK_NEXT: "Next Track",
    K.MEDIA_TRACK_PREVIOUS: "Prev Track",
    K.MEDIA_SELECT: "Media Select",
    K.AUDIO_VOLUME_UP: "Vol+",
    K.AUDIO_VOLUME_DOWN: "Vol-",
    K.AUDIO_VOLUME_MUTE: "Mute",
    # Browser
    K.BROWSER_BACK: "Browser Back",
    K.BROWSER_FORWARD: "Browser Forward",
    K.BROWSER_REFRESH: "Refresh",
    K.BROWSER_STOP: "Browser Stop",
    K.BROWSER_SEARCH: "Browser Search",
    K.BROWSER_FAVORITES: "Favorites",
    K.BROWSER_HOME: "Browser Home",
    # Application
    K.LAUNCH_MAIL: "Mail",
    K.LAUNCH_APP_1: "App1",
    K.LAUNCH_APP_2: "App2",
    K.COPY: "Copy",
    K.CUT: "Cut",
    K.PASTE: "Paste",
    K.UNDO: "Undo",
    K.FIND: "Find",
    K.OPEN: "Open",
    K.SELECT: "Select",
    # Modifiers collapse left/right
    K.CONTROL_LEFT: "Ctrl",
    K.CONTROL_RIGHT: "Ctrl",
    K.ALT_LEFT: "Alt",
    K.ALT_RIGHT: "Alt",
    K.SHIFT_LEFT: "Shift",
    K.SHIFT_RIGHT: "Shift",
    K.SUPER_LEFT: "Super",
    K.SUPER_RIGHT: "Super",
    # International
    K.INTL_BACKSLASH: "Intl \\",
    K.INTL_RO: "Ro",
    K.INTL_YEN: "¥",
    # Language
    K.LANG_1: "Lang1",
    K.LANG_2: "Lang2",
    K.LANG_3: "Lang3",
    K.LANG_4: "Lang4",
    K.LANG_5: "Lang5",
    K.KANA_MODE: "Kana",
    K.HIRAGANA: "Hiragana",
    K.KATAKANA: "Katakana",
    K.CONVERT: "Convert",
    K.NON_CONVERT: "NonConvert",
    # Additional application/system keys
    K.AGAIN: "Again",
    K.RESUME: "Resume",
    K.SUSPEND: "Suspend",
    K.ABORT: "Abort",
    K.PROPS: "Props",
    K.HELP: "Help",
    # Power
    K.POWER: "Power",
    K.SLEEP: "Sleep",
    K.WAKE_UP: "WakeUp",
    K.EJECT: "⏏",
    # Misc
    K.FN: "Fn",
    K.FN_LOCK: "FnLock",
    K.TURBO: "Turbo",
    K.META: "Meta",
    K.HYPER: "Hyper",
})
del K
# Name-indexed view, built on first lookup and never written again.
_by_name: Optional[Dict[str, str]] = None
_by_name_lock = threading.Lock()
def _labels_by_name() -> Dict[str, str]:
    global _by_name
    if _by_name is None:
        with _by_name_lock:
            if _by_name is None:
                _by_name = {key.value: text for key, text in KEY_LABELS.items()}
    return _by_name
def label_for(key: Union[KeyCode, str]) -> str:
    """Return the display string for *key*.

    Accepts a ``KeyCode`` or a canonical key name.  Unknown names are
    returned unchanged, so this never raises.
    """
    if isinstance(key, KeyCode):
        return KEY_LABELS.get(key, key.value)
    return _labels_by_name().get(key, key)
