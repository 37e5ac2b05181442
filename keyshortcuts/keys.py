"""keyshortcuts.keys
Canonical physical-key identifiers plus the per-tick keyboard snapshot.
Key names follow the W3C ``KeyboardEvent.code`` spelling (``KeyA``,
``ArrowLeft``, ``ControlRight`` ...), which is also what the structured
configuration uses.
"""
from __future__ import annotations
from enum import Enum
from typing import Iterable, Set, Union
__all__ = ["KeyCode", "KeyboardState", "to_key_code"]
# ──────────────────────────────────────────────────────────────────────────────
# Key identifiers
# ──────────────────────────────────────────────────────────────────────────────
class KeyCode(Enum):
    # Writing system keys
    BACKQUOTE = "Backquote"
    BACKSLASH = "Backslash"
    BRACKET_LEFT = "BracketLeft"
    BRACKET_RIGHT = "BracketRight"
    COMMA = "Comma"
    DIGIT_0 = "Digit0"
    DIGIT_1 = "Digit1"
    DIGIT_2 = "Digit2"
    DIGIT_3 = "Digit3"
    DIGIT_4 = "Digit4"
    DIGIT_5 = "Digit5"
    DIGIT_6 = "Digit6"
    DIGIT_7 = "Digit7"
    DIGIT_8 = "Digit8"
    DIGIT_9 = "Digit9"
    EQUAL = "Equal"
    INTL_BACKSLASH = "IntlBackslash"
    INTL_RO = "IntlRo"
    INTL_YEN = "IntlYen"
    KEY_A = "KeyA"
    KEY_B = "KeyB"
    KEY_C = "KeyC"
    KEY_D = "KeyD"
    KEY_E = "KeyE"
    KEY_F = "KeyF"
    KEY_G = "KeyG"
    KEY_H = "KeyH"
    KEY_I = "KeyI"
    KEY_J = "KeyJ"
    KEY_K = "KeyK"
    KEY_L = "KeyL"
    KEY_M = "KeyM"
    KEY_N = "KeyN"
    KEY_O = "KeyO"
    KEY_P = "KeyP"
    KEY_Q = "KeyQ"
    KEY_R = "KeyR"
    KEY_S = "KeyS"
    KEY_T = "KeyT"
    KEY_U = "KeyU"
    KEY_V = "KeyV"
    KEY_W = "KeyW"
    KEY_X = "KeyX"
    KEY_Y = "KeyY"
    KEY_Z = "KeyZ"
    MINUS = "Minus"
    PERIOD = "Period"
    QUOTE = "Quote"
    SEMICOLON = "Semicolon"
    SLASH = "Slash"
    # Functional keys
    ALT_LEFT = "AltLeft"
    ALT_RIGHT = "AltRight"
    BACKSPACE = "Backspace"
    CAPS_LOCK = "CapsLock"
    CONTEXT_MENU = "ContextMenu"
    CONTROL_LEFT = "ControlLeft"
    CONTROL_RIGHT = "ControlRight"
    ENTER = "Enter"
    SUPER_LEFT = "SuperLeft"
    SUPER_RIGHT = "SuperRight"
    SHIFT_LEFT = "ShiftLeft"
    SHIFT_RIGHT = "ShiftRight"
    SPACE = "Space"
    TAB = "Tab"
    CONVERT = "Convert"
    KANA_MODE = "KanaMode"
    LANG_1 = "Lang1"
    LANG_2 = "Lang2"
    LANG_3 = "Lang3"
    LANG_4 = "Lang4"
    LANG_5 = "Lang5"
    NON_CONVERT = "NonConvert"
    HIRAGANA = "Hiragana"
    KATAKANA = "Katakana"
    # Control pad
    DELETE = "Delete"
    END = "End"
    HELP = "Help"
    HOME = "Home"
    INSERT = "Insert"
    PAGE_DOWN = "PageDown"
    PAGE_UP = "PageUp"
    # Arrow pad
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ARROW_UP = "ArrowUp"
    # Numpad
    NUM_LOCK = "NumLock"
    NUMPAD_0 = "Numpad0"
    NUMPAD_1 = "Numpad1"
    NUMPAD_2 = "Numpad2"
    NUMPAD_3 = "Numpad3"
    NUMPAD_4 = "Numpad4"
    NUMPAD_5 = "Numpad5"
    NUMPAD_6 = "Numpad6"
    NUMPAD_7 = "Numpad7"
    NUMPAD_8 = "Numpad8"
    NUMPAD_9 = "Numpad9"
    NUMPAD_ADD = "NumpadAdd"
    NUMPAD_BACKSPACE = "NumpadBackspace"
    NUMPAD_CLEAR = "NumpadClear"
    NUMPAD_CLEAR_ENTRY = "NumpadClearEntry"
    NUMPAD_COMMA = "NumpadComma"
    NUMPAD_DECIMAL = "NumpadDecimal"
    NUMPAD_DIVIDE = "NumpadDivide"
    NUMPAD_ENTER = "NumpadEnter"
    NUMPAD_EQUAL = "NumpadEqual"
    NUMPAD_HASH = "NumpadHash"
    NUMPAD_MEMORY_ADD = "NumpadMemoryAdd"
    NUMPAD_MEMORY_CLEAR = "NumpadMemoryClear"
    NUMPAD_MEMORY_RECALL = "NumpadMemoryRecall"
    NUMPAD_MEMORY_STORE = "NumpadMemoryStore"
    NUMPAD_MEMORY_SUBTRACT = "NumpadMemorySubtract"
    NUMPAD_MULTIPLY = "NumpadMultiply"
    NUMPAD_PAREN_LEFT = "NumpadParenLeft"
    NUMPAD_PAREN_RIGHT = "NumpadParenRight"
    NUMPAD_STAR = "NumpadStar"
    NUMPAD_SUBTRACT = "NumpadSubtract"
    # Function section
    ESCAPE = "Escape"
    FN = "Fn"
    FN_LOCK = "FnLock"
    PRINT_SCREEN = "PrintScreen"
    SCROLL_LOCK = "ScrollLock"
    PAUSE = "Pause"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    F21 = "F21"
    F22 = "F22"
    F23 = "F23"
    F24 = "F24"
    F25 = "F25"
    F26 = "F26"
    F27 = "F27"
    F28 = "F28"
    F29 = "F29"
    F30 = "F30"
    F31 = "F31"
    F32 = "F32"
    F33 = "F33"
    F34 = "F34"
    F35 = "F35"
    # Media and browser keys
    BROWSER_BACK = "BrowserBack"
    BROWSER_FAVORITES = "BrowserFavorites"
    BROWSER_FORWARD = "BrowserForward"
    BROWSER_HOME = "BrowserHome"
    BROWSER_REFRESH = "BrowserRefresh"
    BROWSER_SEARCH = "BrowserSearch"
    BROWSER_STOP = "BrowserStop"
    EJECT = "Eject"
    LAUNCH_APP_1 = "LaunchApp1"
    LAUNCH_APP_2 = "LaunchApp2"
    LAUNCH_MAIL = "LaunchMail"
    MEDIA_PLAY_PAUSE = "MediaPlayPause"
    MEDIA_SELECT = "MediaSelect"
    MEDIA_STOP = "MediaStop"
    MEDIA_TRACK_NEXT = "MediaTrackNext"
    MEDIA_TRACK_PREVIOUS = "MediaTrackPrevious"
    POWER = "Power"
    SLEEP = "Sleep"
    AUDIO_VOLUME_DOWN = "AudioVolumeDown"
    AUDIO_VOLUME_MUTE = "AudioVolumeMute"
    AUDIO_VOLUME_UP = "AudioVolumeUp"
    WAKE_UP = "WakeUp"
    # Legacy and application keys
    META = "Meta"
    HYPER = "Hyper"
    TURBO = "Turbo"
    ABORT = "Abort"
    RESUME = "Resume"
    SUSPEND = "Suspend"
    AGAIN = "Again"
    COPY = "Copy"
    CUT = "Cut"
    FIND = "Find"
    OPEN = "Open"
    PASTE = "Paste"
    PROPS = "Props"
    SELECT = "Select"
    UNDO = "Undo"
    def __str__(self) -> str:  # noqa: D401
        return self.value
KeyLike = Union[KeyCode, str]
def to_key_code(key: KeyLike) -> KeyCode:
    """Accept a ``KeyCode`` or its canonical name; raise ``ValueError`` otherwise."""
    if isinstance(key, KeyCode):
        return key
    return KeyCode(key)
# ──────────────────────────────────────────────────────────────────────────────
# Per-tick snapshot
# ──────────────────────────────────────────────────────────────────────────────
class KeyboardState:
    """Keys currently down plus the keys that went down during this tick.

    The host records presses and releases as they arrive and calls
    :meth:`clear` once per tick after its shortcuts were evaluated.
    Shortcut predicates only ever call :meth:`pressed` and
    :meth:`just_pressed`.
    """
    def __init__(
        self,
        pressed: Iterable[KeyCode] = (),
        just_pressed: Iterable[KeyCode] = (),
    ) -> None:
        self.pressed_keys: Set[KeyCode] = set(pressed)
        self.just_pressed_keys: Set[KeyCode] = set(just_pressed)
        self.pressed_keys |= self.just_pressed_keys
    # recording -----------------------------------------------------------
    def press(self, key: KeyCode) -> None:
        # auto-repeat of a held key is not a new down-transition
        if key not in self.pressed_keys:
            self.pressed_keys.add(key)
            self.just_pressed_keys.add(key)
    def release(self, key: KeyCode) -> None:
        self.pressed_keys.discard(key)
    def release_all(self) -> None:
        self.pressed_keys.clear()
    def clear_just_pressed(self, key: KeyCode) -> None:
        self.just_pressed_keys.discard(key)
    def clear(self) -> None:
        """End the tick: forget every down-transition, keep held keys."""
        self.just_pressed_keys.clear()
    # queries -------------------------------------------------------------
    def pressed(self, key: KeyCode) -> bool:
        return key in self.pressed_keys
    def just_pressed(self, key: KeyCode) -> bool:
        return key in self.just_pressed_keys
    def any_pressed(self, keys: Iterable[KeyCode]) -> bool:
        return any(key in self.pressed_keys for key in keys)
    def snapshot(self) -> "KeyboardState":
        copy = KeyboardState()
        # a key may have gone down and up again within one tick
        copy.pressed_keys = set(self.pressed_keys)
        copy.just_pressed_keys = set(self.just_pressed_keys)
        return copy
    def __repr__(self) -> str:  # noqa: D401
        held = ", ".join(sorted(k.value for k in self.pressed_keys))
        fresh = ", ".join(sorted(k.value for k in self.just_pressed_keys))
        return f"KeyboardState(pressed=[{held}], just_pressed=[{fresh}])"
