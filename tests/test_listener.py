import sys
from types import ModuleType, SimpleNamespace
from keyshortcuts import config
from keyshortcuts.keys import KeyCode
from keyshortcuts.listener import KeyboardListener, key_code_from_pynput
from keyshortcuts.shortcuts import Shortcuts
def char(c):
    return SimpleNamespace(char=c)
def special(name):
    return SimpleNamespace(char=None, name=name)
def test_characters_map_to_physical_keys():
    assert key_code_from_pynput(char("a")) is KeyCode.KEY_A
    assert key_code_from_pynput(char("A")) is KeyCode.KEY_A
    assert key_code_from_pynput(char("!")) is KeyCode.DIGIT_1
    assert key_code_from_pynput(char("?")) is KeyCode.SLASH
    assert key_code_from_pynput(char("\x13")) is KeyCode.KEY_S
    assert key_code_from_pynput(char("é")) is None
def test_special_keys():
    assert key_code_from_pynput(special("ctrl_r")) is KeyCode.CONTROL_RIGHT
    assert key_code_from_pynput(special("cmd")) is KeyCode.SUPER_LEFT
    assert key_code_from_pynput(special("left")) is KeyCode.ARROW_LEFT
    assert key_code_from_pynput(special("f12")) is KeyCode.F12
    assert key_code_from_pynput(special("media_next")) is KeyCode.MEDIA_TRACK_NEXT
    assert key_code_from_pynput(special("unknown_thing")) is None
def test_callbacks_feed_ticks():
    """Callbacks record input; tick() hands out a snapshot and resets edges."""
    listener = KeyboardListener()
    save = Shortcuts.single_press([KeyCode.KEY_S]).add_require_control()
    listener.on_press(special("ctrl_l"))
    listener.on_press(char("\x13"))
    first = listener.tick()
    assert save.is_active(first)
    second = listener.tick()
    assert second.pressed(KeyCode.KEY_S)
    assert not save.is_active(second)
    listener.on_release(char("s"))
    listener.on_release(special("ctrl_l"))
    assert not listener.tick().pressed_keys
def test_unmapped_keys_are_ignored():
    listener = KeyboardListener()
    listener.on_press(special("mystery"))
    listener.on_release(special("mystery"))
    assert not listener.tick().pressed_keys
    assert not listener.running
def test_control_characters_of_real_keys():
    """Tab, Enter and Backspace sent as characters keep their own keys."""
    assert key_code_from_pynput(char("\t")) is KeyCode.TAB
    assert key_code_from_pynput(char("\r")) is KeyCode.ENTER
    assert key_code_from_pynput(char("\n")) is KeyCode.ENTER
    assert key_code_from_pynput(char("\b")) is KeyCode.BACKSPACE
    assert key_code_from_pynput(char("\x1b")) is KeyCode.ESCAPE
    # other Ctrl+letter characters still resolve to the letter
    assert key_code_from_pynput(char("\x01")) is KeyCode.KEY_A
def numpad(vk, c):
    return SimpleNamespace(vk=vk, char=c)
def test_numpad_keys_use_virtual_key_codes():
    assert key_code_from_pynput(numpad(0x65, "5"), platform="win32") is KeyCode.NUMPAD_5
    assert key_code_from_pynput(numpad(0x6B, "+"), platform="win32") is KeyCode.NUMPAD_ADD
    assert key_code_from_pynput(numpad(0xFFB7, "7"), platform="linux") is KeyCode.NUMPAD_7
    assert key_code_from_pynput(numpad(0xFF8D, "\r"), platform="linux") is KeyCode.NUMPAD_ENTER
    assert key_code_from_pynput(numpad(0x5B, "8"), platform="darwin") is KeyCode.NUMPAD_8
    # main-block keys carry a vk too and still map by character
    assert key_code_from_pynput(numpad(0x35, "5"), platform="win32") is KeyCode.DIGIT_5
    assert key_code_from_pynput(numpad(0x41, "a"), platform="win32") is KeyCode.KEY_A
def test_numpad_group_fires_through_listener():
    listener = KeyboardListener()
    group = Shortcuts.single_press([KeyCode.NUMPAD_ADD])
    if sys.platform.startswith("win"):
        vk = 0x6B
    elif sys.platform == "darwin":
        vk = 0x45
    else:
        vk = 0xFFAB
    listener.on_press(numpad(vk, "+"))
    assert group.is_active(listener.tick())
class RecordingListener:
    instances = []
    def __init__(self, on_press, on_release):
        self.on_press = on_press
        self.on_release = on_release
        self.daemon = False
        self.calls = []
        RecordingListener.instances.append(self)
    def start(self):
        self.calls.append("start")
    def stop(self):
        self.calls.append("stop")
    def join(self, timeout=None):
        self.calls.append(("join", timeout))
def install_fake_pynput(monkeypatch):
    RecordingListener.instances = []
    keyboard = ModuleType("pynput.keyboard")
    keyboard.Listener = RecordingListener
    pynput = ModuleType("pynput")
    pynput.keyboard = keyboard
    monkeypatch.setitem(sys.modules, "pynput", pynput)
    monkeypatch.setitem(sys.modules, "pynput.keyboard", keyboard)
def test_listener_lifecycle(monkeypatch):
    """start() runs one daemon listener; stop() joins it and forgets held keys."""
    install_fake_pynput(monkeypatch)
    monkeypatch.setattr(config, "LISTENER_JOIN_TIMEOUT", 0.25)
    with KeyboardListener() as listener:
        assert listener.running
        listener.start()
        assert len(RecordingListener.instances) == 1
        backend = RecordingListener.instances[0]
        assert backend.daemon is True
        assert backend.calls == ["start"]
        backend.on_press(special("ctrl_l"))
        backend.on_press(char("s"))
        assert listener.tick().pressed(KeyCode.KEY_S)
        backend.on_press(char("q"))
    assert not listener.running
    assert backend.calls == ["start", "stop", ("join", 0.25)]
    snapshot = listener.tick()
    assert not snapshot.pressed_keys
    assert not snapshot.just_pressed_keys
    listener.stop()
    assert backend.calls == ["start", "stop", ("join", 0.25)]
