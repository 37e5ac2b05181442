import pytest
from keyshortcuts.dispatch import ShortcutHandler, action
from keyshortcuts.errors import ShortcutConfigError
from keyshortcuts.keys import KeyboardState, KeyCode
from keyshortcuts.settings import ShortcutSettings
from keyshortcuts.shortcuts import Shortcuts
def make_settings():
    return ShortcutSettings({
        "save": Shortcuts.single_press([KeyCode.KEY_S]).add_require_control(),
        "zoom_in": Shortcuts.repeating([KeyCode.KEY_Q]),
        "quit": Shortcuts.single_press([KeyCode.ESCAPE]),
    })
class Commands(ShortcutHandler):
    def __init__(self, settings):
        self.calls = []
        self.unbound = []
        super().__init__(settings)
    @action("save")
    def command_save(self, keys):
        self.calls.append("save")
    @action("zoom_in")
    def command_zoom(self, keys):
        self.calls.append("zoom_in")
    def on_unbound(self, names):
        self.unbound.extend(names)
def test_discovers_bound_commands():
    handler = Commands(make_settings())
    assert sorted(handler.bindings) == ["save", "zoom_in"]
def test_process_fires_active_commands():
    """Ctrl+S fires once; holding Q zooms every tick."""
    handler = Commands(make_settings())
    keys = KeyboardState()
    keys.press(KeyCode.CONTROL_LEFT)
    keys.press(KeyCode.KEY_S)
    keys.press(KeyCode.KEY_Q)
    assert handler.process(keys) == ["save", "zoom_in"]
    keys.clear()
    assert handler.process(keys) == ["zoom_in"]
    assert handler.calls == ["save", "zoom_in", "zoom_in"]
def test_unbound_active_groups_are_reported():
    handler = Commands(make_settings())
    keys = KeyboardState()
    keys.press(KeyCode.ESCAPE)
    assert handler.process(keys) == []
    assert handler.unbound == ["quit"]
def test_unknown_action_is_a_config_error():
    class Broken(ShortcutHandler):
        @action("jump")
        def command_jump(self, keys):
            pass
    with pytest.raises(ShortcutConfigError, match="jump"):
        Broken(make_settings())
