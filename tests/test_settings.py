import pytest
from keyshortcuts.errors import ShortcutConfigError
from keyshortcuts.keys import KeyboardState, KeyCode
from keyshortcuts.settings import ShortcutSettings
from keyshortcuts.shortcuts import Shortcuts
DOCUMENT = {
    "move_left": {"repeats": True, "shortcuts": [{"key": "KeyA"}, {"key": "ArrowLeft"}]},
    "move_right": {"repeats": True, "shortcuts": [{"key": "KeyD"}, {"key": "ArrowRight"}]},
    "save": {"shortcuts": [{"key": "KeyS", "modifiers": {"control": "RequirePressed"}}]},
}
def test_load_and_lookup():
    settings = ShortcutSettings.from_dict(DOCUMENT)
    assert settings.names() == ["move_left", "move_right", "save"]
    assert len(settings) == 3
    assert "save" in settings
    assert settings["save"] == Shortcuts.single_press([KeyCode.KEY_S]).add_require_control()
    assert settings.get("jump") is None
def test_labels():
    settings = ShortcutSettings.from_dict(DOCUMENT)
    assert settings.labels() == {
        "move_left": "A, ←",
        "move_right": "D, →",
        "save": "Ctrl + S",
    }
def test_active_in_definition_order():
    settings = ShortcutSettings.from_dict(DOCUMENT)
    keys = KeyboardState()
    keys.press(KeyCode.CONTROL_LEFT)
    keys.press(KeyCode.KEY_S)
    keys.press(KeyCode.ARROW_RIGHT)
    keys.press(KeyCode.KEY_A)
    assert settings.active(keys) == ["move_left", "move_right", "save"]
    keys.clear()
    assert settings.active(keys) == ["move_left", "move_right"]
def test_round_trip():
    settings = ShortcutSettings.from_dict(DOCUMENT)
    again = ShortcutSettings.from_dict(settings.to_dict())
    assert again.to_dict() == settings.to_dict()
    assert again["move_left"] == settings["move_left"]
def test_bad_entry_names_the_action():
    with pytest.raises(ShortcutConfigError, match="jump"):
        ShortcutSettings.from_dict({"jump": {"shortcuts": [{"key": "Spacebar"}]}})
    with pytest.raises(ShortcutConfigError):
        ShortcutSettings.from_dict(["save"])
