import pytest
from keyshortcuts.keys import KeyboardState, KeyCode, to_key_code
def test_press_marks_just_pressed_once():
    keys = KeyboardState()
    keys.press(KeyCode.KEY_A)
    assert keys.pressed(KeyCode.KEY_A)
    assert keys.just_pressed(KeyCode.KEY_A)
    keys.clear()
    keys.press(KeyCode.KEY_A)
    assert keys.pressed(KeyCode.KEY_A)
    assert not keys.just_pressed(KeyCode.KEY_A)
def test_constructor_treats_just_pressed_as_down():
    keys = KeyboardState(just_pressed=[KeyCode.KEY_S])
    assert keys.pressed(KeyCode.KEY_S)
    assert keys.any_pressed([KeyCode.KEY_D, KeyCode.KEY_S])
def test_snapshot_is_independent():
    keys = KeyboardState()
    keys.press(KeyCode.ENTER)
    keys.release(KeyCode.ENTER)
    snap = keys.snapshot()
    keys.clear()
    # tapped within one tick: went down, but is no longer held
    assert snap.just_pressed(KeyCode.ENTER)
    assert not snap.pressed(KeyCode.ENTER)
    assert not keys.just_pressed(KeyCode.ENTER)
def test_to_key_code():
    assert to_key_code("ArrowUp") is KeyCode.ARROW_UP
    assert to_key_code(KeyCode.F1) is KeyCode.F1
    assert str(KeyCode.NUMPAD_ENTER) == "NumpadEnter"
    with pytest.raises(ValueError):
        to_key_code("arrowup")
