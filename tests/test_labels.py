from keyshortcuts.keys import KeyCode
from keyshortcuts.labels import KEY_LABELS, label_for
def test_symbols_and_glyphs():
    assert label_for(KeyCode.BACKSLASH) == "\\"
    assert label_for(KeyCode.BACKSPACE) == "⌫"
    assert label_for(KeyCode.ENTER) == "↵"
    assert label_for(KeyCode.ARROW_LEFT) == "←"
    assert label_for(KeyCode.PAGE_DOWN) == "PgDn"
def test_enumerated_ranges():
    assert label_for(KeyCode.KEY_Q) == "Q"
    assert label_for(KeyCode.DIGIT_7) == "7"
    assert label_for(KeyCode.NUMPAD_3) == "Num 3"
    assert label_for(KeyCode.NUMPAD_ADD) == "Num +"
    assert label_for(KeyCode.F35) == "F35"
def test_modifier_keys_collapse():
    assert label_for(KeyCode.CONTROL_LEFT) == label_for(KeyCode.CONTROL_RIGHT) == "Ctrl"
    assert label_for(KeyCode.SUPER_RIGHT) == "Super"
def test_lookup_by_name():
    assert label_for("KeyA") == "A"
    assert label_for("MediaPlayPause") == "Play/Pause"
def test_unknown_name_passes_through():
    """Unmapped names come back unchanged."""
    assert label_for("Unidentified") == "Unidentified"
    assert label_for("") == ""
def test_every_key_has_a_label():
    assert set(KEY_LABELS) == set(KeyCode)
