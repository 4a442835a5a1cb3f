import pytest

from entry_engine import DivideByZero, EntryEngine
from entry_state import ADD, DIVIDE, MULTIPLY, SUBTRACT
from keyboard_map import KEY_ACTIONS, action_for_key, dispatch_key, normalize_key


@pytest.mark.parametrize("key, expected", [
    ("7", ("append_digit", ("7",))),
    (".", ("append_decimal", ())),
    ("+", ("choose_operation", (ADD,))),
    ("-", ("choose_operation", (SUBTRACT,))),
    ("*", ("choose_operation", (MULTIPLY,))),
    ("/", ("choose_operation", (DIVIDE,))),
    ("Enter", ("calculate", ())),
    ("=", ("calculate", ())),
    ("Escape", ("clear", ())),
    ("Backspace", ("delete_last_digit", ())),
])
def test_key_actions(key, expected):
    assert action_for_key(key) == expected


@pytest.mark.parametrize("keysym, key", [
    ("Return", "Enter"),
    ("KP_Enter", "Enter"),
    ("BackSpace", "Backspace"),
    ("KP_Add", "+"),
    ("asterisk", "*"),
    ("period", "."),
    ("KP_5", "5"),
])
def test_tk_keysyms_are_normalized(keysym, key):
    assert normalize_key(keysym) == key
    assert action_for_key(keysym) == KEY_ACTIONS[key]


def test_unmapped_key():
    engine = EntryEngine()
    assert action_for_key("x") is None
    assert dispatch_key(engine, "Shift_L") is False
    assert engine.snapshot().display_operand == "0"


def test_dispatch_sequence():
    engine = EntryEngine()
    for key in ["1", "2", "KP_Add", "3", "asterisk", "2", "Return"]:
        assert dispatch_key(engine, key) is True
    assert engine.snapshot().display_operand == "30"


def test_dispatch_propagates_engine_errors():
    engine = EntryEngine()
    for key in "4/0":
        dispatch_key(engine, key)
    with pytest.raises(DivideByZero):
        dispatch_key(engine, "Enter")
