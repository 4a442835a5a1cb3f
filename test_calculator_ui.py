import pytest

pytest.importorskip("tkinter")

from calculator_ui import CalculatorApp  # noqa: E402
from entry_engine import EntryEngine  # noqa: E402


class _FakeVar:
    def __init__(self):
        self.v = ""

    def set(self, x):
        self.v = x

    def get(self):
        return self.v


class _FakeWidget:
    def __init__(self, **options):
        self.options = dict(options)

    def config(self, **options):
        self.options.update(options)

    def cget(self, name):
        return self.options.get(name)


class _FakeRoot:
    def __init__(self):
        self.scheduled = []

    def after(self, ms, fn=None):
        self.scheduled.append(ms)
        if fn:
            fn()


class _DeferredRoot:
    """Guarda los callbacks de after() hasta que se llama a flush()."""

    def __init__(self):
        self.pending = []

    def after(self, ms, fn=None):
        if fn:
            self.pending.append(fn)

    def flush(self):
        pending, self.pending = self.pending, []
        for fn in pending:
            fn()


class _FakeEvent:
    def __init__(self, keysym, char=""):
        self.keysym = keysym
        self.char = char


class _DummyApp(CalculatorApp):
    def __init__(self):
        pass


def _make_app() -> _DummyApp:
    app = _DummyApp()
    app.root = _FakeRoot()
    app.engine = EntryEngine()
    app.previous_var = _FakeVar()
    app.current_var = _FakeVar()
    app.message_var = _FakeVar()
    app.message_label = _FakeWidget(fg=CalculatorApp.C["warning_fg"])
    app._buttons = {}
    app._button_kinds = {}
    app._refresh()
    return app


def _press(app, *actions):
    for action in actions:
        app._on_button(action)


def test_buttons_drive_display():
    app = _make_app()
    _press(app, "digit:5", "op:add", "digit:3")
    assert app.previous_var.get() == "5 +"
    assert app.current_var.get() == "3"
    _press(app, "equals")
    assert app.previous_var.get() == ""
    assert app.current_var.get() == "8"


def test_keypad_rows_are_all_known_actions():
    app = _make_app()
    for row in CalculatorApp.KEYPAD:
        for _text, action, _kind in row:
            app._on_key(action)
    assert app.message_var.get() == ""


def test_divide_by_zero_shows_error_and_clears():
    app = _make_app()
    _press(app, "digit:9", "op:divide", "digit:0", "equals")
    assert app.message_var.get() == "Error: No se puede dividir entre cero"
    assert app.message_label.cget("fg") == CalculatorApp.C["error_fg"]
    assert app.current_var.get() == "0"
    assert app.previous_var.get() == ""


def test_digit_limit_shows_warning_and_next_action_clears_it():
    app = _make_app()
    _press(app, *["digit:1"] * 16)
    assert app.message_var.get() == "Máximo de dígitos alcanzado"
    assert app.current_var.get() == "1" * 15
    _press(app, "backspace")
    assert app.message_var.get() == ""


def test_button_pulse_restores_colour():
    app = _make_app()
    btn = _FakeWidget(bg="#313244")
    app._buttons["digit:7"] = btn
    app._button_kinds["digit:7"] = "num"
    _press(app, "digit:7")
    assert app.root.scheduled == [CalculatorApp.PULSE_MS]
    assert btn.cget("bg") == "#313244"


def test_repeated_press_within_pulse_restores_palette_colour():
    app = _make_app()
    app.root = _DeferredRoot()
    btn = _FakeWidget(bg=CalculatorApp.C["num"])
    app._buttons["digit:7"] = btn
    app._button_kinds["digit:7"] = "num"
    _press(app, "digit:7", "digit:7")
    assert btn.cget("bg") == CalculatorApp.C["active"]
    app.root.flush()
    assert btn.cget("bg") == CalculatorApp.C["num"]
    assert app.current_var.get() == "77"


def test_chained_divide_by_zero_keeps_new_operator():
    app = _make_app()
    _press(app, "digit:8", "op:divide", "digit:0", "op:add")
    assert app.message_var.get() == "Error: No se puede dividir entre cero"
    assert app.previous_var.get() == "0 +"
    assert app.current_var.get() == "0"


def test_keyboard_events():
    app = _make_app()
    for keysym, char in [("1", "1"), ("0", "0"), ("slash", "/"), ("4", "4"), ("Return", "\r")]:
        assert app._on_keypress(_FakeEvent(keysym, char)) == "break"
    assert app.current_var.get() == "2.5"
    assert app._on_keypress(_FakeEvent("Escape")) == "break"
    assert app.current_var.get() == "0"
    assert app._on_keypress(_FakeEvent("Shift_L")) is None


def test_compute_spans():
    assert CalculatorApp._compute_spans(2, 4) == [2, 2]
    assert CalculatorApp._compute_spans(3, 4) == [1, 1, 2]
