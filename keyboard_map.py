"""Traducción de teclas a operaciones del motor de entrada."""

from entry_state import ADD, DIVIDE, MULTIPLY, SUBTRACT


KEY_ACTIONS = {
    **{d: ("append_digit", (d,)) for d in "0123456789"},
    ".": ("append_decimal", ()),
    "+": ("choose_operation", (ADD,)),
    "-": ("choose_operation", (SUBTRACT,)),
    "*": ("choose_operation", (MULTIPLY,)),
    "/": ("choose_operation", (DIVIDE,)),
    "Enter": ("calculate", ()),
    "=": ("calculate", ()),
    "Escape": ("clear", ()),
    "Backspace": ("delete_last_digit", ()),
}

# keysym de tkinter -> nombre de tecla
TK_KEYSYM_ALIASES = {
    "Return": "Enter",
    "KP_Enter": "Enter",
    "BackSpace": "Backspace",
    "KP_Add": "+",
    "KP_Subtract": "-",
    "KP_Multiply": "*",
    "KP_Divide": "/",
    "KP_Decimal": ".",
    "KP_Equal": "=",
    "plus": "+",
    "minus": "-",
    "asterisk": "*",
    "slash": "/",
    "period": ".",
    "equal": "=",
    **{f"KP_{d}": d for d in "0123456789"},
}


def normalize_key(key: str) -> str:
    return TK_KEYSYM_ALIASES.get(key, key)


def action_for_key(key: str):
    """Devuelve ``(método, argumentos)`` o ``None`` si la tecla no se usa."""
    return KEY_ACTIONS.get(normalize_key(key))


def dispatch_key(engine, key: str) -> bool:
    """Ejecuta en ``engine`` la operación asociada a ``key``.

    Los errores del motor (p. ej. ``DivideByZero``) se propagan.
    """
    action = action_for_key(key)
    if action is None:
        return False
    method_name, args = action
    getattr(engine, method_name)(*args)
    return True
