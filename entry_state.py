"""Estado de entrada de la calculadora y su vista de solo lectura."""

from __future__ import annotations

from typing import NamedTuple


ADD = "add"
SUBTRACT = "subtract"
MULTIPLY = "multiply"
DIVIDE = "divide"

OPERATIONS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)

OPERATION_SYMBOLS = {
    ADD: "+",
    SUBTRACT: "-",
    MULTIPLY: "×",
    DIVIDE: "/",
}


class EntrySnapshot(NamedTuple):
    """Lo que la pantalla necesita mostrar."""

    display_operand: str
    pending_label: str


class EntryState:
    """Registro mutable con los operandos y la operación pendiente.

    No valida nada: solo guarda valores. Quien lo muta es el motor
    que lo posee.
    """

    __slots__ = ("current_operand", "previous_operand", "operation", "fresh_entry")

    def __init__(self):
        self.current_operand = "0"
        self.previous_operand = ""
        self.operation: str | None = None
        self.fresh_entry = False

    def reset(self):
        self.current_operand = "0"
        self.previous_operand = ""
        self.operation = None
        self.fresh_entry = False

    def copy(self) -> "EntryState":
        other = EntryState()
        other.current_operand = self.current_operand
        other.previous_operand = self.previous_operand
        other.operation = self.operation
        other.fresh_entry = self.fresh_entry
        return other

    def as_tuple(self) -> tuple[str, str, str | None, bool]:
        return (
            self.current_operand,
            self.previous_operand,
            self.operation,
            self.fresh_entry,
        )

    def snapshot(self) -> EntrySnapshot:
        if self.operation is None:
            label = ""
        else:
            label = f"{self.previous_operand} {OPERATION_SYMBOLS[self.operation]}"
        return EntrySnapshot(self.current_operand, label)

    def __eq__(self, other):
        if not isinstance(other, EntryState):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return (
            f"EntryState(current={self.current_operand!r}, "
            f"previous={self.previous_operand!r}, "
            f"operation={self.operation!r}, fresh={self.fresh_entry})"
        )
