"""
Motor de entrada para la calculadora de cuatro operaciones.

Este módulo provee la clase EntryEngine, que acumula dígitos, guarda
una sola operación pendiente y resuelve de izquierda a derecha
(``5 + 3 × 2`` da ``16``). No dibuja nada ni lee el teclado: la capa
de presentación llama a sus operaciones y vuelve a leer ``snapshot()``.

Contrato de interfaz:
    - append_digit(d), append_decimal(), delete_last_digit()
    - choose_operation(op), calculate(), clear()
    - snapshot() -> EntrySnapshot
"""

from entry_state import DIVIDE, OPERATIONS, EntrySnapshot, EntryState
from logging_config import get_logger
from number_provider import PythonNumberProvider


logger = get_logger(__name__)

MAX_DIGITS = 15
DIGITS = "0123456789"


class EntryError(Exception):
    """Error recuperable que la interfaz debe mostrar al usuario."""


class DigitLimitExceeded(EntryError, ValueError):
    def __init__(self, limit: int = MAX_DIGITS):
        super().__init__("Máximo de dígitos alcanzado")
        self.limit = limit


class DivideByZero(EntryError, ZeroDivisionError):
    def __init__(self):
        super().__init__("No se puede dividir entre cero")


class EntryEngine:
    """Máquina de estados de la calculadora."""

    def __init__(self, provider=None):
        self._provider = provider if provider is not None else PythonNumberProvider()
        self._state = EntryState()

    @property
    def provider(self):
        return self._provider

    @property
    def state(self) -> EntryState:
        """Copia del estado; mutarla no afecta al motor."""
        return self._state.copy()

    def snapshot(self) -> EntrySnapshot:
        return self._state.snapshot()

    # ── Acumulación de dígitos ───────────────────────────────────

    def append_digit(self, d: str):
        if d == ".":
            self.append_decimal()
            return
        if not isinstance(d, str) or len(d) != 1 or d not in DIGITS:
            raise ValueError(f"Dígito inválido: {d!r}")

        state = self._state
        if state.fresh_entry:
            state.current_operand = ""
            state.fresh_entry = False

        if d == "0" and state.current_operand == "0":
            return

        if state.current_operand == "0":
            state.current_operand = d
            return

        if len(state.current_operand.replace(".", "")) >= MAX_DIGITS:
            logger.warning("Dígito %s rechazado: límite de %d dígitos", d, MAX_DIGITS)
            raise DigitLimitExceeded(MAX_DIGITS)

        state.current_operand += d

    def append_decimal(self):
        state = self._state
        if state.fresh_entry:
            state.current_operand = "0."
            state.fresh_entry = False
            return

        if "." in state.current_operand:
            return

        if not state.current_operand:
            state.current_operand = "0."
        else:
            state.current_operand += "."

    def delete_last_digit(self):
        state = self._state
        current = state.current_operand
        if len(current) <= 1 or current == "0":
            state.current_operand = "0"
            return

        trimmed = current[:-1]
        state.current_operand = trimmed if trimmed != "-" else "0"

    # ── Operaciones ──────────────────────────────────────────────

    def choose_operation(self, op: str):
        if op not in OPERATIONS:
            raise ValueError(f"Operación desconocida: {op!r}")

        state = self._state
        if state.current_operand == "":
            return

        # Segundo operando ya escrito: se resuelve antes de encadenar
        if state.previous_operand != "" and not state.fresh_entry:
            try:
                self.calculate()
            except DivideByZero:
                # El motor ya está limpio; el operador queda pendiente sobre "0"
                self._store_operation(op)
                raise

        self._store_operation(op)

    def _store_operation(self, op: str):
        state = self._state
        state.operation = op
        state.previous_operand = state.current_operand
        state.fresh_entry = True
        logger.debug("Operación pendiente: %s %s", state.previous_operand, op)

    def calculate(self):
        """Aplica la operación pendiente.

        Raises:
            DivideByZero: el operando derecho es cero; el motor queda limpio.
        """
        state = self._state
        if state.operation is None:
            return

        provider = self._provider
        left = provider.parse(state.previous_operand)
        right = provider.parse(state.current_operand)
        if left is None or right is None:
            logger.debug(
                "Operandos no numéricos (%r, %r); se ignora el cálculo",
                state.previous_operand,
                state.current_operand,
            )
            return

        if state.operation == DIVIDE and provider.is_zero(right):
            logger.warning("División entre cero: %s / %s", state.previous_operand,
                           state.current_operand)
            self.clear()
            raise DivideByZero()

        value = provider.apply(state.operation, left, right)
        result = provider.format_result(value)
        logger.debug(
            "%s %s %s = %s",
            state.previous_operand,
            state.operation,
            state.current_operand,
            result,
        )

        state.current_operand = result
        state.previous_operand = ""
        state.operation = None
        state.fresh_entry = True

    def clear(self):
        self._state.reset()
