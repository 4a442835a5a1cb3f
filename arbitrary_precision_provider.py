"""Proveedor numérico de precisión arbitraria basado en mpmath."""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal

from entry_state import ADD, DIVIDE, MULTIPLY, SUBTRACT
from number_provider import (
    EXPONENTIAL_LIMIT,
    ROUND_PLACES,
    exponential_text,
    non_finite_text,
    plain_decimal_text,
)

try:
    from mpmath import mp
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "mpmath no está instalado. Instala con: pip install mpmath"
    ) from exc


class MPMathNumberProvider:
    """Opera con ``mpf`` a ``digits`` cifras significativas.

    Evita los restos binarios de ``float`` (``0.1 + 0.2``) antes de
    aplicar las mismas reglas de formato que el proveedor de doble
    precisión.
    """

    name = "mpmath"
    MIN_DIGITS = 16

    def __init__(self, digits: int = 30):
        self._digits = max(self.MIN_DIGITS, digits)
        self._operations = {
            ADD: lambda a, b: a + b,
            SUBTRACT: lambda a, b: a - b,
            MULTIPLY: lambda a, b: a * b,
            DIVIDE: lambda a, b: a / b,
        }

    @property
    def digits(self) -> int:
        return self._digits

    def parse(self, text: str):
        with mp.workdps(self._digits):
            try:
                value = mp.mpf(text)
            except (TypeError, ValueError):
                return None
            if not mp.isfinite(value):
                return None
            return value

    @staticmethod
    def is_zero(value) -> bool:
        return value == 0

    def apply(self, operation: str, left, right):
        try:
            fn = self._operations[operation]
        except KeyError:
            raise ValueError(f"Operación desconocida: {operation}") from None
        with mp.workdps(self._digits):
            return fn(left, right)

    # ── Formato del resultado ────────────────────────────────────

    def format_result(self, value) -> str:
        if not mp.isfinite(value):
            return non_finite_text(value)

        with mp.workdps(self._digits):
            number = Decimal(mp.nstr(value, n=self._digits))

        if abs(number) > Decimal(int(EXPONENTIAL_LIMIT)):
            return exponential_text(number)

        if number != number.to_integral_value():
            scaled = (number.scaleb(ROUND_PLACES) + Decimal("0.5")).to_integral_value(
                rounding=ROUND_FLOOR
            )
            return plain_decimal_text(str(scaled.scaleb(-ROUND_PLACES)))

        return str(int(number))
