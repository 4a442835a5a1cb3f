"""Proveedor numérico de la calculadora basado en ``float`` de Python.

Un proveedor encapsula todo lo que el motor necesita saber de los
números: convertir texto, operar y formatear el resultado. El motor
no sabe si trabaja con ``float`` o con ``mpmath``.

Contrato de interfaz:
    - parse(text: str) -> valor | None
    - is_zero(value) -> bool
    - apply(operation: str, left, right) -> valor
    - format_result(value) -> str
"""

import math
import operator
from decimal import ROUND_HALF_UP, Decimal

from entry_state import ADD, DIVIDE, MULTIPLY, SUBTRACT


EXPONENTIAL_LIMIT = 1e15     # por encima se usa notación exponencial
EXPONENTIAL_DIGITS = 6       # decimales de la mantisa
ROUND_PLACES = 8             # decimales máximos en resultados fraccionarios
POSITIONAL_MIN = Decimal("1e-6")  # por debajo las fracciones van en exponencial


def non_finite_text(value) -> str:
    if value != value:
        return "NaN"
    return "∞" if value > 0 else "-∞"


def plain_decimal_text(text: str) -> str:
    """Convierte un número textual a su forma más corta, sin ceros sobrantes.

    ``"3.0"`` pasa a ``"3"`` y ``"0.12500000"`` a ``"0.125"``. Las
    fracciones menores que 1e-6 se escriben en exponencial sin relleno
    (``"5e-08"`` pasa a ``"5e-8"``).
    """
    value = Decimal(text)
    if value == value.to_integral_value():
        return str(int(value))
    value = value.normalize()
    if abs(value) < POSITIONAL_MIN:
        return format(value, "e")
    return format(value, "f")


def exponential_text(value: Decimal) -> str:
    """Notación exponencial con mantisa de 6 decimales redondeada hacia arriba.

    Los empates exactos suben (``1.0000005e16`` da ``"1.000001e+16"``).
    """
    exponent = value.adjusted()
    rounded = value.quantize(
        Decimal(1).scaleb(exponent - EXPONENTIAL_DIGITS), rounding=ROUND_HALF_UP
    )
    # 9.9999996e16 sube a 1.000000e17
    if rounded.adjusted() > exponent:
        exponent += 1
        rounded = rounded.quantize(Decimal(1).scaleb(exponent - EXPONENTIAL_DIGITS))
    return f"{rounded.scaleb(-exponent)}e{exponent:+d}"


class PythonNumberProvider:
    """Aritmética de doble precisión, como la de una calculadora de bolsillo."""

    name = "float"

    def __init__(self):
        self._operations = {
            ADD: operator.add,
            SUBTRACT: operator.sub,
            MULTIPLY: operator.mul,
            DIVIDE: operator.truediv,
        }

    def parse(self, text: str):
        try:
            value = float(text)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(value):
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
        return fn(left, right)

    # ── Formato del resultado ────────────────────────────────────

    @staticmethod
    def format_result(value) -> str:
        if not math.isfinite(value):
            return non_finite_text(value)

        if abs(value) > EXPONENTIAL_LIMIT:
            return exponential_text(Decimal(value))

        if value != int(value):
            scale = 10 ** ROUND_PLACES
            rounded = math.floor(value * scale + 0.5) / scale
            return plain_decimal_text(repr(rounded))

        return str(int(value))
