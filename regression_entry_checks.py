from entry_engine import DigitLimitExceeded, DivideByZero, EntryEngine, EntryError
from keyboard_map import dispatch_key
import sys


# Atajos de una letra para las teclas con nombre
_NAMED_KEYS = {
	"C": "Escape",
	"<": "Backspace",
	"E": "Enter",
}


def _keys(sequence: str) -> list[str]:
	return [_NAMED_KEYS.get(ch, ch) for ch in sequence if not ch.isspace()]


def _walk(sequence: str, *, provider=None):
	engine = EntryEngine(provider)
	states = []
	errors = []

	for key in _keys(sequence):
		try:
			dispatch_key(engine, key)
		except EntryError as exc:
			errors.append(type(exc).__name__)
		states.append((key, engine.snapshot()))

	return engine, states, errors


def inspect_entry_states(sequence: str, *, arbitrary_precision: bool = False) -> None:
	"""Imprime la pantalla después de cada tecla de la secuencia."""
	provider = None
	if arbitrary_precision:
		from arbitrary_precision_provider import MPMathNumberProvider

		provider = MPMathNumberProvider()

	engine, states, errors = _walk(sequence, provider=provider)

	print("Entry inspection")
	print(f"keys:           {sequence}")
	print(f"provider:       {engine.provider.name}")
	print(f"keys pressed:   {len(states)}")
	for i, (key, snapshot) in enumerate(states, start=1):
		label = snapshot.pending_label or "-"
		print(f"  {i:>2}. {key:<10} {label:>20} | {snapshot.display_operand}")

	print(f"errors:         {', '.join(errors) if errors else '(none)'}")
	print(f"final state:    {engine.state!r}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	for sequence, expected in (
		("5+3=", "8"),
		("10/2=", "5"),
		("7*8=", "56"),
		("9-4=", "5"),
		("5+3*2=", "16"),
		("0.1+0.2=", "0.3"),
		("1/3=", "0.33333333"),
		("2/3=", "0.66666667"),
		("100000000*100000000=", "1.000000e+16"),
		("3-5=", "-2"),
		("1.5*2=", "3"),
		("1/20000000=", "5e-8"),
	):
		engine, _, _ = _walk(sequence)
		expected_actual.append((sequence, expected, engine.snapshot().display_operand))

	engine, _, _ = _walk("5+3=")
	checks.append(("result clears the pending label", engine.snapshot().pending_label == ""))

	engine, states, _ = _walk("5+3")
	checks.append(("pending label shows previous operand and symbol", states[1][1].pending_label == "5 +"))
	checks.append(("second operand replaces the first on screen", engine.snapshot().display_operand == "3"))

	engine, _, _ = _walk("5*")
	checks.append(("multiply label uses the times sign", engine.snapshot().pending_label == "5 ×"))

	engine, _, errors = _walk("8/0=")
	checks.append(("divide by zero is reported", errors == [DivideByZero.__name__]))
	checks.append(("divide by zero clears the engine", engine.state.as_tuple() == ("0", "", None, False)))

	engine, _, errors = _walk("8/0+")
	checks.append(("chained divide by zero is reported", errors == [DivideByZero.__name__]))
	checks.append(("chained divide by zero keeps the new operator on zero", engine.snapshot() == ("0", "0 +")))

	engine, _, errors = _walk("1" * 16)
	checks.append(("sixteenth digit is rejected", errors == [DigitLimitExceeded.__name__]))
	checks.append(("digit limit keeps fifteen digits", engine.snapshot().display_operand == "1" * 15))

	engine, _, errors = _walk("1234567.123456789")
	checks.append(("decimal point does not count as a digit", engine.snapshot().display_operand == "1234567.12345678"))
	checks.append(("fractional digits count toward the limit", errors == [DigitLimitExceeded.__name__]))

	engine, _, _ = _walk("1..5.")
	checks.append(("repeated decimal point is ignored", engine.snapshot().display_operand == "1.5"))

	engine, _, _ = _walk("0005")
	checks.append(("leading zeros collapse", engine.snapshot().display_operand == "5"))

	engine, _, _ = _walk("5+3=.5")
	checks.append(("decimal after result starts a new number", engine.snapshot().display_operand == "0.5"))

	engine, _, _ = _walk("5+3=2")
	checks.append(("digit after result starts a new number", engine.snapshot().display_operand == "2"))

	engine, _, _ = _walk("5+*3=")
	checks.append(("operator switch overwrites pending operator", engine.snapshot().display_operand == "15"))

	engine, _, _ = _walk("123<<")
	checks.append(("backspace drops last digits", engine.snapshot().display_operand == "1"))
	engine, _, _ = _walk("7<<")
	checks.append(("backspace on one digit resets to zero", engine.snapshot().display_operand == "0"))

	engine, _, _ = _walk("12+3C")
	checks.append(("escape clears everything", engine.state.as_tuple() == ("0", "", None, False)))

	engine, _, _ = _walk("12+3E")
	checks.append(("enter computes like equals", engine.snapshot().display_operand == "15"))

	engine, _, _ = _walk("42=")
	checks.append(("equals without operator keeps operand", engine.snapshot().display_operand == "42"))

	failed = [name for name, ok in checks if not ok]
	failed += [label for label, expected, actual in expected_actual if expected != actual]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_entry_checks.py
	#   python regression_entry_checks.py --inspect "5+3*2="
	#   python regression_entry_checks.py --inspect "0.1+0.2=" --mpmath
	#   (C = Escape, < = Backspace, E = Enter)
	if "--inspect" in sys.argv:
		try:
			sequence = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")

		inspect_entry_states(sequence, arbitrary_precision="--mpmath" in sys.argv)
	else:
		run_regressions()
