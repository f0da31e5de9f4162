from calculator_actions import action_from_key
from calculator_view_model import CalculatorViewModel
import sys


def _split_keys(keys: str) -> list[str]:
	"""Separa una secuencia de teclas; 'AC' y 'Del' cuentan como una sola."""
	tokens = []
	i = 0
	while i < len(keys):
		for name in ("AC", "Del"):
			if keys.startswith(name, i):
				tokens.append(name)
				i += len(name)
				break
		else:
			if not keys[i].isspace():
				tokens.append(keys[i])
			i += 1
	return tokens


def _press(keys: str, view_model: CalculatorViewModel | None = None):
	view_model = view_model if view_model is not None else CalculatorViewModel()
	states = []

	for key in _split_keys(keys):
		view_model.on_action(action_from_key(key))
		states.append((key, str(view_model.state)))

	return view_model, states


def inspect_key_states(keys: str) -> None:
	"""Imprime la pantalla y el historial tras cada tecla."""
	view_model, states = _press(keys)

	print("Key inspection")
	print(f"keys:           {keys}")
	print(f"total presses:  {len(states)}")
	for i, (key, text) in enumerate(states, start=1):
		print(f"  {i}. {key:>3} -> {text!r}")

	print("history:")
	if not view_model.history:
		print("  (empty)")
	for entry in view_model.history:
		print(f"  {entry}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	vm_prec, _ = _press("3+4x2=")
	expected_actual.append(("3+4x2=", "3+4x2 = 11", str(vm_prec.history[0])))
	checks.append(("multiply resolves before add", str(vm_prec.state) == "11"))

	vm_div, _ = _press("10/3=")
	expected_actual.append(("10/3=", "3.3333333", str(vm_div.state)))
	checks.append((
		"division narrows to single precision",
		str(vm_div.state) == "3.3333333",
	))

	vm_point, _ = _press(".1+.2=")
	expected_actual.append((".1+.2=", "0.3", str(vm_point.state)))
	checks.append((
		"decimal on empty operand prefixes zero",
		str(vm_point.history[0]) == "0.1+0.2 = 0.3",
	))

	vm_limit, _ = _press("123456789")
	checks.append((
		"operand stops at eight digits",
		str(vm_limit.state) == "12345678",
	))
	vm_limit_dot, _ = _press("1234.56789")
	checks.append((
		"decimal point does not count as a digit",
		str(vm_limit_dot.state) == "1234.5678",
	))

	vm_ops, _ = _press("5+x-")
	checks.append(("operator after operator is ignored", str(vm_ops.state) == "5+"))
	_press("Del", vm_ops)
	checks.append(("delete removes trailing operator", str(vm_ops.state) == "5"))

	vm_noop, _ = _press("5=")
	checks.append(("calculate without operator is a no-op", not vm_noop.history))
	_press("+=", vm_noop)
	checks.append(("calculate with blank operand is a no-op", not vm_noop.history))

	vm_chain, _ = _press("2+3=x4=")
	expected_actual.append(("2+3=x4=", "5x4 = 20", str(vm_chain.history[0])))
	checks.append(("history is newest first", str(vm_chain.history[1]) == "2+3 = 5"))

	vm_clear, _ = _press("1+1=AC")
	checks.append(("single clear keeps history", len(vm_clear.history) == 1))
	_press("AC", vm_clear)
	checks.append(("double clear empties history", len(vm_clear.history) == 0))

	vm_streak, _ = _press("1+1=AC7AC")
	checks.append((
		"clear streak resets on other keys",
		len(vm_streak.history) == 1,
	))

	vm_inf, _ = _press("5/0=")
	expected_actual.append(("5/0=", "∞", str(vm_inf.state)))
	vm_nan, _ = _press("0/0=")
	expected_actual.append(("0/0=", "NaN", str(vm_nan.state)))

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
	#   python regression_checks.py
	#   python regression_checks.py --inspect "3+4x2="
	#   python regression_checks.py --inspect "1+1=ACAC"
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")

		inspect_key_states(keys)
	else:
		run_regressions()
