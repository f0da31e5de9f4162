"""Acciones que pueden disparar los botones y el teclado."""

from dataclasses import dataclass

from calculator_state import Operator


class CalculatorAction:
    """Base de todas las acciones de la calculadora."""


@dataclass(frozen=True)
class Number(CalculatorAction):
    digit: int

    def __post_init__(self):
        if not 0 <= self.digit <= 9:
            raise ValueError(f"Dígito fuera de rango: {self.digit}")


@dataclass(frozen=True)
class Decimal(CalculatorAction):
    pass


@dataclass(frozen=True)
class Clear(CalculatorAction):
    pass


@dataclass(frozen=True)
class Delete(CalculatorAction):
    pass


@dataclass(frozen=True)
class Calculate(CalculatorAction):
    pass


@dataclass(frozen=True)
class Operation(CalculatorAction):
    operator: Operator


_DIGITS = "0123456789"

# Nombres de tecla aceptados: etiquetas del teclado en pantalla y keysyms de tk
_KEY_ACTIONS = {
    ".": Decimal(),
    ",": Decimal(),
    "period": Decimal(),
    "KP_Decimal": Decimal(),
    "AC": Clear(),
    "C": Clear(),
    "Escape": Clear(),
    "Del": Delete(),
    "⌫": Delete(),
    "BackSpace": Delete(),
    "=": Calculate(),
    "Return": Calculate(),
    "KP_Enter": Calculate(),
    "+": Operation(Operator.ADD),
    "plus": Operation(Operator.ADD),
    "KP_Add": Operation(Operator.ADD),
    "-": Operation(Operator.SUBTRACT),
    "−": Operation(Operator.SUBTRACT),
    "minus": Operation(Operator.SUBTRACT),
    "KP_Subtract": Operation(Operator.SUBTRACT),
    "x": Operation(Operator.MULTIPLY),
    "*": Operation(Operator.MULTIPLY),
    "×": Operation(Operator.MULTIPLY),
    "asterisk": Operation(Operator.MULTIPLY),
    "KP_Multiply": Operation(Operator.MULTIPLY),
    "/": Operation(Operator.DIVIDE),
    "÷": Operation(Operator.DIVIDE),
    "slash": Operation(Operator.DIVIDE),
    "KP_Divide": Operation(Operator.DIVIDE),
}


def action_from_key(key: str) -> CalculatorAction:
    """Traduce una etiqueta de botón o un keysym a su acción.

    Raises:
        ValueError: la tecla no corresponde a ninguna acción.
    """
    if key.startswith("KP_") and len(key) == 4 and key[3] in _DIGITS:
        key = key[3:]
    if len(key) == 1 and key in _DIGITS:
        return Number(int(key))

    try:
        return _KEY_ACTIONS[key]
    except KeyError:
        raise ValueError(f"Tecla sin acción: {key!r}") from None
