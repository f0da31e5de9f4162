"""
Estado de la operación que el usuario va escribiendo.

Los operandos se guardan como cadenas para poder editarlos carácter a
carácter. El operador ``i`` siempre está entre los operandos ``i`` e
``i + 1``, por lo que siempre hay un operando más que operadores.

Todas las transiciones devuelven un estado nuevo; ningún método modifica
la instancia original.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum


class Operator(Enum):
    """Operaciones disponibles, cada una con su símbolo de pantalla."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def high_precedence(self) -> bool:
        return self in (Operator.MULTIPLY, Operator.DIVIDE)

    def apply(self, left: float, right: float) -> float:
        """Aplica la operación con semántica IEEE (sin excepciones)."""
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.MULTIPLY:
            return left * right
        return _ieee_divide(left, right)


def _ieee_divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


@dataclass(frozen=True)
class CalculatorState:
    """Operación en pantalla o entrada del historial."""

    MAX_NUM_LENGTH = 8
    # Un resultado con exponente o no finito ya no admite punto decimal
    FRACTION_MARKS = (".", "e", "∞", "NaN")

    numbers: tuple = ("",)
    operators: tuple = ()
    result: str = ""

    def __post_init__(self):
        object.__setattr__(self, "numbers", tuple(self.numbers))
        object.__setattr__(self, "operators", tuple(self.operators))

        if not self.numbers:
            raise ValueError("Debe existir al menos un operando")
        if len(self.operators) != len(self.numbers) - 1:
            raise ValueError(
                f"{len(self.numbers)} operandos no admiten "
                f"{len(self.operators)} operadores"
            )

    def __str__(self) -> str:
        text = ""
        for index, number in enumerate(self.numbers):
            text += number
            if index < len(self.operators):
                text += self.operators[index].symbol

        if self.result.strip():
            text += f" = {self.result}"
        return text

    @property
    def last_number(self) -> str:
        return self.numbers[-1]

    @staticmethod
    def digit_count(number: str) -> int:
        return len(number.replace(".", ""))

    # ── Transiciones ─────────────────────────────────────────────

    def enter_number(self, digit: int) -> "CalculatorState":
        if not 0 <= digit <= 9:
            raise ValueError(f"Dígito fuera de rango: {digit}")
        if self.digit_count(self.last_number) >= self.MAX_NUM_LENGTH:
            return self
        return self._with_last_number(self.last_number + str(digit))

    def enter_decimal(self) -> "CalculatorState":
        last = self.last_number
        if any(mark in last for mark in self.FRACTION_MARKS):
            return self
        return self._with_last_number(last + ("0." if not last.strip() else "."))

    def enter_operator(self, operator: Operator) -> "CalculatorState":
        if not self.last_number.strip():
            return self
        return replace(
            self,
            numbers=self.numbers + ("",),
            operators=self.operators + (operator,),
        )

    def delete_last(self) -> "CalculatorState":
        """Borra el último carácter visible: una cifra o un operador."""
        if self.last_number.strip():
            return self._with_last_number(self.last_number[:-1])
        if self.operators:
            return replace(
                self,
                numbers=self.numbers[:-1],
                operators=self.operators[:-1],
            )
        return self

    def with_result(self, result: str) -> "CalculatorState":
        return replace(self, result=result)

    def _with_last_number(self, number: str) -> "CalculatorState":
        return replace(self, numbers=self.numbers[:-1] + (number,))
