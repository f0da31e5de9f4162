"""Evaluación de operandos y operadores respetando la precedencia."""

import math

from calculator_state import Operator


_SYMBOL_VALUES = {
    "∞": math.inf,
    "-∞": -math.inf,
    "NaN": math.nan,
}


class FormulaEvaluator:
    """Reduce una secuencia de operandos y operadores a un único número.

    Primero se resuelven multiplicaciones y divisiones de izquierda a
    derecha; después, sumas y restas en el mismo sentido.
    """

    def evaluate(self, numbers, operators) -> float:
        numbers = list(numbers)
        operators = list(operators)
        self._validate(numbers, operators)

        values = [self.parse_operand(number) for number in numbers]

        # Nivel alto: x y /
        pending_values = [values[0]]
        pending_operators = []
        for operator, value in zip(operators, values[1:]):
            if operator.high_precedence:
                pending_values[-1] = operator.apply(pending_values[-1], value)
            else:
                pending_operators.append(operator)
                pending_values.append(value)

        # Nivel bajo: + y -
        result = pending_values[0]
        for operator, value in zip(pending_operators, pending_values[1:]):
            result = operator.apply(result, value)
        return result

    @staticmethod
    def parse_operand(text: str) -> float:
        """Convierte un operando a float; lo que no se reconoce vale NaN."""
        text = text.strip()
        if text in _SYMBOL_VALUES:
            return _SYMBOL_VALUES[text]
        try:
            return float(text)
        except ValueError:
            return math.nan

    @staticmethod
    def _validate(numbers, operators):
        if not operators:
            raise ValueError("Se necesita al menos un operador")
        if len(numbers) != len(operators) + 1:
            raise ValueError("Debe haber un operando más que operadores")
        if not numbers[-1].strip():
            raise ValueError("El último operando está vacío")
        for operator in operators:
            if not isinstance(operator, Operator):
                raise ValueError(f"Operador desconocido: {operator!r}")
