"""
Motor de cálculo de la calculadora básica.

Este módulo provee la clase CalculatorEngine, que resuelve la operación
acumulada en pantalla y da formato al resultado.

Contrato de interfaz:
    - evaluate(numbers, operators) -> str
    - history_text(result: str) -> str
"""

import logging
import math

from mpmath import mp

from formula_evaluator import FormulaEvaluator


logger = logging.getLogger(__name__)

FLOAT32_MAX = 3.4028234663852886e38
FLOAT32_MIN_NORMAL = 2.0 ** -126
SUBNORMAL_EXPONENT = 149
SINGLE_PRECISION_BITS = 24
EXTENDED_PRECISION_BITS = 80


class CalculatorEngine:
    """Resuelve operaciones de cuatro funciones y formatea el resultado."""

    RESULT_LENGTH = 15

    def __init__(self):
        self._evaluator = FormulaEvaluator()

    # ── Evaluación principal ─────────────────────────────────────

    def evaluate(self, numbers, operators) -> str:
        """Evalúa la operación y devuelve el resultado como cadena.

        Raises:
            ValueError: faltan operadores, el último operando está vacío o
                las longitudes no concuerdan.
        """
        value = self._evaluator.evaluate(numbers, operators)
        result = self._format_result(value)
        logger.debug("Resultado de %s %s: %s", list(numbers),
                     [op.symbol for op in operators], result)
        return result

    def history_text(self, result: str) -> str:
        return self._truncate(result, self.RESULT_LENGTH)

    # ── Formato del resultado ────────────────────────────────────

    @classmethod
    def _format_result(cls, value: float) -> str:
        if math.isnan(value):
            return "NaN"
        if value == math.inf:
            return "∞"
        if value == -math.inf:
            return "-∞"

        text = repr(value)
        if cls._long_integer_part(text):
            text = f"{value:.16e}"
        elif text.endswith(".0"):
            return str(int(value))

        single = cls._to_single(cls._truncate(text, cls.RESULT_LENGTH))
        if math.isinf(single):
            return "∞" if single > 0 else "-∞"
        return cls._shortest_single(single)

    @classmethod
    def _long_integer_part(cls, text: str) -> bool:
        """Indica si recortar el texto cortaría cifras de la parte entera."""
        return "e" not in text and len(text.partition(".")[0]) > cls.RESULT_LENGTH

    @staticmethod
    def _truncate(text: str, limit: int) -> str:
        """Recorta a ``limit`` caracteres conservando el exponente."""
        if len(text) <= limit:
            return text
        mantissa, sep, exponent = text.partition("e")
        suffix = sep + exponent
        return mantissa[:limit - len(suffix)].rstrip(".") + suffix

    @staticmethod
    def _to_single(text: str) -> float:
        """Redondea el texto decimal una sola vez a precisión simple."""
        with mp.workprec(EXTENDED_PRECISION_BITS):
            exact = mp.mpf(text)
            subnormal = abs(exact) < FLOAT32_MIN_NORMAL
            if subnormal:
                steps = mp.nint(mp.ldexp(exact, SUBNORMAL_EXPONENT))

        # Por debajo del mínimo normal la rejilla es fija: 2**-149
        if subnormal:
            return math.copysign(
                math.ldexp(float(steps), -SUBNORMAL_EXPONENT), float(exact)
            )

        with mp.workprec(SINGLE_PRECISION_BITS):
            value = float(mp.mpf(text))
        if abs(value) > FLOAT32_MAX:
            return math.copysign(math.inf, value)
        return value

    @classmethod
    def _shortest_single(cls, value: float) -> str:
        # Menor cantidad de cifras que identifica el mismo valor simple
        for digits in range(1, 10):
            candidate = f"{value:.{digits - 1}e}"
            if cls._to_single(candidate) == value:
                rendered = repr(float(candidate))
                return candidate if cls._long_integer_part(rendered) else rendered
        return repr(value)
