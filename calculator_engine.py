"""
Motor de cálculo para la calculadora científica.

Este módulo provee la clase CalculatorEngine, que evalúa operaciones
de uno y dos operandos sobre números en texto decimal y devuelve el
resultado formateado. No guarda estado entre llamadas: quien lo usa
(el teclado, ver calculator_session) vuelve a pasar los operandos y
el operador pendiente en cada paso.

Contrato de interfaz:
    - evaluate_unary(symbol, operand) -> str
    - evaluate_binary(previous, current, symbol) -> str
    - evaluate_power(base, exponent) -> str
    - is_unary(symbol) -> bool
    - format_result(value) -> str

Ningún método lanza excepciones por datos inválidos: los fallos de
lectura y de dominio se devuelven como ERROR_MARKER.
"""

import logging
import math
import operator

from calculator_errors import DomainError, OperandParseError
from result_formatter import format_result, parse_operand
from scientific_operations import UNARY_SYMBOLS, UnaryOperation


logger = logging.getLogger(__name__)

ERROR_MARKER = "Error"

PERCENT = "%"
POWER = "^"


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DomainError("No se puede dividir entre cero")
    return a / b


_BINARY_OPERATIONS = {
    "+": operator.add,
    "—": operator.sub,
    "×": operator.mul,
    "÷": _divide,
    POWER: math.pow,
}


class CalculatorEngine:
    """Evalúa operaciones aritméticas y científicas sobre operandos en texto."""

    def __init__(self, error_marker: str = ERROR_MARKER):
        self._error_marker = error_marker

    @property
    def error_marker(self) -> str:
        return self._error_marker

    # ── Clasificación ────────────────────────────────────────────

    @staticmethod
    def is_unary(symbol: str) -> bool:
        return symbol in UNARY_SYMBOLS

    # ── Operaciones de un operando ───────────────────────────────

    def evaluate_unary(self, symbol: str, operand: str) -> str:
        """Aplica la operación científica `symbol` al operando.

        Un símbolo que no es unario se trata como fallo.
        """
        operation = UnaryOperation.from_symbol(symbol)
        if operation is None:
            logger.debug("Símbolo unario desconocido: %r", symbol)
            return self._error_marker

        try:
            value = parse_operand(operand)
            return format_result(operation.apply(value))
        except (ValueError, ArithmeticError) as exc:
            return self._fail(symbol, (operand,), exc)

    # ── Potencia ─────────────────────────────────────────────────

    def evaluate_power(self, base: str, exponent: str) -> str:
        try:
            result = math.pow(parse_operand(base), parse_operand(exponent))
            return format_result(result)
        except (ValueError, ArithmeticError) as exc:
            return self._fail(POWER, (base, exponent), exc)

    # ── Operaciones de dos operandos ─────────────────────────────

    def evaluate_binary(self, previous: str, current: str, symbol: str) -> str:
        """Evalúa `previous symbol current`.

        Si algún operando no es numérico, o el símbolo no se conoce,
        devuelve `current` sin cambios: así el teclado puede seguir
        escribiendo sin mostrar errores. El porcentaje sólo usa
        `current`; los símbolos unarios sólo usan `previous`.
        """
        if symbol == PERCENT:
            try:
                value = parse_operand(current)
            except OperandParseError:
                return current
            return format_result(value / 100)

        try:
            prev = parse_operand(previous)
            cur = parse_operand(current)
        except OperandParseError:
            return current

        operation = UnaryOperation.from_symbol(symbol)
        binary = _BINARY_OPERATIONS.get(symbol)
        if operation is None and binary is None:
            logger.debug("Operador desconocido %r, se conserva %r", symbol, current)
            return current

        try:
            if operation is not None:
                # El resultado intermedio pasa por el formato de pantalla.
                result = parse_operand(format_result(operation.apply(prev)))
            else:
                result = binary(prev, cur)
            return format_result(result)
        except (ValueError, ArithmeticError) as exc:
            return self._fail(symbol, (previous, current), exc)

    # ── Formato del resultado ────────────────────────────────────

    @staticmethod
    def format_result(value: float) -> str:
        """Formatea un resultado numérico finito (ver result_formatter)."""
        return format_result(value)

    def _fail(self, symbol: str, operands: tuple, exc: Exception) -> str:
        logger.debug("Fallo al evaluar %r con %r: %s", symbol, operands, exc)
        return self._error_marker


_default_engine = CalculatorEngine()


def evaluate_unary(symbol: str, operand: str) -> str:
    return _default_engine.evaluate_unary(symbol, operand)


def evaluate_binary(previous: str, current: str, symbol: str) -> str:
    return _default_engine.evaluate_binary(previous, current, symbol)


def evaluate_power(base: str, exponent: str) -> str:
    return _default_engine.evaluate_power(base, exponent)


def is_unary(symbol: str) -> bool:
    return CalculatorEngine.is_unary(symbol)
