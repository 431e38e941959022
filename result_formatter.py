"""Conversión entre texto de pantalla y valores numéricos."""

import math
import re

from calculator_errors import DomainError, OperandParseError


FRACTION_DIGITS = 10

_DEC_RE = re.compile(
    r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$"
)


def parse_operand(text: str) -> float:
    """Convierte el texto de un operando en float.

    Raises:
        OperandParseError: el texto no es un número decimal finito.
    """
    if not isinstance(text, str):
        raise OperandParseError(repr(text))

    stripped = text.strip()
    if not _DEC_RE.fullmatch(stripped):
        raise OperandParseError(text)

    value = float(stripped)
    if not math.isfinite(value):
        # p. ej. "1e400"
        raise OperandParseError(text)
    return value


def format_result(value: float) -> str:
    """Formatea un resultado finito para mostrarlo.

    Los valores enteros se muestran sin punto decimal; el resto con
    hasta FRACTION_DIGITS decimales, sin ceros ni punto finales.

    Raises:
        DomainError: el valor es NaN o infinito.
    """
    value = float(value)
    if not math.isfinite(value):
        raise DomainError(f"Resultado no finito: {value}")

    if value == int(value):
        return str(int(value))

    text = f"{value:.{FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
