"""Jerarquía de errores del motor de cálculo.

Todos los fallos se reducen a un único marcador de error en la
interfaz pública; estas clases sólo existen dentro del motor para
distinguir la causa en los registros de depuración.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categoría del fallo."""
    PARSE = "parse"
    DOMAIN = "domain"


class CalculatorError(Exception):
    """Base de todos los errores del motor."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.kind = kind


class OperandParseError(CalculatorError, ValueError):
    """El texto del operando no es un número decimal válido."""

    def __init__(self, text: str):
        super().__init__(f"Operando no numérico: {text!r}", ErrorKind.PARSE)
        self.text = text


class DomainError(CalculatorError, ArithmeticError):
    """Argumento fuera del dominio matemático de la operación."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.DOMAIN)
