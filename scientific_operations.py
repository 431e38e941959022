"""Registro de operaciones científicas de un argumento.

Cada operación es un miembro de UnaryOperation cuyo valor es el
símbolo mostrado en el teclado. La tabla _OPERATIONS asocia cada
miembro con su comprobación de dominio y su transformación numérica.

Las funciones trigonométricas trabajan en grados: se convierte a
radianes a la entrada (sin, cos, tan) y de radianes a grados a la
salida (sin⁻¹, cos⁻¹, tan⁻¹).
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, NamedTuple, Optional

from calculator_errors import DomainError


FACTORIAL_LIMIT = 170


class UnaryOperation(str, Enum):
    RECIPROCAL = "1/x"
    FACTORIAL = "x!"
    SQRT = "√x"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "sin⁻¹"
    ACOS = "cos⁻¹"
    ATAN = "tan⁻¹"
    LOG = "log"
    LN = "ln"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional[UnaryOperation]:
        """Devuelve la operación para el símbolo, o None si no existe."""
        try:
            return cls(symbol)
        except ValueError:
            return None

    def check_domain(self, x: float) -> Optional[str]:
        """Devuelve el motivo del fallo si x está fuera del dominio."""
        check = _OPERATIONS[self].domain
        return check(x) if check is not None else None

    def apply(self, x: float) -> float:
        """Aplica la operación a x.

        Raises:
            DomainError: x está fuera del dominio de la operación.
        """
        reason = self.check_domain(x)
        if reason is not None:
            raise DomainError(reason)
        return _OPERATIONS[self].transform(x)


class _Entry(NamedTuple):
    domain: Optional[Callable[[float], Optional[str]]]
    transform: Callable[[float], float]


# ── Comprobaciones de dominio ────────────────────────────────────

def _non_zero(x: float) -> Optional[str]:
    if x == 0:
        return "No se puede dividir entre cero"
    return None


def _factorial_domain(x: float) -> Optional[str]:
    if x < 0 or x != math.floor(x):
        return "factorial requiere entero no negativo"
    if x > FACTORIAL_LIMIT:
        return "Resultado demasiado grande"
    return None


def _non_negative(x: float) -> Optional[str]:
    if x < 0:
        return "Raíz cuadrada de número negativo"
    return None


def _unit_interval(x: float) -> Optional[str]:
    if x < -1 or x > 1:
        return "Argumento fuera de [-1, 1]"
    return None


def _positive(x: float) -> Optional[str]:
    if x <= 0:
        return "Logaritmo requiere número positivo"
    return None


# ── Transformaciones ─────────────────────────────────────────────

def _factorial(x: float) -> float:
    # Acumulador en coma flotante, no aritmética entera exacta.
    result = 1.0
    for i in range(2, int(x) + 1):
        result *= i
    return result


def _trig(fn: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        return fn(math.radians(x))

    return wrapped


def _inv_trig(fn: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        return math.degrees(fn(x))

    return wrapped


_OPERATIONS = {
    UnaryOperation.RECIPROCAL: _Entry(_non_zero, lambda x: 1.0 / x),
    UnaryOperation.FACTORIAL: _Entry(_factorial_domain, _factorial),
    UnaryOperation.SQRT: _Entry(_non_negative, math.sqrt),
    UnaryOperation.SIN: _Entry(None, _trig(math.sin)),
    UnaryOperation.COS: _Entry(None, _trig(math.cos)),
    UnaryOperation.TAN: _Entry(None, _trig(math.tan)),
    UnaryOperation.ASIN: _Entry(_unit_interval, _inv_trig(math.asin)),
    UnaryOperation.ACOS: _Entry(_unit_interval, _inv_trig(math.acos)),
    UnaryOperation.ATAN: _Entry(None, _inv_trig(math.atan)),
    UnaryOperation.LOG: _Entry(_positive, math.log10),
    UnaryOperation.LN: _Entry(_positive, math.log),
}

UNARY_SYMBOLS = frozenset(op.symbol for op in UnaryOperation)
