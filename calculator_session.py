"""Estado del teclado de la calculadora.

CalculatorState es inmutable: cada pulsación recibe el estado actual
y devuelve uno nuevo. El motor no guarda nada entre llamadas; este
módulo es quien acumula el operando anterior y el operador pendiente.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from calculator_engine import CalculatorEngine


DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class CalculatorState:
    current: str = "0"
    previous: str = ""
    operation: str = ""
    # Se acaba de pulsar un operador y aún no hay segundo operando.
    operation_pressed: bool = False
    # `current` es un resultado; el siguiente dígito lo reemplaza.
    result_shown: bool = False

    @property
    def has_pending_operation(self) -> bool:
        return bool(self.operation) and bool(self.previous)


def clear() -> CalculatorState:
    return CalculatorState()


def _replaces_current(state: CalculatorState, engine: CalculatorEngine) -> bool:
    return (
        state.operation_pressed
        or state.result_shown
        or state.current == engine.error_marker
    )


def press_digit(
    state: CalculatorState,
    digit: str,
    engine: Optional[CalculatorEngine] = None,
) -> CalculatorState:
    if digit not in DIGITS:
        raise ValueError(f"Dígito no válido: {digit!r}")
    engine = engine or CalculatorEngine()

    if _replaces_current(state, engine) or state.current == "0":
        current = digit
    else:
        current = state.current + digit
    return replace(state, current=current, operation_pressed=False, result_shown=False)


def press_decimal(
    state: CalculatorState,
    engine: Optional[CalculatorEngine] = None,
) -> CalculatorState:
    engine = engine or CalculatorEngine()

    if _replaces_current(state, engine):
        current = "0."
    elif "." in state.current:
        return state
    else:
        current = state.current + "."
    return replace(state, current=current, operation_pressed=False, result_shown=False)


def press_operation(
    state: CalculatorState,
    symbol: str,
    engine: Optional[CalculatorEngine] = None,
) -> CalculatorState:
    """Procesa un operador.

    Los unarios se evalúan al pulsarlos sobre el operando actual y no
    tocan el operador binario pendiente. Los binarios encadenan: si ya
    había uno pendiente con su segundo operando, se evalúa primero y
    el resultado pasa a ser el operando anterior.
    """
    engine = engine or CalculatorEngine()

    if engine.is_unary(symbol):
        result = engine.evaluate_unary(symbol, state.current)
        return replace(state, current=result, operation_pressed=False, result_shown=True)

    if state.operation and not state.operation_pressed and state.previous:
        result = engine.evaluate_binary(state.previous, state.current, state.operation)
        return replace(
            state,
            current=result,
            previous=result,
            operation=symbol,
            operation_pressed=True,
            result_shown=False,
        )

    return replace(
        state,
        previous=state.current,
        operation=symbol,
        operation_pressed=True,
        result_shown=False,
    )


def press_equals(
    state: CalculatorState,
    engine: Optional[CalculatorEngine] = None,
) -> CalculatorState:
    if not state.has_pending_operation:
        return state
    engine = engine or CalculatorEngine()

    result = engine.evaluate_binary(state.previous, state.current, state.operation)
    return CalculatorState(current=result, result_shown=True)


def press_backspace(
    state: CalculatorState,
    engine: Optional[CalculatorEngine] = None,
) -> CalculatorState:
    engine = engine or CalculatorEngine()

    if _replaces_current(state, engine) and not state.operation_pressed:
        return replace(state, current="0", result_shown=False)
    if state.operation_pressed:
        return state

    current = state.current[:-1]
    if current in ("", "-", "+"):
        current = "0"
    return replace(state, current=current)
