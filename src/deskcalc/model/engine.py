"""
Calculator Engine
=================
Pure state transitions of the desk calculator.

Every public function takes a `CalculatorState` (plus the key argument) and
returns a new `CalculatorState`. Nothing here touches Qt.

Functions:
    enter_digit, enter_decimal, clear, negate, percent,
    select_operator, execute: One transition per key class.
    apply_operator: The binary evaluator.
    press: Dispatches a logical `Key` to the matching transition.
"""
from __future__ import annotations

from dataclasses import replace
import logging

import numpy as np

from deskcalc.model.keys import Key, Operator
from deskcalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Evaluation
# ------------------------------------------------------------------------------
def apply_operator(accumulator: float, input_buffer: str, operator: Operator) -> float:
    """
    Evaluate `accumulator <operator> input_buffer`.

    Uses float64 IEEE semantics: division by zero gives +/-inf (or nan for
    0/0) instead of raising ZeroDivisionError.
    """
    lhs = np.float64(accumulator)
    rhs = np.float64(float(input_buffer))

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        match operator:
            case Operator.DIVIDE:
                result = np.divide(lhs, rhs)
            case Operator.MULTIPLY:
                result = np.multiply(lhs, rhs)
            case Operator.SUBTRACT:
                result = np.subtract(lhs, rhs)
            case Operator.ADD:
                result = np.add(lhs, rhs)
            case _:
                raise ValueError(f"Unknown operator: {operator!r}")

    if not np.isfinite(result):
        logger.debug(f"{accumulator} {operator} {input_buffer} gave non-finite result {result}")

    return float(result)


def _commit(state: CalculatorState) -> float:
    """Value the accumulator takes when the input buffer is committed."""
    if state.has_accumulator and state.has_input and state.has_operator:
        return apply_operator(state.accumulator, state.input_buffer, state.selected_operator)
    return float(state.input_buffer)


# ------------------------------------------------------------------------------
# Transitions
# ------------------------------------------------------------------------------
def enter_digit(state: CalculatorState, digit: int) -> CalculatorState:
    if not 0 <= digit <= 9:
        raise ValueError(f"Digit out of range: {digit!r}")

    if state.has_input:
        return replace(state, input_buffer=state.input_buffer + str(digit))
    if digit != 0:
        return replace(state, input_buffer=str(digit))
    # Leading zero
    return state


def enter_decimal(state: CalculatorState) -> CalculatorState:
    if not state.has_input:
        return replace(state, input_buffer="0.")
    if "." not in state.input_buffer:
        return replace(state, input_buffer=state.input_buffer + ".")
    return state


def clear(state: CalculatorState) -> CalculatorState:
    """Clear entry (C) while typing, all clear (AC) otherwise."""
    if state.has_input:
        return replace(state, input_buffer=None, selected_operator=None)
    return replace(state, accumulator=0.0, selected_operator=None)


def negate(state: CalculatorState) -> CalculatorState:
    if not (state.has_accumulator or state.has_input):
        return state
    return replace(state, accumulator=-state.operand, input_buffer=None)


def percent(state: CalculatorState) -> CalculatorState:
    if not (state.has_accumulator or state.has_input):
        return state
    return replace(state, accumulator=state.operand / 100, input_buffer=None)


def select_operator(state: CalculatorState, operator: Operator) -> CalculatorState:
    """
    Pick the operator for the next operand.

    A pending operation is evaluated first (chaining: `3 + 4 x` shows 7 and
    waits for the multiplier). Without a typed number only the operator
    changes.
    """
    if not state.has_input:
        return replace(state, selected_operator=operator)
    return CalculatorState(accumulator=_commit(state), input_buffer=None, selected_operator=operator)


def execute(state: CalculatorState) -> CalculatorState:
    """Evaluate the pending operation, leaving no operator selected."""
    if not state.has_input:
        return replace(state, selected_operator=None)
    return CalculatorState(accumulator=_commit(state), input_buffer=None, selected_operator=None)


# ------------------------------------------------------------------------------
# Dispatch
# ------------------------------------------------------------------------------
def press(state: CalculatorState, key: Key) -> CalculatorState:
    """Run one key activation through the state machine."""
    if not isinstance(key, Key):
        raise ValueError(f"Not a calculator key: {key!r}")

    if key.digit is not None:
        return enter_digit(state, key.digit)
    if key.operator is not None:
        return select_operator(state, key.operator)

    match key:
        case Key.DECIMAL:
            return enter_decimal(state)
        case Key.CLEAR:
            return clear(state)
        case Key.NEGATE:
            return negate(state)
        case Key.PERCENT:
            return percent(state)
        case Key.EXECUTE:
            return execute(state)

    raise ValueError(f"Unhandled key: {key!r}")
