"""
Calculator State (Data Model)
=============================
This module defines the value the calculator holds between key presses.

Why is this file needed?
------------------------
1. State Management: Accumulator, input buffer and pending operator live in
   one place instead of being scattered over widget attributes.
2. Immutability: The state is a frozen dataclass. Key presses never mutate it;
   the engine returns a new value (see `deskcalc.model.engine`).
3. Decoupling: Views read from this object; the controller swaps it.

Classes:
    CalculatorState: The immutable state value.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from deskcalc.model.keys import Operator


@dataclass(frozen=True)
class CalculatorState:
    """
    Holds the calculator registers.

    `input_buffer` and `selected_operator` use None for "absent".
    `accumulator` is always a number; 0.0 doubles as "not set" in the
    engine guards (see `has_accumulator`).
    """
    # Running total carried across operator applications
    accumulator: float = 0.0

    # Number being typed, digits and at most one '.'
    input_buffer: Optional[str] = None

    # Operator waiting for its second operand
    selected_operator: Optional[Operator] = None

    @property
    def has_input(self) -> bool:
        return self.input_buffer is not None

    @property
    def has_operator(self) -> bool:
        return self.selected_operator is not None

    @property
    def has_accumulator(self) -> bool:
        """
        True when the accumulator counts as set.
        A zero total (including -0.0) is treated as never set, so e.g. negating
        the result of `5 - 5 =` does nothing. NaN counts as set.
        """
        return self.accumulator != 0.0

    @property
    def operand(self) -> float:
        """The buffer parsed as a number if present, otherwise the accumulator."""
        if self.input_buffer is not None:
            return float(self.input_buffer)
        return self.accumulator


def initial_state() -> CalculatorState:
    """State of a freshly constructed calculator."""
    return CalculatorState()
