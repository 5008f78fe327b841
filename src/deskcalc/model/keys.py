"""Logical keys of the calculator keypad."""
from enum import Enum, StrEnum
from typing import Optional


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class Operator(StrEnum):
    """Binary operator awaiting its second operand."""
    DIVIDE = "divide"
    MULTIPLY = "multiply"
    SUBTRACT = "subtract"
    ADD = "add"


class Key(Enum):
    """
    One logical key on the keypad.
    Digit keys carry their digit as value, the rest a descriptive name.
    """
    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    DECIMAL = "decimal"
    CLEAR = "clear"
    NEGATE = "negate"
    PERCENT = "percent"
    DIVIDE = "divide"
    MULTIPLY = "multiply"
    SUBTRACT = "subtract"
    ADD = "add"
    EXECUTE = "execute"

    @property
    def digit(self) -> Optional[int]:
        """Digit 0-9 for digit keys, None otherwise."""
        return self.value if isinstance(self.value, int) else None

    @property
    def operator(self) -> Optional[Operator]:
        """Operator for the four operator keys, None otherwise."""
        return _KEY_OPERATORS.get(self)

    @classmethod
    def for_digit(cls, digit: int) -> "Key":
        if not 0 <= digit <= 9:
            raise ValueError(f"Digit out of range: {digit!r}")
        return cls(digit)


_KEY_OPERATORS: dict[Key, Operator] = {
    Key.DIVIDE: Operator.DIVIDE,
    Key.MULTIPLY: Operator.MULTIPLY,
    Key.SUBTRACT: Operator.SUBTRACT,
    Key.ADD: Operator.ADD,
}

# Keypad layout, row by row (4 columns; ZERO is the wide key of the last row)
KEY_ORDER: tuple[Key, ...] = (
    Key.CLEAR, Key.NEGATE, Key.PERCENT, Key.DIVIDE,
    Key.SEVEN, Key.EIGHT, Key.NINE, Key.MULTIPLY,
    Key.FOUR, Key.FIVE, Key.SIX, Key.SUBTRACT,
    Key.ONE, Key.TWO, Key.THREE, Key.ADD,
    Key.ZERO, Key.DECIMAL, Key.EXECUTE,
)
