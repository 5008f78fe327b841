"""Display strings derived from the calculator state."""
import math
from decimal import Decimal

from deskcalc.model.state import CalculatorState

# Magnitudes outside [1e-7, 1e21) are shown in exponent form
_MAX_PLAIN_EXPONENT = 21
_MIN_PLAIN_EXPONENT = -6


def format_number(value: float) -> str:
    """
    Shortest text that round-trips to `value`, desk-calculator style.

    7.0 -> '7', 0.5 -> '0.5', 1e21 -> '1e+21', 1e-7 -> '1e-7',
    inf -> 'Infinity', nan -> 'NaN'. Both zeros show as '0'.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""

    # repr() gives the shortest round-trip digits
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    point = len(digit_tuple) + exponent  # position of the decimal point
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    n_digits = len(digits)

    if n_digits <= point <= _MAX_PLAIN_EXPONENT:
        text = digits + "0" * (point - n_digits)
    elif 0 < point <= _MAX_PLAIN_EXPONENT:
        text = f"{digits[:point]}.{digits[point:]}"
    elif _MIN_PLAIN_EXPONENT < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        e = point - 1
        mantissa = digits if n_digits == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"

    return sign + text


def display_text(state: CalculatorState) -> str:
    """Text for the calculator display."""
    if state.input_buffer is not None:
        return state.input_buffer
    if state.has_accumulator:
        return format_number(state.accumulator)
    return "0"


def clear_label(state: CalculatorState) -> str:
    # C clears the entry being typed, AC resets the total
    return "C" if state.has_input else "AC"
