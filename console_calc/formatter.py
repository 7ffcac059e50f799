# formatter.py
"""
Display formatting for results and result lines.

Output always uses the convention in CalculatorSettings: the configured
decimal separator, no digit grouping and an upper-case 'E' exponent.
"""

import math
from decimal import Decimal
from typing import Sequence

from .operations import Operation
from .settings import CalculatorSettings, DEFAULT_SETTINGS

_INFIX_SYMBOLS = {
    Operation.ADD: '+',
    Operation.SUBTRACT: '-',
    Operation.MULTIPLY: '*',
    Operation.DIVIDE: '/',
    Operation.MODULO: '%',
    Operation.POW: '^',
}

_DEGREE_OPERATIONS = {Operation.SIN, Operation.COS, Operation.TAN}


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _localize(text: str, settings: CalculatorSettings) -> str:
    if settings.decimal_separator == '.':
        return text
    return text.replace('.', settings.decimal_separator)


def format_result(value: float, settings: CalculatorSettings = DEFAULT_SETTINGS) -> str:
    """
    Render a calculation result for display.

    Magnitudes at or below the tolerance print as "0". Very large or very small
    magnitudes use scientific notation; everything else is rounded to the
    configured number of decimal places with trailing zeros dropped.
    """
    if not math.isfinite(value):
        return _non_finite(value)
    magnitude = abs(value)
    if magnitude <= settings.tolerance:
        return "0"
    if magnitude >= settings.large_threshold or magnitude < settings.small_threshold:
        text = f"{value:.{settings.scientific_digits}E}"
    else:
        places = settings.decimal_places
        # shortest decimal form of the rounded double
        text = format(Decimal(repr(round(value, places))), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    return _localize(text, settings)


def format_operand(value: float, settings: CalculatorSettings = DEFAULT_SETTINGS) -> str:
    """Render an entered operand: integral values without a fraction, others in shortest form."""
    if not math.isfinite(value):
        return _non_finite(value)
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return _localize(repr(float(value)).replace('e', 'E'), settings)


def describe(operation: Operation, operands: Sequence[float],
             settings: CalculatorSettings = DEFAULT_SETTINGS) -> str:
    """Render the left-hand side of a result line, e.g. '2 + 3', 'sin(30°)' or 'log_2(8)'."""
    shown = [format_operand(x, settings) for x in operands]
    if operation in _INFIX_SYMBOLS:
        return f"{shown[0]} {_INFIX_SYMBOLS[operation]} {shown[1]}"
    if operation is Operation.LOG:
        return f"log_{shown[0]}({shown[1]})"
    if operation in _DEGREE_OPERATIONS:
        return f"{operation.value}({shown[0]}°)"
    return f"{operation.value}({shown[0]})"


def format_line(operation: Operation, operands: Sequence[float], value: float,
                settings: CalculatorSettings = DEFAULT_SETTINGS) -> str:
    """Render a complete result line: '<description> = <result>'."""
    return f"{describe(operation, operands, settings)} = {format_result(value, settings)}"
