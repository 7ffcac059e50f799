# prompts.py
"""
Interactive input: the operation selector and the operand reader.

Both loop on standard input until they get something valid, reporting each
rejected entry and asking again. EOFError and KeyboardInterrupt from `input`
are left to the caller, which ends the session.
"""

import logging
import re
from functools import lru_cache
from typing import List, Pattern, Union

from .errors import InputFormatError, UnknownOperationError
from .operations import Operation, VALID_OPERATIONS, parse_selection
from .settings import CalculatorSettings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

# Try to import readline for line editing on input().
try:
    import readline  # noqa: F401
except ImportError:
    readline = None  # Not available on Windows.

OPERATION_PROMPT = "Enter operation (or 'help' for the operation guide): "
INVALID_NUMBER_MESSAGE = "Invalid number format. Please try again."


# ---------------------------
# Number parsing
# ---------------------------

@lru_cache(maxsize=None)
def _number_pattern(separator: str) -> Pattern[str]:
    sep = re.escape(separator)
    return re.compile(rf'[+-]?(?:\d+(?:{sep}\d*)?|{sep}\d+)(?:[eE][+-]?\d+)?')


def parse_number(text: str, settings: CalculatorSettings = DEFAULT_SETTINGS) -> float:
    """
    Parse a floating-point literal using the fixed numeric convention.

    Accepts an optional sign, digits with the configured decimal separator and
    an optional exponent ('1', '-2.5', '.5', '3.', '1e-3'). Surrounding
    whitespace is ignored. Digit grouping, '_' separators, 'inf' and 'nan'
    are rejected.

    Raises:
        InputFormatError: If the text is not a valid literal.
    """
    s = text.strip()
    if not _number_pattern(settings.decimal_separator).fullmatch(s):
        raise InputFormatError(f"Invalid number format: {text!r}")
    return float(s.replace(settings.decimal_separator, '.'))


# ---------------------------
# Operand reader
# ---------------------------

def read_number(prompt: str, settings: CalculatorSettings = DEFAULT_SETTINGS) -> float:
    """Prompt until the user enters a valid number and return it."""
    while True:
        line = input(f"{prompt}: ")
        try:
            return parse_number(line, settings)
        except InputFormatError as e:
            logger.debug(str(e))
            print(INVALID_NUMBER_MESSAGE)


def read_operands(operation: Operation, settings: CalculatorSettings = DEFAULT_SETTINGS) -> List[float]:
    """Ask for each operand of the operation in order and return the values."""
    return [read_number(prompt, settings) for prompt in operation.prompts]


# ---------------------------
# Operation selector
# ---------------------------

def select_operation() -> Union[Operation, str]:
    """
    Prompt until the user names an operation or asks for help.

    Returns:
        The selected Operation, or operations.HELP_COMMAND when the user typed 'help'
    """
    while True:
        token = input(OPERATION_PROMPT).strip()
        if not token:
            print("Please enter an operation.")
            continue
        try:
            return parse_selection(token)
        except UnknownOperationError as e:
            logger.debug(str(e))
            print(f"Invalid operation '{e.token}'. Valid operations are: {VALID_OPERATIONS}")
