# operations.py
"""
The closed set of supported operations.

Each operation knows how many operands it takes and which prompt introduces
each one. The help guide shown for the 'help' command is built from the same
table so the two never drift apart.
"""

from enum import Enum
from typing import Dict, Tuple, Union

from .errors import UnknownOperationError

HELP_COMMAND = 'help'


class Operation(str, Enum):
    """Supported operations, keyed by the identifier the user types."""
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    MODULO = '%'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    POW = 'pow'
    SQRT = 'sqrt'
    LOG = 'log'
    LN = 'ln'
    LOG10 = 'log10'

    def __str__(self) -> str:
        return self.value

    @property
    def prompts(self) -> Tuple[str, ...]:
        """Prompt texts for this operation's operands, in entry order."""
        return OPERAND_PROMPTS[self]

    @property
    def arity(self) -> int:
        return len(self.prompts)


_UNARY_PROMPTS = ("Enter a number",)
_BINARY_PROMPTS = ("Enter the first number", "Enter the second number")

OPERAND_PROMPTS: Dict[Operation, Tuple[str, ...]] = {
    Operation.ADD: _BINARY_PROMPTS,
    Operation.SUBTRACT: _BINARY_PROMPTS,
    Operation.MULTIPLY: _BINARY_PROMPTS,
    Operation.DIVIDE: _BINARY_PROMPTS,
    Operation.MODULO: _BINARY_PROMPTS,
    Operation.SIN: _UNARY_PROMPTS,
    Operation.COS: _UNARY_PROMPTS,
    Operation.TAN: _UNARY_PROMPTS,
    Operation.POW: ("Enter the base", "Enter the exponent"),
    Operation.SQRT: _UNARY_PROMPTS,
    # base comes first
    Operation.LOG: ("Enter the base", "Enter the number"),
    Operation.LN: _UNARY_PROMPTS,
    Operation.LOG10: _UNARY_PROMPTS,
}

VALID_OPERATIONS = ", ".join(op.value for op in Operation)


def lookup_operation(token: str) -> Operation:
    """
    Map user text to an Operation.

    Matching is exact after trimming and case-folding.

    Raises:
        UnknownOperationError: If the token names no supported operation.
    """
    key = token.strip().lower()
    try:
        return Operation(key)
    except ValueError:
        raise UnknownOperationError(token.strip()) from None


def parse_selection(token: str) -> Union[Operation, str]:
    """Return HELP_COMMAND for a help request, otherwise the matching Operation."""
    if token.strip().lower() == HELP_COMMAND:
        return HELP_COMMAND
    return lookup_operation(token)


# ---------------------------
# Help guide
# ---------------------------

_GUIDE_ROWS = [
    (Operation.ADD, "Addition", "2 + 3 = 5"),
    (Operation.SUBTRACT, "Subtraction", "7 - 4 = 3"),
    (Operation.MULTIPLY, "Multiplication", "6 * 7 = 42"),
    (Operation.DIVIDE, "Division", "9 / 2 = 4.5"),
    (Operation.MODULO, "Remainder (sign of dividend)", "-7 % 3 = -1"),
    (Operation.SIN, "Sine of an angle in degrees", "sin(30°) = 0.5"),
    (Operation.COS, "Cosine of an angle in degrees", "cos(60°) = 0.5"),
    (Operation.TAN, "Tangent of an angle in degrees", "tan(45°) = 1"),
    (Operation.POW, "Base raised to an exponent", "2 ^ 10 = 1024"),
    (Operation.SQRT, "Square root", "sqrt(16) = 4"),
    (Operation.LOG, "Logarithm with a custom base", "log_2(8) = 3"),
    (Operation.LN, "Natural logarithm", "ln(1) = 0"),
    (Operation.LOG10, "Base-10 logarithm", "log10(100) = 2"),
]


def help_text() -> str:
    """Return the operation guide table shown for the 'help' command."""
    lines = [
        "Operation Guide",
        "===============",
        f"{'Op':<7}{'Operands':<10}{'Description':<32}Example",
        "-" * 64,
    ]
    for op, description, example in _GUIDE_ROWS:
        lines.append(f"{op.value:<7}{op.arity:<10}{description:<32}{example}")
    lines.append("")
    lines.append("Angles are entered in degrees. For log, enter the base first.")
    return "\n".join(lines)
