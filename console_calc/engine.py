# engine.py
"""
Calculation engine.

`calculate` looks the operation up in a dispatch table of small pure functions.
A function that meets an undefined case raises DomainError; `calculate` turns
that into a failed CalculationResult carrying the reason, so callers never have
to test a numeric sentinel.

Angles for sin, cos and tan are taken in degrees and folded into [0, 360)
before conversion to radians.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from .errors import DomainError
from .operations import Operation
from .settings import CalculatorSettings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a calculation: a value on success, a reason on failure."""
    value: Optional[float] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, value: float) -> "CalculationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "CalculationResult":
        return cls(reason=reason)


def normalize_degrees(degrees: float) -> float:
    """Fold an angle into [0, 360); the remainder follows the dividend's sign before the fixup.

    Non-finite angles give NaN.
    """
    if not math.isfinite(degrees):
        return math.nan
    return math.fmod(math.fmod(degrees, 360.0) + 360.0, 360.0)


def _radians(degrees: float) -> float:
    return math.radians(normalize_degrees(degrees))


# ---------------------------
# Operation functions
# ---------------------------

def _add(a: float, b: float, settings: CalculatorSettings) -> float:
    return a + b

def _subtract(a: float, b: float, settings: CalculatorSettings) -> float:
    return a - b

def _multiply(a: float, b: float, settings: CalculatorSettings) -> float:
    return a * b

def _divide(a: float, b: float, settings: CalculatorSettings) -> float:
    if abs(b) < settings.tolerance:
        raise DomainError("Cannot divide by zero.")
    return a / b

def _modulo(a: float, b: float, settings: CalculatorSettings) -> float:
    if abs(b) < settings.tolerance:
        raise DomainError("Cannot perform modulo by zero.")
    if not math.isfinite(a):
        return math.nan
    return math.fmod(a, b)

def _sin(degrees: float, settings: CalculatorSettings) -> float:
    return math.sin(_radians(degrees))

def _cos(degrees: float, settings: CalculatorSettings) -> float:
    return math.cos(_radians(degrees))

def _tan(degrees: float, settings: CalculatorSettings) -> float:
    radians = _radians(degrees)
    if abs(math.cos(radians)) < settings.tolerance:
        raise DomainError(f"Tangent is undefined for {normalize_degrees(degrees):g}°.")
    return math.tan(radians)

def _pow(base: float, exponent: float, settings: CalculatorSettings) -> float:
    """
    Real power.

    Exponent 0 gives 1 for every base, 0 included. A negative base with a
    fractional exponent yields NaN and overflow yields infinity; both are
    passed through rather than reported as errors.
    """
    if exponent == 0:
        return 1.0
    if base == 0 and exponent < 0:
        raise DomainError("0 raised to a negative power is undefined.")
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        # sign follows the base only for odd integral exponents
        odd = float(exponent).is_integer() and math.fmod(exponent, 2.0) != 0
        return -math.inf if base < 0 and odd else math.inf

def _sqrt(x: float, settings: CalculatorSettings) -> float:
    if x < 0:
        raise DomainError("Cannot calculate the square root of a negative number.")
    return math.sqrt(x)

def _require_positive(x: float) -> None:
    if x <= 0:
        raise DomainError("Logarithm is only defined for positive numbers.")

def _log(base: float, x: float, settings: CalculatorSettings) -> float:
    if base <= 0 or abs(base - 1.0) < settings.tolerance:
        raise DomainError("Logarithm base must be positive and not equal to 1.")
    _require_positive(x)
    return math.log(x) / math.log(base)

def _ln(x: float, settings: CalculatorSettings) -> float:
    _require_positive(x)
    return math.log(x)

def _log10(x: float, settings: CalculatorSettings) -> float:
    _require_positive(x)
    return math.log10(x)


_DISPATCH: Dict[Operation, Callable[..., float]] = {
    Operation.ADD: _add,
    Operation.SUBTRACT: _subtract,
    Operation.MULTIPLY: _multiply,
    Operation.DIVIDE: _divide,
    Operation.MODULO: _modulo,
    Operation.SIN: _sin,
    Operation.COS: _cos,
    Operation.TAN: _tan,
    Operation.POW: _pow,
    Operation.SQRT: _sqrt,
    Operation.LOG: _log,
    Operation.LN: _ln,
    Operation.LOG10: _log10,
}


def calculate(operation: Operation, operands: Sequence[float],
              settings: CalculatorSettings = DEFAULT_SETTINGS) -> CalculationResult:
    """
    Apply an operation to its operands.

    Args:
        operation: The operation to apply
        operands: Operand values in prompt order (base before number for log)
        settings: Numeric convention supplying the zero tolerance

    Returns:
        CalculationResult with the value, or the reason the operation is undefined

    Raises:
        ValueError: If the number of operands does not match the operation's arity
    """
    if len(operands) != operation.arity:
        raise ValueError(
            f"Operation '{operation}' takes {operation.arity} operand(s), got {len(operands)}"
        )
    func = _DISPATCH[operation]
    try:
        value = func(*operands, settings)
    except DomainError as e:
        logger.info(f"Domain error for {operation} {tuple(operands)}: {e}")
        return CalculationResult.failure(str(e))
    logger.debug(f"{operation} {tuple(operands)} -> {value!r}")
    return CalculationResult.success(value)
