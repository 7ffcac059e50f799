# errors.py

"""Exception hierarchy shared by the calculator components."""


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass

class InputFormatError(CalculatorError, ValueError):
    """Raised when operand text is not a valid floating-point literal."""
    pass

class UnknownOperationError(CalculatorError):
    """Raised when an operation token is not one of the supported operations."""

    def __init__(self, token: str):
        super().__init__(f"Unknown operation: {token!r}")
        self.token = token

class DomainError(CalculatorError):
    """Raised when an operation is undefined for the given operands."""
    pass
