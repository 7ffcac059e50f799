# main.py

"""
Console Calculator
------------------
A menu-driven command-line calculator. The user picks an operation by name,
enters its operands one per line, and gets a formatted result line back. The
loop repeats until the user answers 'no' to the continue prompt.

Modules
-------
- errors:     CalculatorError, InputFormatError, UnknownOperationError, DomainError
- settings:   CalculatorSettings (numeric convention), configure_logging
- operations: Operation, operand prompts, help guide
- prompts:    operation selector and operand reader
- engine:     calculate, normalize_degrees, CalculationResult
- formatter:  format_result, format_operand, describe, format_line
- session:    Session (main loop)
"""

import logging
from typing import List, Optional

from .session import Session
from .settings import CalculatorSettings, DEFAULT_SETTINGS, configure_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None,
         settings: CalculatorSettings = DEFAULT_SETTINGS) -> int:
    """
    Entry point for the calculator application.

    The calculator takes no options; any arguments are ignored.
    """
    configure_logging(settings)
    logger.debug(f"Starting session with settings {settings.model_dump()}")
    return Session(settings).run()
