# session.py
"""
The interactive session loop.

Each iteration selects an operation, reads its operands, calculates and prints
the result line, then asks whether to go again. Faults are contained to the
iteration they happen in; only the end of input (or Ctrl-C) stops the session
early.
"""

import logging

from .engine import calculate
from .errors import InputFormatError
from .formatter import format_line
from .operations import HELP_COMMAND, Operation, help_text
from .prompts import read_operands, select_operation
from .settings import CalculatorSettings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

WELCOME = (
    "Welcome to the Console Calculator!\n"
    "Type 'help' to see the list of available operations."
)
CONTINUE_PROMPT = "Do you want to perform another calculation? (yes/no): "
SEPARATOR = "-" * 40
GOODBYE = "Thank you for using the calculator. Goodbye!"

_YES = {'yes', 'y'}
_NO = {'no', 'n'}


class Session:
    """Runs the select → read → calculate → display → continue loop."""

    def __init__(self, settings: CalculatorSettings = DEFAULT_SETTINGS):
        self.settings = settings
        self.calculations = 0

    def run(self) -> int:
        """
        Run the session until the user declines to continue.

        Returns:
            0 when the user ends the session, 1 when input ends first
        """
        print(WELCOME)
        try:
            while True:
                selection = select_operation()
                if selection == HELP_COMMAND:
                    # help goes straight back to operation selection
                    print(help_text())
                    continue
                self.run_calculation(selection)
                if not self.ask_continue():
                    break
                print(SEPARATOR)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed; ending session")
            print()
            print(GOODBYE)
            return 1
        logger.info(f"Session finished after {self.calculations} calculation(s)")
        print(GOODBYE)
        return 0

    def run_calculation(self, operation: Operation) -> None:
        """Read operands, calculate and print one result, containing any fault."""
        try:
            operands = read_operands(operation, self.settings)
            result = calculate(operation, operands, self.settings)
            self.calculations += 1
            if result.ok:
                print(format_line(operation, operands, result.value, self.settings))
            else:
                print(f"Error: {result.reason}")
        except EOFError:
            raise
        except InputFormatError as e:
            logger.debug(f"Number format fault: {e}")
            print("Please enter valid numbers only.")
        except Exception as e:
            logger.debug("Unexpected fault during calculation", exc_info=True)
            print(f"An unexpected error occurred: {e}")

    def ask_continue(self) -> bool:
        """Ask whether to perform another calculation; re-prompts until yes or no."""
        while True:
            answer = input(CONTINUE_PROMPT).strip().lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            print("Please enter 'yes' or 'no'.")
