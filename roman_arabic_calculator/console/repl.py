"""Interactive read-eval-print loop around the expression parser."""
from enum import Enum
import io
import sys

from pydantic import BaseModel, ConfigDict, Field

from roman_arabic_calculator.common.errors import CalculatorError
from roman_arabic_calculator.common.logger import logger
from roman_arabic_calculator.common.models import OperatorSelection
from roman_arabic_calculator.common.parser import ExpressionParser

DEFAULT_PROMPT = (
    "Enter an arithmetic expression with numbers from 1 to 10 "
    "in Roman or Arabic notation"
)


class ErrorPolicy(str, Enum):
    """What the loop does after printing an evaluation error."""

    CONTINUE = "continue"
    EXIT = "exit"


class CalculatorRepl(BaseModel):
    """
    Console loop reading one expression per line and printing its result.

    Lifecycle:
        - Prints the prompt and reads a line
        - Stops on the exit command or at end of input
        - Prints the result, or the error message followed by the error policy decision
    """

    # Make the Pydantic instance immutable (read-only) so the loop
    # configuration cannot change while it is running.
    # Allow arbitrary types like io.TextIOBase streams
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    stdin: io.TextIOBase = Field(default_factory=lambda: sys.stdin, description="Stream expressions are read from")
    stdout: io.TextIOBase = Field(default_factory=lambda: sys.stdout, description="Stream results are written to")
    prompt: str = Field(default=DEFAULT_PROMPT, description="Text printed before each read")
    exit_command: str = Field(default="exit", min_length=1, description="Line that stops the loop")
    error_policy: ErrorPolicy = Field(default=ErrorPolicy.CONTINUE, description="Keep reading or stop after an error")
    operator_selection: OperatorSelection = Field(
        default=OperatorSelection.LEFTMOST, description="Rule used to pick the operator"
    )

    def _write(self, text: str) -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def evaluate_line(self, line: str) -> str:
        """
        Evaluate one input line.

        :param str line: Raw line read from the input stream

        :return: Rendered result
        :rtype: str
        :raises CalculatorError: If the expression cannot be evaluated
        """
        logger.info(f"🧮🏁 Evaluating: {line!r}")
        output = ExpressionParser.evaluate(line, self.operator_selection)
        logger.info(f"🧮✅ {line!r} = {output}")
        return output

    def run(self) -> int:
        """
        Run the loop until the exit command, end of input or, under the exit policy, an error.

        :return: Number of expressions that failed
        :rtype: int
        """
        errors = 0

        while True:
            if self.prompt:
                self._write(self.prompt)

            line = self.stdin.readline()
            # readline() returns an empty string only at end of input
            if not line:
                logger.info("📭 End of input reached")
                break
            if line.strip() == self.exit_command:
                logger.info("👋 Exit command received")
                break

            try:
                self._write(self.evaluate_line(line))
            except CalculatorError as exc:
                errors += 1
                logger.error(f"🧮❌ {exc.kind}: {exc}")
                self._write(str(exc))
                if self.error_policy is ErrorPolicy.EXIT:
                    break

        return errors
