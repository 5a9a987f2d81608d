"""
Command-line entrypoint of the Roman/Arabic calculator.

This script:
- Validates the command-line options
- Configures logging on stderr
- Runs the interactive loop

Exit status is 0 when every expression succeeded and 1 otherwise.
"""

import argparse
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, ValidationError

from roman_arabic_calculator.common.logger import configure_logging, logger
from roman_arabic_calculator.common.models import OperatorSelection
from roman_arabic_calculator.console.repl import CalculatorRepl, ErrorPolicy


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    on_error : ErrorPolicy
        Whether the interactive loop keeps reading after an error.
    operator_selection : OperatorSelection
        Rule used to pick the operator of each expression.
    log_level : str
        Logging level name.
    """

    on_error: ErrorPolicy = ErrorPolicy.CONTINUE
    operator_selection: OperatorSelection = OperatorSelection.LEFTMOST
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, sys.argv[1:] when None

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate A<op>B with numbers from 1 to 10 in Roman or Arabic notation"
    )

    parser.add_argument(
        "--on-error",
        choices=[policy.value for policy in ErrorPolicy],
        default=ErrorPolicy.CONTINUE.value,
        help="Keep reading after an invalid expression, or stop",
    )
    parser.add_argument(
        "--operator-selection",
        choices=[selection.value for selection in OperatorSelection],
        default=OperatorSelection.LEFTMOST.value,
        help="Pick the leftmost operator, or the first one of the fixed order '+-/*'",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for messages written to stderr",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(**vars(args))
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the console script.

    :param argv: Arguments to parse, sys.argv[1:] when None

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    repl = CalculatorRepl(
        error_policy=cli_args.on_error,
        operator_selection=cli_args.operator_selection,
    )
    errors = repl.run()

    logger.info(f"🏁 Finished with {errors} error(s)")
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
