"""Errors raised while evaluating an arithmetic expression."""


class CalculatorError(ValueError):
    """
    Base class for every failure the evaluator reports to its caller.

    Subclasses set ``kind``, a stable tag that names the error independently
    of the human-readable message.
    """

    kind: str = "CalculatorError"


class MissingOperatorError(CalculatorError):
    """The expression contains no recognized operator symbol."""

    kind = "MissingOperator"


class TooManyOperandsError(CalculatorError):
    """Splitting on the operator produced more than two operands."""

    kind = "TooManyOperands"


class MixedNotationError(CalculatorError):
    """One operand is a Roman numeral and the other is not."""

    kind = "MixedOrOutOfRangeNotation"


class NotANumberError(CalculatorError):
    """An Arabic operand is not a base-10 integer."""

    kind = "NotANumber"


class OutOfRangeError(CalculatorError):
    """An Arabic operand lies outside the supported range."""

    kind = "OutOfRange"


class NonPositiveRomanResultError(CalculatorError):
    """A Roman computation produced zero or a negative number."""

    kind = "NonPositiveRomanResult"


class DivisionByZeroError(CalculatorError):
    """The divisor of a division is zero."""

    kind = "DivisionByZero"


class UnrecognizedOperandError(CalculatorError):
    """A Roman operand is not one of the canonical numerals I to X."""

    kind = "UnrecognizedOperand"
