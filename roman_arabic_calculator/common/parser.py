"""Parse and evaluate two-operand Roman or Arabic arithmetic expressions."""
from collections.abc import Callable as ABCCallable
import operator
from typing import Callable, Dict, List, Tuple

from roman_arabic_calculator.common.errors import (
    DivisionByZeroError,
    MissingOperatorError,
    MixedNotationError,
    NotANumberError,
    OutOfRangeError,
    TooManyOperandsError,
)
from roman_arabic_calculator.common.models import (
    EvaluationResult,
    Expression,
    Notation,
    OperatorSelection,
)
from roman_arabic_calculator.common.roman import (
    MAX_OPERAND,
    MIN_OPERAND,
    from_roman,
    is_roman,
)


# Type alias for operator functions (taking two ints, returning an int)
OperatorFn: ABCCallable[[int, int], int] = Callable[[int, int], int]


def truncating_div(left: int, right: int) -> int:
    """
    Integer division rounding toward zero.

    :raises DivisionByZeroError: If the divisor is zero
    """
    if right == 0:
        raise DivisionByZeroError(f"Cannot divide {left} by zero")
    # floordiv rounds toward negative infinity, so divide the magnitudes
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


# Operator symbols in their fixed scan order, mapped to integer functions
OPERATORS: Dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "/": truncating_div,
    "*": operator.mul,
}

MAX_OPERANDS: int = 2


class ExpressionParser:
    """
    Parse and evaluate expressions of the form ``A<op>B``.

    Both operands are either Arabic integers from 1 to 10 or Roman numerals
    from I to X, and the result is printed in the notation of the operands.

    Algorithm:
        1. Normalize: strip every whitespace character
        2. Split on the selected operator into exactly two operands
        3. Classify the operands as Roman or Arabic
        4. Convert both operands to integers, checking the range
        5. Compute the integer result
        6. Render it in the operands' notation

    Examples:
        - "3 + 4"   -> "7"
        - "iv * ii" -> "VIII"
    """

    @staticmethod
    def normalize(raw: str) -> str:
        """
        Remove surrounding and internal whitespace.

        :param str raw: Expression as typed by the user

        :return: Expression without whitespace
        :rtype: str
        """
        return "".join(raw.split())

    @staticmethod
    def _select_operator(expr: str, selection: OperatorSelection) -> str:
        """Return the operator symbol to split on, or an empty string if none is present."""
        if selection is OperatorSelection.SCAN_ORDER:
            for symbol in OPERATORS:
                if symbol in expr:
                    return symbol
            return ""

        for char in expr:
            if char in OPERATORS:
                return char
        return ""

    @staticmethod
    def split(
        raw: str,
        selection: OperatorSelection = OperatorSelection.LEFTMOST,
    ) -> Expression:
        """
        Split an expression into its two operands and its operator.

        :param str raw: Expression as typed by the user
        :param OperatorSelection selection: Rule used to pick the operator

        :return: Parsed expression
        :rtype: Expression
        :raises MissingOperatorError: If no operator symbol is present
        :raises TooManyOperandsError: If the operator splits the input into more than two parts
        """
        expr: str = ExpressionParser.normalize(raw)
        symbol: str = ExpressionParser._select_operator(expr, selection)

        if not symbol:
            raise MissingOperatorError(f"The expression contains no arithmetic operator: {expr!r}")

        operands: List[str] = expr.split(symbol)
        if len(operands) > MAX_OPERANDS:
            raise TooManyOperandsError(
                f"The expression has more than {MAX_OPERANDS} operands: {expr!r}"
            )

        return Expression(raw=raw, operands=tuple(operands), operator=symbol)

    @staticmethod
    def classify(operands: Tuple[str, str]) -> Notation:
        """
        Determine the notation shared by both operands.

        :param Tuple[str, str] operands: Left and right operand tokens

        :return: Notation.ROMAN if both are Roman numerals, Notation.ARABIC otherwise
        :rtype: Notation
        :raises MixedNotationError: If only one operand is a Roman numeral
        """
        left_is_roman, right_is_roman = (is_roman(token) for token in operands)

        if left_is_roman != right_is_roman:
            raise MixedNotationError(
                "The operands use different numeral systems, or one of them "
                f"is not between {MIN_OPERAND} and {MAX_OPERAND}"
            )

        return Notation.ROMAN if left_is_roman else Notation.ARABIC

    @staticmethod
    def _parse_arabic(token: str) -> int:
        """Parse one Arabic operand and check it lies in the operand range."""
        # int() would also accept underscores and non-ASCII digits
        if not (token.isascii() and token.isdigit()):
            raise NotANumberError(
                f"'{token}' is not a number that can be used in an operation"
            )

        value = int(token, 10)

        if not MIN_OPERAND <= value <= MAX_OPERAND:
            raise OutOfRangeError(
                f"Operations are only possible with numbers from {MIN_OPERAND} to {MAX_OPERAND}, got {value}"
            )
        return value

    @staticmethod
    def to_integers(operands: Tuple[str, str], notation: Notation) -> Tuple[int, int]:
        """
        Convert both operands to canonical integers.

        :param Tuple[str, str] operands: Left and right operand tokens
        :param Notation notation: Notation returned by classify()

        :return: Integer values of both operands
        :rtype: Tuple[int, int]
        :raises UnrecognizedOperandError: If a Roman operand is not between I and X
        :raises NotANumberError: If an Arabic operand is not an integer
        :raises OutOfRangeError: If an Arabic operand is outside [1, 10]
        """
        convert = from_roman if notation is Notation.ROMAN else ExpressionParser._parse_arabic
        left, right = (convert(token) for token in operands)
        return left, right

    @staticmethod
    def compute(left: int, right: int, symbol: str) -> int:
        """
        Apply an operator to two integers, in operand order.

        Division truncates toward zero; an unknown symbol yields 0.

        :param int left: Left operand
        :param int right: Right operand
        :param str symbol: Operator symbol

        :return: Integer result
        :rtype: int
        :raises DivisionByZeroError: If dividing by zero
        """
        operation = OPERATORS.get(symbol)
        if operation is None:
            return 0
        return operation(left, right)

    @staticmethod
    def evaluate_expression(
        raw: str,
        selection: OperatorSelection = OperatorSelection.LEFTMOST,
    ) -> EvaluationResult:
        """
        Run every step except rendering.

        :param str raw: Expression as typed by the user
        :param OperatorSelection selection: Rule used to pick the operator

        :return: Integer result paired with its notation
        :rtype: EvaluationResult
        :raises CalculatorError: If any step fails
        """
        expression: Expression = ExpressionParser.split(raw, selection)
        notation: Notation = ExpressionParser.classify(expression.operands)
        left, right = ExpressionParser.to_integers(expression.operands, notation)
        value: int = ExpressionParser.compute(left, right, expression.operator)
        return EvaluationResult(value=value, notation=notation)

    @staticmethod
    def evaluate(
        raw: str,
        selection: OperatorSelection = OperatorSelection.LEFTMOST,
    ) -> str:
        """
        Evaluate an expression and format the result in the operands' notation.

        :param str raw: Expression as typed by the user
        :param OperatorSelection selection: Rule used to pick the operator

        :return: Decimal or Roman rendering of the result
        :rtype: str
        :raises CalculatorError: If the expression is malformed or the result cannot be rendered
        """
        return ExpressionParser.evaluate_expression(raw, selection).render()
