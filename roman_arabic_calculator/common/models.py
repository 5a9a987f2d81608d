"""Pydantic models describing a parsed expression and its evaluation result."""
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roman_arabic_calculator.common.roman import to_roman


class Notation(str, Enum):
    """Numeral system shared by both operands of an expression."""

    ARABIC = "arabic"
    ROMAN = "roman"


class OperatorSelection(str, Enum):
    """
    Rule used to pick the operator when several operator symbols are present.

    LEFTMOST selects the symbol that occurs first in the expression.
    SCAN_ORDER selects the first symbol of the fixed order ``+ - / *`` that
    appears anywhere in the expression, whatever its position.
    """

    LEFTMOST = "leftmost"
    SCAN_ORDER = "scan-order"


class Expression(BaseModel):
    """A normalized expression split into its two operands and one operator."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., description="Expression as typed by the user")
    operands: Tuple[str, str] = Field(..., description="Left and right operand tokens")
    operator: str = Field(..., description="Operator symbol")

    @field_validator("operator")
    def operator_must_be_known(cls, v: str) -> str:
        """Ensure the operator is one of the four supported symbols."""
        if v not in ("+", "-", "*", "/"):
            raise ValueError(f"Unsupported operator: {v!r}")
        return v


class EvaluationResult(BaseModel):
    """Integer outcome of an expression and the notation to print it in."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., description="Result of the arithmetic operation")
    notation: Notation = Field(..., description="Notation of the input operands")

    def render(self) -> str:
        """
        Format the value in the notation of the operands.

        :return: Decimal or Roman rendering of the value
        :rtype: str
        :raises NonPositiveRomanResultError: If a Roman result is zero or negative
        """
        if self.notation is Notation.ROMAN:
            return to_roman(self.value)
        return str(self.value)

