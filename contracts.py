"""
contracts.py — single source of truth for every data type in SmartCalc.
All modules import tokens, results and errors ONLY from here.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tokens ──────────────────────────────────────

class TokenType(str, Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    VARIABLE = "variable"
    ASSIGNMENT = "assignment"
    PARENTHESIS = "parenthesis"
    END = "end"


class _TokenBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        raise NotImplementedError


class NumberToken(_TokenBase):
    token_type: Literal[TokenType.NUMBER] = TokenType.NUMBER
    value: float

    def render(self) -> str:
        return f"{self.value:g}"


class OperatorToken(_TokenBase):
    token_type: Literal[TokenType.OPERATOR] = TokenType.OPERATOR
    # "=" only when a bare '=' slipped past the assignment lookahead
    symbol: Literal["+", "-", "*", "/", "^", "="]

    def render(self) -> str:
        return self.symbol


class FunctionToken(_TokenBase):
    token_type: Literal[TokenType.FUNCTION] = TokenType.FUNCTION
    name: str

    def render(self) -> str:
        return self.name


class VariableToken(_TokenBase):
    token_type: Literal[TokenType.VARIABLE] = TokenType.VARIABLE
    name: str

    def render(self) -> str:
        return self.name


class AssignmentToken(_TokenBase):
    token_type: Literal[TokenType.ASSIGNMENT] = TokenType.ASSIGNMENT
    name: str

    def render(self) -> str:
        return f"{self.name} ="


class ParenthesisToken(_TokenBase):
    token_type: Literal[TokenType.PARENTHESIS] = TokenType.PARENTHESIS
    symbol: Literal["(", ")"]

    def render(self) -> str:
        return self.symbol


class EndToken(_TokenBase):
    token_type: Literal[TokenType.END] = TokenType.END

    def render(self) -> str:
        return ""


Token = Union[
    NumberToken, OperatorToken, FunctionToken, VariableToken,
    AssignmentToken, ParenthesisToken, EndToken,
]

# Postfix (RPN) sequence: output of the converter, input of the evaluator
Postfix = list[Token]


def render_postfix(postfix: Postfix) -> list[str]:
    return [t.render() for t in postfix]


class Conversion(BaseModel):
    postfix: list[Token]
    assigned: Optional[str] = None  # outermost assigned name, if the line assigned


# ─────────────────────────── Evaluation ──────────────────────────────────

class EvalResult(BaseModel):
    value: float
    postfix: list[str] = Field(default_factory=list)  # rendered tokens
    assigned: Optional[str] = None                    # variable name for "x = ..."


# ─────────────────────────── Errors ──────────────────────────────────────

class ErrorKind(str, Enum):
    UNEXPECTED_CHARACTER = "unexpected_character"
    UNBALANCED_PARENTHESES = "unbalanced_parentheses"
    UNDEFINED_VARIABLE = "undefined_variable"
    DIVISION_BY_ZERO = "division_by_zero"
    MALFORMED_POSTFIX = "malformed_postfix"
    UNKNOWN_OPERATOR = "unknown_operator"
    UNKNOWN_FUNCTION = "unknown_function"


class CalculatorError(Exception):
    """Base of every error the pipeline raises. Aborts the current line."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnexpectedCharacterError(CalculatorError):
    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, char: str) -> None:
        super().__init__(f"Unexpected character: {char}")
        self.char = char


class UnbalancedParenthesesError(CalculatorError):
    kind = ErrorKind.UNBALANCED_PARENTHESES

    def __init__(self, message: str = "Unbalanced parentheses") -> None:
        super().__init__(message)


class UndefinedVariableError(CalculatorError):
    kind = ErrorKind.UNDEFINED_VARIABLE

    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("Division by zero")


class MalformedPostfixError(CalculatorError):
    kind = ErrorKind.MALFORMED_POSTFIX

    def __init__(self, message: str = "Malformed expression") -> None:
        super().__init__(message)


class UnknownOperatorError(CalculatorError):
    kind = ErrorKind.UNKNOWN_OPERATOR

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown operator: {symbol}")
        self.symbol = symbol


class UnknownFunctionError(CalculatorError):
    kind = ErrorKind.UNKNOWN_FUNCTION

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown function: {name}")
        self.name = name
