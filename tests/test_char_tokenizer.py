from __future__ import annotations

import pytest

from adapters.tokenizer.char_tokenizer import CharTokenizer
from contracts import (
    AssignmentToken,
    EndToken,
    FunctionToken,
    NumberToken,
    OperatorToken,
    ParenthesisToken,
    UnexpectedCharacterError,
    VariableToken,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42.0), ("3.14", 3.14), ("0.5", 0.5), (".25", 0.25), ("7.", 7.0), ("100.001", 100.001)],
)
def test_number_literal_accumulates_to_its_value(text, expected):
    token = CharTokenizer(text).next_token()

    assert isinstance(token, NumberToken)
    assert token.value == pytest.approx(expected)


def test_second_decimal_point_does_not_crash():
    tokenizer = CharTokenizer("1.2.3")

    token = tokenizer.next_token()

    assert isinstance(token, NumberToken)
    assert token.value == pytest.approx(1.23)
    assert isinstance(tokenizer.next_token(), EndToken)


def test_cursor_advances_past_each_lexeme():
    tokenizer = CharTokenizer("  12 + x")

    assert tokenizer.next_token() == NumberToken(value=12)
    assert tokenizer.position == 4
    assert tokenizer.next_token() == OperatorToken(symbol="+")
    assert tokenizer.remainder() == " x"


def test_full_token_stream():
    tokens = list(CharTokenizer("sin(a1) ^ 2 - b / 4"))

    assert tokens == [
        FunctionToken(name="sin"),
        ParenthesisToken(symbol="("),
        VariableToken(name="a1"),
        ParenthesisToken(symbol=")"),
        OperatorToken(symbol="^"),
        NumberToken(value=2),
        OperatorToken(symbol="-"),
        VariableToken(name="b"),
        OperatorToken(symbol="/"),
        NumberToken(value=4),
    ]


def test_identifier_followed_by_equals_is_assignment():
    tokenizer = CharTokenizer("rate   = 2 * 3")

    assert tokenizer.next_token() == AssignmentToken(name="rate")
    assert tokenizer.remainder() == " 2 * 3"


def test_function_name_followed_by_equals_is_assignment():
    assert CharTokenizer("log = 1").next_token() == AssignmentToken(name="log")


def test_unknown_name_is_variable_not_function():
    assert CharTokenizer("sinh").next_token() == VariableToken(name="sinh")


def test_bare_equals_is_an_operator_token():
    tokens = list(CharTokenizer("3 = 4"))

    assert tokens[1] == OperatorToken(symbol="=")


def test_end_is_returned_repeatedly_after_exhaustion():
    tokenizer = CharTokenizer("   ")

    assert isinstance(tokenizer.next_token(), EndToken)
    assert isinstance(tokenizer.next_token(), EndToken)


@pytest.mark.parametrize("text, char", [("2 % 3", "%"), ("x_1", "_"), ("2 , 3", ","), ("π", "π")])
def test_unexpected_character(text, char):
    with pytest.raises(UnexpectedCharacterError) as excinfo:
        list(CharTokenizer(text))

    assert excinfo.value.char == char
    assert str(excinfo.value) == f"Unexpected character: {char}"


def test_non_ascii_digit_is_rejected_not_crashed():
    with pytest.raises(UnexpectedCharacterError):
        list(CharTokenizer("2²"))
