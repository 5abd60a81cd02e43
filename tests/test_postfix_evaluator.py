from __future__ import annotations

import math

import pytest

from adapters.evaluator.postfix_evaluator import PostfixEvaluator
from adapters.variable_store.memory_store import InMemoryVariableStore
from contracts import (
    DivisionByZeroError,
    FunctionToken,
    MalformedPostfixError,
    NumberToken,
    OperatorToken,
    ParenthesisToken,
    UndefinedVariableError,
    UnknownFunctionError,
    UnknownOperatorError,
    VariableToken,
)


def _num(v: float) -> NumberToken:
    return NumberToken(value=v)


def _op(symbol: str) -> OperatorToken:
    return OperatorToken(symbol=symbol)


def _eval(postfix, store=None) -> float:
    return PostfixEvaluator().eval_postfix(postfix, store or InMemoryVariableStore())


def test_right_operand_is_the_most_recent_push():
    assert _eval([_num(10), _num(4), _op("-")]) == 6.0
    assert _eval([_num(2), _num(8), _op("/")]) == 0.25
    assert _eval([_num(2), _num(10), _op("^")]) == 1024.0


def test_variable_is_read_from_store():
    store = InMemoryVariableStore({"x": 10})

    assert _eval([VariableToken(name="x"), _num(5), _op("+")], store) == 15.0


def test_undefined_variable():
    with pytest.raises(UndefinedVariableError) as excinfo:
        _eval([VariableToken(name="y"), _num(1), _op("+")])

    assert excinfo.value.name == "y"


@pytest.mark.parametrize("zero", [0.0, -0.0])
def test_division_by_zero(zero):
    with pytest.raises(DivisionByZeroError):
        _eval([_num(1), _num(zero), _op("/")])


def test_division_by_zero_is_also_a_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        _eval([_num(1), _num(0), _op("/")])


def test_functions():
    assert _eval([_num(16), FunctionToken(name="sqrt")]) == 4.0
    assert _eval([_num(0), FunctionToken(name="cos")]) == 1.0
    assert _eval([_num(1), FunctionToken(name="exp")]) == pytest.approx(math.e)
    assert _eval([_num(math.e), FunctionToken(name="log")]) == pytest.approx(1.0)


def test_function_domain_errors_propagate_as_non_finite_values():
    assert _eval([_num(0), FunctionToken(name="log")]) == -math.inf
    assert math.isnan(_eval([_num(-1), FunctionToken(name="log")]))
    assert math.isnan(_eval([_num(-1), FunctionToken(name="sqrt")]))
    assert _eval([_num(1000), FunctionToken(name="exp")]) == math.inf


def test_power_stays_real():
    assert math.isnan(_eval([_num(-8), _num(1 / 3), _op("^")]))
    assert _eval([_num(10), _num(400), _op("^")]) == math.inf


@pytest.mark.parametrize(
    "postfix",
    [
        [],
        [_num(1), _num(2)],
        [_num(1), _op("+")],
        [_op("*")],
        [FunctionToken(name="sin")],
        [FunctionToken(name="sin"), _num(0)],
        [_num(1), ParenthesisToken(symbol="(")],
    ],
)
def test_malformed_postfix(postfix):
    with pytest.raises(MalformedPostfixError):
        _eval(postfix)


def test_unknown_operator_and_function():
    with pytest.raises(UnknownOperatorError):
        _eval([_num(3), _num(4), _op("=")])
    with pytest.raises(UnknownFunctionError):
        _eval([_num(3), FunctionToken(name="sinh")])


def test_evaluation_never_writes_to_store():
    store = InMemoryVariableStore({"x": 2})

    _eval([VariableToken(name="x"), _num(3), _op("*")], store)

    assert store.snapshot() == {"x": 2.0}
