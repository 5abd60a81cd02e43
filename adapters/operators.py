"""
Operator tables shared by the converter and the evaluator.

PRECEDENCES — immutable operator → rank table; anything missing ranks 0
FUNCTIONS   — immutable registry of unary functions (log = natural log)

Arithmetic goes through numpy under np.errstate(all="ignore"): domain errors
and overflow come back as nan / ±inf instead of raising, and negative bases
with fractional exponents stay real (nan), never complex.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

import numpy as np

from contracts import DivisionByZeroError, UnknownFunctionError, UnknownOperatorError

PRECEDENCES: Mapping[str, int] = MappingProxyType({
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "^": 3,
})

# Deferred function tokens bind tighter than every binary operator
FUNCTION_PRECEDENCE = max(PRECEDENCES.values()) + 1

FUNCTIONS: Mapping[str, Callable] = MappingProxyType({
    "sin":  np.sin,
    "cos":  np.cos,
    "tan":  np.tan,
    "log":  np.log,
    "sqrt": np.sqrt,
    "exp":  np.exp,
})


def precedence(symbol: str) -> int:
    return PRECEDENCES.get(symbol, 0)


def _safe_div(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return np.float64(a) / np.float64(b)


_OP_FUNCS: Mapping[str, Callable[[float, float], float]] = MappingProxyType({
    "+": lambda a, b: np.float64(a) + np.float64(b),
    "-": lambda a, b: np.float64(a) - np.float64(b),
    "*": lambda a, b: np.float64(a) * np.float64(b),
    "/": _safe_div,
    "^": lambda a, b: np.power(np.float64(a), np.float64(b)),
})


def apply_operator(symbol: str, left: float, right: float) -> float:
    fn = _OP_FUNCS.get(symbol)
    if fn is None:
        raise UnknownOperatorError(symbol)
    with np.errstate(all="ignore"):
        return float(fn(left, right))


def apply_function(name: str, arg: float) -> float:
    fn = FUNCTIONS.get(name)
    if fn is None:
        raise UnknownFunctionError(name)
    with np.errstate(all="ignore"):
        return float(fn(np.float64(arg)))
