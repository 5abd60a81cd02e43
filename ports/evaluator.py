"""
Port: Evaluator
Responsibility: deterministic reduction of a postfix sequence to a single number.
"""
from typing import Protocol, runtime_checkable

from contracts import Postfix
from ports.variable_store import VariableStore


@runtime_checkable
class Evaluator(Protocol):
    def eval_postfix(self, postfix: Postfix, store: VariableStore) -> float:
        """
        Evaluates a postfix sequence with an operand stack.
        Variables are read from `store`; the store is never written here.

        Raises UndefinedVariableError for unbound variables,
        DivisionByZeroError when the right operand of '/' is zero,
        MalformedPostfixError when operands are missing or more than one
        value remains, UnknownOperatorError / UnknownFunctionError for
        symbols outside the operator table / function registry.
        """
        ...
