"""
Port: Converter
Responsibility: infix line → postfix (RPN) token sequence; performs assignment.
"""
from typing import Protocol, runtime_checkable

from contracts import Conversion, Postfix
from ports.variable_store import VariableStore


@runtime_checkable
class Converter(Protocol):
    def to_postfix(self, line: str, store: VariableStore) -> Postfix:
        """
        Converts a whole input line to a postfix sequence ready for evaluation.

        If the line contains an assignment `name = expr`, the right-hand side is
        evaluated through the full pipeline, stored under `name`, and the result
        is returned as a single NumberToken. Tokens seen before the assignment
        are discarded.

        Raises UnexpectedCharacterError (from the tokenizer) and
        UnbalancedParenthesesError; MalformedPostfixError when assignments are
        chained deeper than the converter allows. Errors from evaluating an
        assignment's right-hand side propagate unchanged and leave `store`
        untouched.
        """
        ...

    def convert(self, line: str, store: VariableStore) -> Conversion:
        """Same as to_postfix(), also reporting the name the line assigned to."""
        ...
