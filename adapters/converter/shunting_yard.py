"""
Adapter: ShuntingYardConverter
Implements the Converter port — Dijkstra's shunting-yard over the tokens of
one line, pulled lazily from a CharTokenizer.

  Number, Variable   → output
  Operator           → pop while top rank >= incoming rank, then push
                       (so every operator, '^' included, groups left to right)
  '('                → push
  ')'                → pop to output until '(' and discard it
  Assignment         → evaluate the rest of the line, store it, return [Number]
                       (chains deeper than max_assignment_depth are malformed)
  End                → drain the stack

Function tokens have two modes:
  defer_functions=True   pushed like a prefix operator ranked above '^',
                         emitted after their argument: sin(x) → x sin
  defer_functions=False  emitted on sight: sin(x) → sin x, which the
                         evaluator rejects as malformed
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from adapters.evaluator.postfix_evaluator import PostfixEvaluator
from adapters.operators import FUNCTION_PRECEDENCE, precedence
from adapters.tokenizer.char_tokenizer import CharTokenizer
from contracts import (
    AssignmentToken,
    Conversion,
    FunctionToken,
    MalformedPostfixError,
    NumberToken,
    OperatorToken,
    ParenthesisToken,
    Postfix,
    UnbalancedParenthesesError,
    VariableToken,
)
from ports.evaluator import Evaluator
from ports.tokenizer import Tokenizer
from ports.variable_store import VariableStore

logger = logging.getLogger("smart_calc.converter")

# Each chained "name =" costs a few Python frames; stay well below the interpreter limit
MAX_ASSIGNMENT_DEPTH = 100

_StackToken = Union[OperatorToken, FunctionToken, ParenthesisToken]


def _rank(token: _StackToken) -> int:
    if isinstance(token, OperatorToken):
        return precedence(token.symbol)
    if isinstance(token, FunctionToken):
        return FUNCTION_PRECEDENCE
    return 0


def _is_open(token: _StackToken) -> bool:
    return isinstance(token, ParenthesisToken) and token.symbol == "("


class ShuntingYardConverter:
    """Infix → postfix. Assignment runs the full pipeline on the rest of the line."""

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        defer_functions: bool = True,
        tokenizer_factory: Callable[[str], Tokenizer] = CharTokenizer,
        max_assignment_depth: int = MAX_ASSIGNMENT_DEPTH,
    ) -> None:
        self._evaluator = evaluator or PostfixEvaluator()
        self.defer_functions = defer_functions
        self._tokenizer_factory = tokenizer_factory
        self.max_assignment_depth = max_assignment_depth

    # -- Converter protocol --------------------------------------------------

    def to_postfix(self, line: str, store: VariableStore) -> Postfix:
        return self._convert(line, store, depth=0).postfix

    def convert(self, line: str, store: VariableStore) -> Conversion:
        return self._convert(line, store, depth=0)

    # -- Private -----------------------------------------------------------

    def _convert(self, line: str, store: VariableStore, depth: int) -> Conversion:
        output: Postfix = []
        stack: list[_StackToken] = []
        tokenizer = self._tokenizer_factory(line)

        for token in tokenizer:
            if isinstance(token, (NumberToken, VariableToken)):
                output.append(token)

            elif isinstance(token, FunctionToken):
                if self.defer_functions:
                    stack.append(token)
                else:
                    output.append(token)

            elif isinstance(token, OperatorToken):
                incoming = precedence(token.symbol)
                while stack and not _is_open(stack[-1]) and _rank(stack[-1]) >= incoming:
                    output.append(stack.pop())
                stack.append(token)

            elif isinstance(token, ParenthesisToken):
                if token.symbol == "(":
                    stack.append(token)
                else:
                    self._close_group(stack, output)

            elif isinstance(token, AssignmentToken):
                number = self._assign(token.name, tokenizer.remainder(), store, depth + 1)
                return Conversion(postfix=[number], assigned=token.name)

        while stack:
            top = stack.pop()
            if _is_open(top):
                raise UnbalancedParenthesesError("Missing ')' for '('")
            output.append(top)

        logger.debug("%r -> %s", line, [t.render() for t in output])
        return Conversion(postfix=output)

    def _close_group(self, stack: list[_StackToken], output: Postfix) -> None:
        while stack and not _is_open(stack[-1]):
            output.append(stack.pop())
        if not stack:
            raise UnbalancedParenthesesError("Unmatched ')'")
        stack.pop()  # '('
        if self.defer_functions and stack and isinstance(stack[-1], FunctionToken):
            output.append(stack.pop())

    def _assign(self, name: str, expression: str, store: VariableStore, depth: int) -> NumberToken:
        # raised before any level assigns, so the store stays untouched
        if depth > self.max_assignment_depth:
            raise MalformedPostfixError(
                f"Assignment nested too deeply (limit {self.max_assignment_depth})"
            )
        postfix = self._convert(expression, store, depth).postfix
        value = self._evaluator.eval_postfix(postfix, store)
        store.assign(name, value)
        logger.debug("assigned %s = %r", name, value)
        return NumberToken(value=value)
