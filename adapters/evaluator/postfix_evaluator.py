"""
Adapter: PostfixEvaluator
Implements the Evaluator port — reduces an RPN token sequence with an
explicit operand stack.

  Number    → push value
  Variable  → push store value (UndefinedVariableError if unbound)
  Operator  → pop right, pop left, push left <op> right
  Function  → pop one, push f(x)

Exactly one value has to remain at the end.
"""
from __future__ import annotations

import logging

from adapters.operators import apply_function, apply_operator
from contracts import (
    FunctionToken,
    MalformedPostfixError,
    NumberToken,
    OperatorToken,
    Postfix,
    UndefinedVariableError,
    VariableToken,
)
from ports.variable_store import VariableStore

logger = logging.getLogger("smart_calc.evaluator")


class PostfixEvaluator:
    """Stack machine over postfix sequences. Never writes to the store."""

    # -- Evaluator protocol --------------------------------------------------

    def eval_postfix(self, postfix: Postfix, store: VariableStore) -> float:
        stack: list[float] = []

        for token in postfix:
            if isinstance(token, NumberToken):
                stack.append(token.value)

            elif isinstance(token, VariableToken):
                value = store.lookup(token.name)
                if value is None:
                    raise UndefinedVariableError(token.name)
                stack.append(value)

            elif isinstance(token, OperatorToken):
                if len(stack) < 2:
                    raise MalformedPostfixError(
                        f"Operator '{token.symbol}' needs two operands, got {len(stack)}"
                    )
                right = stack.pop()
                left = stack.pop()
                stack.append(apply_operator(token.symbol, left, right))

            elif isinstance(token, FunctionToken):
                if not stack:
                    raise MalformedPostfixError(f"Function '{token.name}' has no argument")
                stack.append(apply_function(token.name, stack.pop()))

            else:
                raise MalformedPostfixError(f"Unexpected token in postfix: {token.render()!r}")

        if len(stack) != 1:
            raise MalformedPostfixError(
                f"Expression left {len(stack)} values on the stack, expected 1"
            )

        logger.debug("postfix %s -> %r", [t.render() for t in postfix], stack[0])
        return stack[0]
