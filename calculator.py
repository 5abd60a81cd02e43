"""
calculator.py — the evaluation pipeline wired together.

    line → CharTokenizer → ShuntingYardConverter → postfix → PostfixEvaluator → float

The variable store is owned by the caller and passed into every call, so
state persists exactly as long as the caller keeps the store around.
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.converter.shunting_yard import ShuntingYardConverter
from adapters.evaluator.postfix_evaluator import PostfixEvaluator
from config import Settings
from contracts import EvalResult, render_postfix
from ports.converter import Converter
from ports.evaluator import Evaluator
from ports.variable_store import VariableStore

logger = logging.getLogger("smart_calc.calculator")


class Calculator:
    def __init__(
        self,
        converter: Optional[Converter] = None,
        evaluator: Optional[Evaluator] = None,
        defer_functions: bool = True,
    ) -> None:
        self.evaluator = evaluator or PostfixEvaluator()
        self.converter = converter or ShuntingYardConverter(
            evaluator=self.evaluator,
            defer_functions=defer_functions,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Calculator":
        return cls(defer_functions=settings.defer_functions)

    def evaluate(self, line: str, store: VariableStore) -> float:
        """Evaluates one input line. Raises CalculatorError on failure."""
        postfix = self.converter.to_postfix(line, store)
        return self.evaluator.eval_postfix(postfix, store)

    def run(self, line: str, store: VariableStore) -> EvalResult:
        """Like evaluate(), but also reports the postfix form and the assigned name."""
        conversion = self.converter.convert(line, store)
        value = self.evaluator.eval_postfix(conversion.postfix, store)
        logger.debug("%r = %r (%d variables bound)", line, value, len(store))
        return EvalResult(
            value=value,
            postfix=render_postfix(conversion.postfix),
            assigned=conversion.assigned,
        )


_DEFAULT = Calculator()


def evaluate(line: str, store: VariableStore) -> float:
    """Module-level entry point with the default pipeline."""
    return _DEFAULT.evaluate(line, store)
