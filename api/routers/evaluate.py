"""
Router: POST /evaluate
Evaluates one line against the application's variable store.
Calculator errors surface as 422 through the handler in api/main.py.
"""
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_calculator, get_store_lock, get_variable_store
from api.schemas import ErrorResponse, EvaluateRequest, EvaluateResponse, json_number
from contracts import CalculatorError

logger = logging.getLogger("smart_calc.api")

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse, responses={422: {"model": ErrorResponse}})
def evaluate(
    body: EvaluateRequest,
    calculator=Depends(get_calculator),
    store=Depends(get_variable_store),
    lock=Depends(get_store_lock),
) -> EvaluateResponse:
    with lock:
        try:
            result = calculator.run(body.expression, store)
        except CalculatorError as exc:
            logger.warning("Evaluation of %r failed: %s", body.expression, exc)
            raise
    return EvaluateResponse(
        expression=body.expression,
        result=json_number(result.value),
        postfix=result.postfix,
        assigned=result.assigned,
    )
