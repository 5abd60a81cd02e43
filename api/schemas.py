"""
schemas.py — FastAPI request/response models.
Kept apart from contracts.py so the API can evolve independently.
"""
from __future__ import annotations

import math
from typing import Optional, Union

from pydantic import BaseModel, Field

from contracts import ErrorKind

# JSON has no nan/inf; non-finite results travel as "nan", "inf", "-inf"
JsonNumber = Union[float, str]


def json_number(value: float) -> JsonNumber:
    if math.isfinite(value):
        return value
    return str(value)


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(..., max_length=4096)


class EvaluateResponse(BaseModel):
    expression: str
    result: JsonNumber
    postfix: list[str]
    assigned: Optional[str] = None  # variable name for "x = ..." lines


class ErrorResponse(BaseModel):
    detail: str
    kind: ErrorKind


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
    variables: int
