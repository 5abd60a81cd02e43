"""
api/main.py — FastAPI entry point.

Lifespan:
  - Builds the Calculator from Settings (defer_functions)
  - Creates the single InMemoryVariableStore shared by every request,
    guarded by a lock so only one evaluation writes at a time
  - Drops the store on shutdown; nothing is persisted

Run (needs the "serve" extra):
    uvicorn api.main:app --reload
"""
from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.variable_store.memory_store import InMemoryVariableStore
from api.routers import evaluate, variables
from api.schemas import HealthResponse
from calculator import Calculator
from config import Settings
from contracts import CalculatorError

logger = logging.getLogger("smart_calc")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    app.state.calculator = Calculator.from_settings(settings)
    app.state.variable_store = InMemoryVariableStore()
    app.state.store_lock = threading.Lock()

    logger.info("SmartCalc API ready (defer_functions=%s).", settings.defer_functions)
    yield

    logger.info("Shutting down, dropping %d variables.", len(app.state.variable_store))
    app.state.variable_store.clear()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(variables.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        return HealthResponse(
            status="ok",
            version=settings.app_version,
            variables=len(request.app.state.variable_store),
        )

    # Global error handler
    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "kind": exc.kind.value},
        )

    return app


app = create_app()
