"""
dependencies.py — FastAPI dependency injection.
Each dependency hands out the shared object kept in Request.app.state.
"""
from __future__ import annotations

import threading

from fastapi import Request

from adapters.variable_store.memory_store import InMemoryVariableStore
from calculator import Calculator


def get_calculator(request: Request) -> Calculator:
    return request.app.state.calculator


def get_variable_store(request: Request) -> InMemoryVariableStore:
    return request.app.state.variable_store


def get_store_lock(request: Request) -> threading.Lock:
    return request.app.state.store_lock
