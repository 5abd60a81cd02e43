"""
Router: GET /variables, DELETE /variables
Inspects or resets the application's variable store.
"""
from fastapi import APIRouter, Depends, Response

from api.dependencies import get_store_lock, get_variable_store
from api.schemas import JsonNumber, json_number

router = APIRouter(prefix="/variables", tags=["variables"])


@router.get("", response_model=dict[str, JsonNumber])
def list_variables(store=Depends(get_variable_store)) -> dict[str, JsonNumber]:
    return {name: json_number(value) for name, value in store.snapshot().items()}


@router.delete("", status_code=204)
def clear_variables(
    store=Depends(get_variable_store),
    lock=Depends(get_store_lock),
) -> Response:
    with lock:
        store.clear()
    return Response(status_code=204)
