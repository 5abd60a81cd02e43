"""
Adapter: InMemoryVariableStore
Implements the VariableStore port with a plain dict. Lives as long as its
owner (CLI session, API app); nothing is persisted.
"""
from __future__ import annotations

from typing import Optional


class InMemoryVariableStore:
    def __init__(self, initial: Optional[dict[str, float]] = None) -> None:
        self._values: dict[str, float] = dict(initial or {})

    # -- VariableStore protocol ------------------------------------------

    def lookup(self, name: str) -> Optional[float]:
        return self._values.get(name)

    def assign(self, name: str, value: float) -> None:
        self._values[name] = float(value)

    def names(self) -> list[str]:
        return list(self._values)

    def snapshot(self) -> dict[str, float]:
        return dict(self._values)

    def clear(self) -> None:
        self._values.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"InMemoryVariableStore({self._values!r})"
