"""
Port: VariableStore
Responsibility: identifier → last assigned value, kept alive by the caller
across successive evaluations.
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class VariableStore(Protocol):
    def lookup(self, name: str) -> Optional[float]:
        """Returns the value bound to `name`, or None if it was never assigned."""
        ...

    def assign(self, name: str, value: float) -> None:
        """Creates or overwrites the binding for `name`."""
        ...

    def names(self) -> list[str]:
        """Bound identifiers in assignment order."""
        ...

    def snapshot(self) -> dict[str, float]:
        """Returns a copy of all bindings; mutating it does not touch the store."""
        ...

    def clear(self) -> None:
        """Drops every binding. Never called by the evaluation pipeline itself."""
        ...

    def __contains__(self, name: object) -> bool:
        ...

    def __len__(self) -> int:
        ...
