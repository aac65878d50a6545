"""Holder for the currently selected search strategy."""

from typing import Any, Sequence

from realty_engine.exceptions import InvalidArgumentError, InvalidStateError
from realty_engine.search.strategies import SearchStrategy


class PropertySearchContext:
    """Runs searches through a strategy that can be swapped at runtime."""

    def __init__(self, strategy: SearchStrategy | None = None) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> SearchStrategy | None:
        return self._strategy

    def set_strategy(self, strategy: SearchStrategy | None) -> None:
        if strategy is None:
            raise InvalidArgumentError("Search strategy cannot be None")
        self._strategy = strategy

    def search(self, center: Sequence[int], radius: int) -> Any:
        if self._strategy is None:
            raise InvalidStateError("Search strategy not set")
        return self._strategy.search(center, radius)
