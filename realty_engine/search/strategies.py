"""Interchangeable search strategies over a radius-filtered snapshot."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from realty_engine.exceptions import InvalidArgumentError
from realty_engine.models import PriceComparison, Property
from realty_engine.search.distance import properties_in_radius
from realty_engine.store import PropertyCatalog


class SearchStrategy(ABC):
    """A search over the records within a radius of a center address."""

    def __init__(self, catalog: PropertyCatalog) -> None:
        self.catalog = catalog

    def in_radius(self, center: Sequence[int], radius: int) -> list[Property]:
        return properties_in_radius(self.catalog, center, radius)

    @abstractmethod
    def search(self, center: Sequence[int], radius: int) -> Any:
        """Run the search around ``center``."""


class SearchByStatusStrategy(SearchStrategy):
    """Keep records whose sold flag matches the target."""

    def __init__(self, catalog: PropertyCatalog, sold: bool) -> None:
        super().__init__(catalog)
        self.sold = bool(sold)

    def search(self, center: Sequence[int], radius: int) -> list[Property]:
        return [p for p in self.in_radius(center, radius) if p.sold == self.sold]


class SearchByPriceStrategy(SearchStrategy):
    """Keep records whose total price compares to a target.

    HIGHER and LOWER are strict; EQUAL is exact float equality.
    """

    def __init__(
        self,
        catalog: PropertyCatalog,
        target_price: float,
        comparison: PriceComparison,
    ) -> None:
        super().__init__(catalog)
        if target_price is None or target_price < 0:
            raise InvalidArgumentError("Price cannot be negative")
        if comparison is None:
            raise InvalidArgumentError("Price comparison type cannot be None")
        self.target_price = float(target_price)
        try:
            self.comparison = PriceComparison(comparison)
        except ValueError:
            raise InvalidArgumentError(f"Unknown price comparison: {comparison}") from None

    def search(self, center: Sequence[int], radius: int) -> list[Property]:
        return [p for p in self.in_radius(center, radius) if self._matches(p.total_price)]

    def _matches(self, price: float) -> bool:
        if self.comparison is PriceComparison.HIGHER:
            return price > self.target_price
        if self.comparison is PriceComparison.LOWER:
            return price < self.target_price
        return price == self.target_price


class SearchByAveragePriceStrategy(SearchStrategy):
    """Mean total price of the records in range, or 0.0 when there are none."""

    def search(self, center: Sequence[int], radius: int) -> float:
        found = self.in_radius(center, radius)
        if not found:
            return 0.0
        return sum(p.total_price for p in found) / len(found)
