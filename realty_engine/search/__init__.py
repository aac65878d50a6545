"""Radius searches over the property catalog."""

from realty_engine.search.context import PropertySearchContext
from realty_engine.search.distance import manhattan_distance, properties_in_radius
from realty_engine.search.strategies import (
    SearchByAveragePriceStrategy,
    SearchByPriceStrategy,
    SearchByStatusStrategy,
    SearchStrategy,
)

__all__ = [
    "PropertySearchContext",
    "SearchByAveragePriceStrategy",
    "SearchByPriceStrategy",
    "SearchByStatusStrategy",
    "SearchStrategy",
    "manhattan_distance",
    "properties_in_radius",
]
