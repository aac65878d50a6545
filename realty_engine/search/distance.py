"""Grid distance and radius filtering over the catalog."""

from typing import Sequence

from realty_engine.exceptions import InvalidArgumentError
from realty_engine.models import Property, normalize_address
from realty_engine.store import PropertyCatalog


def manhattan_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """Street/avenue distance between two addresses; subdivisions are ignored."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def properties_in_radius(
    catalog: PropertyCatalog,
    center: Sequence[int] | None,
    radius: int,
) -> list[Property]:
    """Return copies of every record within ``radius`` of ``center``.

    Parameters
    ----------
    catalog : PropertyCatalog
        Catalog to read a snapshot from.
    center : Sequence[int] | None
        Center address; only its first two coordinates matter.
    radius : int
        Maximum Manhattan distance, inclusive. Zero matches records on the
        same street and avenue as ``center``.

    Raises
    ------
    InvalidArgumentError
        If the center is missing or too short, or the radius is negative.
    """
    center = normalize_address(center, what="Center address")
    if radius is None or radius < 0:
        raise InvalidArgumentError("Radius cannot be negative")
    return [p for p in catalog.list_all() if manhattan_distance(center, p.address) <= radius]
