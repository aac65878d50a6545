"""Property record for the catalog."""

import math
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Sequence

from realty_engine.exceptions import InvalidArgumentError
from realty_engine.formatting import format_address, format_bool, format_number

MIN_ADDRESS_LENGTH = 2


def normalize_address(address: Sequence[int] | None, what: str = "Address") -> tuple[int, ...]:
    """Copy an address into an immutable tuple, validating its length.

    Parameters
    ----------
    address : Sequence[int] | None
        Street and avenue coordinates followed by optional subdivisions.
    what : str
        Name used in the error message.

    Returns
    -------
    tuple[int, ...]
        Independent copy of the address.

    Raises
    ------
    InvalidArgumentError
        If the address is missing or has fewer than two coordinates.
    """
    if address is None:
        raise InvalidArgumentError(f"{what} cannot be None")
    try:
        coords = tuple(int(part) for part in address)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{what} must be a sequence of integers") from e
    if len(coords) < MIN_ADDRESS_LENGTH:
        raise InvalidArgumentError(
            f"{what} must contain at least street and avenue coordinates"
        )
    return coords


def _positive(value: Any, label: str) -> float:
    # bool is a Real subclass but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{label} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgumentError(f"{label} must be positive")
    return value


@dataclass
class Property:
    """Real estate property for sale.

    The address is fixed at construction; area and price per square meter
    are positive and ``sold`` only ever moves from ``False`` to ``True``
    through a completed deal (or an explicit update/bulk load).
    """

    address: tuple[int, ...]
    area: float  # Square meters
    price_per_square_meter: float
    sold: bool = False
    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", normalize_address(self.address))
        self.area = _positive(self.area, "Area")
        self.price_per_square_meter = _positive(
            self.price_per_square_meter, "Price per square meter"
        )
        self.sold = bool(self.sold)
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "address" and getattr(self, "_frozen", False):
            raise AttributeError("Property address cannot be changed")
        super().__setattr__(name, value)

    @property
    def total_price(self) -> float:
        """Area times price per square meter."""
        return self.area * self.price_per_square_meter

    def get_address(self) -> list[int]:
        """Return a mutable copy of the address."""
        return list(self.address)

    def copy(self) -> "Property":
        """Return an independent copy of this record."""
        return replace(self)

    def __str__(self) -> str:
        return (
            f"address: {format_address(self.address)}"
            f" area: {format_number(self.area)}"
            f" pricePerSquareMeter: {format_number(self.price_per_square_meter)}"
            f" status: {format_bool(self.sold)}"
        )
