"""Sample property and participant generation."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from realty_engine.exceptions import InvalidArgumentError
from realty_engine.formatting import format_bool
from realty_engine.generators.base import BaseGenerator
from realty_engine.models import Property, UserRole
from realty_engine.participants import Participant, ParticipantFactory


class PropertyGenerator(BaseGenerator):
    """Generate properties with unique addresses on a square street grid.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    grid_size : int
        Streets and avenues are drawn from ``0..grid_size-1``.
    max_subdivisions : int
        Maximum number of sub-unit coordinates appended to an address.
    sold_rate : float
        Probability that a generated property starts out sold.
    """

    AREA_RANGE = (35, 250)  # Square meters
    PRICE_RANGE = (3000, 15000)  # Per square meter

    def __init__(
        self,
        seed: int | None = None,
        grid_size: int = 20,
        max_subdivisions: int = 2,
        sold_rate: float = 0.2,
    ) -> None:
        super().__init__(seed)
        if grid_size < 1:
            raise InvalidArgumentError("Grid size must be positive")
        self.grid_size = grid_size
        self.max_subdivisions = max_subdivisions
        self.sold_rate = sold_rate
        self._used: set[tuple[int, ...]] = set()

    def generate(self) -> Property:
        """Generate a single property at an address not handed out before."""
        for _ in range(1000):
            address = self._random_address()
            if address not in self._used:
                self._used.add(address)
                break
        else:
            raise InvalidArgumentError("Address grid exhausted; increase grid_size")

        return Property(
            address=address,
            area=float(self.random.randint(*self.AREA_RANGE)),
            price_per_square_meter=float(self.random.randrange(*self.PRICE_RANGE, 250)),
            sold=self.random.random() < self.sold_rate,
        )

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate ``count`` properties."""
        for _ in range(count):
            yield self.generate()

    def _random_address(self) -> tuple[int, ...]:
        street = self.random.randrange(self.grid_size)
        avenue = self.random.randrange(self.grid_size)
        depth = self.random.randint(0, self.max_subdivisions)
        return (street, avenue) + tuple(self.random.randint(1, 9) for _ in range(depth))


class ParticipantGenerator(BaseGenerator):
    """Create named buyers, sellers and brokers through a factory."""

    def create(self, factory: ParticipantFactory, role: UserRole | str, user_id: int) -> Participant:
        """Create one participant with a generated display name."""
        return factory.create(role, user_id, name=self.fake.name())

    def populate(
        self,
        factory: ParticipantFactory,
        counts: dict[UserRole, int],
        start_id: int = 1,
    ) -> list[Participant]:
        """Create ``counts[role]`` participants per role with sequential ids."""
        created = []
        next_id = start_id
        for role, count in counts.items():
            for _ in range(count):
                created.append(self.create(factory, role, next_id))
                next_id += 1
        return created


def format_property_line(prop: Property) -> str:
    """Render a property in the bulk-load line format."""
    address = ",".join(str(c) for c in prop.address)
    return f"{address} {prop.area!r} {prop.price_per_square_meter!r} {format_bool(prop.sold)}"


def write_property_file(records: Iterable[Property], path: str | Path) -> int:
    """Write properties in the bulk-load format; returns the number written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for prop in records:
            f.write(format_property_line(prop) + "\n")
            count += 1
    return count
