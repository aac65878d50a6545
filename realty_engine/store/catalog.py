"""In-memory property catalog with address uniqueness."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from realty_engine.exceptions import (
    DuplicateAddressError,
    InvalidArgumentError,
    PropertyNotFoundError,
)
from realty_engine.formatting import format_address
from realty_engine.loaders import PropertyFileReader, find_duplicate_addresses
from realty_engine.models import Property, normalize_address
from realty_engine.notifications import DeletionNotifier

logger = logging.getLogger(__name__)


@dataclass
class PropertyCatalog:
    """Single source of truth for the properties on offer.

    Records are kept in insertion order and no two share an address. Reads
    hand out copies; the only ways to change stored state are ``add``,
    ``load``, ``update``, ``remove`` and ``mark_sold``.
    """

    properties: list[Property] = field(default_factory=list)
    deletion_notifier: DeletionNotifier = field(default_factory=DeletionNotifier)
    reader: PropertyFileReader = field(default_factory=PropertyFileReader, repr=False)

    def __post_init__(self) -> None:
        seeded, self.properties = self.properties, []
        for prop in seeded:
            self.add(prop)

    def add(self, prop: Property) -> None:
        """Add a property to the catalog."""
        if prop is None:
            raise InvalidArgumentError("Property cannot be None")
        if self._index_of(prop.address) is not None:
            raise DuplicateAddressError(
                f"Property already exists at address {format_address(prop.address)}",
                addresses=[list(prop.address)],
            )
        self.properties.append(prop.copy())
        logger.debug(
            "Added property at %s", list(prop.address), extra={"address": list(prop.address)}
        )

    def load(self, file_path: str | Path | None) -> list[Property]:
        """Bulk-load properties from a file, appending to what is stored.

        A malformed line fails the whole file and nothing is added. A line
        whose address repeats an earlier line, or a stored record, is
        discarded; the remaining lines are added and then
        ``DuplicateAddressError`` is raised naming the discarded addresses.

        Parameters
        ----------
        file_path : str | Path | None
            Path to a file in the property line format.

        Returns
        -------
        list[Property]
            Copies of the records that were added.
        """
        records = self.reader.read(file_path)

        stored = [p.address for p in self.properties]
        dup_idx = set(find_duplicate_addresses(records, existing=stored))
        accepted = [r for i, r in enumerate(records) if i not in dup_idx]
        discarded = [r for i, r in enumerate(records) if i in dup_idx]

        self.properties.extend(accepted)
        logger.info(
            "Loaded %d properties from %s",
            len(accepted),
            file_path,
            extra={"count": len(accepted), "source": str(file_path)},
        )

        if discarded:
            shown = ", ".join(format_address(r.address) for r in discarded)
            logger.warning("Discarded %d duplicate address(es) from %s", len(discarded), file_path)
            raise DuplicateAddressError(
                f"Duplicate address found and removed: {shown}",
                addresses=[list(r.address) for r in discarded],
            )
        return [p.copy() for p in accepted]

    def list_all(self) -> list[Property]:
        """Snapshot of every record; changing it never touches the catalog."""
        return [p.copy() for p in self.properties]

    def find(self, address: Sequence[int] | None) -> Property | None:
        """Copy of the record stored at exactly ``address``, or None."""
        idx = self._index_of(normalize_address(address))
        return None if idx is None else self.properties[idx].copy()

    def remove(self, address: Sequence[int] | None) -> bool:
        """Remove the record stored at exactly ``address``.

        Listeners on ``deletion_notifier`` are told only when a record was
        removed.

        Returns
        -------
        bool
            Whether a record was removed.
        """
        key = normalize_address(address)
        idx = self._index_of(key)
        if idx is None:
            return False
        del self.properties[idx]
        logger.info("Removed property at %s", list(key), extra={"address": list(key)})
        self.deletion_notifier.notify(key)
        return True

    def update(self, address: Sequence[int] | None, updated: Property | None) -> bool:
        """Replace the record at ``address`` with ``updated``.

        Raises
        ------
        InvalidArgumentError
            If either argument is missing or the address is too short.
        DuplicateAddressError
            If the address is changing to one already held by another record.

        Returns
        -------
        bool
            Whether a record was found and replaced.
        """
        if address is None or updated is None:
            raise InvalidArgumentError("Address and updated property cannot be None")
        key = normalize_address(address)

        if updated.address != key and self._index_of(updated.address) is not None:
            raise DuplicateAddressError(
                "Cannot update: new address already exists",
                addresses=[list(updated.address)],
            )

        idx = self._index_of(key)
        if idx is None:
            return False
        self.properties[idx] = updated.copy()
        logger.info("Updated property at %s", list(key), extra={"address": list(key)})
        return True

    def mark_sold(self, address: Sequence[int]) -> Property:
        """Flip the stored record at ``address`` to sold and return a copy."""
        key = normalize_address(address)
        idx = self._index_of(key)
        if idx is None:
            raise PropertyNotFoundError(f"No property at address {format_address(key)}")
        self.properties[idx].sold = True
        return self.properties[idx].copy()

    def summary(self) -> dict[str, int]:
        """Return counts of stored, sold and unsold records."""
        sold = sum(1 for p in self.properties if p.sold)
        return {
            "properties": len(self.properties),
            "sold": sold,
            "unsold": len(self.properties) - sold,
        }

    def __len__(self) -> int:
        return len(self.properties)

    def __contains__(self, address: object) -> bool:
        try:
            return self._index_of(normalize_address(address)) is not None  # type: ignore[arg-type]
        except InvalidArgumentError:
            return False

    def _index_of(self, address: tuple[int, ...]) -> int | None:
        for idx, prop in enumerate(self.properties):
            if prop.address == address:
                return idx
        return None
