"""Reader for the line-oriented property file format.

Each non-blank line describes one property with four whitespace-separated
fields::

    <comma-separated address ints> <area> <price per sqm> <sold>

Example::

    4,5,1,1 80 10000 true
"""

import logging
from pathlib import Path
from typing import Iterable

from realty_engine.exceptions import (
    CatalogIOError,
    InvalidArgumentError,
    PropertyParseError,
)
from realty_engine.models import Property

logger = logging.getLogger(__name__)

FIELD_COUNT = 4


def parse_property_line(line: str) -> Property:
    """Parse one line of the property file format.

    Parameters
    ----------
    line : str
        A single record line.

    Returns
    -------
    Property
        Parsed property.

    Raises
    ------
    PropertyParseError
        If the field count is wrong, a number does not parse, the address has
        fewer than two coordinates or a value is out of range.
    """
    parts = line.split()
    if len(parts) != FIELD_COUNT:
        raise PropertyParseError(
            f"Invalid property format: expected {FIELD_COUNT} parts but found {len(parts)}"
        )

    raw_address, raw_area, raw_price, raw_sold = parts
    coords = raw_address.split(",")
    if len(coords) < 2:
        raise PropertyParseError("Address must contain at least street and avenue coordinates")

    try:
        address = [int(c) for c in coords]
        area = float(raw_area)
        price = float(raw_price)
    except ValueError as e:
        raise PropertyParseError(f"Error parsing numeric values: {e}") from e

    try:
        return Property(address, area, price, sold=raw_sold.lower() == "true")
    except InvalidArgumentError as e:
        raise PropertyParseError(str(e)) from e


def parse_property_lines(lines: Iterable[str]) -> list[Property]:
    """Parse every non-blank line, failing the whole batch on the first error."""
    records = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            records.append(parse_property_line(line))
        except PropertyParseError as e:
            raise PropertyParseError(f"Line {lineno}: {e}") from e
    return records


def find_duplicate_addresses(
    records: list[Property], existing: Iterable[tuple[int, ...]] = ()
) -> list[int]:
    """Return indices of records whose address appeared earlier or in ``existing``."""
    seen: set[tuple[int, ...]] = set(existing)
    duplicates = []
    for idx, record in enumerate(records):
        if record.address in seen:
            duplicates.append(idx)
        else:
            seen.add(record.address)
    return duplicates


class PropertyFileReader:
    """Read property records from text files."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, file_path: str | Path | None) -> list[Property]:
        """Read and parse every property in a file.

        Parameters
        ----------
        file_path : str | Path | None
            Path to the property file.

        Returns
        -------
        list[Property]
            Parsed records in file order; duplicates are not checked here.

        Raises
        ------
        InvalidArgumentError
            If ``file_path`` is None.
        CatalogIOError
            If the file cannot be read.
        PropertyParseError
            If any line is malformed.
        """
        if file_path is None:
            raise InvalidArgumentError("File path cannot be None")

        path = Path(file_path)
        try:
            with open(path, encoding=self.encoding) as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogIOError(f"Error reading from file: {e}") from e

        records = parse_property_lines(lines)
        logger.debug("Parsed %d properties from %s", len(records), path)
        return records
