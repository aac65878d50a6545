"""Bulk loading of property records."""

from realty_engine.loaders.property_file import (
    PropertyFileReader,
    find_duplicate_addresses,
    parse_property_line,
    parse_property_lines,
)

__all__ = [
    "PropertyFileReader",
    "find_duplicate_addresses",
    "parse_property_line",
    "parse_property_lines",
]
