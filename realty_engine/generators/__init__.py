"""Sample data generators."""

from realty_engine.generators.property import (
    ParticipantGenerator,
    PropertyGenerator,
    format_property_line,
    write_property_file,
)

__all__ = [
    "ParticipantGenerator",
    "PropertyGenerator",
    "format_property_line",
    "write_property_file",
]
