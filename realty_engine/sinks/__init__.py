"""Output sinks for exporting catalog snapshots."""

from realty_engine.sinks.console import ConsoleSink
from realty_engine.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
