"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from realty_engine.models import Property


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, Property):
        return property_to_dict(obj)
    elif is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def property_to_dict(prop: Property) -> dict:
    """Property fields plus the derived total price."""
    return {
        "address": list(prop.address),
        "area": prop.area,
        "price_per_square_meter": prop.price_per_square_meter,
        "sold": prop.sold,
        "total_price": prop.total_price,
    }


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass to a dict of its public, repr-visible fields.

    Back-references such as a participant's catalog are declared with
    ``repr=False`` and are skipped.
    """
    return {
        f.name: serialize_value(getattr(obj, f.name))
        for f in fields(obj)
        if f.repr and not f.name.startswith("_")
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Property):
        return property_to_dict(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, Path):
        return str(value)
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
