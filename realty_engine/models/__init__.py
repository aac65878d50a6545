"""Domain models for the real-estate engine."""

from realty_engine.models.enums import (
    ROLE_PERMISSIONS,
    Permission,
    PriceComparison,
    ServiceType,
    UserRole,
)
from realty_engine.models.property import MIN_ADDRESS_LENGTH, Property, normalize_address

__all__ = [
    "MIN_ADDRESS_LENGTH",
    "Permission",
    "PriceComparison",
    "Property",
    "ROLE_PERMISSIONS",
    "ServiceType",
    "UserRole",
    "normalize_address",
]
