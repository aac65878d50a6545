"""Enumeration types for the real-estate domain."""

from enum import Enum, Flag, auto

from realty_engine.exceptions import InvalidArgumentError


class UserRole(str, Enum):
    BUYER = "BUYER"
    SELLER = "SELLER"
    BROKER = "BROKER"


class Permission(Flag):
    """Capabilities a participant may exercise on the catalog."""

    NONE = 0
    VIEW = auto()
    EDIT = auto()
    DELETE = auto()


ROLE_PERMISSIONS: dict[UserRole, Permission] = {
    UserRole.BUYER: Permission.VIEW,
    UserRole.SELLER: Permission.VIEW | Permission.DELETE,
    UserRole.BROKER: Permission.VIEW | Permission.EDIT,
}


class PriceComparison(str, Enum):
    HIGHER = "HIGHER"
    LOWER = "LOWER"
    EQUAL = "EQUAL"


class ServiceType(str, Enum):
    """Optional add-on services a buyer can attach to a deal."""

    EVENING = "EVENING"
    CLEANING = "CLEANING"
    MOVING = "MOVING"
    DESIGN = "DESIGN"

    @classmethod
    def parse(cls, token: str) -> "ServiceType":
        """Resolve a requested service name, ignoring case.

        Raises
        ------
        InvalidArgumentError
            If the token names no known service.
        """
        try:
            return cls(str(token).upper())
        except ValueError:
            raise InvalidArgumentError(f"Unknown service: {token}") from None
