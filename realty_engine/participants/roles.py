"""Buyers, sellers and brokers acting on a catalog."""

from dataclasses import dataclass, field
from typing import Sequence

from realty_engine.exceptions import InvalidArgumentError
from realty_engine.formatting import format_address
from realty_engine.models import ROLE_PERMISSIONS, Permission, Property, UserRole, normalize_address
from realty_engine.notifications import PropertyDeletionListener
from realty_engine.store import PropertyCatalog


@dataclass
class Participant:
    """Someone taking part in a deal, identified by id within a role."""

    user_id: int
    catalog: PropertyCatalog = field(repr=False, compare=False)
    name: str | None = None

    role: UserRole = field(init=False, default=UserRole.BUYER)

    def __post_init__(self) -> None:
        if self.user_id is None or self.user_id < 0:
            raise InvalidArgumentError("User ID cannot be negative")

    @property
    def permissions(self) -> Permission:
        return ROLE_PERMISSIONS[self.role]

    def can(self, permission: Permission) -> bool:
        return permission in self.permissions

    def view_property(self, address: Sequence[int] | None) -> Property | None:
        """Look up one property, printing it when found."""
        if address is None:
            raise InvalidArgumentError("Address cannot be None")
        found = self.catalog.find(address)
        if found is not None:
            print(f"Property found: {found}")
        return found

    def view_all_properties(self) -> list[Property]:
        return self.catalog.list_all()

    def __str__(self) -> str:
        label = self.role.value.capitalize()
        return f"{label} {self.user_id}" + (f" ({self.name})" if self.name else "")


@dataclass
class Buyer(Participant):
    role: UserRole = field(init=False, default=UserRole.BUYER)


@dataclass
class Broker(Participant):
    """Manages deals, may edit listings and hears about deletions."""

    role: UserRole = field(init=False, default=UserRole.BROKER)

    def edit_property(self, address: Sequence[int], updated: Property) -> bool:
        return self.catalog.update(address, updated)

    def on_property_deleted(self, address: list[int]) -> None:
        print(f"Notification: Property at address {format_address(address)} has been deleted")


@dataclass
class Seller(Participant):
    """Offers properties and may withdraw them from the catalog."""

    role: UserRole = field(init=False, default=UserRole.SELLER)
    listener: PropertyDeletionListener | None = field(
        init=False, default=None, repr=False, compare=False
    )

    def set_listener(self, listener: PropertyDeletionListener) -> None:
        """Register who to tell about deletions; a later call replaces it."""
        self.listener = listener

    def delete_property(self, address: Sequence[int]) -> bool:
        """Remove a property and notify the listener if one was removed."""
        key = normalize_address(address)
        deleted = self.catalog.remove(key)
        if deleted and self.listener is not None:
            self.listener.on_property_deleted(list(key))
        return deleted
