"""Factory that registers participants and wires deletion listeners."""

import logging

from realty_engine.exceptions import DuplicateEntityError, InvalidArgumentError
from realty_engine.models import UserRole
from realty_engine.participants.roles import Broker, Buyer, Participant, Seller
from realty_engine.store import PropertyCatalog

logger = logging.getLogger(__name__)

_ROLE_CLASSES: dict[UserRole, type[Participant]] = {
    UserRole.BUYER: Buyer,
    UserRole.SELLER: Seller,
    UserRole.BROKER: Broker,
}


class ParticipantFactory:
    """Create participants bound to one catalog, unique by id within a role.

    Parameters
    ----------
    catalog : PropertyCatalog
        Catalog every created participant acts on.
    """

    def __init__(self, catalog: PropertyCatalog) -> None:
        self.catalog = catalog
        self._registry: dict[UserRole, dict[int, Participant]] = {role: {} for role in UserRole}

    def create(self, role: UserRole | str, user_id: int, name: str | None = None) -> Participant:
        """Create and register a participant.

        Raises
        ------
        InvalidArgumentError
            If the role is unknown or the id is negative.
        DuplicateEntityError
            If the id is already taken within the role.
        """
        try:
            role = UserRole(role)
        except ValueError:
            raise InvalidArgumentError(f"Unknown user role: {role}") from None

        registry = self._registry[role]
        label = role.value.capitalize()
        if user_id in registry:
            raise DuplicateEntityError(f"{label} with ID {user_id} already exists.")

        participant = _ROLE_CLASSES[role](user_id, self.catalog, name)
        registry[user_id] = participant
        print(f"{label} created with ID: {participant.user_id}")
        return participant

    def create_buyer(self, user_id: int, name: str | None = None) -> Buyer:
        return self.create(UserRole.BUYER, user_id, name)  # type: ignore[return-value]

    def create_seller(self, user_id: int, name: str | None = None) -> Seller:
        return self.create(UserRole.SELLER, user_id, name)  # type: ignore[return-value]

    def create_broker(self, user_id: int, name: str | None = None) -> Broker:
        return self.create(UserRole.BROKER, user_id, name)  # type: ignore[return-value]

    @property
    def buyers(self) -> list[Buyer]:
        return list(self._registry[UserRole.BUYER].values())  # type: ignore[arg-type]

    @property
    def sellers(self) -> list[Seller]:
        return list(self._registry[UserRole.SELLER].values())  # type: ignore[arg-type]

    @property
    def brokers(self) -> list[Broker]:
        return list(self._registry[UserRole.BROKER].values())  # type: ignore[arg-type]

    def setup_listeners(self) -> None:
        """Point every seller at the brokers; the last broker created wins."""
        for seller in self.sellers:
            for broker in self.brokers:
                seller.set_listener(broker)
        logger.debug(
            "Wired %d seller(s) to %d broker(s)", len(self.sellers), len(self.brokers)
        )
