"""The deal contract and the base sale every service wraps."""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from realty_engine.exceptions import InvalidStateError, PropertyNotFoundError
from realty_engine.formatting import format_address, format_number
from realty_engine.models import Property, normalize_address
from realty_engine.participants import Broker, Participant
from realty_engine.store import PropertyCatalog

logger = logging.getLogger(__name__)


class Deal(ABC):
    """Something that can be executed once and priced."""

    @abstractmethod
    def execute(self) -> None:
        """Run the deal, printing its narrative."""

    @abstractmethod
    def total_price(self) -> float:
        """Price of the deal including any services."""


class BasicDeal(Deal):
    """Sale of one catalog property from a seller to a buyer via a broker.

    The deal refers to the property by address and reads the live record
    from the catalog each time, so copies handed out elsewhere never go
    stale against it.
    """

    def __init__(
        self,
        catalog: PropertyCatalog,
        address: Sequence[int],
        buyer: Participant,
        seller: Participant,
        broker: Broker,
    ) -> None:
        self.catalog = catalog
        self.address = normalize_address(address)
        self.buyer = buyer
        self.seller = seller
        self.broker = broker

    def current_property(self) -> Property:
        found = self.catalog.find(self.address)
        if found is None:
            raise PropertyNotFoundError(f"No property at address {format_address(self.address)}")
        return found

    def total_price(self) -> float:
        return self.current_property().total_price

    def execute(self) -> None:
        prop = self.current_property()
        if prop.sold:
            raise InvalidStateError("Property is already sold")

        print(f"Broker {self.broker.user_id} : I'm managing this deal")
        print(
            f"Seller {self.seller.user_id} : I'm offering the property at "
            f"{format_address(prop.address)} for {format_number(prop.total_price)}"
        )
        print(f"Buyer {self.buyer.user_id} : I'm interested in buying the property")

        self.catalog.mark_sold(self.address)
        logger.info(
            "Property at %s sold to buyer %s",
            list(self.address),
            self.buyer.user_id,
            extra={"address": list(self.address), "user_id": self.buyer.user_id},
        )
