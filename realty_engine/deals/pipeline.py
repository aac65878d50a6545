"""Orchestration of a full sale: checks, services, execution, total."""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from realty_engine.deals.base import BasicDeal, Deal
from realty_engine.deals.services import build_deal
from realty_engine.exceptions import InvalidStateError, PropertyNotFoundError
from realty_engine.formatting import format_address, format_number
from realty_engine.models import ServiceType, normalize_address
from realty_engine.participants import Broker, Buyer, Seller
from realty_engine.store import PropertyCatalog

logger = logging.getLogger(__name__)

SERVICE_MENU = (
    "broker: did you want to add any of the following services?\n"
    "EveningServices\nCleaning\nMoving\nDesign"
)


@dataclass
class DealReceipt:
    """Outcome of a completed deal."""

    address: list[int]
    services: list[ServiceType] = field(default_factory=list)
    total_price: float = 0.0


class DealPipeline:
    """Runs whole deals against one catalog.

    Parameters
    ----------
    catalog : PropertyCatalog
        Catalog holding the properties being sold.
    """

    def __init__(self, catalog: PropertyCatalog) -> None:
        self.catalog = catalog

    def execute_whole_deal(
        self,
        address: Sequence[int],
        services: Sequence[str | ServiceType],
        seller: Seller,
        buyer: Buyer,
        broker: Broker,
    ) -> DealReceipt:
        """Sell the property at ``address`` with the requested services.

        Parameters
        ----------
        address : Sequence[int]
            Address of the property to sell.
        services : Sequence[str | ServiceType]
            Requested services, case-insensitive, applied in the given order.
        seller, buyer, broker : Participant
            Parties to the deal.

        Returns
        -------
        DealReceipt
            Address, services applied and the final price.

        Raises
        ------
        PropertyNotFoundError
            If nothing is stored at ``address``.
        InvalidStateError
            If the property is already sold; nothing is printed or changed.
        InvalidArgumentError
            If a service name is not recognized; the menu and echo are
            printed but no narrative runs and the property stays unsold.
        """
        key = normalize_address(address)
        prop = self.catalog.find(key)
        if prop is None:
            raise PropertyNotFoundError(f"No property at address {format_address(key)}")
        if prop.sold:
            raise InvalidStateError("Property is already sold")

        requested = list(services or [])

        print(SERVICE_MENU)
        print("buyer: yes, I want to add services:")
        if not requested:
            print("No services needed.")
        else:
            for service in requested:
                print(service.value if isinstance(service, ServiceType) else service)

        deal: Deal = build_deal(BasicDeal(self.catalog, key, buyer, seller, broker), requested)
        deal.execute()

        total = deal.total_price()
        applied = [s if isinstance(s, ServiceType) else ServiceType.parse(s) for s in requested]
        print(f"Total price: {format_number(total)}")
        logger.info(
            "Deal closed at %s for %s",
            list(key),
            total,
            extra={
                "address": list(key),
                "total_price": total,
                "services": [s.value for s in applied],
            },
        )

        return DealReceipt(address=list(key), services=applied, total_price=total)
