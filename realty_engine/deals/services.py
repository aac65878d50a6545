"""Optional priced services layered around a deal."""

from typing import Iterable

from realty_engine.deals.base import Deal
from realty_engine.formatting import format_number
from realty_engine.models import ServiceType

SERVICE_FEES: dict[ServiceType, float] = {
    ServiceType.EVENING: 1000.0,
    ServiceType.CLEANING: 2000.0,
    ServiceType.MOVING: 3000.0,
    ServiceType.DESIGN: 4000.0,
}


class DealDecorator(Deal):
    """Wraps another deal; by default passes everything through."""

    def __init__(self, deal: Deal) -> None:
        self.deal = deal

    def execute(self) -> None:
        self.deal.execute()

    def total_price(self) -> float:
        return self.deal.total_price()


class ServiceDecorator(DealDecorator):
    """Adds one fixed-fee service after the wrapped deal has run."""

    service: ServiceType
    label: str

    @property
    def fee(self) -> float:
        return SERVICE_FEES[self.service]

    def execute(self) -> None:
        self.deal.execute()
        print(f"Adding {self.label} services: {format_number(self.fee)}")

    def total_price(self) -> float:
        return self.deal.total_price() + self.fee


class EveningServicesDecorator(ServiceDecorator):
    service = ServiceType.EVENING
    label = "evening"


class CleaningDecorator(ServiceDecorator):
    service = ServiceType.CLEANING
    label = "cleaning"


class MovingDecorator(ServiceDecorator):
    service = ServiceType.MOVING
    label = "moving"


class DesignDecorator(ServiceDecorator):
    service = ServiceType.DESIGN
    label = "design"


SERVICE_DECORATORS: dict[ServiceType, type[ServiceDecorator]] = {
    ServiceType.EVENING: EveningServicesDecorator,
    ServiceType.CLEANING: CleaningDecorator,
    ServiceType.MOVING: MovingDecorator,
    ServiceType.DESIGN: DesignDecorator,
}


def build_deal(base: Deal, services: Iterable[str | ServiceType]) -> Deal:
    """Wrap ``base`` with one decorator per requested service, in order.

    The first service requested is innermost, so its line prints first.

    Raises
    ------
    InvalidArgumentError
        On the first unrecognized service name; nothing after it is wrapped.
    """
    deal = base
    for token in services:
        service = token if isinstance(token, ServiceType) else ServiceType.parse(token)
        deal = SERVICE_DECORATORS[service](deal)
    return deal
