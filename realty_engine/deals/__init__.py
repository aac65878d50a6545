"""Deal execution with optional add-on services."""

from realty_engine.deals.base import BasicDeal, Deal
from realty_engine.deals.pipeline import DealPipeline, DealReceipt
from realty_engine.deals.services import (
    SERVICE_FEES,
    CleaningDecorator,
    DealDecorator,
    DesignDecorator,
    EveningServicesDecorator,
    MovingDecorator,
    ServiceDecorator,
    build_deal,
)

__all__ = [
    "BasicDeal",
    "CleaningDecorator",
    "Deal",
    "DealDecorator",
    "DealPipeline",
    "DealReceipt",
    "DesignDecorator",
    "EveningServicesDecorator",
    "MovingDecorator",
    "SERVICE_FEES",
    "ServiceDecorator",
    "build_deal",
]
