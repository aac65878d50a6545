"""Tests for the deal pipeline and service decorators."""

import pytest

from realty_engine.deals import (
    SERVICE_FEES,
    BasicDeal,
    CleaningDecorator,
    DealPipeline,
    DesignDecorator,
    EveningServicesDecorator,
    MovingDecorator,
    build_deal,
)
from realty_engine.deals.pipeline import SERVICE_MENU
from realty_engine.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    PropertyNotFoundError,
)
from realty_engine.models import ServiceType
from realty_engine.participants import Broker, Buyer, ParticipantFactory, Seller
from realty_engine.store import PropertyCatalog

ADDRESS = [4, 5, 1, 1]
BASE_PRICE = 800000.0

NARRATIVE = [
    "Broker 777 : I'm managing this deal",
    "Seller 1 : I'm offering the property at [4, 5, 1, 1] for 800000.0",
    "Buyer 55 : I'm interested in buying the property",
]


@pytest.fixture
def parties(factory: ParticipantFactory, capsys: pytest.CaptureFixture) -> tuple[Seller, Buyer, Broker]:
    seller = factory.create_seller(1)
    buyer = factory.create_buyer(55)
    broker = factory.create_broker(777)
    capsys.readouterr()
    return seller, buyer, broker


@pytest.fixture
def base_deal(catalog: PropertyCatalog, parties: tuple[Seller, Buyer, Broker]) -> BasicDeal:
    seller, buyer, broker = parties
    return BasicDeal(catalog, ADDRESS, buyer, seller, broker)


@pytest.fixture
def pipeline(catalog: PropertyCatalog) -> DealPipeline:
    return DealPipeline(catalog)


def output_lines(capsys: pytest.CaptureFixture) -> list[str]:
    return capsys.readouterr().out.splitlines()


class TestServiceFees:
    """Tests for the fee table."""

    def test_fees(self) -> None:
        assert SERVICE_FEES == {
            ServiceType.EVENING: 1000.0,
            ServiceType.CLEANING: 2000.0,
            ServiceType.MOVING: 3000.0,
            ServiceType.DESIGN: 4000.0,
        }


class TestBasicDeal:
    """Tests for BasicDeal."""

    def test_total_price_matches_property(self, base_deal: BasicDeal) -> None:
        assert base_deal.total_price() == BASE_PRICE

    def test_execute_prints_narrative_and_marks_sold(
        self, base_deal: BasicDeal, catalog: PropertyCatalog, capsys: pytest.CaptureFixture
    ) -> None:
        base_deal.execute()

        assert output_lines(capsys) == NARRATIVE
        assert catalog.find(ADDRESS).sold is True

    def test_execute_twice_fails(
        self, base_deal: BasicDeal, capsys: pytest.CaptureFixture
    ) -> None:
        base_deal.execute()
        capsys.readouterr()

        with pytest.raises(InvalidStateError):
            base_deal.execute()
        assert output_lines(capsys) == []

    def test_missing_property(self, catalog: PropertyCatalog, parties) -> None:
        seller, buyer, broker = parties
        deal = BasicDeal(catalog, [99, 99], buyer, seller, broker)

        with pytest.raises(PropertyNotFoundError):
            deal.total_price()


class TestDecorators:
    """Tests for the service decorators."""

    @pytest.mark.parametrize(
        ("decorator", "fee", "line"),
        [
            (EveningServicesDecorator, 1000, "Adding evening services: 1000.0"),
            (CleaningDecorator, 2000, "Adding cleaning services: 2000.0"),
            (MovingDecorator, 3000, "Adding moving services: 3000.0"),
            (DesignDecorator, 4000, "Adding design services: 4000.0"),
        ],
    )
    def test_single_service(
        self, base_deal: BasicDeal, capsys: pytest.CaptureFixture, decorator, fee, line
    ) -> None:
        deal = decorator(base_deal)

        assert deal.total_price() == BASE_PRICE + fee
        deal.execute()
        assert output_lines(capsys) == NARRATIVE + [line]

    def test_stacked_services_order(self, base_deal: BasicDeal, capsys: pytest.CaptureFixture) -> None:
        deal = DesignDecorator(MovingDecorator(CleaningDecorator(base_deal)))

        assert deal.total_price() == BASE_PRICE + 2000 + 3000 + 4000
        deal.execute()
        assert output_lines(capsys) == NARRATIVE + [
            "Adding cleaning services: 2000.0",
            "Adding moving services: 3000.0",
            "Adding design services: 4000.0",
        ]

    def test_total_is_order_independent(self, base_deal: BasicDeal) -> None:
        forward = build_deal(base_deal, ["evening", "cleaning", "moving"])
        backward = build_deal(base_deal, ["moving", "cleaning", "evening"])

        assert forward.total_price() == backward.total_price() == BASE_PRICE + 6000

    def test_repeated_service_charged_twice(self, base_deal: BasicDeal) -> None:
        assert build_deal(base_deal, ["evening", "EVENING"]).total_price() == BASE_PRICE + 2000


class TestBuildDeal:
    """Tests for build_deal."""

    def test_no_services_returns_base(self, base_deal: BasicDeal) -> None:
        assert build_deal(base_deal, []) is base_deal

    def test_accepts_service_types(self, base_deal: BasicDeal) -> None:
        deal = build_deal(base_deal, [ServiceType.DESIGN])

        assert isinstance(deal, DesignDecorator)

    def test_unknown_service(self, base_deal: BasicDeal) -> None:
        with pytest.raises(InvalidArgumentError, match="Unknown service: SAUNA"):
            build_deal(base_deal, ["cleaning", "SAUNA", "moving"])


class TestDealPipeline:
    """Tests for DealPipeline.execute_whole_deal."""

    def test_deal_without_services(
        self, pipeline: DealPipeline, catalog: PropertyCatalog, parties, capsys: pytest.CaptureFixture
    ) -> None:
        seller, buyer, broker = parties

        receipt = pipeline.execute_whole_deal(ADDRESS, [], seller, buyer, broker)

        lines = output_lines(capsys)
        assert lines[:5] == [
            "broker: did you want to add any of the following services?",
            "EveningServices",
            "Cleaning",
            "Moving",
            "Design",
        ]
        assert lines[5:] == [
            "buyer: yes, I want to add services:",
            "No services needed.",
            *NARRATIVE,
            "Total price: 800000.0",
        ]
        assert receipt.total_price == BASE_PRICE
        assert receipt.services == []
        assert receipt.address == ADDRESS
        assert catalog.find(ADDRESS).sold is True

    def test_deal_with_services(
        self, pipeline: DealPipeline, catalog: PropertyCatalog, parties, capsys: pytest.CaptureFixture
    ) -> None:
        seller, buyer, broker = parties

        receipt = pipeline.execute_whole_deal(ADDRESS, ["evening", "Cleaning"], seller, buyer, broker)

        lines = output_lines(capsys)[5:]
        assert lines == [
            "buyer: yes, I want to add services:",
            "evening",
            "Cleaning",
            *NARRATIVE,
            "Adding evening services: 1000.0",
            "Adding cleaning services: 2000.0",
            "Total price: 803000.0",
        ]
        assert receipt.services == [ServiceType.EVENING, ServiceType.CLEANING]
        assert receipt.total_price == BASE_PRICE + 3000

    def test_second_deal_on_sold_property(
        self, pipeline: DealPipeline, catalog: PropertyCatalog, parties, capsys: pytest.CaptureFixture
    ) -> None:
        seller, buyer, broker = parties
        pipeline.execute_whole_deal(ADDRESS, [], seller, buyer, broker)
        capsys.readouterr()

        with pytest.raises(InvalidStateError, match="already sold"):
            pipeline.execute_whole_deal(ADDRESS, ["design"], seller, buyer, broker)

        assert output_lines(capsys) == []
        assert catalog.find(ADDRESS).sold is True

    def test_property_sold_at_load(self, pipeline: DealPipeline, parties) -> None:
        seller, buyer, broker = parties

        with pytest.raises(InvalidStateError):
            pipeline.execute_whole_deal([4, 6], [], seller, buyer, broker)

    def test_unknown_service_leaves_property_unsold(
        self, pipeline: DealPipeline, catalog: PropertyCatalog, parties, capsys: pytest.CaptureFixture
    ) -> None:
        seller, buyer, broker = parties

        with pytest.raises(InvalidArgumentError, match="Unknown service: sauna"):
            pipeline.execute_whole_deal(ADDRESS, ["evening", "sauna"], seller, buyer, broker)

        out = capsys.readouterr().out
        assert out == (
            SERVICE_MENU + "\nbuyer: yes, I want to add services:\nevening\nsauna\n"
        )
        assert not any(line in out for line in NARRATIVE)
        assert catalog.find(ADDRESS).sold is False

    def test_missing_property(self, pipeline: DealPipeline, parties) -> None:
        seller, buyer, broker = parties

        with pytest.raises(PropertyNotFoundError):
            pipeline.execute_whole_deal([50, 50], [], seller, buyer, broker)

    def test_deal_acts_on_live_record_not_snapshot(
        self, pipeline: DealPipeline, catalog: PropertyCatalog, parties
    ) -> None:
        seller, buyer, broker = parties
        snapshot = catalog.list_all()[0]

        pipeline.execute_whole_deal(snapshot.address, [], seller, buyer, broker)

        assert snapshot.sold is False
        assert catalog.list_all()[0].sold is True
