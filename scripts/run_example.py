#!/usr/bin/env python3
"""Walk through the engine end to end.

Loads a catalog, creates participants, deletes, views and edits properties,
runs radius searches and closes two deals.
"""

import argparse
import logging
import sys
import tempfile
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from realty_engine.config import EngineConfig
from realty_engine.deals import DealPipeline
from realty_engine.exceptions import RealtyEngineError
from realty_engine.generators import ParticipantGenerator
from realty_engine.logging import setup_logging
from realty_engine.models import Property, UserRole
from realty_engine.participants import ParticipantFactory
from realty_engine.search import (
    PropertySearchContext,
    SearchByAveragePriceStrategy,
    SearchByStatusStrategy,
)
from realty_engine.sinks import ConsoleSink, JsonFileSink
from realty_engine.store import PropertyCatalog

logger = logging.getLogger(__name__)

SAMPLE_LINES = [
    "4,5,1,1 80 10000 false",
    "4,6 120 8000 true",
    "5,5,2 95 9000 false",
    "10,3 60 12000 false",
    "4,5,2 70 11000 false",
]


def print_catalog(title: str, catalog: PropertyCatalog) -> None:
    print(f"\n{title}")
    for prop in catalog.list_all():
        print(prop)


def run(catalog_path: Path, radius: int, export_dir: Path | None, seed: int | None = None) -> None:
    catalog = PropertyCatalog()
    catalog.load(catalog_path)

    factory = ParticipantFactory(catalog)
    people = ParticipantGenerator(seed=seed)
    seller1 = people.create(factory, UserRole.SELLER, 1)
    seller2 = people.create(factory, UserRole.SELLER, 2)
    broker1 = people.create(factory, UserRole.BROKER, 777)
    people.create(factory, UserRole.BROKER, 888)
    buyer1 = people.create(factory, UserRole.BUYER, 55)
    buyer2 = people.create(factory, UserRole.BUYER, 66)
    factory.setup_listeners()
    for participant in (seller1, seller2, broker1, buyer1, buyer2):
        logger.info("%s %s is %s", participant.role.value, participant.user_id, participant.name)

    print_catalog("list of all Properties in the system:", catalog)

    print("\nThe seller will send a message to the brokers (observer) when the property is deleted.")
    seller1.delete_property(catalog.list_all()[2].address)
    print_catalog("list of all Properties in the system after deletion:", catalog)

    print("\nthe buyer can see all the property details, for example the 2nd property")
    buyer1.view_property(catalog.list_all()[1].address)

    first = catalog.list_all()[0]
    broker1.edit_property(first.address, Property(first.address, 80, 10000, False))
    print_catalog("list of all Properties in the system after editing the first property:", catalog)

    center = [4, 5]
    context = PropertySearchContext(SearchByAveragePriceStrategy(catalog))
    print(f"\nAverage price of properties in the radius: {context.search(center, radius)}")

    context.set_strategy(SearchByStatusStrategy(catalog, sold=True))
    print("\nList of sold properties in the radius:")
    for prop in context.search(center, radius):
        print(prop)

    pipeline = DealPipeline(catalog)
    print("\nexecute deal with no services")
    pipeline.execute_whole_deal(catalog.list_all()[0].address, [], seller1, buyer1, broker1)

    print("\nexecute deal with services")
    pipeline.execute_whole_deal(
        catalog.list_all()[2].address, ["evening", "cleaning"], seller2, buyer2, broker1
    )

    print("\nthe property's status is true after the deals")
    print(catalog.list_all()[0])
    print(catalog.list_all()[2])

    if export_dir is not None:
        sink = JsonFileSink(export_dir, pretty=True)
        sink.write_batch("properties", catalog.list_all())
        sink.close()
    else:
        sink = ConsoleSink(pretty=False)
        sink.write_batch("summary", [catalog.summary()])
        sink.close()


def main() -> None:
    """Main entry point."""
    config = EngineConfig.from_env()

    parser = argparse.ArgumentParser(description="Run the real-estate engine walkthrough")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=config.catalog.source_path,
        help="Property file to load (default: built-in sample)",
    )
    parser.add_argument(
        "--radius",
        type=int,
        default=config.search.default_radius,
        help="Search radius around [4, 5] (default: 8)",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Write the final catalog to the JSON output directory",
    )
    args = parser.parse_args()

    setup_logging(config.log_level)
    export_dir = config.output.json_output_dir if args.export else None

    print("welcome to the real-estate engine walkthrough")
    try:
        if args.catalog is not None:
            run(args.catalog, args.radius, export_dir, config.seed)
        else:
            with tempfile.TemporaryDirectory() as tmp:
                sample = Path(tmp) / "properties.txt"
                sample.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
                run(sample, args.radius, export_dir, config.seed)
    except RealtyEngineError as e:
        logger.error("Walkthrough failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
