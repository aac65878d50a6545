#!/usr/bin/env python3
"""Generate a sample property file in the bulk-load line format.

The file can be fed to ``run_example.py --catalog`` or to
``PropertyCatalog.load``.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from realty_engine.config import EngineConfig
from realty_engine.generators import PropertyGenerator, write_property_file
from realty_engine.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    config = EngineConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample property file")
    parser.add_argument(
        "--output",
        type=Path,
        default=config.output.json_output_dir / "properties.txt",
        help="Where to write the property file (default: output/properties.txt)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=25,
        help="Number of properties to generate (default: 25)",
    )
    parser.add_argument(
        "--grid-size",
        type=int,
        default=20,
        help="Streets and avenues are drawn from 0..grid-size-1 (default: 20)",
    )
    parser.add_argument(
        "--sold-rate",
        type=float,
        default=0.2,
        help="Fraction of properties that start out sold (default: 0.2)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed for reproducibility (default: 42)",
    )
    args = parser.parse_args()

    setup_logging(config.log_level)

    generator = PropertyGenerator(
        seed=args.seed,
        grid_size=args.grid_size,
        sold_rate=args.sold_rate,
    )
    written = write_property_file(generator.generate_batch(args.count), args.output)
    logger.info("Wrote %d properties to %s", written, args.output)
    print(f"Saved {written} properties to {args.output}")


if __name__ == "__main__":
    main()
