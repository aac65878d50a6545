"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from realty_engine.models import Property
from realty_engine.participants import ParticipantFactory
from realty_engine.store import PropertyCatalog


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_lines() -> list[str]:
    """Property file lines around the [4, 5] intersection."""
    return [
        "4,5,1,1 80 10000 false",
        "4,6 120 8000 true",
        "5,5,2 95 9000 false",
        "10,3 60 12000 false",
        "4,5,2 70 11000 true",
    ]


@pytest.fixture
def property_file(tmp_path: Path, sample_lines: list[str]) -> Path:
    """Property file written from ``sample_lines``."""
    path = tmp_path / "properties.txt"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def catalog(property_file: Path) -> PropertyCatalog:
    """Catalog loaded from the sample property file."""
    store = PropertyCatalog()
    store.load(property_file)
    return store


@pytest.fixture
def empty_catalog() -> PropertyCatalog:
    """Fresh catalog with nothing in it."""
    return PropertyCatalog()


@pytest.fixture
def sample_property() -> Property:
    """Unsold property at [4, 5]."""
    return Property([4, 5], 80, 10000, False)


@pytest.fixture
def factory(catalog: PropertyCatalog) -> ParticipantFactory:
    """Participant factory bound to the sample catalog."""
    return ParticipantFactory(catalog)
