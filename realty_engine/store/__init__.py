"""In-memory store for the property catalog."""

from realty_engine.store.catalog import PropertyCatalog

__all__ = ["PropertyCatalog"]
