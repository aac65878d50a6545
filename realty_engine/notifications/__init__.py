"""Deletion notifications."""

from realty_engine.notifications.deletion import DeletionNotifier, PropertyDeletionListener

__all__ = ["DeletionNotifier", "PropertyDeletionListener"]
