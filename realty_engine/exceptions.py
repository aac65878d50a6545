"""Custom exception hierarchy for realty-engine."""


class RealtyEngineError(Exception):
    """Base exception for all realty-engine errors."""


class InvalidArgumentError(RealtyEngineError, ValueError):
    """Raised when an argument is missing, undersized or out of range."""


class ConflictError(RealtyEngineError):
    """Raised when an operation would break a uniqueness constraint."""


class DuplicateAddressError(ConflictError):
    """Raised when two properties would share the same address."""

    def __init__(self, message: str, addresses: list[list[int]] | None = None) -> None:
        super().__init__(message)
        self.addresses = addresses or []


class DuplicateEntityError(ConflictError):
    """Raised when a participant id is already taken within its role."""


class InvalidStateError(RealtyEngineError):
    """Raised when an entity is in an invalid state for the operation."""


class EntityNotFoundError(RealtyEngineError):
    """Raised when a referenced entity does not exist."""


class PropertyNotFoundError(EntityNotFoundError):
    """Raised when no property is stored at the given address."""


class PropertyParseError(RealtyEngineError):
    """Raised when a bulk-load line is structurally malformed."""


class CatalogIOError(RealtyEngineError):
    """Raised when a property file cannot be read."""


class ConfigurationError(RealtyEngineError):
    """Raised when configuration is invalid or missing."""
