"""Configuration management for realty-engine."""

from dataclasses import dataclass, field
from pathlib import Path

from realty_engine.exceptions import ConfigurationError


@dataclass
class CatalogConfig:
    """Where the catalog is bulk-loaded from at startup."""

    source_path: Path | None = None


@dataclass
class SearchConfig:
    """Defaults for radius searches."""

    default_radius: int = 8


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class EngineConfig:
    """Main configuration for realty-engine."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        import os

        source = os.getenv("REALTY_CATALOG_PATH")
        catalog = CatalogConfig(source_path=Path(source) if source else None)

        search = SearchConfig(
            default_radius=_int_env("REALTY_SEARCH_RADIUS", "8"),
        )
        if search.default_radius < 0:
            raise ConfigurationError("REALTY_SEARCH_RADIUS cannot be negative")

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            catalog=catalog,
            search=search,
            output=output,
            seed=_int_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _int_env(name: str, default: str | None) -> int | None:
    import os

    raw = os.getenv(name, default)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
