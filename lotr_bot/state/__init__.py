"""State module - Catalog, game state schema and initialization."""

from lotr_bot.state.catalog import (
    Catalog, CatalogError, default_catalog, load_catalog,
)
from lotr_bot.state.state_schema import (
    build_initial_state, validate_state, get_snapshot,
)

__all__ = [
    "Catalog",
    "CatalogError",
    "default_catalog",
    "load_catalog",
    "build_initial_state",
    "validate_state",
    "get_snapshot",
]
