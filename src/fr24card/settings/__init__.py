"""Card configuration: column registry and config schema."""

from .columns import ColumnRegistry, default_registry
from .schema import DEFAULT_COLUMNS, CardConfig, HideOptions, validate_config

__all__ = [
    "ColumnRegistry",
    "default_registry",
    "DEFAULT_COLUMNS",
    "CardConfig",
    "HideOptions",
    "validate_config",
]
