"""Exception taxonomy for card configuration and per-cycle host state.

Configuration errors derive from :class:`ConfigError` and are raised
synchronously while a card is being configured; they are never retried.
:class:`MissingEntityState` is raised when a render cycle's host state lacks
the configured entity and is absorbed by the render pipeline.
"""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "InvalidConfig",
    "MissingEntity",
    "UnknownColumn",
    "WeightBudgetExceeded",
    "MissingEntityState",
]


class ConfigError(ValueError):
    """Base class for fatal configuration problems."""


class InvalidConfig(ConfigError):
    """Configuration has the wrong shape (wrong types, bad unit, ...)."""


class MissingEntity(ConfigError):
    def __init__(self) -> None:
        super().__init__("You need to define an entity")


class UnknownColumn(ConfigError, KeyError):
    """A column key is not present in the column registry."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Column '{key}' does not exist")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class WeightBudgetExceeded(ConfigError):
    def __init__(self, total: int, budget: int) -> None:
        self.total = total
        self.budget = budget
        super().__init__(
            f"Too many columns defined (weight {total} exceeds budget {budget})"
        )


class MissingEntityState(LookupError):
    """The configured entity is absent from the host state of one cycle."""

    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(f"Entity '{entity}' is not available in host state")
