"""Base classes for domain layer.

Provides foundational abstractions for entities and value objects.
Both are frozen: the catalog core only ever borrows read-only snapshots.
"""

from abc import ABC
from dataclasses import dataclass
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


# ============================================================================
# Value Object Base
# ============================================================================


@dataclass(frozen=True)
class ValueObject(ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their attributes,
    not by identity. They have no lifecycle and are interchangeable
    when their values are equal.

    Example:
        @dataclass(frozen=True)
        class FilterSpec(ValueObject):
            price_min: float = 0.0
            price_max: float = math.inf
    """

    pass


# ============================================================================
# Entity Base
# ============================================================================


@dataclass(frozen=True)
class Entity(ABC):
    """Base class for catalog entities.

    Entities carry a store-assigned identity. Instances are frozen
    snapshots; a change produces a new instance via dataclasses.replace.

    Attributes:
        id: Unique identifier for this entity.
    """

    id: str
