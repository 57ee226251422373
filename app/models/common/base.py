"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass, fields
from typing import Any, Self


@dataclass
class BaseEntity:
    """Base class for all entities."""

    @classmethod
    def columns(cls) -> list[str]:
        """Field names, in declaration order; matches the table column order."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_row(cls, row: tuple) -> Self:
        """Build from a DB row selected in ``columns()`` order."""
        return cls(*row)

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)
