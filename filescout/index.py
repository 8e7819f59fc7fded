"""A location that is indexed into the database."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class IndexKind(enum.Enum):
    """The kind of location an index covers."""

    FOLDER = 0


@dataclass
class Index:
    """A location to index and how it is treated."""

    kind: IndexKind
    path: str | None
    enabled: bool
    update: bool
    one_filesystem: bool
    last_updated: int = 0

    def __post_init__(self) -> None:
        if self.path is None:
            self.path = ""

    def copy(self) -> Index:
        """Return an independent copy."""
        return Index(
            self.kind,
            self.path,
            self.enabled,
            self.update,
            self.one_filesystem,
            self.last_updated,
        )