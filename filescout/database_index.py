"""Index types and flags used to sort and describe database entries."""

from __future__ import annotations

import enum


class IndexFlags(enum.IntFlag):
    """Which properties of an entry a database keeps indexed."""

    NAME = 1 << 0
    PATH = 1 << 1
    SIZE = 1 << 2
    MODIFICATION_TIME = 1 << 3
    ACCESS_TIME = 1 << 4
    CREATION_TIME = 1 << 5
    STATUS_CHANGE_TIME = 1 << 6


_LABELS = {
    "NAME": "Name",
    "PATH": "Path",
    "SIZE": "Size",
    "MODIFICATION_TIME": "Date Modified",
    "FILETYPE": "Type",
    "EXTENSION": "Extension",
}


class IndexType(enum.IntEnum):
    """The property by which entries are ordered."""

    NAME = 0
    PATH = 1
    SIZE = 2
    MODIFICATION_TIME = 3
    ACCESS_TIME = 4
    CREATION_TIME = 5
    STATUS_CHANGE_TIME = 6
    FILETYPE = 7
    EXTENSION = 8

    def label(self) -> str:
        """Return the human readable column label of this index type."""
        try:
            return _LABELS[self.name]
        except KeyError:
            raise ValueError(f"index type {self.name} has no label") from None