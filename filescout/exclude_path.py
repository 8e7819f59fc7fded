"""A path that is left out when the database is built."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExcludePath:
    """A path to exclude, which may be switched off."""

    path: str | None
    enabled: bool = True

    def copy(self) -> ExcludePath:
        """Return an independent copy."""
        return ExcludePath(self.path, self.enabled)